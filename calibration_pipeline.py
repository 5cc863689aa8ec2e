from __future__ import annotations

import logging
import warnings
from collections.abc import Iterable
from pathlib import Path

import pdfplumber
from pdfplumber.utils.exceptions import MalformedPDFException, PdfminerException

from calibration_errors import CalibrationError, InputFileError, LineError
from calibration_extract import digits_only, first_and_last
from calibration_models import Draw, Game, LineResult
from cube_games import DEFAULT_LIMIT, parse_game

logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", module="pdfminer")

logger = logging.getLogger(__name__)


def read_lines(path: str | Path) -> list[str]:
    """Read *path* in full and split it into lines.

    PDF inputs are read page by page through pdfplumber; anything else is
    treated as UTF-8 text.
    """
    path = Path(path)
    if not path.is_file():
        raise InputFileError(f"file not found: {path}")

    if path.suffix.lower() == ".pdf":
        lines: list[str] = []
        try:
            with pdfplumber.open(path) as pdf:
                for page in pdf.pages:
                    lines.extend((page.extract_text() or "").splitlines())
                logger.debug("read %d lines from %d-page PDF %s", len(lines), len(pdf.pages), path)
        except (OSError, PdfminerException, MalformedPDFException) as exc:
            raise InputFileError(f"cannot read PDF {path}: {exc}") from exc
        return lines

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(f"cannot read {path}: {exc}") from exc
    return text.splitlines()


def _scan_line(number: int, line: str, words: bool, strict: bool) -> LineResult:
    try:
        if not words:
            return LineResult(number, line, value=digits_only(line))
        first, last = first_and_last(line, strict)
        return LineResult(number, line, value=first.value * 10 + last.value, first=first, last=last)
    except CalibrationError as exc:
        return LineResult(number, line, error=exc)


def calibrate_lines(
    lines: Iterable[str],
    words: bool = False,
    strict: bool = False,
) -> list[LineResult]:
    """Scan every line, blank ones included, capturing failures instead of raising."""
    return [_scan_line(number, line, words, strict) for number, line in enumerate(lines, 1)]


def total_results(results: Iterable[LineResult], skip_invalid: bool = False) -> int:
    """Sum already-scanned line results.

    The first failing line aborts the sum with a LineError unless
    *skip_invalid* is set, in which case it is logged and left out.
    """
    total = 0
    for result in results:
        if result.ok:
            total += result.value
            continue
        if not skip_invalid:
            raise LineError(result.line_number, result.text, result.error)
        logger.warning("skipping line %d: %s", result.line_number, result.error)
    return total


def sum_calibration(
    lines: Iterable[str],
    words: bool = False,
    skip_invalid: bool = False,
    strict: bool = False,
) -> int:
    """Sum the calibration values of *lines*; see total_results for failures."""
    return total_results(calibrate_lines(lines, words, strict), skip_invalid)


def _game_lines(lines: Iterable[str]) -> Iterable[tuple[int, str]]:
    for number, line in enumerate(lines, 1):
        if not line.strip():
            logger.debug("skipping blank line %d", number)
            continue
        yield number, line


def parse_games(lines: Iterable[str]) -> list[Game]:
    games: list[Game] = []
    for number, line in _game_lines(lines):
        try:
            games.append(parse_game(line))
        except CalibrationError as exc:
            raise LineError(number, line, exc) from exc
    return games


def sum_possible_games(lines: Iterable[str], limit: Draw | None = None) -> int:
    """Sum the ids of games whose every draw fits within *limit*."""
    if limit is None:
        limit = DEFAULT_LIMIT
    return sum(g.id for g in parse_games(lines) if g.is_possible(limit))


def sum_game_powers(lines: Iterable[str]) -> int:
    """Sum the power of each game's minimal bag."""
    return sum(g.minimum().power() for g in parse_games(lines))
