from __future__ import annotations

import re

from calibration_errors import GameParseError
from calibration_models import Draw, Game

DEFAULT_LIMIT = Draw(red=12, green=13, blue=14)

_HEADER_RE = re.compile(r"^\s*Game\s+(\d+)\s*$")
_CUBE_RE = re.compile(r"^\s*(\d+)\s+([a-z]+)\s*$")
_COLOURS = frozenset({"red", "green", "blue"})


def parse_draw(text: str) -> Draw:
    """Parse ``"3 blue, 4 red"`` into a Draw; absent colours count as zero."""
    counts: dict[str, int] = {}
    for part in text.split(","):
        if not part.strip():
            continue
        m = _CUBE_RE.match(part)
        if m is None:
            raise GameParseError(f"malformed cube count: {part.strip()!r}")
        count, colour = int(m.group(1)), m.group(2)
        if colour not in _COLOURS:
            raise GameParseError(f"unknown colour: {colour!r}", {"draw": text.strip()})
        counts[colour] = count
    return Draw(**counts)


def parse_game(line: str) -> Game:
    header, sep, body = line.partition(":")
    if not sep:
        raise GameParseError("missing ':' after game header", {"line": line})

    m = _HEADER_RE.match(header)
    if m is None:
        raise GameParseError(f"malformed game header: {header.strip()!r}", {"line": line})

    draws = [parse_draw(chunk) for chunk in body.split(";") if chunk.strip()]
    return Game(id=int(m.group(1)), draws=draws)
