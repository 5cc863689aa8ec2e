from __future__ import annotations

import logging

from calibration_errors import ConflictingTie, NoDigitFound, NoTokenFound
from calibration_models import TokenMatch

logger = logging.getLogger(__name__)

NUMBER_WORDS: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

_DIGITS = frozenset("0123456789")


def is_digit(ch: str) -> bool:
    """ASCII decimal digits only; ``str.isdigit`` also accepts superscripts."""
    return ch in _DIGITS


def word_at(line: str, start: int) -> TokenMatch | None:
    """Return the number word beginning at *start*, or None.

    A word that would run past the end of the line never matches.
    """
    for word, value in NUMBER_WORDS.items():
        if line.startswith(word, start):
            return TokenMatch(position=start, value=value, kind="word")
    return None


def find_first_digit(line: str) -> TokenMatch | None:
    for i, ch in enumerate(line):
        if is_digit(ch):
            return TokenMatch(position=i, value=int(ch), kind="digit")
    return None


def find_last_digit(line: str) -> TokenMatch | None:
    for i in range(len(line) - 1, -1, -1):
        if is_digit(line[i]):
            return TokenMatch(position=i, value=int(line[i]), kind="digit")
    return None


def find_first_word(line: str) -> TokenMatch | None:
    for i in range(len(line)):
        match = word_at(line, i)
        if match is not None:
            return match
    return None


def find_last_word(line: str) -> TokenMatch | None:
    """Return the word with the largest *starting* index.

    Every index is tried, so a word hidden inside an earlier one
    ("one" in "twone") is still found.
    """
    for i in range(len(line) - 1, -1, -1):
        match = word_at(line, i)
        if match is not None:
            return match
    return None


def resolve_tie(digit: TokenMatch, word: TokenMatch, strict: bool = False) -> TokenMatch:
    """Pick between a digit and a word starting at the same index.

    The digit wins unless *strict* is set, in which case the clash is an error.
    """
    if strict:
        raise ConflictingTie(
            "digit and word start at the same position",
            {"position": digit.position, "digit": digit.value, "word": word.value},
        )
    return digit


def find_first(line: str, strict: bool = False) -> TokenMatch:
    """Return the numeric token with the smallest starting position in *line*."""
    digit = find_first_digit(line)
    word = find_first_word(line)
    if digit is None and word is None:
        raise NoTokenFound("no digit or number word found in forward pass", {"line": line})
    if word is None:
        return digit
    if digit is None:
        return word
    if digit.position == word.position:
        return resolve_tie(digit, word, strict)
    return digit if digit.position < word.position else word


def find_last(line: str, strict: bool = False) -> TokenMatch:
    """Return the numeric token with the largest starting position in *line*."""
    digit = find_last_digit(line)
    word = find_last_word(line)
    if digit is None and word is None:
        raise NoTokenFound("no digit or number word found in backward pass", {"line": line})
    if word is None:
        return digit
    if digit is None:
        return word
    if digit.position == word.position:
        return resolve_tie(digit, word, strict)
    return digit if digit.position > word.position else word


def first_and_last(line: str, strict: bool = False) -> tuple[TokenMatch, TokenMatch]:
    first = find_first(line, strict)
    last = find_last(line, strict)
    logger.debug("%r: first=%s last=%s", line, first, last)
    return first, last


def combine(line: str, strict: bool = False) -> int:
    """Calibration value of *line* counting both digits and number words."""
    first, last = first_and_last(line, strict)
    return first.value * 10 + last.value


def digits_only(line: str) -> int:
    """Calibration value of *line* counting digit characters only."""
    digits = [int(ch) for ch in line if is_digit(ch)]
    if not digits:
        raise NoDigitFound("missing numbers in line", {"line": line})
    return digits[0] * 10 + digits[-1]
