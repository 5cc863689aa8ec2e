"""Exceptions raised by the line scanners, game parser and input pipeline."""

from __future__ import annotations

from typing import Any


class CalibrationError(Exception):
    """Base class for every error raised by this project."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ScanError(CalibrationError):
    """A line did not yield the tokens needed for a calibration value."""


class NoDigitFound(ScanError):
    """Digit-only mode found no digit characters."""


class NoTokenFound(ScanError):
    """Neither a digit nor a number word exists on the scanned side."""


class ConflictingTie(ScanError):
    """A digit and a word start at the same position and strict mode is on."""


class GameParseError(CalibrationError):
    """A game record is malformed."""


class InputFileError(CalibrationError):
    """The input file is missing or unreadable."""


class LineError(CalibrationError):
    """Wraps a per-line failure with its position in the input."""

    def __init__(self, line_number: int, line: str, cause: CalibrationError) -> None:
        super().__init__(
            f"line {line_number}: {cause.message}",
            {"line_number": line_number, "line": line},
        )
        self.line_number = line_number
        self.line = line
        self.cause = cause
