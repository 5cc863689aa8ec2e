from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

TokenKind = Literal["digit", "word"]


@dataclass(frozen=True)
class TokenMatch:
    """A digit character or spelled-out number word found in a line."""

    position: int
    value: int
    kind: TokenKind


@dataclass
class LineResult:
    """Outcome of scanning one input line; exactly one of value/error is set."""

    line_number: int
    text: str
    value: int | None = None
    error: Exception | None = None
    first: TokenMatch | None = None
    last: TokenMatch | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Draw:
    """Cube counts shown in a single handful."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def power(self) -> int:
        return self.red * self.green * self.blue

    def fits(self, limit: Draw) -> bool:
        return self.red <= limit.red and self.green <= limit.green and self.blue <= limit.blue


@dataclass
class Game:
    """One ``Game <id>: ...`` record and its draws."""

    id: int
    draws: list[Draw] = field(default_factory=list)

    def is_possible(self, limit: Draw) -> bool:
        return all(d.fits(limit) for d in self.draws)

    def minimum(self) -> Draw:
        """Return the smallest bag that could have produced every draw."""
        return Draw(
            red=max((d.red for d in self.draws), default=0),
            green=max((d.green for d in self.draws), default=0),
            blue=max((d.blue for d in self.draws), default=0),
        )
