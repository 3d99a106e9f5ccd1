"""Turn tracking: whose move it is and how many moves have been played."""

from __future__ import annotations

from dataclasses import dataclass

from chesscore.core.enums import Color


@dataclass(slots=True)
class Turn:
    """Side to move plus a move counter starting at 1.

    Advanced exactly once per committed move; rejected moves never touch it.
    """

    color: Color = Color.WHITE
    number: int = 1

    def advance(self) -> None:
        self.color = self.color.opposite
        self.number += 1

    def reset(self) -> None:
        self.color = Color.WHITE
        self.number = 1

    @property
    def ordinal(self) -> str:
        """Move number as an English ordinal, e.g. '1st', '12th', '23rd'."""
        return ordinal(self.number)

    def __str__(self) -> str:
        return f"{self.color.name.capitalize()} to move ({self.ordinal} turn)"


def ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"
