"""Side definitions and disc cell codes for Othello."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class Side(str, Enum):
    """Player side. Black moves first."""

    BLACK = "black"
    WHITE = "white"

    def opponent(self) -> "Side":
        return Side.WHITE if self is Side.BLACK else Side.BLACK

    @property
    def code(self) -> int:
        return SIDE_CODE[self]

    @property
    def symbol(self) -> str:
        return SIDE_SYMBOL[self]


# Grid cell codes. White is positive so that a signed sum of the grid
# already scores in White's favour.
EMPTY = 0
WHITE_CODE = 1
BLACK_CODE = -1

SIDE_CODE: Dict[Side, int] = {
    Side.BLACK: BLACK_CODE,
    Side.WHITE: WHITE_CODE,
}

SIDE_SYMBOL: Dict[Side, str] = {
    Side.BLACK: "B",
    Side.WHITE: "W",
}

EMPTY_SYMBOL = "."


def side_from_code(code: int) -> Optional[Side]:
    """Return the side owning a cell code, or None for an empty cell."""
    if code == BLACK_CODE:
        return Side.BLACK
    if code == WHITE_CODE:
        return Side.WHITE
    return None

