"""Static positional evaluation of Othello boards."""

from __future__ import annotations

import numpy as np

from engine.board import Board
from engine.rules import positional_weights

# Corner 1 + 10, edge 1 + 2, interior 1.
POSITION_WEIGHTS: np.ndarray = positional_weights()
POSITION_WEIGHTS.setflags(write=False)


def evaluate(board: Board) -> int:
    """
    Score a board: positive favours White, negative favours Black.

    Each disc counts 1, plus 10 more on a corner or 2 more on any other
    border cell. The grid already carries the sign (White +1, Black -1).
    """
    return int(np.sum(board.grid.astype(np.int32) * POSITION_WEIGHTS))
