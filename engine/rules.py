"""Rules helpers for Othello: geometry and capture runs."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

BOARD_SIZE = 8

Position = Tuple[int, int]
Direction = Tuple[int, int]
Cells = Sequence[Sequence[int]]

DIRECTIONS: Tuple[Direction, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

CORNERS: Tuple[Position, ...] = ((0, 0), (0, 7), (7, 0), (7, 7))


def in_bounds(pos: Position) -> bool:
    """Return whether a position is inside the 8x8 board."""
    row, col = pos
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_corner(pos: Position) -> bool:
    return pos in CORNERS


def is_edge(pos: Position) -> bool:
    """Return whether a position lies on the border, corners included."""
    row, col = pos
    return row in (0, BOARD_SIZE - 1) or col in (0, BOARD_SIZE - 1)


def capture_run(cells: Cells, pos: Position, direction: Direction, code: int) -> List[Position]:
    """
    Return the opposing discs bracketed from ``pos`` along ``direction``.

    The run must be non-empty and closed by a disc of ``code``. A run that
    reaches an empty cell or the edge first captures nothing.
    """
    dr, dc = direction
    r, c = pos[0] + dr, pos[1] + dc
    run: List[Position] = []
    while in_bounds((r, c)) and cells[r][c] == -code:
        run.append((r, c))
        r += dr
        c += dc
    if run and in_bounds((r, c)) and cells[r][c] == code:
        return run
    return []


def has_capture(cells: Cells, pos: Position, code: int) -> bool:
    """Return whether any direction from ``pos`` yields a capture run."""
    return any(capture_run(cells, pos, direction, code) for direction in DIRECTIONS)


def positional_weights() -> np.ndarray:
    """Per-cell evaluation weights: 11 on corners, 3 on edges, 1 inside."""
    weights = np.ones((BOARD_SIZE, BOARD_SIZE), dtype=np.int32)
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if is_corner((row, col)):
                weights[row, col] += 10
            elif is_edge((row, col)):
                weights[row, col] += 2
    return weights
