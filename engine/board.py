"""Othello board state, legal move generation, and capture application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from engine.pieces import (
    BLACK_CODE,
    EMPTY,
    EMPTY_SYMBOL,
    WHITE_CODE,
    Side,
    side_from_code,
)
from engine.rules import BOARD_SIZE, DIRECTIONS, Position, capture_run, has_capture, in_bounds


@dataclass(frozen=True, order=True)
class Move:
    """A disc placement at (row, col)."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


class Board:
    """
    8x8 Othello board.

    Boards are values: ``apply_move`` returns a new board and never touches
    the receiver, so a board handed to the search can be shared safely.
    """

    rows: int = BOARD_SIZE
    cols: int = BOARD_SIZE

    def __init__(self, grid: np.ndarray | None = None) -> None:
        if grid is None:
            grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        if grid.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board grid must be {BOARD_SIZE}x{BOARD_SIZE}, got {grid.shape}")
        self.grid = grid

    @classmethod
    def initial(cls) -> "Board":
        """Standard opening: White on (3,3)/(4,4), Black on (3,4)/(4,3)."""
        board = cls()
        board.grid[3, 3] = WHITE_CODE
        board.grid[3, 4] = BLACK_CODE
        board.grid[4, 3] = BLACK_CODE
        board.grid[4, 4] = WHITE_CODE
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Build a board from 8 strings of ``B``, ``W`` and ``.``."""
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        codes = {"B": BLACK_CODE, "W": WHITE_CODE, EMPTY_SYMBOL: EMPTY}
        grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        for row, line in enumerate(rows):
            cells = line.replace(" ", "")
            if len(cells) != BOARD_SIZE:
                raise ValueError(f"Row {row} must have {BOARD_SIZE} cells: {line!r}")
            for col, symbol in enumerate(cells.upper()):
                if symbol not in codes:
                    raise ValueError(f"Unknown cell symbol {symbol!r} at ({row}, {col})")
                grid[row, col] = codes[symbol]
        return cls(grid)

    def clone(self) -> "Board":
        return Board(self.grid.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __hash__(self) -> int:
        return hash(self.grid.tobytes())

    def iter_positions(self) -> Iterable[Position]:
        """Yield all board positions in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)

    def get_cell(self, pos: Position) -> Side | None:
        """Return the side occupying a position, or None when empty."""
        row, col = pos
        return side_from_code(int(self.grid[row, col]))

    def is_empty(self, pos: Position) -> bool:
        row, col = pos
        return self.grid[row, col] == EMPTY

    def cells(self) -> List[List[int]]:
        """Plain nested-list copy of the grid for tight scalar loops."""
        return self.grid.tolist()

    def is_legal_move(self, row: int, col: int, side: Side) -> bool:
        """Return whether ``side`` may place a disc at (row, col)."""
        if not in_bounds((row, col)) or not self.is_empty((row, col)):
            return False
        return has_capture(self.cells(), (row, col), side.code)

    def _iter_legal(self, side: Side) -> Iterable[Move]:
        cells = self.cells()
        code = side.code
        for row, col in self.iter_positions():
            if cells[row][col] == EMPTY and has_capture(cells, (row, col), code):
                yield Move(row, col)

    def legal_moves(self, side: Side) -> List[Move]:
        """All legal moves for ``side`` in row-major order."""
        return list(self._iter_legal(side))

    def has_legal_move(self, side: Side) -> bool:
        return next(iter(self._iter_legal(side)), None) is not None

    def captured_by(self, row: int, col: int, side: Side) -> List[Position]:
        """Cells that would flip if ``side`` played at (row, col)."""
        cells = self.cells()
        flipped: List[Position] = []
        for direction in DIRECTIONS:
            flipped.extend(capture_run(cells, (row, col), direction, side.code))
        return flipped

    def apply_move(self, row: int, col: int, side: Side) -> "Board":
        """
        Return a new board with ``side`` played at (row, col).

        The move must already be known to be legal; legality is not checked
        again here. Every capturing direction flips at once.
        """
        assert self.grid[row, col] == EMPTY, f"apply_move on occupied cell ({row}, {col})"
        flipped = self.captured_by(row, col, side)
        child = self.clone()
        child.grid[row, col] = side.code
        for r, c in flipped:
            child.grid[r, c] = side.code
        return child

    def count(self) -> Tuple[int, int]:
        """Return (black_count, white_count)."""
        black = int(np.count_nonzero(self.grid == BLACK_CODE))
        white = int(np.count_nonzero(self.grid == WHITE_CODE))
        return black, white

    def empty_count(self) -> int:
        return int(np.count_nonzero(self.grid == EMPTY))

    def render_ascii(self) -> str:
        """Return a simple human-readable board representation."""
        lines: List[str] = ["  " + " ".join(str(c) for c in range(self.cols))]
        for row in range(self.rows):
            cells: List[str] = []
            for col in range(self.cols):
                side = self.get_cell((row, col))
                cells.append(EMPTY_SYMBOL if side is None else side.symbol)
            lines.append(f"{row} " + " ".join(cells))
        return "\n".join(lines)

    def __repr__(self) -> str:
        black, white = self.count()
        return f"Board(black={black}, white={white})"
