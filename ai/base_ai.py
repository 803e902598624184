"""Base AI interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from engine.board import Board, Move
from engine.pieces import Side


class BaseAI(ABC):
    """Abstract AI strategy contract."""

    @abstractmethod
    def choose_move(self, board: Board, side: Side) -> Optional[Move]:
        """Choose a legal move for ``side``, or None when it has none."""
        raise NotImplementedError
