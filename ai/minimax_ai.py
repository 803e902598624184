"""Minimax AI for Othello with difficulty tiers."""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Tuple

from ai.base_ai import BaseAI
from ai.evaluation import evaluate
from engine.board import Board, Move
from engine.config import EASY_CANDIDATES, Difficulty
from engine.pieces import Side

LOGGER = logging.getLogger(__name__)


class MinimaxAI(BaseAI):
    """
    Fixed-depth minimax over the static evaluator.

    Scores are always from White's point of view: White maximizes and Black
    minimizes. A side with no legal move ends its branch at the static
    score instead of passing.

    ``alpha_beta`` switches to a pruned search that returns the same values
    and therefore the same moves; it only visits fewer nodes.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.MEDIUM,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        alpha_beta: bool = False,
        debug_top_k: int = 3,
    ) -> None:
        self.difficulty = difficulty
        self._rng = rng if rng is not None else random.Random(seed)
        self.alpha_beta = alpha_beta
        self.debug_top_k = max(1, debug_top_k)
        self.nodes_evaluated = 0

    def choose_move(self, board: Board, side: Side) -> Optional[Move]:
        return self.best_move(board, side)

    def best_move(self, board: Board, side: Side, difficulty: Optional[Difficulty] = None) -> Optional[Move]:
        """Pick a move for ``side``; None when it has no legal move."""
        difficulty = difficulty or self.difficulty
        legal_moves = board.legal_moves(side)
        if not legal_moves:
            LOGGER.debug("No legal move for %s", side.value)
            return None

        if difficulty is Difficulty.EASY:
            candidates = legal_moves[: min(EASY_CANDIDATES, len(legal_moves))]
            chosen = self._rng.choice(candidates)
            LOGGER.debug("Easy pick %s from %s", chosen, [str(m) for m in candidates])
            return chosen

        self.nodes_evaluated = 0
        depth = difficulty.depth
        maximizing = side is Side.WHITE
        best_move = legal_moves[0]
        best_score = -math.inf if maximizing else math.inf
        diagnostics: List[Tuple[Move, int]] = []

        for move in legal_moves:
            child = board.apply_move(move.row, move.col, side)
            score = self._search(child, depth - 1, side.opponent(), maximizing)
            diagnostics.append((move, score))
            # Strict comparison: the earliest row-major move wins ties.
            if maximizing and score > best_score:
                best_score, best_move = score, move
            elif not maximizing and score < best_score:
                best_score, best_move = score, move

        self._log_diagnostics(diagnostics, best_move, maximizing)
        LOGGER.debug(
            "Minimax %s selected %s with score %s (depth=%d nodes=%d)",
            side.value,
            best_move,
            best_score,
            depth,
            self.nodes_evaluated,
        )
        return best_move

    def _search(self, board: Board, depth: int, side_to_move: Side, maximizing: bool) -> int:
        if self.alpha_beta:
            return self.alphabeta(board, depth, -math.inf, math.inf, side_to_move, maximizing)
        return self.minimax(board, depth, side_to_move, maximizing)

    def minimax(self, board: Board, depth: int, side_to_move: Side, maximizing: bool) -> int:
        """Full-width minimax value of ``board``."""
        self.nodes_evaluated += 1
        if depth == 0:
            return evaluate(board)
        legal_moves = board.legal_moves(side_to_move)
        if not legal_moves:
            return evaluate(board)

        next_side = side_to_move.opponent()
        scores = (
            self.minimax(board.apply_move(move.row, move.col, side_to_move), depth - 1, next_side, not maximizing)
            for move in legal_moves
        )
        return max(scores) if maximizing else min(scores)

    def alphabeta(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        side_to_move: Side,
        maximizing: bool,
    ) -> int:
        """Minimax value with alpha-beta cutoffs; exact inside (alpha, beta)."""
        self.nodes_evaluated += 1
        if depth == 0:
            return evaluate(board)
        legal_moves = board.legal_moves(side_to_move)
        if not legal_moves:
            return evaluate(board)

        next_side = side_to_move.opponent()
        if maximizing:
            best = -math.inf
            for move in legal_moves:
                child = board.apply_move(move.row, move.col, side_to_move)
                score = self.alphabeta(child, depth - 1, alpha, beta, next_side, False)
                best = max(best, score)
                alpha = max(alpha, score)
                if alpha >= beta:
                    break
            return int(best)

        best = math.inf
        for move in legal_moves:
            child = board.apply_move(move.row, move.col, side_to_move)
            score = self.alphabeta(child, depth - 1, alpha, beta, next_side, True)
            best = min(best, score)
            beta = min(beta, score)
            if alpha >= beta:
                break
        return int(best)

    def _log_diagnostics(self, diagnostics: List[Tuple[Move, int]], chosen: Move, maximizing: bool) -> None:
        """Emit top-k candidate breakdown when DEBUG is enabled."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        ranked = sorted(diagnostics, key=lambda item: item[1], reverse=maximizing)
        for idx, (move, score) in enumerate(ranked[: self.debug_top_k], start=1):
            LOGGER.debug("Candidate #%d move=%s eval=%d chosen=%s", idx, move, score, move == chosen)
