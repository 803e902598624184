"""Turn order, pass handling, and outcome bookkeeping for an Othello game."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ai.minimax_ai import MinimaxAI
from engine.board import Board, Move
from engine.config import Difficulty, GameConfig, GameMode
from engine.pieces import Side
from engine.rules import Position

LOGGER = logging.getLogger(__name__)

# The automated opponent always plays White.
CPU_SIDE = Side.WHITE


class GameOutcome(str, Enum):
    IN_PROGRESS = "in_progress"
    BLACK_WINS = "black_wins"
    WHITE_WINS = "white_wins"
    DRAW = "draw"

    @property
    def winner(self) -> Optional[Side]:
        if self is GameOutcome.BLACK_WINS:
            return Side.BLACK
        if self is GameOutcome.WHITE_WINS:
            return Side.WHITE
        return None


@dataclass(frozen=True)
class GameState:
    """Board plus whose turn it is. ``outcome`` is final once terminal."""

    board: Board
    to_move: Side = Side.BLACK
    outcome: GameOutcome = GameOutcome.IN_PROGRESS

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not GameOutcome.IN_PROGRESS


@dataclass(frozen=True)
class MoveResult:
    """Result metadata for a proposed move."""

    accepted: bool
    side: Side
    move: Optional[Move] = None
    flipped: List[Position] = field(default_factory=list)
    passed: Optional[Side] = None
    outcome: GameOutcome = GameOutcome.IN_PROGRESS


def new_game() -> Board:
    return Board.initial()


def current_score(board: Board) -> Tuple[int, int]:
    """Return (black_count, white_count)."""
    return board.count()


def final_outcome(board: Board) -> GameOutcome:
    """Compare disc counts; more discs wins, equal counts draw."""
    black, white = board.count()
    if black > white:
        return GameOutcome.BLACK_WINS
    if white > black:
        return GameOutcome.WHITE_WINS
    return GameOutcome.DRAW


def settle_turn(board: Board, preferred: Side) -> GameState:
    """
    Work out whose turn it is on ``board`` and whether the game is over.

    ``preferred`` moves if it can, otherwise its opponent moves again, and
    when neither side has a move the game ends on the disc count.
    """
    if board.has_legal_move(preferred):
        return GameState(board=board, to_move=preferred)
    if board.has_legal_move(preferred.opponent()):
        return GameState(board=board, to_move=preferred.opponent())
    return GameState(board=board, to_move=preferred, outcome=final_outcome(board))


def outcome(state: GameState) -> GameOutcome:
    """Outcome of ``state``, derived from its board."""
    return settle_turn(state.board, state.to_move).outcome


def try_move(state: GameState, row: int, col: int, side: Side) -> Tuple[GameState, bool]:
    """
    Apply a proposed move.

    Returns the new state and True, or the unchanged state and False when
    it is not ``side``'s turn, the game is over, or the move is illegal.
    When the opponent has no reply but ``side`` does, ``side`` moves again.
    """
    if state.is_terminal or side is not state.to_move or not state.board.is_legal_move(row, col, side):
        return state, False

    board = state.board.apply_move(row, col, side)
    return settle_turn(board, side.opponent()), True


class GameController:
    """
    Authoritative game owner used by front ends.

    Holds the current ``GameState``, and in ``VS_CPU`` mode answers every
    human move with the automated opponent through the same ``try_move``
    path a human move takes.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GameConfig()
        self.ai = MinimaxAI(
            difficulty=self.config.difficulty,
            seed=self.config.seed,
            rng=rng,
            alpha_beta=self.config.alpha_beta,
        )
        # Separate random source so hints never shift the opponent's Easy picks.
        self.hint_ai = MinimaxAI(
            difficulty=self.config.difficulty,
            seed=self.config.seed,
            alpha_beta=self.config.alpha_beta,
        )
        self.state = GameState(board=new_game())

    @property
    def mode(self) -> GameMode:
        return self.config.mode

    @property
    def difficulty(self) -> Difficulty:
        return self.config.difficulty

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def to_move(self) -> Side:
        return self.state.to_move

    @property
    def is_over(self) -> bool:
        return self.state.is_terminal

    def reset(self) -> None:
        """Restart from the opening position; mode and difficulty are kept."""
        self.state = GameState(board=new_game())
        LOGGER.info("New game: mode=%s difficulty=%s", self.mode.value, self.difficulty.value)

    def score(self) -> Tuple[int, int]:
        return current_score(self.state.board)

    def outcome(self) -> GameOutcome:
        return outcome(self.state)

    def legal_moves(self) -> List[Move]:
        if self.state.is_terminal:
            return []
        return self.state.board.legal_moves(self.state.to_move)

    def is_cpu_turn(self) -> bool:
        return self.mode is GameMode.VS_CPU and not self.state.is_terminal and self.state.to_move is CPU_SIDE

    def submit(self, row: int, col: int, side: Side) -> MoveResult:
        """Run one move through the transition rules and report what changed."""
        before = self.state
        flipped = before.board.captured_by(row, col, side) if before.board.is_legal_move(row, col, side) else []
        after, accepted = try_move(before, row, col, side)
        if not accepted:
            LOGGER.debug("Rejected %s move (%d, %d); %s to move", side.value, row, col, before.to_move.value)
            return MoveResult(accepted=False, side=side, outcome=before.outcome)

        self.state = after
        passed = None
        if not after.is_terminal and after.to_move is side:
            passed = side.opponent()
            LOGGER.info("%s has no legal move; %s plays again", passed.value, side.value)
        if after.is_terminal:
            black, white = after.board.count()
            LOGGER.info("Game over: %s (black=%d white=%d)", after.outcome.value, black, white)
        return MoveResult(
            accepted=True,
            side=side,
            move=Move(row, col),
            flipped=flipped,
            passed=passed,
            outcome=after.outcome,
        )

    def play(self, row: int, col: int) -> List[MoveResult]:
        """
        Play (row, col) for the side to move.

        In ``VS_CPU`` mode the automated opponent's replies follow. The
        first result is the human move; when it was rejected it is the only
        entry and the state is unchanged.
        """
        if self.is_cpu_turn():
            return [MoveResult(accepted=False, side=self.state.to_move, outcome=self.state.outcome)]
        result = self.submit(row, col, self.state.to_move)
        if not result.accepted:
            return [result]
        return [result] + self.run_cpu()

    def run_cpu(self) -> List[MoveResult]:
        """Let the automated opponent move for as long as it is its turn."""
        results: List[MoveResult] = []
        while self.is_cpu_turn():
            move = self.ai.best_move(self.state.board, CPU_SIDE)
            if move is None:
                break
            result = self.submit(move.row, move.col, CPU_SIDE)
            if not result.accepted:
                break
            results.append(result)
        return results

    def hint(self) -> Optional[Move]:
        """Suggest a move for the side to move without changing state."""
        if self.state.is_terminal or self.is_cpu_turn():
            return None
        return hint(self.state.board, self.state.to_move, self.difficulty, self.hint_ai)

    def with_state(self, state: GameState) -> "GameController":
        """
        Resume from a set-up position.

        Turn and outcome are taken from the board: a side without a move is
        skipped and a board where nobody can move is finished.
        """
        self.state = settle_turn(state.board, state.to_move)
        if self.state.to_move is not state.to_move:
            LOGGER.info("%s has no legal move; %s to move", state.to_move.value, self.state.to_move.value)
        return self


def hint(board: Board, side: Side, difficulty: Difficulty, ai: Optional[MinimaxAI] = None) -> Optional[Move]:
    """Advisory best move; identical to the automated opponent's choice."""
    ai = ai or MinimaxAI(difficulty=difficulty)
    return ai.best_move(board, side, difficulty)
