import random
import unittest

from ai.evaluation import evaluate
from ai.minimax_ai import MinimaxAI
from engine.board import Board, Move
from engine.config import Difficulty
from engine.pieces import Side

# White has exactly five legal moves here: (0,2), (0,4), (2,2), (4,2), (6,2).
FIVE_WHITE_MOVES = [
    "WB...BW.",
    "........",
    "WB......",
    "........",
    "WB......",
    "........",
    "WB......",
    "........",
]

# Mirror-symmetric rows 2 and 5: each side has two legal moves that are
# reflections of each other and therefore score the same.
MIRRORED = [
    "........",
    "........",
    "..WB....",
    "........",
    "........",
    "..WB....",
    "........",
    "........",
]


class TestEvaluation(unittest.TestCase):
    def test_initial_board_is_balanced(self):
        self.assertEqual(evaluate(Board.initial()), 0)

    def test_corner_edge_and_interior_weights(self):
        rows = ["........"] * 8
        corner = Board.from_rows(["W......."] + rows[1:])
        self.assertEqual(evaluate(corner), 11)
        edge = Board.from_rows(["...B...."] + rows[1:])
        self.assertEqual(evaluate(edge), -3)
        interior = Board.from_rows(rows[:3] + ["...W...."] + rows[4:])
        self.assertEqual(evaluate(interior), 1)
        side_edge = Board.from_rows(rows[:4] + ["B......W"] + rows[5:])
        self.assertEqual(evaluate(side_edge), 0)
        mixed = Board.from_rows(["B......B"] + rows[1:3] + ["...WW..."] + rows[4:])
        self.assertEqual(evaluate(mixed), -22 + 2)


class TestMinimax(unittest.TestCase):
    def test_depth_zero_is_static_score(self):
        ai = MinimaxAI()
        board = Board.initial().apply_move(2, 3, Side.BLACK)
        self.assertEqual(ai.minimax(board, 0, Side.WHITE, True), evaluate(board))

    def test_side_without_moves_stops_at_static_score(self):
        board = Board.from_rows(["WB......"] + ["........"] * 7)
        ai = MinimaxAI()
        self.assertFalse(board.has_legal_move(Side.BLACK))
        self.assertEqual(ai.minimax(board, 3, Side.BLACK, False), evaluate(board))
        # White takes (0,2), then Black cannot reply and the line ends there.
        self.assertEqual(ai.minimax(board, 3, Side.WHITE, True), 11 + 3 + 3)

    def test_depth_one_picks_best_immediate_score(self):
        board = Board.initial()
        ai = MinimaxAI()
        expected = max(evaluate(board.apply_move(m.row, m.col, Side.WHITE)) for m in board.legal_moves(Side.WHITE))
        self.assertEqual(ai.minimax(board, 1, Side.WHITE, True), expected)

    def test_minimax_does_not_mutate_board(self):
        board = Board.initial()
        snapshot = board.clone()
        MinimaxAI().minimax(board, 3, Side.BLACK, False)
        self.assertEqual(board, snapshot)

    def test_alpha_beta_matches_minimax(self):
        plain = MinimaxAI()
        pruned = MinimaxAI(alpha_beta=True)
        board = Board.initial()
        side = Side.BLACK
        for _ in range(6):
            for depth in (1, 2, 3):
                for maximizing in (True, False):
                    self.assertEqual(
                        plain.minimax(board, depth, side, maximizing),
                        pruned.alphabeta(board, depth, float("-inf"), float("inf"), side, maximizing),
                    )
            move = board.legal_moves(side)[0]
            board = board.apply_move(move.row, move.col, side)
            side = side.opponent()


class TestBestMove(unittest.TestCase):
    def test_no_legal_move_returns_none(self):
        board = Board.from_rows(["W......."] + ["........"] * 7)
        for difficulty in Difficulty:
            self.assertIsNone(MinimaxAI(difficulty=difficulty).best_move(board, Side.WHITE))
            self.assertIsNone(MinimaxAI(difficulty=difficulty).best_move(board, Side.BLACK))

    def test_easy_only_picks_among_first_three(self):
        board = Board.from_rows(FIVE_WHITE_MOVES)
        legal = board.legal_moves(Side.WHITE)
        self.assertEqual(legal, [Move(0, 2), Move(0, 4), Move(2, 2), Move(4, 2), Move(6, 2)])
        seen = set()
        for seed in range(60):
            ai = MinimaxAI(difficulty=Difficulty.EASY, rng=random.Random(seed))
            move = ai.best_move(board, Side.WHITE)
            self.assertIn(move, legal[:3])
            seen.add(move)
        self.assertEqual(seen, set(legal[:3]))

    def test_easy_with_fewer_than_three_moves(self):
        board = Board.from_rows(MIRRORED)
        ai = MinimaxAI(difficulty=Difficulty.EASY, seed=7)
        for _ in range(10):
            self.assertIn(ai.best_move(board, Side.WHITE), [Move(2, 4), Move(5, 4)])

    def test_ties_go_to_earliest_row_major_move(self):
        board = Board.from_rows(MIRRORED)
        self.assertEqual(board.legal_moves(Side.WHITE), [Move(2, 4), Move(5, 4)])
        self.assertEqual(board.legal_moves(Side.BLACK), [Move(2, 1), Move(5, 1)])

        ai = MinimaxAI()
        top = board.apply_move(2, 4, Side.WHITE)
        bottom = board.apply_move(5, 4, Side.WHITE)
        self.assertEqual(ai.minimax(top, 2, Side.BLACK, True), ai.minimax(bottom, 2, Side.BLACK, True))

        for difficulty in (Difficulty.MEDIUM, Difficulty.HARD):
            self.assertEqual(MinimaxAI(difficulty=difficulty).best_move(board, Side.WHITE), Move(2, 4))
            self.assertEqual(MinimaxAI(difficulty=difficulty).best_move(board, Side.BLACK), Move(2, 1))

    def test_white_maximizes_and_black_minimizes(self):
        board = Board.initial()
        for move, side in ((Move(2, 3), Side.BLACK), (Move(2, 2), Side.WHITE), (Move(3, 2), Side.BLACK)):
            board = board.apply_move(move.row, move.col, side)
        ai = MinimaxAI(difficulty=Difficulty.MEDIUM)
        for side in Side:
            legal = board.legal_moves(side)
            scores = [
                ai.minimax(board.apply_move(m.row, m.col, side), 2, side.opponent(), side is Side.WHITE)
                for m in legal
            ]
            target = max(scores) if side is Side.WHITE else min(scores)
            self.assertEqual(ai.best_move(board, side), legal[scores.index(target)])

    def test_search_is_deterministic(self):
        board = Board.initial().apply_move(2, 3, Side.BLACK)
        for difficulty in (Difficulty.MEDIUM, Difficulty.HARD):
            first = MinimaxAI(difficulty=difficulty, seed=1).best_move(board, Side.WHITE)
            second = MinimaxAI(difficulty=difficulty, seed=2).best_move(board, Side.WHITE)
            self.assertEqual(first, second)
            self.assertIn(first, board.legal_moves(Side.WHITE))

    def test_alpha_beta_chooses_the_same_moves(self):
        board = Board.initial()
        side = Side.BLACK
        for ply in range(8):
            levels = (Difficulty.MEDIUM, Difficulty.HARD) if ply < 2 else (Difficulty.MEDIUM,)
            for difficulty in levels:
                plain = MinimaxAI(difficulty=difficulty).best_move(board, side)
                pruned = MinimaxAI(difficulty=difficulty, alpha_beta=True).best_move(board, side)
                self.assertEqual(plain, pruned)
            move = MinimaxAI(difficulty=Difficulty.MEDIUM).best_move(board, side)
            board = board.apply_move(move.row, move.col, side)
            side = side.opponent()
            if not board.has_legal_move(side):
                side = side.opponent()

    def test_best_move_does_not_mutate_board(self):
        board = Board.initial()
        snapshot = board.clone()
        MinimaxAI(difficulty=Difficulty.HARD).best_move(board, Side.BLACK)
        self.assertEqual(board, snapshot)

    def test_explicit_difficulty_overrides_default(self):
        board = Board.from_rows(FIVE_WHITE_MOVES)
        ai = MinimaxAI(difficulty=Difficulty.HARD, seed=0)
        self.assertIn(ai.best_move(board, Side.WHITE, Difficulty.EASY), board.legal_moves(Side.WHITE)[:3])


if __name__ == "__main__":
    unittest.main()
