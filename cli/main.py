"""CLI entrypoint for playing Othello in the terminal."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from engine.config import Difficulty, GameConfig, GameMode
from engine.game import GameController, GameOutcome, MoveResult

HELP_TEXT = "Commands: <row> <col> | hint | moves | reset | help | quit"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Othello in terminal.")
    parser.add_argument("--config", type=str, default=None, help="Path to game config JSON")
    parser.add_argument(
        "--mode",
        type=str,
        default=None,
        choices=[mode.value for mode in GameMode],
        help="cpu: play Black against the computer; player: two humans",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        default=None,
        choices=[level.value for level in Difficulty],
        help="Computer and hint strength",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the easy-level random pick")
    parser.add_argument("--alpha-beta", action="store_true", help="Use alpha-beta pruning in search")
    parser.add_argument("--log-level", type=str, default=None, help="Python logging level")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    """Load the JSON config if given, then apply command-line overrides."""
    config = GameConfig.from_json(args.config) if args.config else GameConfig()
    if args.mode is not None:
        config = replace(config, mode=GameMode(args.mode))
    if args.difficulty is not None:
        config = replace(config, difficulty=Difficulty(args.difficulty))
    if args.seed is not None:
        config = replace(config, seed=args.seed)
    if args.alpha_beta:
        config = replace(config, alpha_beta=True)
    if args.log_level is not None:
        config = replace(config, log_level=args.log_level.upper())
    return config


def parse_user_move(command: str) -> Optional[Tuple[int, int]]:
    """Parse ``"row col"`` (or ``"row,col"``) into a coordinate pair."""
    parts = command.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    return row, col


def describe_result(result: MoveResult, label: str) -> List[str]:
    lines = [f"{label} ({result.side.value}) played {result.move}, flipped {len(result.flipped)}"]
    if result.passed is not None:
        lines.append(f"{result.passed.value} has no legal move and passes.")
    return lines


def describe_outcome(outcome: GameOutcome) -> str:
    if outcome is GameOutcome.DRAW:
        return "Game ended in draw."
    winner = outcome.winner
    return f"Winner: {winner.value if winner else 'none'}"


def run_cli(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    config = build_config(args)
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO))
    logger = logging.getLogger("othello.cli")

    controller = GameController(config)
    logger.info("Starting Othello. mode=%s difficulty=%s", config.mode.value, config.difficulty.value)
    print(HELP_TEXT)

    while True:
        black, white = controller.score()
        print()
        print(controller.board.render_ascii())
        print(f"Black: {black} | White: {white}")

        if controller.is_over:
            print(describe_outcome(controller.outcome()))
            break

        print(f"Turn: {controller.to_move.value}")
        user_input = input("Your move> ").strip().lower()
        if user_input in {"quit", "exit"}:
            print("Exiting game.")
            break
        if user_input == "help":
            print(HELP_TEXT)
            continue
        if user_input == "moves":
            print("Legal moves: " + " ".join(str(move) for move in controller.legal_moves()))
            continue
        if user_input == "hint":
            suggestion = controller.hint()
            print(f"Hint: {suggestion}" if suggestion is not None else "No hint available.")
            continue
        if user_input == "reset":
            controller.reset()
            continue

        coords = parse_user_move(user_input)
        if coords is None:
            print("Invalid command format.")
            continue
        results = controller.play(*coords)
        if not results[0].accepted:
            print("Illegal move for current state.")
            continue
        for idx, result in enumerate(results):
            label = "AI" if idx > 0 else "Player"
            for line in describe_result(result, label):
                print(line)


if __name__ == "__main__":
    run_cli()
