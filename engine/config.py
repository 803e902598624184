"""Game configuration: difficulty tiers, game modes, and loaded settings."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional


class Difficulty(str, Enum):
    """Automated opponent strength."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def depth(self) -> int:
        return DIFFICULTY_DEPTH[self]


DIFFICULTY_DEPTH: Dict[Difficulty, int] = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 3,
    Difficulty.HARD: 5,
}

# Easy picks at random among this many leading legal moves.
EASY_CANDIDATES = 3


class GameMode(str, Enum):
    """Who plays White."""

    VS_CPU = "cpu"
    TWO_PLAYER = "player"


def _as_bool(value: object, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got {value!r}")
    return value


@dataclass(frozen=True)
class GameConfig:
    """Settings fixed for the duration of one game."""

    mode: GameMode = GameMode.VS_CPU
    difficulty: Difficulty = Difficulty.MEDIUM
    seed: Optional[int] = None
    alpha_beta: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "GameConfig":
        seed = payload.get("seed")
        return cls(
            mode=GameMode(str(payload.get("mode", GameMode.VS_CPU.value)).lower()),
            difficulty=Difficulty(str(payload.get("difficulty", Difficulty.MEDIUM.value)).lower()),
            seed=None if seed is None else int(seed),
            alpha_beta=_as_bool(payload.get("alpha_beta", False), "alpha_beta"),
            log_level=str(payload.get("log_level", "INFO")).upper(),
        )

    @classmethod
    def from_json(cls, path: str | Path) -> "GameConfig":
        with Path(path).open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        return cls.from_dict(payload)

    def to_dict(self) -> Dict[str, object]:
        payload = asdict(self)
        payload["mode"] = self.mode.value
        payload["difficulty"] = self.difficulty.value
        return payload
