from __future__ import annotations

import os
from dataclasses import dataclass


MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 10
DEFAULT_DIFFICULTY = 5

DEFAULT_BASE_URL = "http://localhost:3000/"


def clamp_difficulty(difficulty: int) -> int:
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, int(difficulty)))


@dataclass(frozen=True)
class ComboConfig:
    base_url: str
    difficulty: int


def combo_config_from_env() -> ComboConfig:
    base_url = os.environ.get("COMBO_BASE_URL") or DEFAULT_BASE_URL
    try:
        difficulty = clamp_difficulty(int(os.environ.get("COMBO_DIFFICULTY", DEFAULT_DIFFICULTY)))
    except ValueError:
        difficulty = DEFAULT_DIFFICULTY
    return ComboConfig(base_url=base_url, difficulty=difficulty)
