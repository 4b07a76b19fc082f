"""Draws random practice scenarios scaled by difficulty."""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Tuple

from .config import DEFAULT_DIFFICULTY, clamp_difficulty
from .scenario import (
    DI,
    MOVES,
    SDI,
    Move,
    Position,
    Scenario,
    SDIStrength,
    Tool,
    consistency_errors,
)

logger = logging.getLogger(__name__)

STAGE_MIN_X = 20.0
STAGE_MAX_X = 80.0
MIN_SEPARATION = 3.0
MAX_SEPARATION = 8.0
BOTTOM_OFFSET_RATIO = 0.5

GOLD_CHANCE = 0.2

# Declaration order matters for the weighted walk.
TOOL_WEIGHTS: Tuple[Tuple[Tool, float], ...] = (
    (Tool.WOOD, 30.0),
    (Tool.STONE, 10.0),
    (Tool.GOLD, 15.0),
    (Tool.IRON, 15.0),
    (Tool.DIAMOND, 30.0),
)

NO_DI_CHANCE = 0.10
DI_IN_CUTOFF = 0.55
NO_SDI_CHANCE = 0.30
SDI_STRENGTH_CUTOFFS: Tuple[Tuple[float, SDIStrength], ...] = (
    (0.70, SDIStrength.ONE),
    (0.95, SDIStrength.TWO),
)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def bottom_offset_for(container_height: float) -> float:
    return max(0.0, container_height * BOTTOM_OFFSET_RATIO)


def place_fighters(
    center: float, separation: float, flip: bool, container_height: float = 0.0
) -> Position:
    """Spread the two fighters around ``center`` and keep both on stage.

    Each side is clamped independently, so a center near the ledge shrinks
    the effective gap instead of pushing the pair back inward.
    """
    left = _clamp(center - separation / 2, STAGE_MIN_X, STAGE_MAX_X)
    right = _clamp(center + separation / 2, STAGE_MIN_X, STAGE_MAX_X)
    if flip:
        left, right = right, left
    return Position(
        steve_x=left,
        lucina_x=right,
        bottom_offset=bottom_offset_for(container_height),
    )


def max_percentage(move: Move, difficulty: int) -> int:
    if move == Move.DOWN_TILT:
        return 20 + difficulty * 3
    if move == Move.JAB:
        return 70 + difficulty * 2
    if move in (Move.SFAIR, Move.SBAIR):
        return 50 + difficulty * 3
    return 100


def pick_tool(r: float) -> Tool:
    """Map a uniform draw in [0, 1) onto the weighted tool table."""
    total = sum(weight for _, weight in TOOL_WEIGHTS)
    remaining = r * total
    for tool, weight in TOOL_WEIGHTS:
        if remaining < weight:
            return tool
        remaining -= weight
    return TOOL_WEIGHTS[0][0]


def pick_di(r: float) -> DI:
    if r < NO_DI_CHANCE:
        return DI.NONE
    return DI.IN if r < DI_IN_CUTOFF else DI.OUT


def pick_sdi_strength(r: float) -> SDIStrength:
    for cutoff, strength in SDI_STRENGTH_CUTOFFS:
        if r < cutoff:
            return strength
    return SDIStrength.THREE


def generate(
    difficulty: int = DEFAULT_DIFFICULTY,
    container_height: float = 0.0,
    rng: Optional[random.Random] = None,
) -> Scenario:
    """Draw a fresh practice scenario.

    Draw order is fixed: positions, move, percentage, gold, tool, DI, SDI,
    SDI strength. SDI is only drawn when DI is present and strength only when
    SDI is present.
    """
    rng = rng or random.Random()
    level = clamp_difficulty(difficulty)
    if level != difficulty:
        logger.debug(f"Clamped difficulty {difficulty} to {level}")

    center = STAGE_MIN_X + rng.random() * (STAGE_MAX_X - STAGE_MIN_X)
    separation = MIN_SEPARATION + rng.random() * (MAX_SEPARATION - MIN_SEPARATION)
    flip = rng.random() < 0.5
    positions = place_fighters(center, separation, flip, container_height)

    move = MOVES[math.floor(rng.random() * len(MOVES))]
    cap = max_percentage(move, level)
    percentage = math.floor(rng.random() * (cap + 1))

    gold = rng.random() > 1.0 - GOLD_CHANCE
    tool = pick_tool(rng.random())

    di = pick_di(rng.random())
    sdi = SDI.NONE
    if di != DI.NONE and rng.random() >= NO_SDI_CHANCE:
        sdi = SDI(di.value)

    sdi_strength = SDIStrength.ZERO
    if sdi != SDI.NONE:
        sdi_strength = pick_sdi_strength(rng.random())

    return Scenario(
        percentage=percentage,
        gold=gold,
        starting_move=move,
        di=di,
        sdi=sdi,
        sdi_strength=sdi_strength,
        tool=tool,
        positions=positions,
    )


def defaults() -> Scenario:
    """Baseline used when clearing the arena instead of randomizing it."""
    return Scenario()


def generation_errors(scenario: Scenario, difficulty: int) -> List[str]:
    errors = consistency_errors(scenario)
    level = clamp_difficulty(difficulty)
    cap = max_percentage(scenario.starting_move, level)
    if not 0 <= scenario.percentage <= cap:
        errors.append(
            f"percentage {scenario.percentage} outside [0, {cap}] for "
            f"{scenario.starting_move.value} at difficulty {level}"
        )
    pos = scenario.positions
    for name, x in (("steveX", pos.steve_x), ("lucinaX", pos.lucina_x)):
        if not STAGE_MIN_X <= x <= STAGE_MAX_X:
            errors.append(f"{name} {x} is off stage")
    gap = abs(pos.steve_x - pos.lucina_x)
    # Clamping at the ledge can shrink the gap down to half the minimum.
    if not MIN_SEPARATION / 2 - 1e-9 <= gap <= MAX_SEPARATION + 1e-9:
        errors.append(f"fighters separated by {gap:.2f}")
    if pos.bottom_offset < 0:
        errors.append(f"bottomOffset {pos.bottom_offset} is negative")
    return errors
