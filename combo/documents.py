"""Flat camelCase field mapping used by stored combo documents and JSON output."""

from __future__ import annotations

import math
import re
from typing import Any, Dict, List, Mapping

from .scenario import (
    DEFAULT_BOTTOM_OFFSET,
    DEFAULT_LUCINA_X,
    DEFAULT_STEVE_X,
    DI,
    SDI,
    Move,
    Position,
    Scenario,
    SDIStrength,
    Tool,
    enum_or,
    safe_float,
    safe_int,
)

SCENARIO_FIELDS = (
    "percentage",
    "gold",
    "startingMove",
    "di",
    "sdi",
    "sdiStrength",
    "tool",
    "positions",
)


def scenario_to_fields(scenario: Scenario) -> Dict[str, Any]:
    pos = scenario.positions
    return {
        "percentage": scenario.percentage,
        "gold": scenario.gold,
        "startingMove": scenario.starting_move.value,
        "di": scenario.di.value,
        "sdi": scenario.sdi.value,
        "sdiStrength": scenario.sdi_strength.value,
        "tool": scenario.tool.value,
        "positions": {
            "steveX": pos.steve_x,
            "lucinaX": pos.lucina_x,
            "bottomOffset": pos.bottom_offset,
        },
    }


def scenario_from_fields(data: Mapping[str, Any]) -> Scenario:
    """Rebuild a scenario from flat fields, defaulting whatever older documents lack."""
    percentage = data.get("percentage")
    if isinstance(percentage, bool) or not isinstance(percentage, (int, float)):
        percentage = 0
    pos = data.get("positions")
    if isinstance(pos, Mapping):
        positions = Position(
            steve_x=safe_float(pos.get("steveX"), DEFAULT_STEVE_X),
            lucina_x=safe_float(pos.get("lucinaX"), DEFAULT_LUCINA_X),
            bottom_offset=safe_float(pos.get("bottomOffset"), DEFAULT_BOTTOM_OFFSET),
        )
    else:
        positions = Position()
    return Scenario(
        percentage=safe_int(percentage),
        gold=bool(data.get("gold")),
        starting_move=enum_or(Move, data.get("startingMove"), Move.JAB),
        di=enum_or(DI, data.get("di"), DI.NONE),
        sdi=enum_or(SDI, data.get("sdi"), SDI.NONE),
        sdi_strength=enum_or(SDIStrength, data.get("sdiStrength"), SDIStrength.ZERO),
        tool=enum_or(Tool, data.get("tool"), Tool.NONE),
        positions=positions,
    )


def combo_tags(scenario: Scenario) -> List[str]:
    """Query tags such as ``percent-40``, ``no-gold`` and ``move-up-tilt-(front)``."""
    bucket = math.floor(scenario.percentage / 10) * 10
    move_slug = re.sub(r"\s+", "-", scenario.starting_move.value.lower())
    return [
        f"percent-{bucket}",
        "gold" if scenario.gold else "no-gold",
        f"move-{move_slug}",
    ]
