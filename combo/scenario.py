"""Scenario value objects shared by the generator, codec and service layer."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class Move(str, Enum):
    """Starting move Steve opens the combo with."""

    JAB = "Jab"
    UP_TILT_FRONT = "Up Tilt (Front)"
    UP_TILT_BACK = "Up Tilt (Back)"
    SFAIR = "Sfair"
    SBAIR = "Sbair"
    DOWN_TILT = "Down Tilt"


class DI(str, Enum):
    """Directional influence held by Lucina."""

    IN = "In"
    OUT = "Out"
    NONE = "No DI"


class SDI(str, Enum):
    """Smash directional influence applied during hitstun."""

    IN = "In"
    OUT = "Out"
    NONE = "No SDI"


class SDIStrength(str, Enum):
    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"


class Tool(str, Enum):
    """Tool tier Steve is holding."""

    NONE = "None"
    WOOD = "Wood"
    STONE = "Stone"
    GOLD = "Gold"
    IRON = "Iron"
    DIAMOND = "Diamond"


# Index into this tuple is what goes on the wire; never reorder.
MOVES: Tuple[Move, ...] = (
    Move.JAB,
    Move.UP_TILT_FRONT,
    Move.UP_TILT_BACK,
    Move.SFAIR,
    Move.SBAIR,
    Move.DOWN_TILT,
)

DEFAULT_STEVE_X = 30.0
DEFAULT_LUCINA_X = 70.0
DEFAULT_BOTTOM_OFFSET = 0.0


@dataclass(frozen=True)
class Position:
    """Horizontal placement (percent of arena width) and baseline offset in pixels."""

    steve_x: float = DEFAULT_STEVE_X
    lucina_x: float = DEFAULT_LUCINA_X
    bottom_offset: float = DEFAULT_BOTTOM_OFFSET


@dataclass(frozen=True)
class Scenario:
    percentage: int = 0
    gold: bool = False
    starting_move: Move = Move.JAB
    di: DI = DI.NONE
    sdi: SDI = SDI.NONE
    sdi_strength: SDIStrength = SDIStrength.ZERO
    tool: Tool = Tool.NONE
    positions: Position = field(default_factory=Position)


def consistency_errors(scenario: Scenario) -> List[str]:
    """Return the DI/SDI consistency rules the scenario breaks (empty when valid)."""
    errors: List[str] = []
    if (scenario.sdi == SDI.NONE) != (scenario.sdi_strength == SDIStrength.ZERO):
        errors.append(
            f"sdiStrength must be '0' exactly when SDI is absent "
            f"(sdi={scenario.sdi.value}, sdiStrength={scenario.sdi_strength.value})"
        )
    if scenario.di == DI.NONE and scenario.sdi != SDI.NONE:
        errors.append(f"SDI must be absent without DI (sdi={scenario.sdi.value})")
    if scenario.sdi != SDI.NONE and scenario.sdi.value != scenario.di.value:
        errors.append(
            f"SDI must match DI direction (di={scenario.di.value}, sdi={scenario.sdi.value})"
        )
    return errors


def safe_int(value: Any, default: int = 0) -> int:
    """Coerce loosely typed input to an int; non-finite or unparsable values give ``default``."""
    if isinstance(value, float) and not math.isfinite(value):
        return default
    try:
        return int(value or default)
    except (TypeError, ValueError, OverflowError):
        return default


def safe_float(value: Any, default: float) -> float:
    # Falsy values (including 0) fall back to the default.
    if not value:
        return default
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return result if math.isfinite(result) else default


def enum_or(enum_cls: Type[E], value: Any, default: E) -> E:
    if not value:
        return default
    try:
        return enum_cls(value)
    except (TypeError, ValueError):
        logger.debug(f"Unknown {enum_cls.__name__} value {value!r}, using {default.value!r}")
        return default
