"""Compact URL-safe encoding of a scenario.

A token is the URL-safe base64 of a compact JSON record with short keys::

    {"p": 42, "g": 0, "m": 3, "di": "In", "sdi": "In", "ss": "1",
     "t": "Wood", "pos": {"sX": 41.5, "lX": 47.2, "bO": 210.0}}

``m`` is the index of the starting move in ``scenario.MOVES``. Padding is
stripped on encode. Decoding also accepts the older padded tokens built
with the standard base64 alphabet.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any, Dict, Optional, TypedDict

from .scenario import (
    DEFAULT_BOTTOM_OFFSET,
    DEFAULT_LUCINA_X,
    DEFAULT_STEVE_X,
    DI,
    MOVES,
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

logger = logging.getLogger(__name__)


class DecodeError(ValueError):
    """Raised when a token cannot be turned back into a record."""


class WirePosition(TypedDict, total=False):
    sX: float
    lX: float
    bO: float


class WireRecord(TypedDict, total=False):
    p: int
    g: int
    m: int
    di: str
    sdi: str
    ss: str
    t: str
    pos: WirePosition


def to_record(scenario: Scenario) -> WireRecord:
    pos = scenario.positions
    return {
        "p": scenario.percentage,
        "g": 1 if scenario.gold else 0,
        "m": MOVES.index(scenario.starting_move),
        "di": scenario.di.value,
        "sdi": scenario.sdi.value,
        "ss": scenario.sdi_strength.value,
        "t": scenario.tool.value,
        "pos": {"sX": pos.steve_x, "lX": pos.lucina_x, "bO": pos.bottom_offset},
    }


def encode(scenario: Scenario) -> str:
    text = json.dumps(to_record(scenario), separators=(",", ":"))
    token = base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii")
    return token.rstrip("=")


def _move_at(index: Any) -> Move:
    # Only whole-number indexes name a move; 3.7 or True do not.
    if isinstance(index, bool):
        return Move.JAB
    if isinstance(index, float) and index.is_integer():
        index = int(index)
    if isinstance(index, int) and 0 <= index < len(MOVES):
        return MOVES[index]
    return Move.JAB


def _merge_position(pos: Any) -> Position:
    if not isinstance(pos, dict):
        return Position()
    return Position(
        steve_x=safe_float(pos.get("sX"), DEFAULT_STEVE_X),
        lucina_x=safe_float(pos.get("lX"), DEFAULT_LUCINA_X),
        bottom_offset=safe_float(pos.get("bO"), DEFAULT_BOTTOM_OFFSET),
    )


def merge_with_defaults(record: WireRecord) -> Scenario:
    """Fill every absent field of a (possibly legacy) record with its default.

    A percentage of 0 and a missing percentage come out the same, as do
    ``g: 0`` and a missing ``g``. Callers cannot tell them apart.
    """
    return Scenario(
        percentage=safe_int(record.get("p")),
        gold=bool(record.get("g")),
        starting_move=_move_at(record.get("m")),
        di=enum_or(DI, record.get("di"), DI.NONE),
        sdi=enum_or(SDI, record.get("sdi"), SDI.NONE),
        sdi_strength=enum_or(SDIStrength, record.get("ss"), SDIStrength.ZERO),
        tool=enum_or(Tool, record.get("t"), Tool.NONE),
        positions=_merge_position(record.get("pos")),
    )


def _b64decode(token: str) -> bytes:
    cleaned = token.strip().rstrip("=")
    padded = cleaned + "=" * (-len(cleaned) % 4)
    return base64.b64decode(padded, altchars=b"-_", validate=True)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_record(token: str) -> WireRecord:
    try:
        raw = _b64decode(token)
        decoded: Dict[str, Any] = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (binascii.Error, UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise DecodeError(f"Malformed combo token: {exc}") from exc
    if not isinstance(decoded, dict):
        raise DecodeError(f"Combo token holds {type(decoded).__name__}, expected an object")
    return decoded  # type: ignore[return-value]


def decode(token: str) -> Scenario:
    return merge_with_defaults(parse_record(token))


def decode_or_default(token: Optional[str]) -> Scenario:
    if not token:
        return Scenario()
    try:
        return decode(token)
    except DecodeError as exc:
        logger.warning(f"Discarding combo token: {exc}")
        return Scenario()
