from datetime import datetime, timezone

from combo.documents import combo_tags, scenario_from_fields, scenario_to_fields
from combo.scenario import DI, SDI, Move, Position, Scenario, SDIStrength, Tool
from src.domain.value_objects.types import ComboVisibility
from src.infrastructure.adapters.combo_documents import saved_combo_from_document


def _scenario() -> Scenario:
    return Scenario(
        percentage=47,
        gold=False,
        starting_move=Move.UP_TILT_FRONT,
        di=DI.IN,
        sdi=SDI.IN,
        sdi_strength=SDIStrength.ONE,
        tool=Tool.GOLD,
        positions=Position(33.5, 38.0, 250.0),
    )


def test_fields_are_flat_camel_case() -> None:
    fields = scenario_to_fields(_scenario())
    assert fields == {
        "percentage": 47,
        "gold": False,
        "startingMove": "Up Tilt (Front)",
        "di": "In",
        "sdi": "In",
        "sdiStrength": "1",
        "tool": "Gold",
        "positions": {"steveX": 33.5, "lucinaX": 38.0, "bottomOffset": 250.0},
    }
    assert scenario_from_fields(fields) == _scenario()


def test_tags() -> None:
    assert combo_tags(_scenario()) == ["percent-40", "no-gold", "move-up-tilt-(front)"]
    gold_jab = Scenario(percentage=9, gold=True, starting_move=Move.JAB)
    assert combo_tags(gold_jab) == ["percent-0", "gold", "move-jab"]


def test_legacy_document_gets_defaults() -> None:
    # Saved before DI/SDI, tools and tags existed.
    doc = {
        "name": "",
        "percentage": "lots",
        "gold": True,
        "startingMove": "Down Tilt",
        "difficulty": "hard",
        "userId": "u1",
        "isPublished": True,
        "createdAt": datetime(2025, 1, 2, tzinfo=timezone.utc),
    }
    combo = saved_combo_from_document("c1", doc)
    assert combo.combo_id == "c1"
    assert combo.name == "Unnamed Combo"
    assert combo.difficulty == 5
    assert combo.author.user_name == "Anonymous"
    assert combo.visibility == ComboVisibility.PUBLISHED
    assert combo.is_published is True
    assert combo.likes_count == 0
    assert combo.created_at == datetime(2025, 1, 2, tzinfo=timezone.utc)
    assert combo.updated_at is None
    assert combo.scenario == Scenario(
        percentage=0,
        gold=True,
        starting_move=Move.DOWN_TILT,
        positions=Position(30.0, 70.0, 0.0),
    )
    assert combo.tags == ["percent-0", "gold", "move-down-tilt"]


def test_document_with_iso_timestamps() -> None:
    combo = saved_combo_from_document(
        "c2",
        {"userId": "u2", "createdAt": "2025-03-04T05:06:07+00:00", "updatedAt": "nope"},
    )
    assert combo.created_at == datetime(2025, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
    assert combo.updated_at is None
    assert combo.visibility == ComboVisibility.PRIVATE


def test_non_finite_numbers_in_document_fall_back() -> None:
    doc = {
        "percentage": float("inf"),
        "positions": {"steveX": float("nan"), "lucinaX": float("-inf"), "bottomOffset": 90.0},
    }
    assert scenario_from_fields(doc) == Scenario(positions=Position(30.0, 70.0, 90.0))
    assert scenario_from_fields({"percentage": float("nan")}).percentage == 0
