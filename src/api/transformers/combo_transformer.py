"""Transform combo entities to the frontend's camelCase format."""

from datetime import datetime
from typing import Any, Dict

from combo.documents import scenario_to_fields
from combo.scenario import Scenario

from ...domain.entities.combo import SavedCombo


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def scenario_to_frontend(scenario: Scenario) -> Dict[str, Any]:
    return scenario_to_fields(scenario)


def shared_combo_to_frontend(scenario: Scenario, token: str, share_link: str) -> Dict[str, Any]:
    """Scenario plus the token and link used to share it."""
    return {
        "scenario": scenario_to_frontend(scenario),
        "token": token,
        "shareLink": share_link,
    }


def saved_combo_to_frontend(combo: SavedCombo) -> Dict[str, Any]:
    """Flatten a saved combo the way the library stores it.

    Scenario fields sit at the top level next to the metadata.
    """
    return {
        "id": combo.combo_id,
        "name": combo.name,
        "description": combo.description,
        **scenario_to_frontend(combo.scenario),
        "solution": combo.solution,
        "difficulty": combo.difficulty,
        "userId": combo.author.user_id,
        "userName": combo.author.user_name,
        "isPublished": combo.is_published,
        "publishedAt": _iso(combo.published_at),
        "createdAt": _iso(combo.created_at),
        "updatedAt": _iso(combo.updated_at),
        "likesCount": combo.likes_count,
        "tags": list(combo.tags),
    }
