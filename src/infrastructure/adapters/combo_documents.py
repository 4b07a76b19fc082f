"""Mapping between stored combo documents and domain entities."""

from datetime import datetime
from typing import Any, Dict

from combo.config import DEFAULT_DIFFICULTY
from combo.documents import combo_tags, scenario_from_fields

from ...domain.entities.combo import ComboAuthor, SavedCombo
from ...domain.value_objects.types import ComboId, ComboVisibility, UserId


def _as_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def saved_combo_from_document(combo_id: str, data: Dict[str, Any]) -> SavedCombo:
    """Build a SavedCombo from a stored document.

    Older documents predate DI/SDI, tools and tags, so every field falls back
    to the same defaults a shared link would get.
    """
    scenario = scenario_from_fields(data)
    difficulty = data.get("difficulty")
    if isinstance(difficulty, bool) or not isinstance(difficulty, int):
        difficulty = DEFAULT_DIFFICULTY
    likes = data.get("likesCount")
    tags = data.get("tags")

    return SavedCombo(
        combo_id=ComboId(combo_id),
        scenario=scenario,
        author=ComboAuthor(
            user_id=UserId(str(data.get("userId") or "")),
            user_name=data.get("userName") or "Anonymous",
        ),
        name=data.get("name") or "Unnamed Combo",
        description=data.get("description") or "",
        solution=data.get("solution") or "",
        difficulty=difficulty,
        visibility=ComboVisibility.PUBLISHED if data.get("isPublished") is True else ComboVisibility.PRIVATE,
        published_at=_as_datetime(data.get("publishedAt")),
        created_at=_as_datetime(data.get("createdAt")),
        updated_at=_as_datetime(data.get("updatedAt")),
        likes_count=likes if isinstance(likes, int) and not isinstance(likes, bool) else 0,
        tags=list(tags) if isinstance(tags, list) else combo_tags(scenario),
    )
