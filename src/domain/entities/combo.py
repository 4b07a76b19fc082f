"""Saved combo domain entity - the library aggregate."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from combo.config import DEFAULT_DIFFICULTY
from combo.scenario import Scenario

from ..value_objects.types import ComboId, ComboVisibility, UserId


@dataclass
class ComboAuthor:
    """Who saved the combo."""

    user_id: UserId
    user_name: str = "Anonymous"


@dataclass
class SavedCombo:
    """A scenario saved to the combo library with its metadata."""

    combo_id: ComboId
    scenario: Scenario
    author: ComboAuthor
    name: str = "Unnamed Combo"
    description: str = ""
    solution: str = ""
    difficulty: int = DEFAULT_DIFFICULTY
    visibility: ComboVisibility = ComboVisibility.PRIVATE
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    likes_count: int = 0
    tags: List[str] = field(default_factory=list)

    @property
    def is_published(self) -> bool:
        return self.visibility == ComboVisibility.PUBLISHED
