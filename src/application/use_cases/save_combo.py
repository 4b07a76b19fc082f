"""Use case for saving a combo to the library."""

import logging
from dataclasses import dataclass

from combo.config import DEFAULT_DIFFICULTY, clamp_difficulty
from combo.documents import combo_tags, scenario_to_fields
from combo.scenario import Scenario, consistency_errors

from ..ports.combo_store import ComboStorePort

logger = logging.getLogger(__name__)


@dataclass
class SaveComboRequest:
    """Request to save a combo."""

    scenario: Scenario
    user_id: str
    user_name: str | None = None
    name: str | None = None
    description: str | None = None
    solution: str = ""
    difficulty: int = DEFAULT_DIFFICULTY
    is_published: bool = False


@dataclass
class SaveComboResult:
    """Result of saving a combo."""

    success: bool
    combo_id: str | None = None
    error: str | None = None


class SaveComboUseCase:
    """Use case for saving combos.

    This orchestrates the process of:
    1. Rejecting scenarios whose DI/SDI fields contradict each other
    2. Flattening the scenario into a library document
    3. Handing the document to the store
    """

    def __init__(self, store: ComboStorePort):
        self._store = store

    def execute(self, request: SaveComboRequest) -> SaveComboResult:
        if not request.user_id:
            return SaveComboResult(success=False, error="User must be logged in to save combos")

        errors = consistency_errors(request.scenario)
        if errors:
            return SaveComboResult(success=False, error="; ".join(errors))

        document = {
            "name": (request.name or "").strip() or "Unnamed Combo",
            "description": (request.description or "").strip(),
            **scenario_to_fields(request.scenario),
            "solution": request.solution,
            "difficulty": clamp_difficulty(request.difficulty),
            "userId": request.user_id,
            "userName": request.user_name or "Anonymous",
            "isPublished": request.is_published,
            "likesCount": 0,
            "tags": combo_tags(request.scenario),
        }

        try:
            combo_id = self._store.add(document)
        except Exception as e:
            logger.error(f"Saving combo for {request.user_id} failed: {e}")
            return SaveComboResult(success=False, error=str(e))

        logger.info(f"Saved combo {combo_id} for {request.user_id}")
        return SaveComboResult(success=True, combo_id=combo_id)
