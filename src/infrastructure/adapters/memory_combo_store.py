"""In-process document store for the combo library."""

import copy
import itertools
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Tuple

from ...application.ports.combo_store import (
    ComboNotFoundError,
    ComboPermissionError,
    ComboStorePort,
)
from ...domain.entities.combo import SavedCombo
from .combo_documents import saved_combo_from_document

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryComboStore(ComboStorePort):
    """Combo store keeping documents in a dict keyed by combo id."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        self._documents: Dict[str, Dict[str, Any]] = {}
        self._order: Dict[str, int] = {}
        self._sequence = itertools.count()

    def _newest_first(self, ids: List[str]) -> List[SavedCombo]:
        def key(combo_id: str) -> Tuple[datetime, int]:
            doc = self._documents[combo_id]
            return doc["createdAt"], self._order[combo_id]

        return [
            saved_combo_from_document(cid, self._documents[cid])
            for cid in sorted(ids, key=key, reverse=True)
        ]

    def _owned(self, combo_id: str, user_id: str) -> Dict[str, Any]:
        doc = self._documents.get(combo_id)
        if doc is None:
            raise ComboNotFoundError(f"Combo not found: {combo_id}")
        if doc.get("userId") != user_id:
            raise ComboPermissionError(f"User {user_id} does not own combo {combo_id}")
        return doc

    def add(self, document: Dict[str, Any]) -> str:
        combo_id = uuid.uuid4().hex
        now = self._clock()
        doc = copy.deepcopy(document)
        is_published = doc.get("isPublished") is True
        doc.update(
            {
                "isPublished": is_published,
                "publishedAt": now if is_published else None,
                "createdAt": now,
                "updatedAt": now,
            }
        )
        self._documents[combo_id] = doc
        self._order[combo_id] = next(self._sequence)
        logger.debug(f"Stored combo {combo_id} ({len(self._documents)} total)")
        return combo_id

    def get(self, combo_id: str) -> SavedCombo:
        doc = self._documents.get(combo_id)
        if doc is None:
            raise ComboNotFoundError(f"Combo not found: {combo_id}")
        return saved_combo_from_document(combo_id, doc)

    def list_for_user(self, user_id: str) -> List[SavedCombo]:
        ids = [cid for cid, doc in self._documents.items() if doc.get("userId") == user_id]
        return self._newest_first(ids)

    def list_published(self) -> List[SavedCombo]:
        ids = [cid for cid, doc in self._documents.items() if doc.get("isPublished") is True]
        return self._newest_first(ids)

    def publish(self, combo_id: str, user_id: str) -> SavedCombo:
        doc = self._owned(combo_id, user_id)
        now = self._clock()
        doc.update({"isPublished": True, "publishedAt": now, "updatedAt": now})
        return saved_combo_from_document(combo_id, doc)

    def delete(self, combo_id: str, user_id: str) -> None:
        self._owned(combo_id, user_id)
        del self._documents[combo_id]
        del self._order[combo_id]
