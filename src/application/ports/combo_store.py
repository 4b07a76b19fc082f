"""Port (interface) for the combo library store."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ...domain.entities.combo import SavedCombo


class ComboStoreError(Exception):
    """Base error raised by combo stores."""


class ComboNotFoundError(ComboStoreError):
    """No combo exists under the requested id."""


class ComboPermissionError(ComboStoreError):
    """The acting user does not own the combo."""


class ComboStorePort(ABC):
    """Port for persisting combos in a document store.

    Documents are flat: the scenario fields sit at the top level next to the
    metadata, never nested under a ``settings`` key.
    """

    @abstractmethod
    def add(self, document: Dict[str, Any]) -> str:
        """Store a new combo document.

        Args:
            document: Flat combo document without timestamps

        Returns:
            Id of the stored combo
        """
        ...

    @abstractmethod
    def get(self, combo_id: str) -> SavedCombo:
        """Fetch one combo.

        Raises:
            ComboNotFoundError: if no combo has this id
        """
        ...

    @abstractmethod
    def list_for_user(self, user_id: str) -> List[SavedCombo]:
        """Combos saved by a user, newest first."""
        ...

    @abstractmethod
    def list_published(self) -> List[SavedCombo]:
        """Published combos, newest first."""
        ...

    @abstractmethod
    def publish(self, combo_id: str, user_id: str) -> SavedCombo:
        """Mark a combo as published.

        Raises:
            ComboNotFoundError: if no combo has this id
            ComboPermissionError: if ``user_id`` does not own it
        """
        ...

    @abstractmethod
    def delete(self, combo_id: str, user_id: str) -> None:
        """Delete a combo owned by ``user_id``.

        Raises:
            ComboNotFoundError: if no combo has this id
            ComboPermissionError: if ``user_id`` does not own it
        """
        ...
