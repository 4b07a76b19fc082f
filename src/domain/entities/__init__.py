"""Domain entities."""

from .combo import (
    ComboAuthor,
    SavedCombo,
)

__all__ = [
    "ComboAuthor",
    "SavedCombo",
]
