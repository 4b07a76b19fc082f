"""Infrastructure adapters."""

from .memory_combo_store import InMemoryComboStore

__all__ = [
    "InMemoryComboStore",
]
