"""Application ports (interfaces)."""

from .combo_store import (
    ComboNotFoundError,
    ComboPermissionError,
    ComboStoreError,
    ComboStorePort,
)

__all__ = [
    "ComboNotFoundError",
    "ComboPermissionError",
    "ComboStoreError",
    "ComboStorePort",
]
