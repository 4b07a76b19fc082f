"""Domain value objects."""

from .types import (
    ComboId,
    ComboVisibility,
    UserId,
)

__all__ = [
    "ComboId",
    "ComboVisibility",
    "UserId",
]
