"""Domain value objects and type aliases."""

from enum import Enum
from typing import NewType

# Type aliases for domain clarity
ComboId = NewType("ComboId", str)
UserId = NewType("UserId", str)


class ComboVisibility(str, Enum):
    """Where a saved combo is listed."""

    PRIVATE = "private"
    PUBLISHED = "published"
