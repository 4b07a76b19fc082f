"""Application use cases."""

from .randomize_combo import (
    RandomizeComboRequest,
    RandomizeComboResult,
    RandomizeComboUseCase,
)
from .save_combo import (
    SaveComboRequest,
    SaveComboResult,
    SaveComboUseCase,
)

__all__ = [
    "RandomizeComboRequest",
    "RandomizeComboResult",
    "RandomizeComboUseCase",
    "SaveComboRequest",
    "SaveComboResult",
    "SaveComboUseCase",
]
