"""Core HAL models and errors."""

from .collection import Collection
from .errors import DomainError, HALError, InvalidArgumentError, InvalidCollectionError

__all__ = [
    "Collection",
    "DomainError",
    "HALError",
    "InvalidArgumentError",
    "InvalidCollectionError",
]
