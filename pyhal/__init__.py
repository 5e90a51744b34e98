"""HAL collection and link models."""

from .core.collection import Collection
from .core.errors import DomainError, HALError, InvalidArgumentError, InvalidCollectionError
from .links import Link, LinkCollection, LinkCollectionAware

__all__ = [
    "Collection",
    "DomainError",
    "HALError",
    "InvalidArgumentError",
    "InvalidCollectionError",
    "Link",
    "LinkCollection",
    "LinkCollectionAware",
]
