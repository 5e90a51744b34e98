"""Hypermedia link models."""

from .aware import LinkCollectionAware
from .collection import LinkCollection
from .link import Link

__all__ = ["Link", "LinkCollection", "LinkCollectionAware"]
