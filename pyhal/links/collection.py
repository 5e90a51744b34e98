"""Ordered set of hypermedia links keyed by relation."""

from __future__ import annotations

import logging
from typing import Iterator, Union

from pyhal.core.errors import InvalidArgumentError, type_name

from .link import Link

logger = logging.getLogger(__name__)

LinkEntry = Union[Link, list[Link]]


class LinkCollection:
    """Hold links by relation, preserving insertion order.

    A relation holds a single link until a second one is added for it, at
    which point the entry becomes a list of links.
    """

    def __init__(self) -> None:
        self._links: dict[str, LinkEntry] = {}

    def add(self, link: Link, *, overwrite: bool = False) -> "LinkCollection":
        """Add a link, stacking it with existing links of the same relation."""
        if not isinstance(link, Link):
            raise InvalidArgumentError(
                f'LinkCollection.add expects a Link; received "{type_name(link)}"'
            )
        rel = link.rel
        existing = self._links.get(rel)
        if existing is None or overwrite:
            if existing is not None:
                logger.debug("Replacing links for relation %r", rel)
            self._links[rel] = link
        elif isinstance(existing, list):
            existing.append(link)
        else:
            self._links[rel] = [existing, link]
        return self

    def get(self, rel: str) -> LinkEntry | None:
        """Return the link (or a copy of the links) for a relation, or None."""
        entry = self._links.get(rel)
        if isinstance(entry, list):
            return list(entry)
        return entry

    def has(self, rel: str) -> bool:
        return rel in self._links

    def remove(self, rel: str) -> bool:
        """Remove all links for a relation; return whether any existed."""
        return self._links.pop(rel, None) is not None

    def __contains__(self, rel: object) -> bool:
        return rel in self._links

    def __iter__(self) -> Iterator[tuple[str, LinkEntry]]:
        return iter(list(self._links.items()))

    def __len__(self) -> int:
        return len(self._links)

    def __repr__(self) -> str:
        return f"LinkCollection({list(self._links)!r})"
