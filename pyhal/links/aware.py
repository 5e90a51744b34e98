"""Protocol for objects that carry a link collection."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .collection import LinkCollection


@runtime_checkable
class LinkCollectionAware(Protocol):
    """Objects exposing a page-level link collection to the renderer."""

    def get_links(self) -> LinkCollection: ...

    def set_links(self, links: LinkCollection) -> Any: ...
