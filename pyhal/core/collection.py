"""HAL collection model: embedded resources plus pagination and routing metadata."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from numbers import Number
from typing import Any, Callable

from pyhal.links.collection import LinkCollection

from .arguments import RouteArguments, to_mapping
from .errors import InvalidArgumentError, InvalidCollectionError, type_name

logger = logging.getLogger(__name__)


def _to_positive_int(value: Any, label: str) -> int:
    """Coerce an integer-like value to int, rejecting anything below 1."""
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, Number):
        number = _truncate(value)
    elif isinstance(value, str):
        number = _parse_numeric(value)
    else:
        number = None

    if number is None:
        logger.debug("%s rejected non-numeric value %r", label, value)
        raise InvalidArgumentError(
            f'{label} must be an integer; received "{type_name(value)}"'
        )
    if number < 1:
        logger.debug("%s rejected non-positive value %r", label, number)
        raise InvalidArgumentError(
            f'{label} must be a positive integer; received "{number}"'
        )
    return number


def _truncate(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _parse_numeric(text: str) -> int | None:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return int(number) if math.isfinite(number) else None


def _is_iterable(source: Any) -> bool:
    """Return True for values usable as a collection source.

    Calling iter() does not advance the source, so lazy sources are left intact.
    """
    if isinstance(source, (str, bytes, bytearray)):
        return False
    try:
        iter(source)
    except TypeError:
        return False
    return True


class Collection:
    """Model a collection of resources for use with HAL payloads.

    The source is held by reference and never iterated here; the renderer
    walks it when producing the ``_embedded`` group. Fields are configured
    through the ``set_*`` methods, each of which returns the collection so
    calls can be chained, and read through properties or :meth:`get`.
    """

    default_collection_name: str = "items"
    default_identifier_name: str = "id"
    default_page: int = 1
    default_page_size: int = 30

    def __init__(
        self,
        source: Iterable[Any],
        resource_route: str | None = None,
        resource_route_params: RouteArguments | None = None,
        resource_route_options: RouteArguments | None = None,
    ) -> None:
        if not _is_iterable(source):
            raise InvalidCollectionError(
                "Collection expects a list or other iterable; "
                f'received "{type_name(source)}"'
            )

        self._source = source
        self._attributes: dict[str, Any] = {}
        self._collection_name = self.default_collection_name
        self._collection_route: str | None = None
        self._collection_route_params: dict[str, Any] = {}
        self._collection_route_options: dict[str, Any] = {}
        self._resource_route: str | None = None
        self._resource_route_params: dict[str, Any] = {}
        self._resource_route_options: dict[str, Any] = {}
        self._identifier_name = self.default_identifier_name
        self._page = self.default_page
        self._page_size = self.default_page_size
        self._links: LinkCollection | None = None
        self._resource_links: LinkCollection | None = None

        if resource_route is not None:
            self.set_resource_route(resource_route)
        if resource_route_params is not None:
            self.set_resource_route_params(resource_route_params)
        if resource_route_options is not None:
            self.set_resource_route_options(resource_route_options)

    def __repr__(self) -> str:
        return (
            f"Collection(name={self._collection_name!r}, "
            f"page={self._page}, page_size={self._page_size})"
        )

    # Read access

    def get(self, name: str) -> Any:
        """Return a field by name; camelCase and snake_case are both accepted."""
        getter = _PROPERTY_GETTERS.get(str(name).lower())
        if getter is None:
            raise InvalidArgumentError(f'Invalid property name "{name}"')
        return getter(self)

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    @property
    def source(self) -> Iterable[Any]:
        return self._source

    @property
    def attributes(self) -> dict[str, Any]:
        return self._attributes

    @property
    def collection_name(self) -> str:
        return self._collection_name

    @property
    def collection_route(self) -> str | None:
        return self._collection_route

    @property
    def collection_route_params(self) -> dict[str, Any]:
        return self._collection_route_params

    @property
    def collection_route_options(self) -> dict[str, Any]:
        return self._collection_route_options

    @property
    def resource_route(self) -> str | None:
        return self._resource_route

    @property
    def resource_route_params(self) -> dict[str, Any]:
        return self._resource_route_params

    @property
    def resource_route_options(self) -> dict[str, Any]:
        return self._resource_route_options

    @property
    def identifier_name(self) -> str:
        return self._identifier_name

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def links(self) -> LinkCollection:
        return self.get_links()

    @property
    def resource_links(self) -> LinkCollection | None:
        return self.get_resource_links()

    # Configuration

    def set_attributes(self, attributes: Mapping[str, Any]) -> "Collection":
        """Set additional attributes to render with the collection."""
        if not isinstance(attributes, Mapping):
            raise InvalidArgumentError(
                "Collection.set_attributes expects a mapping; "
                f'received "{type_name(attributes)}"'
            )
        self._attributes = dict(attributes)
        return self

    def set_collection_name(self, name: Any) -> "Collection":
        """Set the key used for the collection inside ``_embedded``."""
        self._collection_name = str(name)
        return self

    def set_collection_route(self, route: Any) -> "Collection":
        """Set the route used to build pagination links."""
        self._collection_route = str(route)
        return self

    def set_collection_route_options(self, options: RouteArguments) -> "Collection":
        """Set options for the collection route (query, fragment, ...)."""
        self._collection_route_options = to_mapping(
            options, "Collection.set_collection_route_options"
        )
        return self

    def set_collection_route_params(self, params: RouteArguments) -> "Collection":
        """Set substitutions for the collection route."""
        self._collection_route_params = to_mapping(
            params, "Collection.set_collection_route_params"
        )
        return self

    def set_identifier_name(self, name: Any) -> "Collection":
        """Set the resource key holding each item's identifier."""
        self._identifier_name = str(name)
        return self

    def set_links(self, links: LinkCollection) -> "Collection":
        if not isinstance(links, LinkCollection):
            raise InvalidArgumentError(
                "Collection.set_links expects a LinkCollection; "
                f'received "{type_name(links)}"'
            )
        self._links = links
        return self

    def set_page(self, page: Any) -> "Collection":
        """Set the current page; must be a positive integer."""
        self._page = _to_positive_int(page, "Page")
        return self

    def set_page_size(self, size: Any) -> "Collection":
        """Set the number of resources per page; must be a positive integer."""
        self._page_size = _to_positive_int(size, "Page size")
        return self

    def set_resource_links(self, links: LinkCollection) -> "Collection":
        """Set the default links applied to every embedded resource."""
        if not isinstance(links, LinkCollection):
            raise InvalidArgumentError(
                "Collection.set_resource_links expects a LinkCollection; "
                f'received "{type_name(links)}"'
            )
        self._resource_links = links
        return self

    def set_resource_route(self, route: Any) -> "Collection":
        """Set the route used to build each resource's self link."""
        self._resource_route = str(route)
        return self

    def set_resource_route_options(self, options: RouteArguments) -> "Collection":
        self._resource_route_options = to_mapping(
            options, "Collection.set_resource_route_options"
        )
        return self

    def set_resource_route_params(self, params: RouteArguments) -> "Collection":
        self._resource_route_params = to_mapping(
            params, "Collection.set_resource_route_params"
        )
        return self

    # Links

    def get_links(self) -> LinkCollection:
        """Return the page-level links, creating an empty set on first use."""
        if self._links is None:
            logger.debug("Creating empty link collection for %r", self)
            self._links = LinkCollection()
        return self._links

    def get_resource_links(self) -> LinkCollection | None:
        """Return the default resource links, or None if none were configured."""
        return self._resource_links


_PROPERTY_GETTERS: dict[str, Callable[[Collection], Any]] = {
    "source": Collection.source.fget,
    "collection": Collection.source.fget,
    "attributes": Collection.attributes.fget,
    "collectionname": Collection.collection_name.fget,
    "collection_name": Collection.collection_name.fget,
    "collectionroute": Collection.collection_route.fget,
    "collection_route": Collection.collection_route.fget,
    "collectionrouteoptions": Collection.collection_route_options.fget,
    "collection_route_options": Collection.collection_route_options.fget,
    "collectionrouteparams": Collection.collection_route_params.fget,
    "collection_route_params": Collection.collection_route_params.fget,
    "identifiername": Collection.identifier_name.fget,
    "identifier_name": Collection.identifier_name.fget,
    "links": Collection.get_links,
    "resourcelinks": Collection.get_resource_links,
    "resource_links": Collection.get_resource_links,
    "resourceroute": Collection.resource_route.fget,
    "resource_route": Collection.resource_route.fget,
    "resourcerouteoptions": Collection.resource_route_options.fget,
    "resource_route_options": Collection.resource_route_options.fget,
    "resourcerouteparams": Collection.resource_route_params.fget,
    "resource_route_params": Collection.resource_route_params.fget,
    "page": Collection.page.fget,
    "pagesize": Collection.page_size.fget,
    "page_size": Collection.page_size.fget,
}
