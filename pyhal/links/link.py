"""Hypermedia link descriptor."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pyhal.core.arguments import RouteArguments, to_mapping
from pyhal.core.errors import DomainError, InvalidArgumentError, type_name


class Link(BaseModel):
    """A single HAL link: a relation pointing at either a URL or a named route.

    Routed links are resolved into URLs by the router at render time; the
    ``route_params`` and ``route_options`` are handed to it unchanged.
    """

    model_config = ConfigDict(validate_assignment=True)

    rel: str
    route: Optional[str] = None
    route_params: dict[str, Any] = Field(default_factory=dict)
    route_options: dict[str, Any] = Field(default_factory=dict)
    url: Optional[str] = None
    props: dict[str, Any] = Field(default_factory=dict)

    @field_validator("rel")
    @classmethod
    def _rel_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("Link relation must not be empty.")
        return value

    @model_validator(mode="after")
    def _route_or_url(self) -> "Link":
        if self.route is not None and self.url is not None:
            raise ValueError("Link cannot have both a route and a URL.")
        return self

    @classmethod
    def factory(cls, definition: Mapping[str, Any]) -> "Link":
        """Build a link from a mapping with ``rel`` and either ``url`` or ``route``.

        ``route`` may be a route name, or a mapping with ``name`` and optional
        ``params`` and ``options`` keys.
        """
        if not isinstance(definition, Mapping):
            raise InvalidArgumentError(
                f'Link.factory expects a mapping; received "{type_name(definition)}"'
            )
        if "rel" not in definition:
            raise InvalidArgumentError('Link.factory expects a "rel" key.')

        link = cls(rel=str(definition["rel"]))
        props = definition.get("props")
        if isinstance(props, Mapping):
            link.props = dict(props)

        if definition.get("url") is not None:
            return link.set_url(definition["url"])

        route = definition.get("route")
        if route is None:
            raise InvalidArgumentError(
                'Link.factory expects either a "url" or a "route" key.'
            )
        if isinstance(route, str):
            return link.set_route(route)
        if not isinstance(route, Mapping):
            raise InvalidArgumentError(
                'Link.factory expects "route" to be a string or mapping; '
                f'received "{type_name(route)}"'
            )
        if "name" not in route:
            raise InvalidArgumentError('Link.factory expects "route" to have a "name" key.')
        return link.set_route(
            route["name"],
            params=route.get("params"),
            options=route.get("options"),
        )

    def set_route(
        self,
        route: str,
        *,
        params: RouteArguments | None = None,
        options: RouteArguments | None = None,
    ) -> "Link":
        """Point the link at a named route."""
        if self.url is not None:
            raise DomainError(
                f'Link "{self.rel}" already has a URL; cannot set a route.'
            )
        route_params = None if params is None else to_mapping(params, "Link.set_route")
        route_options = None if options is None else to_mapping(options, "Link.set_route")
        self.route = str(route)
        if route_params is not None:
            self.route_params = route_params
        if route_options is not None:
            self.route_options = route_options
        return self

    def set_url(self, url: str) -> "Link":
        """Point the link at a fixed URL."""
        if self.route is not None:
            raise DomainError(
                f'Link "{self.rel}" already has a route; cannot set a URL.'
            )
        self.url = str(url)
        return self

    def has_route(self) -> bool:
        return self.route is not None

    def has_url(self) -> bool:
        return self.url is not None

    def is_complete(self) -> bool:
        """Return True if the link can be turned into a URI."""
        return self.has_route() or self.has_url()
