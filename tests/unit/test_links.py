"""Unit tests for link models."""

import pytest
from pydantic import ValidationError

from pyhal import DomainError, InvalidArgumentError, Link, LinkCollection


class TestLink:
    """Tests for the Link model."""

    def test_routed_link(self):
        """Test a link pointing at a named route."""
        link = Link(rel="self", route="collection.route", route_params={"id": 1})

        assert link.has_route() is True
        assert link.has_url() is False
        assert link.is_complete() is True
        assert link.route_params == {"id": 1}
        assert link.route_options == {}

    def test_incomplete_link(self):
        """Test that a link with neither route nor URL is incomplete."""
        assert Link(rel="self").is_complete() is False

    def test_empty_rel_is_invalid(self):
        """Test that the relation is required to be non-empty."""
        with pytest.raises(ValidationError):
            Link(rel="")

    def test_route_and_url_are_exclusive(self):
        """Test that a link cannot be built with both a route and a URL."""
        with pytest.raises(ValidationError):
            Link(rel="self", route="a.route", url="https://example.com")

    def test_set_route_after_url_raises(self):
        """Test that setting a route on a URL link is rejected."""
        link = Link(rel="self").set_url("https://example.com")

        with pytest.raises(DomainError, match="already has a URL"):
            link.set_route("a.route")

    def test_set_url_after_route_raises(self):
        """Test that setting a URL on a routed link is rejected."""
        link = Link(rel="self").set_route("a.route")

        with pytest.raises(DomainError, match="already has a route"):
            link.set_url("https://example.com")

    def test_set_route_rejects_invalid_params_without_changes(self):
        """Test that invalid route params leave the link untouched."""
        link = Link(rel="self")

        with pytest.raises(InvalidArgumentError, match="Link.set_route"):
            link.set_route("a.route", params=42)

        assert link.route is None
        assert link.route_params == {}

    def test_set_route_accepts_pair_iterables(self):
        """Test that route params may be given as key/value pairs."""
        link = Link(rel="self").set_route("a.route", params=[("id", 1), ("id", 2)])

        assert link.route_params == {"id": 2}

    def test_set_route_with_params_and_options(self):
        """Test that route params and options are stored."""
        link = Link(rel="next").set_route(
            "a.route", params={"id": 2}, options={"query": {"page": 3}}
        )

        assert link.route == "a.route"
        assert link.route_params == {"id": 2}
        assert link.route_options == {"query": {"page": 3}}


class TestLinkFactory:
    """Tests for building links from mappings."""

    def test_factory_with_url(self):
        """Test building a URL link with props."""
        link = Link.factory(
            {"rel": "describedby", "url": "https://example.com/docs", "props": {"title": "Docs"}}
        )

        assert link.rel == "describedby"
        assert link.url == "https://example.com/docs"
        assert link.props == {"title": "Docs"}

    def test_factory_with_route_name(self):
        """Test building a routed link from a route name."""
        link = Link.factory({"rel": "self", "route": "collection.route"})

        assert link.route == "collection.route"

    def test_factory_with_route_mapping(self):
        """Test building a routed link from a route mapping."""
        link = Link.factory(
            {
                "rel": "self",
                "route": {"name": "resource.route", "params": {"id": 1}, "options": {"a": 1}},
            }
        )

        assert link.route == "resource.route"
        assert link.route_params == {"id": 1}
        assert link.route_options == {"a": 1}

    @pytest.mark.parametrize(
        "definition, message",
        [
            ({"url": "https://example.com"}, '"rel"'),
            ({"rel": "self"}, 'either a "url" or a "route"'),
            ({"rel": "self", "route": 42}, "string or mapping"),
            ({"rel": "self", "route": {"params": {}}}, '"name"'),
            (
                {"rel": "self", "route": {"name": "r", "params": 42}},
                'expects a mapping or an iterable; received "int"',
            ),
            (
                {"rel": "self", "route": {"name": "r", "options": [1, 2]}},
                "iterable of key/value pairs",
            ),
        ],
    )
    def test_factory_rejects_incomplete_definitions(self, definition, message):
        """Test that malformed link definitions are rejected with a clear message."""
        with pytest.raises(InvalidArgumentError, match=message):
            Link.factory(definition)

    def test_factory_rejects_non_mapping(self):
        """Test that the factory requires a mapping."""
        with pytest.raises(InvalidArgumentError, match='received "list"'):
            Link.factory(["rel", "self"])


class TestLinkCollection:
    """Tests for the ordered link collection."""

    def test_add_and_get(self, link_collection):
        """Test that links are retrievable by relation."""
        assert link_collection.has("self")
        assert "describedby" in link_collection
        assert link_collection.get("self").route == "collection.route"
        assert link_collection.get("missing") is None
        assert len(link_collection) == 2

    def test_iterates_in_insertion_order(self, link_collection):
        """Test that iteration yields relations in the order they were added."""
        assert [rel for rel, _ in link_collection] == ["self", "describedby"]

    def test_add_same_rel_stacks_links(self):
        """Test that adding a second link for a relation keeps both."""
        first = Link(rel="item", url="/a")
        second = Link(rel="item", url="/b")
        third = Link(rel="item", url="/c")

        links = LinkCollection().add(first).add(second).add(third)

        assert links.get("item") == [first, second, third]
        assert len(links) == 1

    def test_add_with_overwrite_replaces(self):
        """Test that overwrite replaces existing links for the relation."""
        replacement = Link(rel="self", url="/new")
        links = LinkCollection().add(Link(rel="self", url="/old"))

        links.add(replacement, overwrite=True)

        assert links.get("self") is replacement

    def test_remove(self, link_collection):
        """Test removing a relation reports whether it existed."""
        assert link_collection.remove("self") is True
        assert link_collection.remove("self") is False
        assert not link_collection.has("self")

    def test_get_returns_copy_of_stacked_links(self):
        """Test that changing a returned list does not alter the collection."""
        links = LinkCollection().add(Link(rel="item", url="/a")).add(Link(rel="item", url="/b"))

        links.get("item").append("junk")

        assert len(links.get("item")) == 2

    def test_add_rejects_non_link(self):
        """Test that only Link instances may be added."""
        with pytest.raises(InvalidArgumentError, match="expects a Link"):
            LinkCollection().add({"rel": "self"})
