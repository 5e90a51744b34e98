"""Shared fixtures for pyhal tests."""

import pytest

from pyhal import Collection, Link, LinkCollection


@pytest.fixture
def collection():
    """A collection over a small list with a resource route configured."""
    return Collection(["a", "b", "c"], "resource.route", {"id": "id"}, {})


@pytest.fixture
def link_collection():
    """A link collection holding a routed self link and a URL docs link."""
    links = LinkCollection()
    links.add(Link(rel="self", route="collection.route"))
    links.add(Link(rel="describedby", url="https://example.com/docs"))
    return links
