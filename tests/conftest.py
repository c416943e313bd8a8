"""Pytest fixtures for contacts feed client tests."""

import httpx
import pytest


class FakeFeedAPI:
    """
    In-process stand-in for the feed and token endpoints.

    ``routes`` maps a request path (with query) to either a decoded JSON body,
    served with status 200, or a callable taking the httpx.Request and returning
    an httpx.Response. Unknown paths get a 404.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        target = request.url.raw_path.decode("ascii")
        route = self.routes.get(target)
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        if callable(route):
            return route(request)
        return httpx.Response(200, json=route)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def requested_paths(self):
        return [r.url.raw_path.decode("ascii") for r in self.requests]


@pytest.fixture
def feed_api():
    return FakeFeedAPI()


def _entry(name=None, *emails):
    entry = {"id": {"$t": f"urn:contact:{name}"}}
    if name is not None:
        entry["title"] = {"$t": name, "type": "text"}
    if emails:
        entry["gd$email"] = [{"address": address, "rel": "http://schemas.google.com/g/2005#other"} for address in emails]
    return entry


def _feed(entries, next_href=None, extra_links=()):
    links = [{"rel": "self", "type": "application/atom+xml", "href": "https://www.google.com/m8/feeds/contacts/default/thin"}]
    if next_href:
        links.append({"rel": "next", "type": "application/atom+xml", "href": next_href})
    links.extend(extra_links)
    return {"version": "1.0", "encoding": "UTF-8", "feed": {"entry": list(entries), "link": links}}


@pytest.fixture
def entry():
    """Build a raw feed entry: entry("Ada", "ada@example.com", "ada@work.example")."""
    return _entry


@pytest.fixture
def feed():
    """Build a decoded feed response: feed([entries], next_href=...)."""
    return _feed
