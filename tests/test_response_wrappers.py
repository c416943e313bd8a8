import logging

import pytest

from gcontacts.integrations.contracts.errors import IntegrationResponseError
from gcontacts.integrations.contracts.feeds import FeedPage
from gcontacts.integrations.contracts.interfaces import Contact
from gcontacts.integrations.policy.response_wrappers import (
    normalize_feed_entries,
    normalize_token_response,
    parse_feed_response,
    select_next_path,
)


def test_malformed_entries_are_skipped_without_error(entry, feed):
    page = parse_feed_response(
        feed(
            [
                entry("Ada", "ada@example.com"),
                entry("No Email"),
                entry(None, "nameless@example.com"),
                {"title": "plain string title", "gd$email": [{"address": "x@example.com"}]},
                "not even a dict",
                entry("Grace", "grace@example.com"),
            ]
        )
    )

    assert normalize_feed_entries(page) == [
        Contact(name="Ada", email="ada@example.com"),
        Contact(name="Grace", email="grace@example.com"),
    ]


def test_only_first_email_is_kept(entry, feed):
    page = parse_feed_response(feed([entry("Ada", "home@example.com", "work@example.com")]))
    assert normalize_feed_entries(page) == [Contact(name="Ada", email="home@example.com")]


def test_empty_email_list_is_skipped():
    page = FeedPage(entry=[{"title": {"$t": "Ada"}, "gd$email": []}])
    assert normalize_feed_entries(page) == []


def test_feed_without_entries_yields_nothing():
    page = parse_feed_response({"feed": {"link": []}})
    assert normalize_feed_entries(page) == []
    assert select_next_path(page) is None


@pytest.mark.parametrize("raw", [None, [], {"items": []}, {"feed": "oops"}])
def test_response_without_feed_object_is_rejected(raw):
    with pytest.raises(IntegrationResponseError):
        parse_feed_response(raw)


def test_next_path_reads_next_relation_only(feed):
    page = parse_feed_response(feed([], extra_links=[{"rel": "previous", "href": "/prev"}]))
    assert select_next_path(page) is None

    page = parse_feed_response(feed([], next_href="https://www.google.com/m8/feeds/contacts/default/thin?start-index=3"))
    assert select_next_path(page) == "/m8/feeds/contacts/default/thin?start-index=3"


def test_several_next_links_pick_first_and_warn(feed, caplog):
    page = parse_feed_response(feed([], next_href="/first", extra_links=[{"rel": "next", "href": "/second"}]))

    with caplog.at_level(logging.WARNING):
        assert select_next_path(page) == "/first"

    assert "/second" in caplog.text


def test_malformed_links_are_ignored():
    page = FeedPage(link=["junk", {"rel": "next"}, {"rel": "next", "href": "/ok"}])
    assert select_next_path(page) == "/ok"


def test_token_response_ignores_other_fields():
    assert normalize_token_response({"access_token": "abc123", "expires_in": 3599, "id_token": "x"}) == "abc123"


def test_token_response_ignores_wrongly_typed_extra_fields():
    assert normalize_token_response({"access_token": "abc123", "expires_in": "one hour", "token_type": 7}) == "abc123"


@pytest.mark.parametrize("raw", [{}, {"access_token": ""}, ["abc123"], {"access_token": 123}])
def test_token_response_requires_access_token(raw):
    with pytest.raises(IntegrationResponseError):
        normalize_token_response(raw)


def test_token_error_payload_hides_tokens():
    with pytest.raises(IntegrationResponseError) as excinfo:
        normalize_token_response({"refresh_token": "secret", "expires_in": 10})
    assert excinfo.value.payload["refresh_token"] == "***"
