from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from gcontacts.integrations.contracts.errors import IntegrationResponseError
from gcontacts.integrations.contracts.feeds import (
    FeedLink,
    FeedPage,
    RawEntry,
    TokenResponseModel,
    continuation_path,
)
from gcontacts.integrations.contracts.interfaces import Contact

logger = logging.getLogger(__name__)


def parse_feed_response(raw: Any) -> FeedPage:
    if not isinstance(raw, dict) or not isinstance(raw.get("feed"), dict):
        raise IntegrationResponseError(
            "Feed response has no 'feed' object.",
            payload=raw if isinstance(raw, dict) else {"body": raw},
        )
    return _build_model(FeedPage, raw["feed"], raw)


def normalize_feed_entries(feed: FeedPage) -> List[Contact]:
    contacts: List[Contact] = []
    for index, raw_entry in enumerate(feed.entry):
        contact = _normalize_entry(raw_entry)
        if contact is None:
            logger.debug("Skipping feed entry %d: no name or email", index)
            continue
        contacts.append(contact)
    return contacts


def select_next_path(feed: FeedPage) -> Optional[str]:
    """
    Return the path of the page's continuation link, or None on the last page.

    Only one continuation is followed per page. When the feed lists several
    "next" links the first one in document order wins.
    """
    hrefs = [link.href for link in _links(feed) if link.rel == "next" and link.href]
    if not hrefs:
        return None
    if len(hrefs) > 1:
        logger.warning("Feed page lists %d next links; following %s, ignoring %s", len(hrefs), hrefs[0], hrefs[1:])
    return continuation_path(hrefs[0])


def normalize_token_response(raw: Any) -> str:
    if not isinstance(raw, dict):
        raise IntegrationResponseError("Token response is not a JSON object.", payload={"body": raw})
    if not raw.get("access_token"):
        raise IntegrationResponseError("Token response has no access_token.", payload=_redact(raw))
    return _build_model(TokenResponseModel, raw, _redact(raw)).access_token


def _normalize_entry(raw_entry: Any) -> Optional[Contact]:
    try:
        entry = RawEntry.model_validate(raw_entry)
    except ValidationError:
        return None
    name = entry.title.text if entry.title else None
    email = entry.emails[0].address if entry.emails else None
    if name is None or email is None:
        return None
    return Contact(name=name, email=email)


def _links(feed: FeedPage) -> List[FeedLink]:
    links: List[FeedLink] = []
    for raw_link in feed.link:
        try:
            links.append(FeedLink.model_validate(raw_link))
        except ValidationError:
            continue
    return links


def _redact(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {k: ("***" if "token" in k else v) for k, v in raw.items()}


def _build_model(model_type, payload: Dict[str, Any], raw: Any):
    try:
        return model_type.model_validate(payload)
    except ValidationError as exc:
        raise IntegrationResponseError(
            f"Response validation failed: {exc}",
            payload=raw if isinstance(raw, dict) else {"body": raw},
        ) from exc
