"""
Pagination aggregation for the contacts feed.

The feed API caps every response, so a full directory fetch means following
"next" continuation links page by page until a page comes back without one.

Includes:
- Sequential page fetching (page N+1 is requested after page N is normalized)
- A run-local accumulator, returned to the caller
- Cooperative cancellation between pages
- Partial results attached to whatever error aborts the run

There is no page cap: a feed that never stops returning "next" links is never
exhausted.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional

from gcontacts.integrations.contracts.errors import AggregationCancelled, ContactsClientError
from gcontacts.integrations.contracts.interfaces import Contact, FeedParams
from gcontacts.integrations.policy.response_wrappers import (
    normalize_feed_entries,
    parse_feed_response,
    select_next_path,
)

logger = logging.getLogger(__name__)

PageFetcher = Callable[[FeedParams], Awaitable[Any]]


async def aggregate_contacts(
    fetch_page: PageFetcher,
    params: Optional[FeedParams] = None,
    *,
    cancel_event: Optional[asyncio.Event] = None,
) -> List[Contact]:
    """
    Fetch every page reachable from ``params`` and return the normalized contacts.

    ``fetch_page`` performs one request and returns the decoded JSON body, raising
    a ContactsClientError on failure. The first error aborts the run; contacts from
    the pages before it are attached as ``partial_contacts``.
    """
    accumulated: List[Contact] = []
    request: FeedParams = dict(params or {})
    pages = 0

    while True:
        if cancel_event is not None and cancel_event.is_set():
            logger.info("Contacts fetch cancelled after %d page(s)", pages)
            raise AggregationCancelled(
                f"Contacts fetch cancelled after {pages} page(s)",
                partial_contacts=accumulated,
            )

        try:
            feed = parse_feed_response(await fetch_page(request))
        except ContactsClientError as exc:
            exc.partial_contacts = list(accumulated)
            logger.error("Contacts fetch failed on page %d: %s", pages + 1, exc)
            raise

        page_contacts = normalize_feed_entries(feed)
        accumulated.extend(page_contacts)
        pages += 1
        logger.debug("Page %d: kept %d of %d entries", pages, len(page_contacts), len(feed.entry))

        next_path = select_next_path(feed)
        if next_path is None:
            break
        request = {"path": next_path}

    logger.info("Fetched %d contact(s) across %d page(s)", len(accumulated), pages)
    return accumulated
