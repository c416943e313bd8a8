"""
Mock Contacts Client.

Purpose:
- Serves contacts feed pages from memory
- Does NOT make any network calls
- Runs the same path building, normalization and continuation handling as the
  real client, so callers see identical results for identical pages

Usage:
- Construct with a mapping of request path -> decoded feed response
- Paths not in the mapping fail with a 404 BadStatusError

Swap:
Replace with clients/real_http/contacts.py once credentials are available.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

from gcontacts.integrations.contracts.errors import BadStatusError
from gcontacts.integrations.contracts.feeds import DEFAULT_FEED_ROOT, build_feed_path
from gcontacts.integrations.contracts.interfaces import Contact, ContactsDirectory, FeedParams
from gcontacts.integrations.policy.pagination import aggregate_contacts
from gcontacts.integrations.policy.response_wrappers import normalize_token_response

logger = logging.getLogger(__name__)


class MockContactsClient(ContactsDirectory):
    def __init__(
        self,
        pages: Optional[Dict[str, Any]] = None,
        token_response: Optional[Dict[str, Any]] = None,
        feed_root: str = DEFAULT_FEED_ROOT,
    ) -> None:
        self.pages = dict(pages or {})
        self.token_response = token_response or {"access_token": "mock-access-token", "expires_in": 3600}
        self.feed_root = feed_root
        self.requested_paths: List[str] = []
        self.contacts: List[Contact] = []

    async def get_contacts(
        self,
        params: Optional[FeedParams] = None,
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> List[Contact]:
        contacts = await aggregate_contacts(self._get, params, cancel_event=cancel_event)
        self.contacts = contacts
        return list(contacts)

    async def refresh_access_token(self, refresh_token: str) -> str:
        logger.info("[MOCK] Refreshing access token")
        return normalize_token_response(self.token_response)

    async def _get(self, params: Optional[FeedParams] = None) -> Any:
        path = build_feed_path(params, feed_root=self.feed_root)
        self.requested_paths.append(path)
        logger.info(f"[MOCK] GET {path}")
        if path not in self.pages:
            raise BadStatusError(404)
        return self.pages[path]
