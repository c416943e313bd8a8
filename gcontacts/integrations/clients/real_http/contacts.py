"""
Real Contacts HTTP Client.

Purpose:
- Fetches the full contacts directory from the feed API, one capped page at a time
- Exchanges a refresh token for a new access token at the OAuth token endpoint

Implementation notes:
- Uses httpx for async requests; the transport is injectable for tests
- Every request is classified the same way: transport failure, bad status, or
  undecodable body, each raised as its own ContactsClientError subclass
- No retries; the first failure aborts the operation

Important:
- The client never stores a refreshed token on its own. Callers decide when to
  swap ``client.token``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import urlencode

import httpx

from gcontacts.integrations.contracts.errors import BadStatusError, DecodeError, TransportError
from gcontacts.integrations.contracts.feeds import build_feed_path
from gcontacts.integrations.contracts.interfaces import ClientOptions, Contact, ContactsDirectory, FeedParams
from gcontacts.integrations.policy.pagination import aggregate_contacts
from gcontacts.integrations.policy.response_wrappers import normalize_token_response
from gcontacts.utils.config_loader import ContactsAPIConfig

logger = logging.getLogger(__name__)


class RealContactsClient(ContactsDirectory):
    def __init__(
        self,
        options: Union[None, str, Mapping[str, Any], ClientOptions] = None,
        config: Optional[ContactsAPIConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        opts = ClientOptions.coerce(options)
        self.consumer_key = opts.consumer_key
        self.consumer_secret = opts.consumer_secret
        self.token = opts.token
        self.refresh_token = opts.refresh_token
        self.config = config or ContactsAPIConfig()
        self.transport = transport
        # Result of the last completed directory fetch.
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
        body = urlencode(
            {
                "refresh_token": refresh_token,
                "client_id": self.consumer_key or "",
                "client_secret": self.consumer_secret or "",
                "grant_type": "refresh_token",
            }
        ).encode("utf-8")
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Content-Length": str(len(body)),
        }

        logger.info("Refreshing access token at %s", self.config.token_url)
        data = await self._request("POST", self.config.token_url, headers=headers, content=body)
        return normalize_token_response(data)

    async def _get(self, params: Optional[FeedParams] = None) -> Any:
        request_params: Dict[str, Any] = {"max-results": self.config.max_results}
        request_params.update({k: v for k, v in (params or {}).items() if v is not None})
        path = build_feed_path(request_params, feed_root=self.config.feed_root)
        url = f"{self.config.contacts_base_url.rstrip('/')}{path}"
        headers = {"Authorization": f"Bearer {self.token}"}
        return await self._request("GET", url, headers=headers)

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        logger.debug("%s %s", method, url)
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds, transport=self.transport) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Request error calling {method} {url}: {e}")
            raise TransportError(e) from e

        if not response.is_success:
            logger.error(f"HTTP error from {method} {url}: {response.status_code}")
            raise BadStatusError(response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Response from {method} {url} is not valid JSON: {e}") from e
