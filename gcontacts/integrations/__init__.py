"""
Integrations layer.
This package contains all code used to communicate with the contacts feed API:
- the contacts feed (paginated directory pages)
- the OAuth token endpoint (access token refresh)

Key rule:
- Callers MUST NOT talk to the feed API directly.
- They should go through a ContactsDirectory client (under gcontacts/integrations/clients).
- MOCK clients serve in-memory pages; REAL_HTTP clients call the API.
"""

from .contracts.interfaces import ClientOptions, Contact, ContactsDirectory
from .contracts.errors import (
    AggregationCancelled,
    BadStatusError,
    ContactsClientError,
    DecodeError,
    IntegrationResponseError,
    TransportError,
)
from .contracts.feeds import (
    DEFAULT_FEED_PARAMS,
    FeedPage,
    RawEntry,
    build_feed_path,
    continuation_path,
)

__all__ = [
    # interfaces
    "ClientOptions", "Contact", "ContactsDirectory",
    # errors
    "AggregationCancelled", "BadStatusError", "ContactsClientError",
    "DecodeError", "IntegrationResponseError", "TransportError",
    # feeds
    "DEFAULT_FEED_PARAMS", "FeedPage", "RawEntry", "build_feed_path", "continuation_path",
]
