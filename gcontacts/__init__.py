"""Client for the paginated contacts feed API."""

from .integrations import (
    AggregationCancelled,
    BadStatusError,
    ClientOptions,
    Contact,
    ContactsClientError,
    DecodeError,
    TransportError,
)
from .integrations.clients.mocks.contacts import MockContactsClient
from .integrations.clients.real_http.contacts import RealContactsClient

__all__ = [
    "AggregationCancelled", "BadStatusError", "ClientOptions", "Contact",
    "ContactsClientError", "DecodeError", "TransportError",
    "MockContactsClient", "RealContactsClient",
]
