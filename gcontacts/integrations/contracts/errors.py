"""
Error contract for the contacts clients.

Every failure a caller can see is a ContactsClientError. Errors raised while a
directory fetch is in progress carry the contacts gathered before the failure in
``partial_contacts``; callers should still treat the run as unusable.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from gcontacts.integrations.contracts.interfaces import Contact


class ContactsClientError(Exception):
    def __init__(self, message: str, *, partial_contacts: Optional[List[Contact]] = None) -> None:
        super().__init__(message)
        self.partial_contacts: List[Contact] = list(partial_contacts or [])


class TransportError(ContactsClientError):
    """The connection could not complete (DNS, reset, TLS, read errors...)."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Transport failure: {cause}")
        self.cause = cause


class BadStatusError(ContactsClientError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"Bad client request status: {status_code}")
        self.status_code = status_code


class DecodeError(ContactsClientError):
    """A 2xx response whose body is not valid JSON."""


class AggregationCancelled(ContactsClientError):
    pass


class IntegrationResponseError(ContactsClientError, ValueError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}
