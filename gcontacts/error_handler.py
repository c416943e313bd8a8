"""Error reporting helpers for contacts client callers."""
from typing import Any, Dict
import logging

from gcontacts.integrations.contracts.errors import BadStatusError, ContactsClientError

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        metadata: Dict[str, Any] = {
            "error": str(exc),
            "error_type": type(exc).__name__,
            "context": context or {},
        }
        if isinstance(exc, ContactsClientError):
            logger.error("Contacts request failed: %s", exc)
            metadata["partial_count"] = len(exc.partial_contacts)
            if isinstance(exc, BadStatusError):
                metadata["status_code"] = exc.status_code
            message = "Could not fetch contacts. The result is incomplete and should not be used."
        else:
            logger.error("Unhandled exception in contacts client: %s", exc, exc_info=True)
            message = "An internal error occurred while fetching contacts. Please try again later."
        return {
            "message": message,
            "fallback": True,
            "metadata": metadata,
        }
