"""
Contacts feed contracts.

Defines the wire shapes of the contacts feed API, e.g.:
- feed pages ({"feed": {"entry": [...], "link": [...]}})
- raw feed entries (title + gd$email list)
- the OAuth token endpoint response

Also owns request path construction, so that both:
- clients/mocks/contacts.py (in-memory pages for development/testing)
- clients/real_http/contacts.py (the real feed API)
address pages the same way.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import urlencode, urlsplit

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from gcontacts.integrations.contracts.interfaces import FeedParams

DEFAULT_FEED_ROOT = "m8"

DEFAULT_FEED_PARAMS: Dict[str, Any] = {
    "type": "contacts",
    "alt": "json",
    "projection": "thin",
    "email": "default",
    "max-results": 2000,
}


# ---------------------------------------------------------------------------
# Feed models
# ---------------------------------------------------------------------------

class _FeedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FeedText(_FeedModel):
    text: Optional[str] = Field(default=None, alias="$t")


class FeedEmail(_FeedModel):
    address: Optional[str] = None
    rel: Optional[str] = None
    primary: Optional[str] = None


class RawEntry(_FeedModel):
    title: Optional[FeedText] = None
    emails: List[FeedEmail] = Field(
        default_factory=list,
        validation_alias=AliasChoices("gd$email", "email"),
    )


class FeedLink(_FeedModel):
    rel: Optional[str] = None
    href: Optional[str] = None
    type: Optional[str] = None


class FeedPage(_FeedModel):
    # Entries stay raw here: a malformed entry must only cost that entry.
    entry: List[Any] = Field(default_factory=list)
    link: List[Any] = Field(default_factory=list)


class TokenResponseModel(_FeedModel):
    access_token: str


# ---------------------------------------------------------------------------
# Request paths
# ---------------------------------------------------------------------------

def build_feed_path(params: Optional[FeedParams] = None, feed_root: str = DEFAULT_FEED_ROOT) -> str:
    """
    Build the request path for one feed page.

    An explicit ``path`` is returned untouched (continuation links). Otherwise the
    caller's fields are merged over DEFAULT_FEED_PARAMS; only ``alt`` and
    ``max-results`` end up in the query string, the rest pick path segments.
    Values are not validated, the feed API reports bad ones.
    """
    supplied = {k: v for k, v in (params or {}).items() if v is not None}
    if supplied.get("path"):
        return supplied["path"]

    merged = {**DEFAULT_FEED_PARAMS, **supplied}
    query = urlencode({"alt": merged["alt"], "max-results": merged["max-results"]})
    return f"/{feed_root}/feeds/{merged['type']}/{merged['email']}/{merged['projection']}?{query}"


def continuation_path(href: str) -> str:
    """Reduce a continuation href (absolute or not) to the path and query to request."""
    parts = urlsplit(href)
    path = parts.path or "/"
    return f"{path}?{parts.query}" if parts.query else path
