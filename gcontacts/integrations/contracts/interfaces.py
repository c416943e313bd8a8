import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Contact:
    name: str
    email: str                           # first listed address only


class ClientOptions(BaseModel):
    """Credentials a contacts client is constructed with.

    Accepts the camelCase names used by the feed API tooling (``consumerKey``,
    ``refreshToken``...) as well as the snake_case field names.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    consumer_key: Optional[str] = Field(default=None, alias="consumerKey")
    consumer_secret: Optional[str] = Field(default=None, alias="consumerSecret")
    token: Optional[str] = None
    refresh_token: Optional[str] = Field(default=None, alias="refreshToken")

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value:
            return None
        return value

    @classmethod
    def coerce(cls, opts: Union[None, str, Mapping[str, Any], "ClientOptions"]) -> "ClientOptions":
        """Build options from a bare access token, a mapping, or an existing instance."""
        if opts is None:
            return cls()
        if isinstance(opts, ClientOptions):
            return opts
        if isinstance(opts, str):
            return cls(token=opts)
        return cls.model_validate(dict(opts))


FeedParams = Mapping[str, Any]


# ---------------------------------------------------------------------------
# Abstract directory interface
# ---------------------------------------------------------------------------

class ContactsDirectory(ABC):
    """Every contacts client (mock or real HTTP) must implement this interface."""

    @abstractmethod
    async def get_contacts(
        self,
        params: Optional[FeedParams] = None,
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> List[Contact]:
        """Fetch the whole directory, following continuation links.

        A set ``cancel_event`` stops the run before the next page request.
        """

    @abstractmethod
    async def refresh_access_token(self, refresh_token: str) -> str:
        """Exchange a refresh credential for a new access token."""
