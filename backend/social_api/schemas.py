"""Pydantic request/response schemas used by the API.

Schemas keep the camelCase JSON shapes of the API stable while the
models and services work with snake_case attributes. Request fields are
optional on purpose: missing values are rejected by the services with a
400, not by FastAPI with a 422.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Optional

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

# Ids are 32-bit; out-of-range values are rejected before they reach the database.
Id = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
Epoch = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class ApiModel(BaseModel):
    """Base schema accepting both alias and field names on input."""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class AccountIn(ApiModel):
    """Payload for the register and login endpoints."""
    username: Optional[str] = None
    password: Optional[str] = None


class AccountOut(ApiModel):
    """An account as returned by register and login."""
    account_id: int = Field(alias='accountId')
    username: str
    password: str


class MessageIn(ApiModel):
    """Payload for message creation and text updates.

    PATCH only reads `message_text`; the other fields are ignored there.
    """
    posted_by: Optional[Id] = Field(default=None, alias='postedBy')
    message_text: Optional[str] = Field(default=None, alias='messageText')
    time_posted_epoch: Optional[Epoch] = Field(default=None, alias='timePostedEpoch')


class MessageOut(ApiModel):
    """A stored message."""
    message_id: int = Field(alias='messageId')
    posted_by: int = Field(alias='postedBy')
    message_text: str = Field(alias='messageText')
    time_posted_epoch: int = Field(alias='timePostedEpoch')
