"""SQLModel data models.

This module defines the application's database tables using SQLModel.
Attribute names are snake_case; the JSON shapes the API exchanges are
declared in `schemas`.
"""

import time
from typing import Optional
from sqlmodel import SQLModel, Field


def _now_epoch() -> int:
    return int(time.time())


class Account(SQLModel, table=True):
    """A registered account.

    Fields:
    - `username`: unique login name
    - `password`: stored and compared as plaintext (no hashing in this service)
    """
    account_id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True, nullable=False, unique=True)
    password: str


class Message(SQLModel, table=True):
    """A text post owned by exactly one account."""
    message_id: Optional[int] = Field(default=None, primary_key=True)
    posted_by: int = Field(foreign_key='account.account_id', index=True)
    message_text: str = Field(max_length=255)
    time_posted_epoch: int = Field(default_factory=_now_epoch)
