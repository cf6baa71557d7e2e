"""Business logic services used by HTTP controllers.

This module holds the account and message services. Services are
intentionally thin: they validate input, apply the API's status
policy by raising `errors.SocialMediaError` subclasses, and persist
through the stores handed to their constructors.
"""

import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from . import errors, models
from .repositories import AccountStore, MessageStore

MIN_PASSWORD_LENGTH = 4
MAX_MESSAGE_LENGTH = 255

logger = logging.getLogger("social_api.services")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class AccountService:
    """Registration and login against an `AccountStore`."""
    def __init__(self, account_repo: AccountStore):
        self.account_repo = account_repo

    def register(self, username: Optional[str], password: Optional[str]) -> models.Account:
        """Create a new account and return it with its assigned id.

        Raises `InvalidInput` for a blank username or a password shorter
        than `MIN_PASSWORD_LENGTH`, and `Conflict` when the username is
        taken. The existence check and the insert are not atomic; a
        concurrent duplicate is caught by the unique constraint on
        `account.username` and also reported as `Conflict`.
        """
        if _is_blank(username) or password is None or len(password) < MIN_PASSWORD_LENGTH:
            logger.debug("register rejected: invalid username or password")
            raise errors.InvalidInput("Username must not be blank and password must be at least 4 characters")
        if self.username_exists(username):
            logger.debug("register rejected: username %r taken", username)
            raise errors.Conflict("Username already exists")
        try:
            account = self.account_repo.create(models.Account(username=username, password=password))
        except IntegrityError:
            raise errors.Conflict("Username already exists")
        logger.info("account registered account_id=%s username=%r", account.account_id, account.username)
        return account

    def login(self, username: Optional[str], password: Optional[str]) -> models.Account:
        """Return the account matching `username` and `password` exactly.

        Passwords are compared as plaintext by the store query.
        """
        if _is_blank(username) or _is_blank(password):
            raise errors.InvalidInput("Username and password are required")
        account = self.account_repo.get_by_username_and_password(username, password)
        if not account:
            logger.debug("login rejected for username %r", username)
            raise errors.Unauthorized("Invalid username or password")
        return account

    def username_exists(self, username: str) -> bool:
        return self.account_repo.exists_by_username(username)


class MessageService:
    """Create, read, update and delete messages."""
    def __init__(self, message_repo: MessageStore, account_repo: AccountStore):
        self.message_repo = message_repo
        self.account_repo = account_repo

    def create(self, posted_by: Optional[int], message_text: Optional[str], time_posted_epoch: Optional[int] = None) -> models.Message:
        """Validate and persist a new message.

        An unknown poster is reported as `InvalidInput`, the same as a
        bad text field.
        """
        if _is_blank(message_text) or len(message_text) > MAX_MESSAGE_LENGTH or posted_by is None:
            logger.debug("message rejected: invalid text or missing poster")
            raise errors.InvalidInput("Message text must be 1-255 characters and postedBy is required")
        username = self.username_for_account(posted_by)
        if username is None or not self.account_repo.exists_by_username(username):
            logger.debug("message rejected: unknown poster %s", posted_by)
            raise errors.InvalidInput("Account not found")
        message = models.Message(posted_by=posted_by, message_text=message_text)
        if time_posted_epoch is not None:
            message.time_posted_epoch = time_posted_epoch
        message = self.message_repo.create(message)
        logger.info("message created message_id=%s posted_by=%s", message.message_id, message.posted_by)
        return message

    def username_for_account(self, account_id: int) -> Optional[str]:
        """Return the username for `account_id`, or `None` if there is no such account."""
        account = self.account_repo.get(account_id)
        return account.username if account else None

    def get_by_id(self, message_id: int) -> Optional[models.Message]:
        """Return the message or `None`; a missing message is not an error."""
        return self.message_repo.get(message_id)

    def delete_by_id(self, message_id: int) -> int:
        """Delete a message and return the rows affected (1, or 0 if absent)."""
        deleted = self.message_repo.delete(message_id)
        if deleted:
            logger.info("message deleted message_id=%s", message_id)
        return deleted

    def update_text(self, message_id: int, message_text: Optional[str]) -> int:
        """Replace a message's text and return the rows affected.

        Existence is checked before the text, so a missing message wins
        over an invalid payload.
        """
        message = self.message_repo.get(message_id)
        if not message:
            raise errors.NotFound("Message not found")
        if _is_blank(message_text):
            raise errors.InvalidInput("Message text cannot be empty")
        if len(message_text) > MAX_MESSAGE_LENGTH:
            raise errors.InvalidInput(f"Message too long: it must have a length of at most {MAX_MESSAGE_LENGTH} characters")
        self.message_repo.update_text(message, message_text)
        logger.info("message updated message_id=%s", message_id)
        return 1

    def list_all(self) -> List[models.Message]:
        return self.message_repo.list_all()

    def list_by_account(self, account_id: int) -> List[models.Message]:
        """Return every message posted by `account_id`, or an empty list."""
        return self.message_repo.list_by_posted_by(account_id)
