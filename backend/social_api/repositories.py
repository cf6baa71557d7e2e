"""Repository classes encapsulating database operations.

Each repository is small and focused on a single table (accounts,
messages). Repositories return SQLModel objects and perform
commits/refreshes where appropriate. The `AccountStore` and
`MessageStore` protocols are the types services depend on.
"""

from typing import List, Optional, Protocol
from sqlmodel import Session, select
from . import models


class AccountStore(Protocol):
    def create(self, account: models.Account) -> models.Account: ...
    def get(self, account_id: int) -> Optional[models.Account]: ...
    def get_by_username(self, username: str) -> Optional[models.Account]: ...
    def exists_by_username(self, username: str) -> bool: ...
    def get_by_username_and_password(self, username: str, password: str) -> Optional[models.Account]: ...


class MessageStore(Protocol):
    def create(self, message: models.Message) -> models.Message: ...
    def get(self, message_id: int) -> Optional[models.Message]: ...
    def exists(self, message_id: int) -> bool: ...
    def update_text(self, message: models.Message, message_text: str) -> models.Message: ...
    def delete(self, message_id: int) -> int: ...
    def list_all(self) -> List[models.Message]: ...
    def list_by_posted_by(self, account_id: int) -> List[models.Message]: ...


class AccountRepository:
    """CRUD operations for `Account` objects."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, account: models.Account) -> models.Account:
        """Persist a new account and return the managed instance.

        A duplicate username violates the table's unique constraint; the
        session is rolled back and the `IntegrityError` propagates.
        """
        self.session.add(account)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(account)
        return account

    def get(self, account_id: int) -> Optional[models.Account]:
        """Get an `Account` by primary key."""
        return self.session.get(models.Account, account_id)

    def get_by_username(self, username: str) -> Optional[models.Account]:
        """Return an `Account` by username or `None` if not found."""
        stmt = select(models.Account).where(models.Account.username == username)
        return self.session.exec(stmt).first()

    def exists_by_username(self, username: str) -> bool:
        """Return True if an account with `username` exists."""
        stmt = select(models.Account.account_id).where(models.Account.username == username)
        return self.session.exec(stmt).first() is not None

    def get_by_username_and_password(self, username: str, password: str) -> Optional[models.Account]:
        """Return the account matching both fields exactly, or `None`."""
        stmt = select(models.Account).where(
            models.Account.username == username,
            models.Account.password == password
        )
        return self.session.exec(stmt).first()


class MessageRepository:
    """CRUD operations for `Message` objects."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, message: models.Message) -> models.Message:
        """Persist a new message and return the managed instance."""
        self.session.add(message)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(message)
        return message

    def get(self, message_id: int) -> Optional[models.Message]:
        """Fetch a message by id."""
        return self.session.get(models.Message, message_id)

    def exists(self, message_id: int) -> bool:
        """Return True if a message with `message_id` exists."""
        stmt = select(models.Message.message_id).where(models.Message.message_id == message_id)
        return self.session.exec(stmt).first() is not None

    def update_text(self, message: models.Message, message_text: str) -> models.Message:
        """Overwrite the text of a managed message in place."""
        message.message_text = message_text
        self.session.add(message)
        self.session.commit()
        self.session.refresh(message)
        return message

    def delete(self, message_id: int) -> int:
        """Delete a message by id and return the number of rows removed."""
        message = self.get(message_id)
        if not message:
            return 0
        self.session.delete(message)
        self.session.commit()
        return 1

    def list_all(self) -> List[models.Message]:
        """Return every message in primary-key order."""
        stmt = select(models.Message).order_by(models.Message.message_id)
        return self.session.exec(stmt).all()

    def list_by_posted_by(self, account_id: int) -> List[models.Message]:
        """List all messages posted by `account_id`."""
        stmt = select(models.Message).where(models.Message.posted_by == account_id).order_by(models.Message.message_id)
        return self.session.exec(stmt).all()
