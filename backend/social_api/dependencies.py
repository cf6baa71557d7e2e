"""FastAPI dependencies wiring stores into services.

Each request gets its own `Session`; the factories below build the
repositories on that session and hand them to the service
constructors, so no store is shared between requests.
"""

from fastapi import Depends
from sqlmodel import Session
from .database import get_session
from . import repositories, services


def get_account_service(db: Session = Depends(get_session)) -> services.AccountService:
    """Return an `AccountService` bound to the request's session."""
    return services.AccountService(repositories.AccountRepository(db))


def get_message_service(db: Session = Depends(get_session)) -> services.MessageService:
    """Return a `MessageService` bound to the request's session."""
    return services.MessageService(
        repositories.MessageRepository(db),
        repositories.AccountRepository(db),
    )
