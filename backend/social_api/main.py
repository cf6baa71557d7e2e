"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the social media backend.
Controllers are intentionally thin: they accept requests, delegate to
services, and pass the service outcome through as a status code and
body. Service errors are rendered by a single exception handler.

Endpoints implemented:
- POST /register
- POST /login
- POST /messages
- GET /messages
- GET /messages/{message_id}
- DELETE /messages/{message_id}
- PATCH /messages/{message_id}
- GET /accounts/{account_id}/messages
- GET /health
"""

from fastapi import FastAPI, Depends, Path, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response
from typing import Annotated, List
import json
import logging
import time
import uuid
from .database import create_db_and_tables
from .dependencies import get_account_service, get_message_service
from .errors import SocialMediaError
from .schemas import INT32_MAX, INT32_MIN, AccountIn, AccountOut, MessageIn, MessageOut
from .services import AccountService, MessageService
from .config import settings

app = FastAPI(title="Social Media API")
logger = logging.getLogger("social_api.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

PathId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]

create_db_and_tables()


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    context = {
        "request_id": req_id,
        "path": request.url.path,
        "method": request.method,
        "client": request.client.host if request.client else "unknown",
    }
    try:
        response = await call_next(request)
    except Exception:
        context["duration_ms"] = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception("request_failed %s", json.dumps(context, ensure_ascii=True))
        raise
    response.headers["X-Request-ID"] = req_id
    context["status_code"] = response.status_code
    context["duration_ms"] = round((time.perf_counter() - started) * 1000.0, 2)
    logger.info("request_done %s", json.dumps(context, ensure_ascii=True))
    return response


@app.exception_handler(SocialMediaError)
async def social_media_error_handler(request: Request, exc: SocialMediaError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # Unreadable bodies and non-numeric ids are client errors, reported as 400.
    logger.debug("request rejected %s: %s", request.url.path, exc.errors())
    return PlainTextResponse("Malformed request", status_code=400)


@app.post('/register', response_model=AccountOut)
def register(payload: AccountIn, svc: AccountService = Depends(get_account_service)):
    """Register a new account.

    Returns 400 for a blank username or a password shorter than four
    characters and 409 when the username is already taken.
    """
    return svc.register(payload.username, payload.password)


@app.post('/login', response_model=AccountOut)
def login(payload: AccountIn, svc: AccountService = Depends(get_account_service)):
    """Return the account matching the supplied username and password, or 401."""
    return svc.login(payload.username, payload.password)


@app.post('/messages', response_model=MessageOut)
def create_message(payload: MessageIn, svc: MessageService = Depends(get_message_service)):
    """Create a message for an existing account.

    Invalid text and unknown posters are both reported as 400.
    """
    return svc.create(payload.posted_by, payload.message_text, payload.time_posted_epoch)


@app.get('/messages', response_model=List[MessageOut])
def list_messages(svc: MessageService = Depends(get_message_service)):
    return svc.list_all()


@app.get('/messages/{message_id}', response_model=None)
def get_message(message_id: PathId, svc: MessageService = Depends(get_message_service)):
    """Return the message, or an empty 200 response when it does not exist."""
    message = svc.get_by_id(message_id)
    if message is None:
        return Response(status_code=200)
    return MessageOut.model_validate(message)


@app.delete('/messages/{message_id}', response_model=None)
def delete_message(message_id: PathId, svc: MessageService = Depends(get_message_service)):
    """Delete a message.

    The body is "1" when a row was removed and empty when the message
    did not exist; both are 200.
    """
    if svc.delete_by_id(message_id):
        return PlainTextResponse("1")
    return Response(status_code=200)


@app.patch('/messages/{message_id}', response_model=None)
def update_message_text(message_id: PathId, payload: MessageIn, svc: MessageService = Depends(get_message_service)):
    """Replace a message's text; only `messageText` is read from the body."""
    updated = svc.update_text(message_id, payload.message_text)
    return PlainTextResponse(str(updated))


@app.get('/accounts/{account_id}/messages', response_model=List[MessageOut])
def list_account_messages(account_id: PathId, svc: MessageService = Depends(get_message_service)):
    """List all messages posted by `account_id` (empty if none)."""
    return svc.list_by_account(account_id)


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
