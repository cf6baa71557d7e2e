"""Domain errors raised by the services.

Each error carries the HTTP status it maps to; the application installs
a single handler that renders them as plain-text responses.
"""


class SocialMediaError(Exception):
    """Base class for errors surfaced to API callers."""
    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidInput(SocialMediaError, ValueError):
    """Malformed, missing or oversized fields, or an unknown poster."""
    status_code = 400


class Conflict(SocialMediaError):
    """The username is already taken."""
    status_code = 409


class Unauthorized(SocialMediaError):
    """No account matches the supplied credentials."""
    status_code = 401


class NotFound(SocialMediaError):
    """The message to update does not exist.

    Reported as 400 rather than 404 to keep the API's published contract.
    """
    status_code = 400
