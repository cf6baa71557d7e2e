"""Run the API with uvicorn.

Usage:
    python -m social_api

Host and port are read from the `HOST` and `PORT` environment
variables (see `config.Settings`).
"""

import uvicorn

from .config import settings


def main() -> None:
    uvicorn.run("social_api.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
