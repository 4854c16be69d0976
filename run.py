"""Entry point for the Users API.

Starts the FastAPI application under Uvicorn.  It is intended to be
executed from the project root, for example inside a container where
only a single Python file is specified.

Configuration such as ``HOST``, ``PORT``, ``ENVIRONMENT`` and
``LOG_LEVEL`` is read from environment variables; see
``users_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""

from users_api.server import main


if __name__ == "__main__":
    main()
