"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all.  Tests and embedding
code may construct their own ``Settings`` instance and pass it to
``create_app``.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Users API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # ``development`` serves the interactive OpenAPI docs.  Any other
    # value hides the docs and redirects plain HTTP requests to HTTPS.
    environment: str = os.getenv("ENVIRONMENT", "development")

    # Maximum number of characters of a request or response body written
    # to the log by the logging middleware.  ``0`` disables truncation.
    log_body_limit: int = int(os.getenv("LOG_BODY_LIMIT", "4096"))

    # Optional prefix for every route, e.g. ``/api``.  Must start with a
    # slash and must not end with one.  Empty by default so resources
    # live at ``/users``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at import time, environment variables should be set
# before importing this module.
settings = Settings()
