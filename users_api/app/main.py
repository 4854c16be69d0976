"""
Main entrypoint for the Users API.

This module assembles the FastAPI application: it sets up logging,
creates the in‑memory user store, registers exception handlers,
includes the versioned routers and installs the middleware chain.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
with::

    uvicorn users_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import install_middleware
from .services.user_store import UserStore

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call returns an independent application with its own empty
    ``UserStore``.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file)

    # Interactive docs are only served in development.
    docs_enabled = app_settings.is_development
    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.settings = app_settings
    app.state.user_store = UserStore()

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=app_settings.api_prefix)
    install_middleware(app, app_settings)

    logger.info("Created %s %s (environment=%s)", app_settings.project_name, app_settings.api_version, app_settings.environment)
    return app


app = create_app()
