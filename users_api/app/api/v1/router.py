"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under their resource prefixes.  The
application mounts this router under ``settings.api_prefix``.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
