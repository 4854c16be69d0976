"""
Middleware chain wrapped around every request.

Three interceptors run in a fixed order, outermost first:

1. ``ErrorTranslatorMiddleware`` turns any exception that escapes the
   rest of the stack into ``500 {"error": "<message>"}``.
2. ``AuthorizationHeaderMiddleware`` rejects requests whose
   ``Authorization`` header is missing or blank with a 401.  It only
   checks presence; the value is not parsed or verified.
3. ``RequestResponseLoggingMiddleware`` logs method, path and body of
   the request and status and body of the response.

Outside the development environment an ``HTTPSRedirectMiddleware`` is
placed between the error translator and the authenticator.

``install_middleware`` registers everything in the right order.
Starlette wraps the most recently added middleware around the others,
so registration happens innermost first.
"""

import logging
from typing import Iterable, Optional, Set

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from .config import Settings, settings

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "Unauthorized: Missing or empty Authorization header."


class ErrorTranslatorMiddleware(BaseHTTPMiddleware):
    """Convert unhandled exceptions into a JSON 500 response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error while processing %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": str(exc)},
            )


class AuthorizationHeaderMiddleware(BaseHTTPMiddleware):
    """Require a non-blank ``Authorization`` header.

    ``public_paths`` are let through without the header; the
    application uses this for its documentation pages.
    """

    def __init__(self, app: ASGIApp, public_paths: Iterable[str] = ()) -> None:
        super().__init__(app)
        self.public_paths = frozenset(public_paths)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path not in self.public_paths:
            header = request.headers.get("Authorization")
            if header is None or not header.strip():
                logger.warning("Rejected %s %s: missing Authorization header", request.method, request.url.path)
                return JSONResponse(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    content={"error": UNAUTHORIZED_MESSAGE},
                )
        return await call_next(request)


class RequestResponseLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request and response including their bodies.

    The request body is read through ``request.body()``; Starlette
    caches it and replays it to the route handler.  The response body is
    drained from the streaming response, logged, and sent on in a new
    response carrying the same status, headers and bytes.
    """

    def __init__(self, app: ASGIApp, body_limit: int = 0) -> None:
        super().__init__(app)
        self.body_limit = body_limit

    def render_body(self, body: bytes) -> str:
        if not body:
            return "<empty>"
        text = body.decode("utf-8", errors="replace")
        if self.body_limit and len(text) > self.body_limit:
            return f"{text[:self.body_limit]}... ({len(text)} chars)"
        return text

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_body = await request.body()
        logger.info("Request: %s %s %s", request.method, request.url.path, self.render_body(request_body))

        response = await call_next(request)

        response_body = b"".join([chunk async for chunk in response.body_iterator])
        logger.info("Response: %s %s", response.status_code, self.render_body(response_body))

        return Response(
            content=response_body,
            status_code=response.status_code,
            headers=response.headers,
            media_type=response.media_type,
        )


def docs_paths(app: FastAPI) -> Set[str]:
    """Return the documentation URLs ``app`` actually serves."""
    paths = set()
    for url in (app.openapi_url, app.docs_url, app.redoc_url):
        if url:
            paths.add(url)
    if app.docs_url and app.swagger_ui_oauth2_redirect_url:
        paths.add(app.swagger_ui_oauth2_redirect_url)
    return paths


def install_middleware(app: FastAPI, app_settings: Optional[Settings] = None) -> None:
    """Register the middleware chain on ``app``.

    Resulting order, outermost first: error translator, HTTPS redirect
    (non-development only), authenticator, logger.
    """
    app_settings = app_settings or settings
    app.add_middleware(RequestResponseLoggingMiddleware, body_limit=app_settings.log_body_limit)
    app.add_middleware(AuthorizationHeaderMiddleware, public_paths=docs_paths(app))
    if not app_settings.is_development:
        app.add_middleware(HTTPSRedirectMiddleware)
    app.add_middleware(ErrorTranslatorMiddleware)
