"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Cross‑cutting pieces (configuration, logging, middleware,
error handlers) live in ``core``; the user domain is split between
``schemas`` (wire models), ``services`` (validation and the in‑memory
store) and ``api/v1/endpoints`` (route handlers).
"""

from .main import app  # noqa: F401
