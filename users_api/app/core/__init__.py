"""Cross‑cutting infrastructure: settings, logging, middleware and error handlers."""
