"""
Application package initializer.

This package contains the entrypoint for the City Info API and its
submodules.  Routers live under ``api/endpoints``, request and response
models under ``schemas``, business rules under ``services`` and the two
storage backends under ``repositories``.  Cross‑cutting pieces
(configuration, logging, database access, error types and content
negotiation) live in ``core``.
"""

from .main import app  # noqa: F401
