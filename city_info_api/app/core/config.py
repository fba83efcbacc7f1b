"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API runs out of the box with the in‑memory store and the local mail
service.  Tests and embedding applications may construct ``Settings``
explicitly and pass it to ``create_app``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "City Info API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional log file; console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")

    # Which City/POI store backs the API: ``memory`` keeps the seeded
    # cities in a process‑wide list, ``sqlite`` persists them in the
    # database file given by ``database_url``.
    store_backend: str = os.getenv("STORE_BACKEND", "memory")

    # Path or connection string for the SQLite database.  If a relative
    # path is provided, it will be resolved relative to the project root
    # by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "city_info.db")

    # ``local`` only logs outgoing mail; ``cloud`` posts it to
    # ``mail_api_url``.
    mail_backend: str = os.getenv("MAIL_BACKEND", "local")
    mail_to_address: str = os.getenv("MAIL_TO_ADDRESS", "admin@mycompany.com")
    mail_from_address: str = os.getenv("MAIL_FROM_ADDRESS", "noreply@mycompany.com")
    mail_api_url: str = os.getenv("MAIL_API_URL", "")
    mail_api_key: str = os.getenv("MAIL_API_KEY", "")
    mail_timeout: int = int(os.getenv("MAIL_TIMEOUT", "10"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
