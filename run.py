"""Entry point for running the City Info API.

This script serves the FastAPI application with Uvicorn.  It is intended
to be executed from the project root, for example in Docker, where you
only specify a single Python file to run.

Configuration such as STORE_BACKEND, DATABASE_URL and the MAIL_* settings
is read from environment variables; see ``city_info_api/app/core/config.py``
for the full list.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from city_info_api.app.main import app as api_app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Host and port are read from environment variables `API_HOST` and
    `API_PORT`. Defaults are `0.0.0.0` and `8000`.
    """
    api_host = os.getenv("API_HOST", "0.0.0.0")
    api_port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=api_app, host=api_host, port=api_port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("City Info API stopped")
