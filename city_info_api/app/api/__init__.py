"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` which includes the
resource routers from ``endpoints``; ``deps.py`` holds the FastAPI
dependencies that hand repositories and services to the handlers.
"""
