"""
Top‑level package for the City Info API.

This file makes ``city_info_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``city_info_api.app.main``.  Tests import the application factory
through these names, so the marker file is required even though the
package itself exports nothing.
"""

__all__ = []
