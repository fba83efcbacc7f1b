"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies for cities and points of
interest.  They are separate from the repository entities so the API
representation stays decoupled from storage.
"""
