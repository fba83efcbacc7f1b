"""
Error types raised by the service layer.

Services never build HTTP responses themselves.  They raise one of
the exceptions below and the handlers registered in ``main.create_app``
translate them: ``NotFoundError`` to 404, ``ValidationError`` to 400
with the accumulated field errors, ``PersistenceError`` to a 500 that
carries only ``GENERIC_ERROR_MESSAGE``.
"""

from typing import Dict, List, Optional

GENERIC_ERROR_MESSAGE = "A problem happened while handling your request."


class CityInfoError(Exception):
    """Base class for all errors raised by the City Info services."""


class NotFoundError(CityInfoError):
    """An unknown city or point of interest was requested."""


class ValidationError(CityInfoError):
    """A payload was missing or failed validation.

    ``errors`` maps a field name to the list of messages for that field.
    It is empty when the payload itself was absent.
    """

    def __init__(self, message: str, errors: Optional[Dict[str, List[str]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}


class PersistenceError(CityInfoError):
    """The store could not save pending changes."""
