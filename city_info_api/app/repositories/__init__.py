"""
City/POI store implementations.

``CityInfoRepository`` defines the contract shared by the in‑memory
store and the SQLite store.  ``create_repository_factory`` picks one
according to the application settings.
"""

from .city_info_repository import CityInfoRepository, create_repository_factory  # noqa: F401
from .entities import City, PointOfInterest  # noqa: F401
