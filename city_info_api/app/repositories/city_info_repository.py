"""
Repository interface for cities and their points of interest.

Both backends honour the same contract:

* point of interest ids are allocated from the highest id in the whole
  store, not per city, and an id is never handed out twice;
* ``update_point_of_interest`` only touches ``name`` and
  ``description``;
* changes become durable through ``save()``, which reports failure
  with ``False`` instead of raising.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from ..core.config import Settings
from .entities import City, PointOfInterest


class CityInfoRepository(ABC):
    """Read/write access to the City/POI store."""

    @abstractmethod
    def get_cities(self) -> List[City]:
        """Return all cities ordered by name, without points of interest."""

    @abstractmethod
    def get_city(self, city_id: int, include_points_of_interest: bool = False) -> Optional[City]:
        """Return a city, or ``None`` if it does not exist."""

    @abstractmethod
    def city_exists(self, city_id: int) -> bool:
        """Return ``True`` if a city with ``city_id`` exists."""

    @abstractmethod
    def get_points_of_interest(self, city_id: int) -> List[PointOfInterest]:
        """Return the ordered points of interest of a city.

        Callers check ``city_exists`` first; an unknown city yields an
        empty list.
        """

    @abstractmethod
    def get_point_of_interest(self, city_id: int, poi_id: int) -> Optional[PointOfInterest]:
        """Return a point of interest of a city, or ``None``."""

    @abstractmethod
    def add_point_of_interest(self, city_id: int, point_of_interest: PointOfInterest) -> None:
        """Assign a fresh id to ``point_of_interest`` and append it to the city."""

    @abstractmethod
    def update_point_of_interest(
        self,
        point_of_interest: PointOfInterest,
        name: str,
        description: Optional[str],
    ) -> None:
        """Overwrite name and description of an existing point of interest."""

    @abstractmethod
    def delete_point_of_interest(self, point_of_interest: PointOfInterest) -> None:
        """Remove a point of interest from its city."""

    @abstractmethod
    def save(self) -> bool:
        """Persist pending changes and report whether that succeeded."""

    def close(self) -> None:
        """Release resources held for the current request."""


RepositoryFactory = Callable[[], CityInfoRepository]


def create_repository_factory(settings: Settings) -> RepositoryFactory:
    """Return a callable producing the repository used for one request.

    The in‑memory store is shared by every request, so the factory
    always returns the same seeded instance.  The SQLite store opens a
    new connection per request; the database is migrated and seeded
    once, here.
    """
    backend = settings.store_backend.lower()
    if backend == "memory":
        from .in_memory import InMemoryCityInfoRepository

        repository = InMemoryCityInfoRepository.seeded()
        return lambda: repository
    if backend == "sqlite":
        from ..core.db import init_db
        from .sqlite import SqliteCityInfoRepository

        init_db(settings.database_url)
        return lambda: SqliteCityInfoRepository(settings.database_url)
    raise ValueError(f"Unknown store backend '{settings.store_backend}'")
