"""
In‑memory City/POI store.

The store lives for the whole process and is shared by all requests.
Route handlers are coroutines that call the service without awaiting,
so each service operation runs on the event loop without interleaving
with another one and the store needs no locking.  ``save()`` has
nothing to flush and always succeeds.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from ..core.db import SEED_CITIES, SEED_POINTS_OF_INTEREST
from .city_info_repository import CityInfoRepository
from .entities import City, PointOfInterest

logger = logging.getLogger(__name__)


class InMemoryCityInfoRepository(CityInfoRepository):
    """City/POI store backed by a list of ``City`` objects."""

    def __init__(self, cities: Optional[Iterable[City]] = None):
        self._cities: List[City] = list(cities or [])
        # Highest id ever allocated; deleting the newest point of
        # interest must not make its id available again.
        self._last_id = max((p.id for p in self._all_points_of_interest()), default=0)

    @classmethod
    def seeded(cls) -> "InMemoryCityInfoRepository":
        """Build a store holding the demo cities and points of interest."""
        cities: Dict[int, City] = {
            city_id: City(id=city_id, name=name, description=description)
            for city_id, name, description in SEED_CITIES
        }
        for poi_id, city_id, name, description in SEED_POINTS_OF_INTEREST:
            cities[city_id].points_of_interest.append(
                PointOfInterest(id=poi_id, city_id=city_id, name=name, description=description)
            )
        return cls(cities.values())

    def _all_points_of_interest(self) -> Iterable[PointOfInterest]:
        for city in self._cities:
            yield from city.points_of_interest

    def _find_city(self, city_id: int) -> Optional[City]:
        return next((c for c in self._cities if c.id == city_id), None)

    def get_cities(self) -> List[City]:
        return [
            replace(city, points_of_interest=[])
            for city in sorted(self._cities, key=lambda c: c.name)
        ]

    def get_city(self, city_id: int, include_points_of_interest: bool = False) -> Optional[City]:
        city = self._find_city(city_id)
        if city is None:
            return None
        points = list(city.points_of_interest) if include_points_of_interest else []
        return replace(city, points_of_interest=points)

    def city_exists(self, city_id: int) -> bool:
        return self._find_city(city_id) is not None

    def get_points_of_interest(self, city_id: int) -> List[PointOfInterest]:
        city = self._find_city(city_id)
        return list(city.points_of_interest) if city else []

    def get_point_of_interest(self, city_id: int, poi_id: int) -> Optional[PointOfInterest]:
        city = self._find_city(city_id)
        if city is None:
            return None
        return next((p for p in city.points_of_interest if p.id == poi_id), None)

    def add_point_of_interest(self, city_id: int, point_of_interest: PointOfInterest) -> None:
        city = self._find_city(city_id)
        if city is None:
            raise LookupError(f"City {city_id} not found")
        current_max = max((p.id for p in self._all_points_of_interest()), default=0)
        self._last_id = max(self._last_id, current_max) + 1
        point_of_interest.id = self._last_id
        point_of_interest.city_id = city_id
        city.points_of_interest.append(point_of_interest)
        logger.debug("Allocated point of interest id %s in city %s", point_of_interest.id, city_id)

    def update_point_of_interest(
        self,
        point_of_interest: PointOfInterest,
        name: str,
        description: Optional[str],
    ) -> None:
        point_of_interest.name = name
        point_of_interest.description = description

    def delete_point_of_interest(self, point_of_interest: PointOfInterest) -> None:
        city = self._find_city(point_of_interest.city_id)
        if city is not None and point_of_interest in city.points_of_interest:
            city.points_of_interest.remove(point_of_interest)

    def save(self) -> bool:
        return True
