"""Read‑only business logic for cities."""

import logging
from typing import List, Union

from ..core.exceptions import NotFoundError
from ..repositories import CityInfoRepository
from ..schemas.city import CityRead, CityWithoutPointsOfInterest

logger = logging.getLogger(__name__)


class CityService:
    """Service for listing cities and reading a single city."""

    def __init__(self, repository: CityInfoRepository):
        self.repository = repository

    def list_cities(self) -> List[CityWithoutPointsOfInterest]:
        return [
            CityWithoutPointsOfInterest.model_validate(city)
            for city in self.repository.get_cities()
        ]

    def get_city(
        self,
        city_id: int,
        include_points_of_interest: bool = False,
    ) -> Union[CityRead, CityWithoutPointsOfInterest]:
        """Return a city, with its points of interest if requested.

        Raises ``NotFoundError`` for an unknown ``city_id``.
        """
        city = self.repository.get_city(city_id, include_points_of_interest)
        if city is None:
            logger.info("City with id %s wasn't found.", city_id)
            raise NotFoundError(f"City {city_id} not found")
        if include_points_of_interest:
            return CityRead.model_validate(city)
        return CityWithoutPointsOfInterest.model_validate(city)
