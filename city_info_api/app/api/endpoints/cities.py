"""
City endpoints.

Cities are seeded at start‑up and are read‑only through the API.  A
single city can be returned with or without its points of interest.
"""

from typing import List, Union

from fastapi import APIRouter, Depends, Query, Request, Response

from city_info_api.app.api.deps import get_city_service
from city_info_api.app.core.negotiation import negotiate
from city_info_api.app.schemas.city import CityRead, CityWithoutPointsOfInterest
from city_info_api.app.services.city_service import CityService

router = APIRouter()


@router.get("", response_model=List[CityWithoutPointsOfInterest])
async def get_cities(
    request: Request,
    service: CityService = Depends(get_city_service),
) -> Response:
    """Return all cities ordered by name, without points of interest."""
    return negotiate(request, service.list_cities(), item_type=CityWithoutPointsOfInterest)


@router.get("/{city_id}", response_model=Union[CityRead, CityWithoutPointsOfInterest])
async def get_city(
    city_id: int,
    request: Request,
    include_points_of_interest: bool = Query(False),
    service: CityService = Depends(get_city_service),
) -> Response:
    """Retrieve a city by ID.

    Pass ``include_points_of_interest=true`` to embed the points of
    interest of the city.  Returns 404 if the city does not exist.
    """
    return negotiate(request, service.get_city(city_id, include_points_of_interest))
