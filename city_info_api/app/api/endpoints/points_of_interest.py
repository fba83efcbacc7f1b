"""
Point of interest endpoints.

These routes expose the points of interest owned by a city.  Handlers
stay thin: the rules live in ``PointOfInterestService`` and the typed
errors it raises are turned into 404/400/500 responses by the handlers
registered in ``main.create_app``.  Successful reads are rendered as
JSON or XML depending on the ``Accept`` header.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, BackgroundTasks, Body, Depends, HTTPException, Request, Response, status

from city_info_api.app.api.deps import get_point_of_interest_service
from city_info_api.app.core.exceptions import GENERIC_ERROR_MESSAGE, CityInfoError
from city_info_api.app.core.negotiation import negotiate
from city_info_api.app.schemas.point_of_interest import PointOfInterestRead
from city_info_api.app.services.point_of_interest_service import PointOfInterestService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{city_id}/pointsofinterest", response_model=List[PointOfInterestRead])
async def get_points_of_interest(
    city_id: int,
    request: Request,
    service: PointOfInterestService = Depends(get_point_of_interest_service),
) -> Response:
    """List the points of interest of a city.

    Returns 404 for an unknown city.  Any other failure is logged at
    critical level and answered with a generic 500 message.
    """
    try:
        points_of_interest = service.list_points_of_interest(city_id)
    except CityInfoError:
        raise
    except Exception:
        logger.critical(
            "Exception while getting points of interest for city with id %s.",
            city_id,
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=GENERIC_ERROR_MESSAGE,
        )
    return negotiate(request, points_of_interest, item_type=PointOfInterestRead)


@router.get(
    "/{city_id}/pointsofinterest/{poi_id}",
    name="get_point_of_interest",
    response_model=PointOfInterestRead,
)
async def get_point_of_interest(
    city_id: int,
    poi_id: int,
    request: Request,
    service: PointOfInterestService = Depends(get_point_of_interest_service),
) -> Response:
    """Retrieve a single point of interest.  Raises 404 for an unknown city or id."""
    return negotiate(request, service.get_point_of_interest(city_id, poi_id))


@router.post(
    "/{city_id}/pointsofinterest",
    response_model=PointOfInterestRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_point_of_interest(
    city_id: int,
    request: Request,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: PointOfInterestService = Depends(get_point_of_interest_service),
) -> Response:
    """Create a point of interest in a city.

    The body is validated before the city is looked up.  On success
    the response carries the created point of interest and a
    ``Location`` header pointing at ``get_point_of_interest``.
    """
    created = service.create_point_of_interest(city_id, payload)
    location = request.url_for("get_point_of_interest", city_id=city_id, poi_id=created.id)
    return negotiate(
        request,
        created,
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)},
    )


@router.put("/{city_id}/pointsofinterest/{poi_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_point_of_interest(
    city_id: int,
    poi_id: int,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: PointOfInterestService = Depends(get_point_of_interest_service),
) -> None:
    """Fully replace name and description of a point of interest."""
    service.update_point_of_interest(city_id, poi_id, payload)
    return None


@router.patch("/{city_id}/pointsofinterest/{poi_id}", status_code=status.HTTP_204_NO_CONTENT)
async def partially_update_point_of_interest(
    city_id: int,
    poi_id: int,
    operations: Optional[List[Dict[str, Any]]] = Body(None),
    service: PointOfInterestService = Depends(get_point_of_interest_service),
) -> None:
    """Apply a JSON Patch document to the ``{name, description}`` of a point of interest."""
    service.partially_update_point_of_interest(city_id, poi_id, operations)
    return None


@router.delete("/{city_id}/pointsofinterest/{poi_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_point_of_interest(
    city_id: int,
    poi_id: int,
    background_tasks: BackgroundTasks,
    service: PointOfInterestService = Depends(get_point_of_interest_service),
) -> None:
    """Delete a point of interest.  The notification mail goes out after the response."""
    service.delete_point_of_interest(city_id, poi_id, background_tasks)
    return None
