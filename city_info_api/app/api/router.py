"""
Top‑level API router.

Both resource routers share the ``/cities`` prefix: points of interest
are addressed as ``/cities/{city_id}/pointsofinterest``.  The
application mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import cities, points_of_interest

router = APIRouter()

router.include_router(cities.router, prefix="/cities", tags=["cities"])
router.include_router(points_of_interest.router, prefix="/cities", tags=["points of interest"])
