"""
FastAPI dependencies shared by the endpoint modules.

The repository factory and the mail service are attached to
``app.state`` by ``create_app``.  Each request gets its own repository
from the factory, which is closed once the response has been produced.
"""

from typing import AsyncIterator

from fastapi import Depends, Request

from ..repositories import CityInfoRepository
from ..services.city_service import CityService
from ..services.mail_service import MailService
from ..services.point_of_interest_service import PointOfInterestService


async def get_repository(request: Request) -> AsyncIterator[CityInfoRepository]:
    repository = request.app.state.repository_factory()
    try:
        yield repository
    finally:
        repository.close()


def get_mail_service(request: Request) -> MailService:
    return request.app.state.mail_service


def get_point_of_interest_service(
    repository: CityInfoRepository = Depends(get_repository),
    mail_service: MailService = Depends(get_mail_service),
) -> PointOfInterestService:
    return PointOfInterestService(repository, mail_service)


def get_city_service(
    repository: CityInfoRepository = Depends(get_repository),
) -> CityService:
    return CityService(repository)
