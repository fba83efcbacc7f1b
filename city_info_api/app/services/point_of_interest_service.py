"""
Business logic for points of interest.

``PointOfInterestService`` implements the rules behind every point of
interest endpoint.  It works against a ``CityInfoRepository`` and a
``MailService`` handed to it per request and reports problems with the
exceptions from ``core.exceptions``:

* ``NotFoundError`` for an unknown city or point of interest;
* ``ValidationError`` for a missing or invalid payload, carrying every
  field error found;
* ``PersistenceError`` when the repository cannot save.

Payloads are validated before the city is looked up, mirroring the
order clients observe: a bad body on an unknown city yields 400, not
404.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import BackgroundTasks

from ..core.exceptions import NotFoundError, PersistenceError, ValidationError
from ..repositories import CityInfoRepository, PointOfInterest
from ..schemas.point_of_interest import (
    PointOfInterestForCreation,
    PointOfInterestForUpdate,
    PointOfInterestRead,
)
from .mail_service import MailService
from .patching import PATCH_ERROR_KEY, apply_patch
from .validation import validate_point_of_interest

logger = logging.getLogger(__name__)

DELETED_MAIL_SUBJECT = "Point of interest deleted."


class PointOfInterestService:
    """Service for reading and changing the points of interest of a city."""

    def __init__(self, repository: CityInfoRepository, mail_service: MailService):
        self.repository = repository
        self.mail_service = mail_service

    def _ensure_city(self, city_id: int) -> None:
        if not self.repository.city_exists(city_id):
            logger.info("City with id %s wasn't found when accessing points of interest.", city_id)
            raise NotFoundError(f"City {city_id} not found")

    def _get_entity(self, city_id: int, poi_id: int) -> PointOfInterest:
        self._ensure_city(city_id)
        point_of_interest = self.repository.get_point_of_interest(city_id, poi_id)
        if point_of_interest is None:
            logger.info("Point of interest %s wasn't found in city %s.", poi_id, city_id)
            raise NotFoundError(f"Point of interest {poi_id} not found")
        return point_of_interest

    def _save(self, action: str) -> None:
        if not self.repository.save():
            raise PersistenceError(f"Saving changes failed while {action}")

    def list_points_of_interest(self, city_id: int) -> List[PointOfInterestRead]:
        """Return the points of interest of a city in stored order."""
        self._ensure_city(city_id)
        return [
            PointOfInterestRead.model_validate(point_of_interest)
            for point_of_interest in self.repository.get_points_of_interest(city_id)
        ]

    def get_point_of_interest(self, city_id: int, poi_id: int) -> PointOfInterestRead:
        return PointOfInterestRead.model_validate(self._get_entity(city_id, poi_id))

    def create_point_of_interest(self, city_id: int, payload: Optional[Dict[str, Any]]) -> PointOfInterestRead:
        """Validate ``payload``, add it to the city and return the stored point of interest."""
        if payload is None:
            raise ValidationError("A point of interest payload is required.")
        data, errors = validate_point_of_interest(payload, PointOfInterestForCreation)
        if errors:
            raise ValidationError("The point of interest is invalid.", errors)

        self._ensure_city(city_id)
        point_of_interest = PointOfInterest(name=data.name, description=data.description)
        self.repository.add_point_of_interest(city_id, point_of_interest)
        self._save("creating a point of interest")
        logger.info("Created point of interest %s in city %s", point_of_interest.id, city_id)
        return PointOfInterestRead.model_validate(point_of_interest)

    def update_point_of_interest(self, city_id: int, poi_id: int, payload: Optional[Dict[str, Any]]) -> None:
        """Replace name and description of a point of interest."""
        if payload is None:
            raise ValidationError("A point of interest payload is required.")
        data, errors = validate_point_of_interest(payload, PointOfInterestForUpdate)
        if errors:
            raise ValidationError("The point of interest is invalid.", errors)

        point_of_interest = self._get_entity(city_id, poi_id)
        self.repository.update_point_of_interest(point_of_interest, data.name, data.description)
        self._save("updating a point of interest")
        logger.info("Updated point of interest %s in city %s", poi_id, city_id)

    def partially_update_point_of_interest(
        self,
        city_id: int,
        poi_id: int,
        operations: Optional[List[Any]],
    ) -> None:
        """Apply JSON Patch ``operations`` to a point of interest.

        The patch is applied to a detached ``{name, description}``
        document; the stored point of interest changes only if the
        patched document passes validation.
        """
        if operations is None:
            raise ValidationError("A patch document is required.")

        point_of_interest = self._get_entity(city_id, poi_id)
        target = {"name": point_of_interest.name, "description": point_of_interest.description}

        patched, patch_errors = apply_patch(target, operations)
        if patch_errors:
            raise ValidationError("The patch document is invalid.", {PATCH_ERROR_KEY: patch_errors})

        # Name/description rule first, then the full update schema.
        data, errors = validate_point_of_interest(patched, PointOfInterestForUpdate)
        if errors:
            raise ValidationError("The patched point of interest is invalid.", errors)

        self.repository.update_point_of_interest(point_of_interest, data.name, data.description)
        self._save("patching a point of interest")
        logger.info("Patched point of interest %s in city %s", poi_id, city_id)

    def delete_point_of_interest(
        self,
        city_id: int,
        poi_id: int,
        background_tasks: Optional[BackgroundTasks] = None,
    ) -> None:
        """Remove a point of interest and notify by mail.

        With ``background_tasks`` the mail is queued to run after the
        response has been sent, otherwise it is sent before returning.
        """
        point_of_interest = self._get_entity(city_id, poi_id)
        self.repository.delete_point_of_interest(point_of_interest)
        self._save("deleting a point of interest")
        logger.info("Deleted point of interest %s from city %s", poi_id, city_id)

        message = f"Point of interest {point_of_interest.name} with id {point_of_interest.id} was deleted."
        if background_tasks is None:
            self.mail_service.send(DELETED_MAIL_SUBJECT, message)
        else:
            background_tasks.add_task(self.mail_service.send, DELETED_MAIL_SUBJECT, message)
