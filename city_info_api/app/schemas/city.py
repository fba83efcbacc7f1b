"""
Pydantic models for city data.

``CityWithoutPointsOfInterest`` is what city listings return;
``CityRead`` adds the owned points of interest and their count and is
returned when a client asks for a single city with its points of
interest.  Both are rendered as a ``City`` element in XML.
"""

from typing import ClassVar, List, Optional

from pydantic import BaseModel, Field, computed_field

from .point_of_interest import PointOfInterestRead


class CityWithoutPointsOfInterest(BaseModel):
    """Schema for reading a city without its points of interest."""

    xml_name: ClassVar[str] = "City"

    id: int
    name: str = Field(..., examples=["New York City"])
    description: Optional[str] = Field(None, examples=["The one with that big park."])

    model_config = {
        "from_attributes": True,
    }


class CityRead(CityWithoutPointsOfInterest):
    """Schema for reading a city together with its points of interest."""

    points_of_interest: List[PointOfInterestRead] = Field(default_factory=list)

    @computed_field
    @property
    def number_of_points_of_interest(self) -> int:
        return len(self.points_of_interest)
