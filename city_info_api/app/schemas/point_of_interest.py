"""
Pydantic schemas for points of interest.

``PointOfInterestRead`` is the representation returned by the API.  Its
``xml_name`` is the element name used for XML responses.
``PointOfInterestForCreation`` and ``PointOfInterestForUpdate`` carry
the same two fields and the same constraints; they are kept separate
so that creation and replacement can evolve independently.  The
update shape is also the target of PATCH documents.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, Field


class PointOfInterestBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50, examples=["Grand Central Terminal"])
    description: Optional[str] = Field(None, max_length=200, examples=["A commuter rail terminal in Midtown Manhattan"])


class PointOfInterestForCreation(PointOfInterestBase):
    """Schema for creating a point of interest."""
    pass


class PointOfInterestForUpdate(PointOfInterestBase):
    """Schema for fully replacing a point of interest."""
    pass


class PointOfInterestRead(BaseModel):
    """Schema for reading a point of interest from the API."""

    xml_name: ClassVar[str] = "PointOfInterest"

    id: int
    name: str
    description: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }

