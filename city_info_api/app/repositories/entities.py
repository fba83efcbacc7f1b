"""Storage entities shared by both repository backends."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class PointOfInterest:
    name: str
    description: Optional[str] = None
    id: int = 0
    city_id: int = 0


@dataclass
class City:
    id: int
    name: str
    description: Optional[str] = None
    points_of_interest: List[PointOfInterest] = field(default_factory=list)
