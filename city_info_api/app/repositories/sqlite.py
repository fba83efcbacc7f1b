"""
SQLite‑backed City/POI store.

One instance is created per request and owns one connection.  Writes
run inside the connection's implicit transaction and only become
visible to other requests once ``save()`` commits them.  A failed
commit is rolled back and reported as ``False``.

All queries use parameterized statements.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import get_connection
from .city_info_repository import CityInfoRepository
from .entities import City, PointOfInterest

logger = logging.getLogger(__name__)


class SqliteCityInfoRepository(CityInfoRepository):
    """City/POI store reading and writing the ``cities`` and ``points_of_interest`` tables."""

    def __init__(self, database_url: str):
        self.database_url = database_url
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = get_connection(self.database_url)
        return self._conn

    @staticmethod
    def _row_to_city(row: sqlite3.Row) -> City:
        return City(id=row["id"], name=row["name"], description=row["description"])

    @staticmethod
    def _row_to_point_of_interest(row: sqlite3.Row) -> PointOfInterest:
        return PointOfInterest(
            id=row["id"],
            city_id=row["city_id"],
            name=row["name"],
            description=row["description"],
        )

    def get_cities(self) -> List[City]:
        rows = self.conn.execute(
            "SELECT id, name, description FROM cities ORDER BY name"
        ).fetchall()
        return [self._row_to_city(row) for row in rows]

    def get_city(self, city_id: int, include_points_of_interest: bool = False) -> Optional[City]:
        row = self.conn.execute(
            "SELECT id, name, description FROM cities WHERE id = ?", (city_id,)
        ).fetchone()
        if not row:
            return None
        city = self._row_to_city(row)
        if include_points_of_interest:
            city.points_of_interest = self.get_points_of_interest(city_id)
        return city

    def city_exists(self, city_id: int) -> bool:
        row = self.conn.execute("SELECT 1 FROM cities WHERE id = ?", (city_id,)).fetchone()
        return row is not None

    def get_points_of_interest(self, city_id: int) -> List[PointOfInterest]:
        rows = self.conn.execute(
            """
            SELECT id, city_id, name, description
            FROM points_of_interest
            WHERE city_id = ?
            ORDER BY id
            """,
            (city_id,),
        ).fetchall()
        return [self._row_to_point_of_interest(row) for row in rows]

    def get_point_of_interest(self, city_id: int, poi_id: int) -> Optional[PointOfInterest]:
        row = self.conn.execute(
            """
            SELECT id, city_id, name, description
            FROM points_of_interest
            WHERE city_id = ? AND id = ?
            """,
            (city_id, poi_id),
        ).fetchone()
        return self._row_to_point_of_interest(row) if row else None

    def add_point_of_interest(self, city_id: int, point_of_interest: PointOfInterest) -> None:
        # AUTOINCREMENT yields max(id ever used) + 1 across the whole table.
        cursor = self.conn.execute(
            "INSERT INTO points_of_interest (city_id, name, description) VALUES (?, ?, ?)",
            (city_id, point_of_interest.name, point_of_interest.description),
        )
        point_of_interest.id = cursor.lastrowid
        point_of_interest.city_id = city_id

    def update_point_of_interest(
        self,
        point_of_interest: PointOfInterest,
        name: str,
        description: Optional[str],
    ) -> None:
        self.conn.execute(
            "UPDATE points_of_interest SET name = ?, description = ? WHERE id = ?",
            (name, description, point_of_interest.id),
        )
        point_of_interest.name = name
        point_of_interest.description = description

    def delete_point_of_interest(self, point_of_interest: PointOfInterest) -> None:
        self.conn.execute(
            "DELETE FROM points_of_interest WHERE id = ?", (point_of_interest.id,)
        )

    def save(self) -> bool:
        try:
            self.conn.commit()
            return True
        except sqlite3.Error as exc:
            logger.error("Failed to save changes to %s: %s", self.database_url, exc)
            self.conn.rollback()
            return False

    def close(self) -> None:
        if self._conn is not None:
            # Uncommitted changes are discarded with the connection.
            self._conn.close()
            self._conn = None
