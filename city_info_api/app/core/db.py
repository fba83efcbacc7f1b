"""
SQLite database integration, schema migrations and seed data.

This module provides functions for obtaining a database connection
(``get_connection``) and for preparing the database on application
start (``init_db``).  The persistence‑backed repository opens one
connection per request and commits it through ``save()``.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.  Seeding
inserts the demo cities and points of interest only when the
``cities`` table is empty, so restarts keep user changes.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: cities and their points of interest
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS cities (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            description TEXT
        );

        -- AUTOINCREMENT keeps deleted ids from being handed out again.
        CREATE TABLE IF NOT EXISTS points_of_interest (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            city_id INTEGER NOT NULL,
            name TEXT NOT NULL,
            description TEXT,
            FOREIGN KEY(city_id) REFERENCES cities(id) ON DELETE CASCADE
        );

        CREATE INDEX IF NOT EXISTS idx_points_of_interest_city_id
            ON points_of_interest(city_id);
        """,
    ),
]

SEED_CITIES = [
    (1, "New York City", "The one with that big park."),
    (2, "Antwerp", "The one with the cathedral that was never really finished."),
    (3, "Paris", "The one with that big tower."),
]

SEED_POINTS_OF_INTEREST = [
    (1, 1, "Central Park", "The most visited urban park in the United States."),
    (2, 1, "Empire State Building", "A 102-story skyscraper located in Midtown Manhattan."),
    (3, 2, "Cathedral of Our Lady", "A Gothic style cathedral, conceived by architects Jan and Pieter Appelmans."),
    (4, 2, "Antwerp Central Station", "The finest example of railway architecture in Belgium."),
    (5, 3, "Eiffel Tower", "A wrought iron lattice tower on the Champ de Mars, named after engineer Gustave Eiffel."),
    (6, 3, "The Louvre", "The world's largest museum."),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used directly; relative paths are resolved
    against the project root.  Each request opens its own connection,
    so an in‑memory SQLite database cannot be used here.
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # city_info_api/
    return str((base_dir / database_url).resolve())


def get_connection(database_url: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign keys are switched on for the lifetime of the
    connection because SQLite disables them by default.  A connection
    belongs to one request but may be closed from another thread than
    the one that opened it.
    """
    conn = sqlite3.connect(get_database_path(database_url), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(database_url: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(database_url)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def seed_database(cursor: sqlite3.Cursor) -> bool:
    """Insert the demo cities and points of interest into an empty database.

    Returns ``True`` when rows were inserted.
    """
    row = cursor.execute("SELECT COUNT(*) AS total FROM cities").fetchone()
    if row["total"]:
        return False
    cursor.executemany(
        "INSERT INTO cities (id, name, description) VALUES (?, ?, ?)",
        SEED_CITIES,
    )
    cursor.executemany(
        "INSERT INTO points_of_interest (id, city_id, name, description) VALUES (?, ?, ?, ?)",
        SEED_POINTS_OF_INTEREST,
    )
    return True


def init_db(database_url: str) -> None:
    """Initialise the database, apply pending migrations and seed it.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies any newer entries of
    ``MIGRATIONS``.  To change the schema, append a migration with an
    incremented version number.
    """
    with get_cursor(database_url) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version

        seed_database(cursor)
