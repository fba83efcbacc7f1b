"""
Contract tests for the City/POI store backends.

The same checks run against the in‑memory store and the SQLite store;
SQLite specific behaviour (transactions, migrations) is tested below.
"""

import sqlite3
from unittest.mock import Mock

import pytest

from city_info_api.app.core.db import get_connection, init_db
from city_info_api.app.repositories import PointOfInterest
from city_info_api.app.repositories.in_memory import InMemoryCityInfoRepository
from city_info_api.app.repositories.sqlite import SqliteCityInfoRepository


@pytest.fixture
def database_url(tmp_path):
    url = str(tmp_path / "store.db")
    init_db(url)
    return url


@pytest.fixture(params=["memory", "sqlite"])
def repository(request, database_url):
    if request.param == "memory":
        yield InMemoryCityInfoRepository.seeded()
    else:
        repo = SqliteCityInfoRepository(database_url)
        yield repo
        repo.close()


def test_city_exists(repository):
    assert repository.city_exists(1)
    assert not repository.city_exists(99)


def test_get_cities_ordered_by_name(repository):
    assert [c.name for c in repository.get_cities()] == ["Antwerp", "New York City", "Paris"]


def test_get_city_with_and_without_points_of_interest(repository):
    assert repository.get_city(2).points_of_interest == []
    assert len(repository.get_city(2, include_points_of_interest=True).points_of_interest) == 2
    assert repository.get_city(99) is None


def test_unknown_city_has_no_points_of_interest(repository):
    assert repository.get_points_of_interest(99) == []


def test_get_point_of_interest_is_scoped_to_city(repository):
    assert repository.get_point_of_interest(1, 1).name == "Central Park"
    assert repository.get_point_of_interest(2, 1) is None


def test_add_allocates_global_max_plus_one(repository):
    point_of_interest = PointOfInterest(name="Grote Markt")

    repository.add_point_of_interest(2, point_of_interest)
    assert repository.save()

    assert point_of_interest.id == 7
    assert [p.id for p in repository.get_points_of_interest(2)] == [3, 4, 7]


def test_ids_are_not_reused_after_delete(repository):
    repository.delete_point_of_interest(repository.get_point_of_interest(3, 6))
    repository.save()

    point_of_interest = PointOfInterest(name="Sacré-Cœur")
    repository.add_point_of_interest(3, point_of_interest)
    repository.save()

    assert point_of_interest.id == 7


def test_update_overwrites_name_and_description(repository):
    point_of_interest = repository.get_point_of_interest(1, 2)

    repository.update_point_of_interest(point_of_interest, "Chrysler Building", None)
    repository.save()

    stored = repository.get_point_of_interest(1, 2)
    assert (stored.id, stored.name, stored.description) == (2, "Chrysler Building", None)


def test_delete_removes_from_city(repository):
    repository.delete_point_of_interest(repository.get_point_of_interest(1, 1))
    repository.save()

    assert [p.id for p in repository.get_points_of_interest(1)] == [2]


class TestSqliteStore:

    def test_unsaved_changes_are_discarded_on_close(self, database_url):
        writer = SqliteCityInfoRepository(database_url)
        writer.add_point_of_interest(1, PointOfInterest(name="Unsaved"))
        writer.close()

        reader = SqliteCityInfoRepository(database_url)
        assert len(reader.get_points_of_interest(1)) == 2
        reader.close()

    def test_saved_changes_are_visible_to_other_connections(self, database_url):
        writer = SqliteCityInfoRepository(database_url)
        writer.add_point_of_interest(1, PointOfInterest(name="Saved"))
        assert writer.save()
        writer.close()

        reader = SqliteCityInfoRepository(database_url)
        assert [p.name for p in reader.get_points_of_interest(1)][-1] == "Saved"
        reader.close()

    def test_failed_commit_is_rolled_back_and_reported(self, database_url, caplog):
        repo = SqliteCityInfoRepository(database_url)
        repo._conn = Mock(spec=sqlite3.Connection)
        repo._conn.commit.side_effect = sqlite3.OperationalError("database is locked")

        assert repo.save() is False

        repo._conn.rollback.assert_called_once()
        assert "database is locked" in caplog.text
        repo.close()

    def test_init_db_seeds_only_once(self, database_url):
        init_db(database_url)

        conn = get_connection(database_url)
        try:
            total = conn.execute("SELECT COUNT(*) AS total FROM points_of_interest").fetchone()["total"]
            versions = conn.execute("SELECT COUNT(*) AS total FROM migrations").fetchone()["total"]
        finally:
            conn.close()
        assert total == 6
        assert versions == 1


def test_in_memory_save_always_succeeds():
    assert InMemoryCityInfoRepository().save()
