"""API tests for the city endpoints and XML content negotiation."""

import xml.etree.ElementTree as ET

import pytest

pytestmark = pytest.mark.api


class TestCities:

    def test_list_cities_is_ordered_by_name(self, client):
        response = client.get("/api/cities")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Antwerp", "New York City", "Paris"]
        assert all("points_of_interest" not in c for c in response.json())

    def test_get_city_without_points_of_interest(self, client):
        response = client.get("/api/cities/3")

        assert response.status_code == 200
        assert response.json() == {"id": 3, "name": "Paris", "description": "The one with that big tower."}

    def test_get_city_with_points_of_interest(self, client):
        response = client.get("/api/cities/3", params={"include_points_of_interest": "true"})

        body = response.json()
        assert body["number_of_points_of_interest"] == 2
        assert [p["name"] for p in body["points_of_interest"]] == ["Eiffel Tower", "The Louvre"]

    def test_unknown_city_returns_404(self, client):
        assert client.get("/api/cities/42").status_code == 404

    def test_non_integer_city_id_returns_404(self, client):
        assert client.get("/api/cities/paris").status_code == 404

    def test_invalid_include_flag_returns_400(self, client):
        response = client.get("/api/cities/1", params={"include_points_of_interest": "maybe"})

        assert response.status_code == 400
        assert "include_points_of_interest" in response.json()["detail"]

    def test_created_point_of_interest_shows_up_in_city(self, client):
        client.post("/api/cities/2/pointsofinterest", json={"name": "Rubens House"})

        body = client.get("/api/cities/2", params={"include_points_of_interest": "true"}).json()
        assert body["number_of_points_of_interest"] == 3


class TestXmlNegotiation:

    def test_json_is_the_default(self, client):
        response = client.get("/api/cities/1/pointsofinterest/1")

        assert response.headers["content-type"].startswith("application/json")

    def test_point_of_interest_as_xml(self, client):
        response = client.get(
            "/api/cities/1/pointsofinterest/1",
            headers={"Accept": "application/xml"},
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        root = ET.fromstring(response.content)
        assert root.tag == "PointOfInterest"
        assert root.findtext("Id") == "1"
        assert root.findtext("Name") == "Central Park"

    def test_list_as_xml(self, client):
        response = client.get(
            "/api/cities/1/pointsofinterest",
            headers={"Accept": "text/xml"},
        )

        root = ET.fromstring(response.content)
        assert root.tag == "ArrayOfPointOfInterest"
        assert [e.findtext("Name") for e in root] == ["Central Park", "Empire State Building"]

    def test_created_point_of_interest_as_xml_omits_missing_description(self, client):
        response = client.post(
            "/api/cities/1/pointsofinterest",
            json={"name": "Grand Central Terminal"},
            headers={"Accept": "application/xml"},
        )

        assert response.status_code == 201
        root = ET.fromstring(response.content)
        assert root.find("Description") is None

    def test_city_with_points_of_interest_as_xml(self, client):
        response = client.get(
            "/api/cities/2",
            params={"include_points_of_interest": "true"},
            headers={"Accept": "application/xml"},
        )

        root = ET.fromstring(response.content)
        assert root.tag == "City"
        assert root.findtext("NumberOfPointsOfInterest") == "2"
        assert len(root.find("PointsOfInterest")) == 2
        assert [e.tag for e in root.find("PointsOfInterest")] == ["PointOfInterest", "PointOfInterest"]

    def test_city_list_as_xml(self, client):
        response = client.get("/api/cities", headers={"Accept": "application/xml"})

        root = ET.fromstring(response.content)
        assert root.tag == "ArrayOfCity"
        assert {e.tag for e in root} == {"City"}

    def test_empty_list_keeps_its_root_element(self, client):
        for poi_id in (5, 6):
            assert client.delete(f"/api/cities/3/pointsofinterest/{poi_id}").status_code == 204

        empty = client.get("/api/cities/3/pointsofinterest", headers={"Accept": "application/xml"})
        filled = client.get("/api/cities/1/pointsofinterest", headers={"Accept": "application/xml"})

        assert ET.fromstring(empty.content).tag == "ArrayOfPointOfInterest"
        assert len(ET.fromstring(empty.content)) == 0
        assert ET.fromstring(filled.content).tag == ET.fromstring(empty.content).tag

    def test_json_preferred_by_quality(self, client):
        response = client.get(
            "/api/cities/1",
            headers={"Accept": "application/xml;q=0.5, application/json"},
        )

        assert response.headers["content-type"].startswith("application/json")
