import pytest
from fastapi.testclient import TestClient

from phone_countries.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["default_country"] == "FR"


def test_list_countries(client):
    response = client.get("/meta/countries")
    assert response.status_code == 200
    data = response.json()
    assert len(data) > 100
    assert {"name", "iso_code", "calling_code", "format", "regions"} <= set(data[0])


def test_list_countries_only(client):
    response = client.get("/meta/countries", params={"only": ["fr", "BE"]})
    assert response.status_code == 200
    assert [c["iso_code"] for c in response.json()] == ["BE", "FR"]


def test_list_countries_exclude_and_region(client):
    response = client.get("/meta/countries", params={"region": "european-union", "exclude": ["FR"]})
    assert response.status_code == 200
    iso_codes = [c["iso_code"] for c in response.json()]
    assert "FR" not in iso_codes
    assert "BE" in iso_codes
    assert "CH" not in iso_codes


def test_list_countries_preferred(client):
    response = client.get("/meta/countries", params={"preferred": ["FR", "DE"]})
    assert response.status_code == 200
    assert [c["iso_code"] for c in response.json()[:2]] == ["FR", "DE"]


def test_list_countries_invalid_code(client):
    response = client.get("/meta/countries", params={"only": ["France"]})
    assert response.status_code == 400


def test_default_country(client):
    response = client.get("/meta/countries/default")
    assert response.status_code == 200
    assert response.json() == {
        "name": "France",
        "iso_code": "FR",
        "calling_code": 33,
        "format": "+.. ... .. .. ..",
        "regions": ["europe", "european-union"],
    }


def test_country_by_iso_code(client):
    response = client.get("/meta/countries/be")
    assert response.status_code == 200
    assert response.json()["name"] == "Belgium"


def test_unknown_iso_code_returns_default(client):
    response = client.get("/meta/countries/XX")
    assert response.status_code == 200
    assert response.json()["iso_code"] == "FR"


def test_country_by_calling_code(client):
    response = client.get("/meta/countries/calling-code/32")
    assert response.status_code == 200
    assert response.json()["iso_code"] == "BE"


def test_unknown_calling_code(client):
    response = client.get("/meta/countries/calling-code/0")
    assert response.status_code == 404
    assert response.json() == {"detail": "Country not found"}
