"""
Tests for package CRUD and its integrity rules.
"""
from tests.helpers import create_car, create_package, create_service


def test_create_package_assigns_number_and_round_trips(auth_client):
    response = create_package(auth_client)

    assert response.status_code == 201
    created = response.json()["data"]
    assert created["packageNumber"] == 1
    fetched = auth_client.get("/api/packages/1").json()["data"]
    assert fetched == created
    assert fetched["packagePrice"] == 3000
    assert isinstance(fetched["packagePrice"], (int, float))


def test_packages_are_listed_by_number(auth_client):
    create_package(auth_client, name="Basic Wash")
    create_package(auth_client, name="Full Detail", price=12000)

    names = [p["packageName"] for p in auth_client.get("/api/packages").json()["data"]]

    assert names == ["Basic Wash", "Full Detail"]


def test_negative_price_is_rejected(auth_client):
    response = create_package(auth_client, price=-5)

    assert response.status_code == 400
    assert [error["field"] for error in response.json()["errors"]] == ["packagePrice"]
    assert auth_client.get("/api/packages").json()["data"] == []


def test_non_finite_price_is_rejected(auth_client):
    response = auth_client.post(
        "/api/packages",
        content='{"packageName": "X", "packageDescription": "d", "packagePrice": 1e309}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error_type"] == "validation_failed"
    assert [error["field"] for error in response.json()["errors"]] == ["packagePrice"]
    assert auth_client.get("/api/packages").json()["data"] == []


def test_free_package_is_allowed(auth_client):
    assert create_package(auth_client, name="Promo", price=0).status_code == 201


def test_update_package(auth_client):
    create_package(auth_client)

    response = auth_client.put(
        "/api/packages/1",
        json={"packageName": "Premium", "packageDescription": "Inside and out", "packagePrice": 5000},
    )

    assert response.status_code == 200
    assert response.json()["data"] == {
        "packageNumber": 1,
        "packageName": "Premium",
        "packageDescription": "Inside and out",
        "packagePrice": 5000,
    }


def test_get_unknown_package_is_not_found(auth_client):
    response = auth_client.get("/api/packages/42")

    assert response.status_code == 404
    assert response.json()["error_type"] == "not_found"


def test_package_in_use_cannot_be_deleted(auth_client):
    create_car(auth_client)
    create_package(auth_client)
    create_service(auth_client)

    first = auth_client.delete("/api/packages/1")
    second = auth_client.delete("/api/packages/1")

    for response in (first, second):
        assert response.status_code == 400
        assert response.json()["message"] == "Cannot delete package that is being used in services"
    assert auth_client.get("/api/packages/1").json()["data"]["packageName"] == "Basic Wash"


def test_delete_unused_package(auth_client):
    create_package(auth_client)

    assert auth_client.delete("/api/packages/1").status_code == 200
    assert auth_client.delete("/api/packages/1").status_code == 404
