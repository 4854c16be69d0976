"""Tests for the /users endpoints."""

from fastapi.testclient import TestClient

from users_api.app.core.errors import BODY_NOT_JSON, BODY_NOT_OBJECT, BODY_REQUIRED
from users_api.app.main import create_app
from users_api.app.services.validation import EMAIL_INVALID, EMAIL_REQUIRED, NAME_REQUIRED


def _create(client, email="a@b.com", name="Ann"):
    return client.post("/users", json={"Email": email, "Name": name})


class TestCreateUser:
    def test_created_with_location(self, client):
        response = _create(client)
        assert response.status_code == 201
        assert response.headers["location"] == "/users/1"
        assert response.json() == {"Id": 1, "Email": "a@b.com", "Name": "Ann"}

    def test_ids_strictly_increase(self, client):
        ids = [_create(client, name=f"User {i}").json()["Id"] for i in range(5)]
        assert ids == sorted(set(ids))
        assert ids == [1, 2, 3, 4, 5]

    def test_client_supplied_id_is_ignored(self, client):
        response = client.post("/users", json={"Id": 99, "Email": "a@b.com", "Name": "Ann"})
        assert response.status_code == 201
        assert response.json()["Id"] == 1

    def test_lowercase_keys_are_accepted(self, client):
        response = client.post("/users", json={"email": "a@b.com", "name": "Ann"})
        assert response.status_code == 201
        assert response.json()["Email"] == "a@b.com"

    def test_empty_fields(self, client, store):
        response = _create(client, email="", name="")
        assert response.status_code == 400
        assert response.json() == {"errors": [EMAIL_REQUIRED, NAME_REQUIRED]}
        assert len(store) == 0

    def test_invalid_email(self, client):
        response = _create(client, email="not-an-email")
        assert response.status_code == 400
        assert response.json() == {"errors": [EMAIL_INVALID]}

    def test_body_must_be_json_object(self, client, store):
        response = client.post("/users", json=["a@b.com", "Ann"])
        assert response.status_code == 400
        assert response.json()["errors"]
        assert len(store) == 0

    def test_malformed_json(self, client):
        response = client.post(
            "/users",
            content=b'{"Email": "a@b.com",',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert "errors" in response.json()

    def test_missing_body(self, client):
        response = client.post("/users")
        assert response.status_code == 400
        assert response.json() == {"errors": [BODY_REQUIRED]}

    def test_null_body_is_not_an_object(self, client, store):
        response = client.post("/users", content=b"null", headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json() == {"errors": [BODY_NOT_OBJECT]}
        assert len(store) == 0

    def test_body_that_is_not_utf8(self, client, store):
        response = client.post(
            "/users",
            content=b'{"Email": "\xff@b.com", "Name": "A"}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"errors": [BODY_NOT_JSON]}
        assert len(store) == 0


def test_unsupported_method_reports_error_key(client):
    response = client.patch("/users/1", json={"Name": "Ann"})
    assert response.status_code == 405
    assert "error" in response.json()
    assert "allow" in response.headers


def test_unknown_route_reports_error_key(client):
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


class TestReadUsers:
    def test_list_empty(self, client):
        response = client.get("/users")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_all(self, client):
        _create(client, name="Ann")
        _create(client, email="b@c.com", name="Bob")
        response = client.get("/users")
        assert response.status_code == 200
        assert [user["Name"] for user in response.json()] == ["Ann", "Bob"]

    def test_get_round_trip(self, client):
        user_id = _create(client, email="x@y.org", name="Xavier").json()["Id"]
        response = client.get(f"/users/{user_id}")
        assert response.status_code == 200
        assert response.json() == {"Id": user_id, "Email": "x@y.org", "Name": "Xavier"}

    def test_get_missing_is_404_with_empty_body(self, client):
        response = client.get("/users/42")
        assert response.status_code == 404
        assert response.content == b""

    def test_non_integer_id_does_not_match(self, client):
        assert client.get("/users/abc").status_code == 404


class TestUpdateUser:
    def test_update(self, client):
        _create(client)
        response = client.put("/users/1", json={"Email": "a@b.org", "Name": "Ann"})
        assert response.status_code == 200
        assert response.json() == {"Id": 1, "Email": "a@b.org", "Name": "Ann"}
        assert client.get("/users/1").json()["Email"] == "a@b.org"

    def test_update_cannot_change_id(self, client):
        _create(client)
        response = client.put("/users/1", json={"Id": 5, "Email": "a@b.org", "Name": "Ann"})
        assert response.json()["Id"] == 1
        assert client.get("/users/5").status_code == 404

    def test_update_missing_is_404(self, client, store):
        _create(client)
        response = client.put("/users/9", json={"Email": "a@b.org", "Name": "Ann"})
        assert response.status_code == 404
        assert len(store) == 1

    def test_missing_id_wins_over_invalid_payload(self, client):
        response = client.put("/users/9", json={"Email": "", "Name": ""})
        assert response.status_code == 404

    def test_update_validation(self, client):
        _create(client)
        response = client.put("/users/1", json={"Email": "nope", "Name": ""})
        assert response.status_code == 400
        assert response.json() == {"errors": [EMAIL_INVALID, NAME_REQUIRED]}
        assert client.get("/users/1").json()["Email"] == "a@b.com"


class TestDeleteUser:
    def test_delete(self, client):
        _create(client)
        response = client.delete("/users/1")
        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/users/1").status_code == 404

    def test_repeated_delete_is_404(self, client):
        _create(client)
        assert client.delete("/users/1").status_code == 204
        assert client.delete("/users/1").status_code == 404

    def test_delete_missing(self, client):
        assert client.delete("/users/3").status_code == 404


def test_end_to_end_scenario(client):
    response = client.post("/users", json={"Email": "a@b.com", "Name": "Ann"})
    assert response.status_code == 201
    assert response.json()["Id"] == 1

    response = client.get("/users/1")
    assert response.status_code == 200
    assert response.json() == {"Id": 1, "Email": "a@b.com", "Name": "Ann"}

    response = client.put("/users/1", json={"Email": "a@b.org", "Name": "Ann"})
    assert response.status_code == 200
    assert response.json()["Email"] == "a@b.org"

    assert client.delete("/users/1").status_code == 204
    assert client.get("/users/1").status_code == 404


def test_api_prefix(settings):
    settings.api_prefix = "/api"
    with TestClient(create_app(settings), headers={"Authorization": "token"}) as client:
        response = client.post("/api/users", json={"Email": "a@b.com", "Name": "Ann"})
        assert response.status_code == 201
        assert response.headers["location"] == "/api/users/1"
        assert client.get("/users").status_code == 404
