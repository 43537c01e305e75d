import pytest
from flask import Flask

from jobopenings.database import OpeningStore
from jobopenings.handlers import make_blueprint


@pytest.fixture
def store(tmp_path):
    with OpeningStore(tmp_path / "test.db") as opened:
        yield opened


@pytest.fixture
def client(store):
    app = Flask("handlers-test")
    app.register_blueprint(make_blueprint(store))
    return app.test_client()


def _body(**overrides):
    body = {
        "role": "Backend Engineer",
        "company": "Example Corp",
        "location": "Remote",
        "remote": True,
        "link": "https://jobs.example.com/1",
        "salary": 5000,
    }
    body.update(overrides)
    return body


def test_create_returns_created_opening(client):
    response = client.post("/opening", json=_body())
    assert response.status_code == 201
    data = response.get_json()
    assert data["message"] == "Opening created successfully"
    opening = data["opening"]
    assert opening["id"] >= 1
    for key, value in _body().items():
        assert opening[key] == value
    assert opening["createdAt"] == opening["updatedAt"]
    assert "deletedAt" not in opening


def test_create_rejects_missing_field(client):
    body = _body()
    del body["remote"]
    response = client.post("/opening", json=body)
    assert response.status_code == 400
    assert "Remote" in response.get_json()["error"]


def test_create_rejects_malformed_json(client):
    response = client.post("/opening", data="{not json", content_type="application/json")
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_create_failure_on_closed_store(client, store):
    store.close()
    response = client.post("/opening", json=_body())
    assert response.status_code == 500
    assert response.get_json() == {"error": "Failed to create opening"}


def test_list_empty(client):
    response = client.get("/openings")
    assert response.status_code == 200
    assert response.get_json() == {"openings": []}


def test_list_returns_created_in_order(client):
    first = client.post("/opening", json=_body(role="A")).get_json()["opening"]
    second = client.post("/opening", json=_body(role="B")).get_json()["opening"]
    listed = client.get("/openings").get_json()["openings"]
    assert [item["id"] for item in listed] == [first["id"], second["id"]]
    assert [item["role"] for item in listed] == ["A", "B"]


def test_list_failure_on_closed_store(client, store):
    store.close()
    response = client.get("/openings")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Failed to retrieve openings"}


def test_show_requires_id(client):
    response = client.get("/opening")
    assert response.status_code == 400
    assert response.get_json() == {"error": "ID is required"}


@pytest.mark.parametrize("opening_id", ["999", "abc"])
def test_show_unknown_id(client, opening_id):
    response = client.get("/opening", query_string={"id": opening_id})
    assert response.status_code == 404
    assert response.get_json() == {"error": "Opening not found"}


def test_show_existing_matches_created(client):
    created = client.post("/opening", json=_body()).get_json()["opening"]
    response = client.get("/opening", query_string={"id": str(created["id"])})
    assert response.status_code == 200
    assert response.get_json() == {"opening": created}


def test_show_on_closed_store_is_not_found(client, store):
    store.close()
    response = client.get("/opening", query_string={"id": "1"})
    assert response.status_code == 404


def test_delete_requires_id(client):
    response = client.delete("/opening")
    assert response.status_code == 400
    assert response.get_json() == {"error": "ID is required"}


def test_delete_unknown_id(client):
    response = client.delete("/opening", query_string={"id": "42"})
    assert response.status_code == 404
    assert response.get_json() == {"error": "Opening not found"}


def test_delete_removes_opening(client):
    created = client.post("/opening", json=_body()).get_json()["opening"]
    response = client.delete("/opening", query_string={"id": str(created["id"])})
    assert response.status_code == 200
    data = response.get_json()
    assert data["message"] == "Opening deleted successfully"
    assert data["opening"]["id"] == created["id"]
    assert "deletedAt" in data["opening"]
    shown = client.get("/opening", query_string={"id": str(created["id"])})
    assert shown.status_code == 404
    assert client.get("/openings").get_json() == {"openings": []}


def test_update_changes_fields(client):
    created = client.post("/opening", json=_body()).get_json()["opening"]
    update = _body(id=str(created["id"]), role="Lead", remote=False, salary=7000)
    response = client.put("/opening", json=update)
    assert response.status_code == 200
    data = response.get_json()
    assert data["message"] == "Opening updated successfully"
    opening = data["opening"]
    assert opening["role"] == "Lead"
    assert opening["remote"] is False
    assert opening["salary"] == 7000
    assert opening["createdAt"] == created["createdAt"]
    shown = client.get("/opening", query_string={"id": str(created["id"])}).get_json()
    assert shown["opening"] == opening


def test_update_unknown_id(client):
    response = client.put("/opening", json=_body(id="999"))
    assert response.status_code == 404
    assert response.get_json() == {"error": "Opening not found"}


def test_update_rejects_missing_id(client):
    response = client.put("/opening", json=_body())
    assert response.status_code == 400
    assert "ID" in response.get_json()["error"]