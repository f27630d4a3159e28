import pytest
from fastapi.testclient import TestClient

from kanban.api.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def create_user(client):
    def _create(name="Sigurd", email="shho@itu.dk"):
        r = client.post("/users/", json={"name": name, "email": email})
        assert r.status_code == 201, r.text
        return r.json()["id"]
    return _create
