"""Fixtures for end-to-end API tests.

Each test runs the full FastAPI app over a fresh container with in-memory
persistence.
"""

import pytest
from fastapi.testclient import TestClient

from forum.domain.repository import BoardRepository
from forum.interface.api.app import create_app
from tests.di import build_test_container

PASSWORD = "password-1234"


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Test client; the lifespan closes the container on exit."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def board_repo(client, container):
    """In-memory board lookup of the running app, for seeding posts."""
    return client.portal.call(container.get, BoardRepository)


def register(client: TestClient, nickname: str) -> dict:
    response = client.post(
        "/users/register",
        json={
            "email": f"{nickname}@example.com",
            "password": PASSWORD,
            "name": nickname.title(),
            "nickname": nickname,
        },
    )
    assert response.status_code == 200, response.text
    return response.json()["data"]


def login(client: TestClient, nickname: str) -> dict[str, str]:
    """Log in and return an Authorization header for the account."""
    response = client.post(
        "/users/login",
        json={"email": f"{nickname}@example.com", "password": PASSWORD},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}
