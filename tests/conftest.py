"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from dossier.app import App
from dossier.config import Config
from dossier.web.server import create_fastapi_app

OWNER = ("owner", "owner-secret")
VIEWER = ("recruiter", "viewer-secret")


@pytest.fixture
def config(tmp_path) -> Config:
    """Config with all storage under a temporary directory."""
    return Config(
        _env_file=None,
        token_secret="test-secret",
        owner_username=OWNER[0],
        owner_password=OWNER[1],
        viewer_username=VIEWER[0],
        viewer_password=VIEWER[1],
        data_path=str(tmp_path / "data" / "projects.json"),
        fallback_data_paths=[str(tmp_path / "seed" / "projects.json")],
        uploads_path=str(tmp_path / "uploads"),
        max_upload_bytes=1024,
    )


@pytest.fixture
def client(config) -> Iterator[TestClient]:
    app = create_fastapi_app(App(config), config)
    with TestClient(app) as test_client:
        yield test_client


def login_headers(client: TestClient, username: str, password: str) -> dict[str, str]:
    """Log in and return an Authorization header; the cookie jar is left empty."""
    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    token = response.cookies["session_token"]
    client.cookies.clear()
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def owner_headers(client) -> dict[str, str]:
    return login_headers(client, *OWNER)


@pytest.fixture
def viewer_headers(client) -> dict[str, str]:
    return login_headers(client, *VIEWER)
