"""Tests for configured login accounts."""

import pytest
import pytest_asyncio

from dossier.app import App
from dossier.core.modules.session.models import Role
from dossier.errors import AuthenticationError
from dossier.utils import now_ms


@pytest_asyncio.fixture
async def app(config):
    app = App(config)
    async with app.lifespan():
        yield app


class TestLogin:
    @pytest.mark.asyncio
    async def test_owner_login(self, app):
        issued = await app.login("owner", "owner-secret")
        assert issued.payload.role == Role.OWNER
        assert app.decode_session(issued.token) == issued.payload

    @pytest.mark.asyncio
    async def test_viewer_login(self, app):
        issued = await app.login("recruiter", "viewer-secret")
        assert issued.payload.role == Role.VIEWER
        assert issued.payload.username == "recruiter"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("username", "password"),
        [("owner", "viewer-secret"), ("recruiter", "owner-secret"), ("nobody", "owner-secret"), ("owner", "")],
    )
    async def test_wrong_credentials(self, app, username, password):
        with pytest.raises(AuthenticationError):
            await app.login(username, password)

    @pytest.mark.asyncio
    async def test_session_lasts_eight_hours(self, app):
        issued = await app.login("owner", "owner-secret")
        remaining = issued.payload.expires_at - now_ms()
        assert 8 * 60 * 60 * 1000 - 60_000 < remaining <= 8 * 60 * 60 * 1000


@pytest.mark.asyncio
async def test_owner_wins_when_both_pairs_match(config):
    config = config.model_copy(update={"viewer_username": "owner", "viewer_password": "owner-secret"})
    app = App(config)
    async with app.lifespan():
        issued = await app.login("owner", "owner-secret")
    assert issued.payload.role == Role.OWNER


@pytest.mark.asyncio
async def test_viewer_disabled_without_password(config):
    config = config.model_copy(update={"viewer_password": ""})
    app = App(config)
    async with app.lifespan():
        with pytest.raises(AuthenticationError):
            await app.login("recruiter", "")


class TestLongPasswords:
    """Passwords past bcrypt's 72-byte input limit still compare in full."""

    @pytest_asyncio.fixture
    async def app(self, config):
        config = config.model_copy(update={"owner_password": "A" * 72 + "correct"})
        app = App(config)
        async with app.lifespan():
            yield app

    @pytest.mark.asyncio
    async def test_full_password_accepted(self, app):
        issued = await app.login("owner", "A" * 72 + "correct")
        assert issued.payload.role == Role.OWNER

    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", ["A" * 72 + "WRONG", "A" * 72, "A" * 72 + "correct!"])
    async def test_same_prefix_rejected(self, app, password):
        with pytest.raises(AuthenticationError):
            await app.login("owner", password)
