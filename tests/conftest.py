import httpx
import pytest
from httpx import ASGITransport

from booking_api.app.core.config import settings
from booking_api.app.core.db import init_db
from booking_api.app.core.security import Actor, hash_password
from booking_api.app.repositories.user_repository import UserRepository
from booking_api.app.schemas.user import Role


@pytest.fixture
def db(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file with all migrations applied."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "test.db"))
    init_db()
    return tmp_path / "test.db"


@pytest.fixture
def admin(db) -> Actor:
    user_id = UserRepository.create("admin", hash_password("admin-pass"), Role.ADMIN.value)
    return Actor(user_id=user_id, username="admin", role=Role.ADMIN)


@pytest.fixture
def alice(db) -> Actor:
    user_id = UserRepository.create("alice", hash_password("alice-pass"), Role.USER.value)
    return Actor(user_id=user_id, username="alice", role=Role.USER)


@pytest.fixture
def bob(db) -> Actor:
    user_id = UserRepository.create("bob", hash_password("bob-pass"), Role.USER.value)
    return Actor(user_id=user_id, username="bob", role=Role.USER)


@pytest.fixture
async def client(db):
    from booking_api.app.main import app

    async with httpx.AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
