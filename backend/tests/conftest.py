"""Shared fixtures: a throwaway SQLite database and an HTTP client wired to it."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.security import create_access_token
from app.db.base import Base, get_db
from app.main import app

OWNER_ID = "user_owner"
OTHER_ID = "user_other"


def auth_headers(user_id: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def owner_headers():
    return auth_headers(OWNER_ID)


@pytest.fixture
def other_headers():
    return auth_headers(OTHER_ID)


@pytest_asyncio.fixture
async def store(client, owner_headers):
    """A store owned by OWNER_ID with one banner and one category."""
    resp = await client.post("/api/stores", json={"name": "Tani Jaya"}, headers=owner_headers)
    assert resp.status_code == 201
    store = resp.json()

    resp = await client.post(
        f"/api/{store['id']}/banners",
        json={"label": "Seeds", "imageUrl": "http://img/banner.png"},
        headers=owner_headers,
    )
    assert resp.status_code == 201
    banner = resp.json()

    resp = await client.post(
        f"/api/{store['id']}/categories",
        json={"name": "Vegetable Seeds", "bannerId": banner["id"]},
        headers=owner_headers,
    )
    assert resp.status_code == 201
    category = resp.json()

    return {"id": store["id"], "banner_id": banner["id"], "category_id": category["id"]}


@pytest_asyncio.fixture
async def other_store(client, other_headers):
    """A second tenant's store, owned by OTHER_ID, with its own banner and category."""
    resp = await client.post("/api/stores", json={"name": "Other Store"}, headers=other_headers)
    store = resp.json()
    resp = await client.post(
        f"/api/{store['id']}/banners",
        json={"label": "Tools", "imageUrl": "http://img/tools.png"},
        headers=other_headers,
    )
    banner = resp.json()
    resp = await client.post(
        f"/api/{store['id']}/categories",
        json={"name": "Tools", "bannerId": banner["id"]},
        headers=other_headers,
    )
    category = resp.json()
    return {"id": store["id"], "banner_id": banner["id"], "category_id": category["id"]}


def product_payload(category_id: str, **overrides) -> dict:
    payload = {
        "name": "Seed A",
        "price": 10000,
        "categoryId": category_id,
        "images": [{"url": "http://x/1.png"}],
    }
    payload.update(overrides)
    return payload
