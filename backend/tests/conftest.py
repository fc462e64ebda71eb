"""
Pytest configuration and shared fixtures.

Every test gets its own SQLite database file and a Storage bound to it.
Simulated delays are switched off so background runs finish immediately.
"""

from datetime import datetime
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.config import settings
from app.db.database import create_tables, seed_brokers
from app.db.storage import Storage
from app.workers.runner import wait_for_background_tasks


# ── Settings ─────────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def fast_simulation(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "scan_delay_seconds", 0)
    monkeypatch.setattr(settings, "removal_delay_min_seconds", 0)
    monkeypatch.setattr(settings, "removal_delay_max_seconds", 0)
    monkeypatch.setattr(settings, "mark_stalled_runs_failed", True)


# ── Database ─────────────────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker, None]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await create_tables(engine)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await wait_for_background_tasks(timeout=10)
    await engine.dispose()


@pytest_asyncio.fixture
async def storage(session_factory) -> Storage:
    return Storage(session_factory)


@pytest_asyncio.fixture
async def seeded_storage(session_factory, storage) -> Storage:
    """Storage with the full broker catalog loaded."""
    await seed_brokers(session_factory)
    return storage


# ── Sample data ──────────────────────────────────────────────────────────────

def user_payload(**overrides) -> dict:
    data = {
        "first_name": "John",
        "last_name": "Doe",
        "email": "j@d.com",
        "phone": "555-123-4567",
        "date_of_birth": "1985-04-12",
        "current_address": "123 Main St",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62704",
        "previous_addresses": None,
    }
    data.update(overrides)
    return data


def broker_values(position: int, **overrides) -> dict:
    data = {
        "position": position,
        "name": f"Broker {position}",
        "url": f"https://broker{position}.example.com/",
        "category": "people-search",
        "priority": "medium",
        "opt_out_url": f"https://broker{position}.example.com/optout",
        "opt_out_process": "Submit opt-out form",
        "required_info": ["Full Name", "Phone Number"],
        "estimated_processing_time": "7-14 days",
        "difficulty_rating": 2,
    }
    data.update(overrides)
    return data


@pytest_asyncio.fixture
async def user(storage):
    return await storage.create_user(**user_payload())


@pytest_asyncio.fixture
async def make_scan(storage):
    """Create a scan record without starting the background run."""

    async def _make_scan(user_id: str, created_at: datetime | None = None, **values):
        if created_at is not None:
            values["created_at"] = created_at
        return await storage.create_scan(user_id=user_id, status="running", **values)

    return _make_scan


# ── HTTP ─────────────────────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def make_client(seeded_storage):
    """Factory for API clients; each client keeps its own session cookie."""
    from app.api.deps import get_storage
    from app.main import app

    app.dependency_overrides[get_storage] = lambda: seeded_storage
    clients: list[AsyncClient] = []

    def _make_client() -> AsyncClient:
        client = AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")
        clients.append(client)
        return client

    yield _make_client

    await wait_for_background_tasks(timeout=10)
    for client in clients:
        await client.aclose()
    app.dependency_overrides.clear()
