from __future__ import annotations

import os
import shutil
import tempfile

# la URL tiene que estar antes de importar app.core.config
_DB_DIR = tempfile.mkdtemp(prefix="clinic-directory-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/directory.db"

import httpx
import pytest_asyncio

from app.client.directory import DirectoryClient
from app.core.db import SessionLocal, create_schema, drop_schema, engine
from app.main import app
from app.services.catalog import seed_catalog


def pytest_sessionfinish(session, exitstatus):
    shutil.rmtree(_DB_DIR, ignore_errors=True)


@pytest_asyncio.fixture()
async def seeded():
    """Fresh schema with the master catalog and the three sample clinics."""
    await drop_schema()
    await create_schema()
    async with SessionLocal() as session:
        await seed_catalog(session)
    yield
    app.dependency_overrides.clear()
    await engine.dispose()


@pytest_asyncio.fixture()
async def db(seeded):
    async with SessionLocal() as session:
        yield session


@pytest_asyncio.fixture()
async def client(seeded):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest_asyncio.fixture()
async def directory(client):
    return DirectoryClient(client)
