"""
Test Configuration — Fixtures for a seeded company_db, the grader and the API client.

Each test gets its own SQLite file database so data-modification
challenges and reseeds never leak between tests.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_catalog, get_db, get_engine, get_grader
from api.main import app
from core.config import DEFAULT_GUIDE_DIR
from curriculum.catalog import load_catalog
from db.seed import seed_company_db
from db.session import build_engine
from grading.runner import ChallengeGrader


@pytest.fixture(scope="session")
def guide_dir():
    return DEFAULT_GUIDE_DIR


@pytest.fixture(scope="session")
def catalog(guide_dir):
    """The real guide, parsed once."""
    return load_catalog(guide_dir)


@pytest.fixture
async def test_engine(tmp_path):
    """Engine on an empty SQLite file database."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'company.db'}")
    yield engine
    await engine.dispose()


@pytest.fixture
async def seeded_engine(test_engine):
    await seed_company_db(test_engine)
    return test_engine


@pytest.fixture
async def test_db(seeded_engine):
    async with AsyncSession(seeded_engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def grader(seeded_engine):
    return ChallengeGrader(seeded_engine)


@pytest.fixture
async def client(seeded_engine, test_db, grader, catalog):
    """Create an async test client with dependency overrides."""

    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_engine] = lambda: seeded_engine
    app.dependency_overrides[get_grader] = lambda: grader
    app.dependency_overrides[get_catalog] = lambda: catalog

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
