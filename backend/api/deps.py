"""
company_db Guide API Dependencies

Dependency injection for DB sessions, the engine, the challenge catalog
and the grader.
"""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from core.config import Settings, get_settings
from curriculum.catalog import Catalog, load_catalog
from db.session import AsyncSessionLocal, engine
from grading.runner import ChallengeGrader


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


def get_engine() -> AsyncEngine:
    return engine


@lru_cache
def get_catalog() -> Catalog:
    """Parsed guide, loaded once per process."""
    return load_catalog(get_settings().guide_dir)


@lru_cache
def get_grader() -> ChallengeGrader:
    """Single grader per process so mutating runs share one lock."""
    settings = get_settings()
    return ChallengeGrader(
        engine,
        statement_timeout_ms=settings.grader_statement_timeout_ms,
        reseed_after_mutation=settings.grader_reseed_after_mutation,
    )


LOCAL_ONLY_DETAIL = "Database reset is disabled outside local/dev/test"


def require_local_env(settings: Settings) -> None:
    """Anything that rewrites company_db is refused outside local environments."""
    if not settings.is_local:
        raise HTTPException(status_code=403, detail=LOCAL_ONLY_DETAIL)
