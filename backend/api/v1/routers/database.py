"""
Database Router — seed status, integrity audit and reset.
"""

from decimal import Decimal

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from api.deps import get_db, get_engine, get_grader, require_local_env
from core.config import Settings, get_settings
from db.integrity import audit_order_totals
from db.seed import completion_summary, table_row_counts
from grading.runner import ChallengeGrader

logger = structlog.get_logger()

router = APIRouter(prefix="/api/v1/database", tags=["database"])


# ─── Schemas ────────────────────────────────────────────────────────────────


class CompletionSummary(BaseModel):
    message: str
    employee_count: int
    customer_count: int
    product_count: int
    order_count: int


class DatabaseSummary(BaseModel):
    completion: CompletionSummary
    row_counts: dict[str, int]


class OrderTotalMismatchResponse(BaseModel):
    order_id: int
    stored_total: Decimal
    calculated_total: Decimal
    difference: Decimal


# ─── Endpoints ──────────────────────────────────────────────────────────────


@router.get("/summary", response_model=DatabaseSummary)
async def database_summary(engine: AsyncEngine = Depends(get_engine)):
    """Headline counts and the row count of every table."""
    async with engine.connect() as conn:
        completion = await completion_summary(conn)
        row_counts = await table_row_counts(conn)
    return DatabaseSummary(completion=CompletionSummary(**completion), row_counts=row_counts)


@router.get("/integrity", response_model=list[OrderTotalMismatchResponse])
async def order_total_integrity(db: AsyncSession = Depends(get_db)):
    """Orders whose stored total disagrees with their line items."""
    mismatches = await audit_order_totals(db)
    return [
        OrderTotalMismatchResponse(
            order_id=m.order_id,
            stored_total=m.stored_total,
            calculated_total=m.calculated_total,
            difference=m.difference,
        )
        for m in mismatches
    ]


@router.post("/reset", response_model=CompletionSummary)
async def reset_database(
    grader: ChallengeGrader = Depends(get_grader),
    settings: Settings = Depends(get_settings),
):
    """Drop everything and reseed the sample data. Local environments only."""
    require_local_env(settings)
    summary = await grader.reset()
    logger.info("database.reset", app_env=settings.app_env)
    return CompletionSummary(**summary)
