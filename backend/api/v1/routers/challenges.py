"""
Challenges Router — browse the guide and grade queries.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from api.deps import get_catalog, get_grader, require_local_env
from core.config import Settings, get_settings
from curriculum.catalog import Catalog
from curriculum.parser import Challenge
from grading.runner import ChallengeGrader
from grading.statements import StatementSplitError, split_statements

router = APIRouter(prefix="/api/v1/challenges", tags=["challenges"])


# ─── Schemas ────────────────────────────────────────────────────────────────


class ChallengeSummary(BaseModel):
    key: str
    part: int
    number: int
    title: str
    topics: list[str]


class ChallengeDetail(ChallengeSummary):
    problem: str
    expected: str
    solution: str
    notes: str


class GradeRequest(BaseModel):
    sql: str | None = Field(None, description="Query to grade; the reference solution when omitted")


class GradeResponse(BaseModel):
    key: str
    status: str
    messages: list[str]
    columns: list[str]
    rows: list[list[str | None]]
    statuses: list[str]
    duration_ms: float


def _summary(challenge: Challenge) -> ChallengeSummary:
    return ChallengeSummary(
        key=challenge.key,
        part=challenge.part,
        number=challenge.number,
        title=challenge.title,
        topics=challenge.topics,
    )


def _writes_data(sql: str) -> bool:
    try:
        return not all(s.read_only for s in split_statements(sql))
    except StatementSplitError:
        # reported by the grader without running anything
        return False


def _lookup(catalog: Catalog, key: str) -> Challenge:
    try:
        return catalog.get(key)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Challenge {key} not found")


# ─── Endpoints ──────────────────────────────────────────────────────────────


@router.get("/", response_model=list[ChallengeSummary])
async def list_challenges(
    part: int | None = Query(None, ge=1),
    catalog: Catalog = Depends(get_catalog),
):
    """List challenges, optionally for one part."""
    if part is None:
        return [_summary(c) for c in catalog]
    try:
        challenges = catalog.for_part(part)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Part {part} not found")
    return [_summary(c) for c in challenges]


@router.get("/{key}", response_model=ChallengeDetail)
async def get_challenge(key: str, catalog: Catalog = Depends(get_catalog)):
    challenge = _lookup(catalog, key)
    return ChallengeDetail(
        **_summary(challenge).model_dump(),
        problem=challenge.problem,
        expected=challenge.expected,
        solution=challenge.solution,
        notes=challenge.notes,
    )


@router.post("/{key}/grade", response_model=GradeResponse)
async def grade_challenge(
    key: str,
    body: GradeRequest | None = None,
    catalog: Catalog = Depends(get_catalog),
    grader: ChallengeGrader = Depends(get_grader),
    settings: Settings = Depends(get_settings),
):
    """Run a query (or the reference solution) and compare it with the expected output.

    Scripts that modify data end with a reseed, so outside local environments
    only read-only scripts are graded.
    """
    challenge = _lookup(catalog, key)
    sql = body.sql if body else None
    if _writes_data(sql if sql is not None else challenge.solution):
        require_local_env(settings)
    result = await grader.grade(challenge, sql=sql)
    return result.to_dict()
