"""
Challenge Grader

Runs a challenge's reference solution (or a learner's submission) against
company_db and diffs the result with the documented expected output.

Read-only scripts run inside a transaction that is always rolled back.
Reads may overlap each other but never a write or a reseed.
Scripts that write run on an AUTOCOMMIT connection so their own
BEGIN / COMMIT / ROLLBACK / SAVEPOINT statements behave as in psql; the
connection is discarded afterwards and the database is reseeded, so every
challenge starts from the same sample data.
"""

import asyncio
import time
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import structlog
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from curriculum.parser import Challenge
from db.seed import seed_company_db
from grading.compare import compare_statuses, compare_table, format_cell
from grading.expected import ExpectedOutputError, StatusTag, parse_expected_output
from grading.statements import Statement, StatementSplitError, split_statements

logger = structlog.get_logger()

PASSED = "passed"
FAILED = "failed"
ERROR = "error"


@dataclass
class ExecutionOutcome:
    columns: list[str] = field(default_factory=list)
    rows: list[list] = field(default_factory=list)
    statuses: list[StatusTag] = field(default_factory=list)
    result_statement: Statement | None = None


@dataclass
class GradeResult:
    key: str
    status: str
    messages: list[str] = field(default_factory=list)
    columns: list[str] = field(default_factory=list)
    rows: list[list[str | None]] = field(default_factory=list)
    statuses: list[str] = field(default_factory=list)
    duration_ms: float = 0.0

    @property
    def passed(self) -> bool:
        return self.status == PASSED

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "status": self.status,
            "messages": self.messages,
            "columns": self.columns,
            "rows": self.rows,
            "statuses": self.statuses,
            "duration_ms": round(self.duration_ms, 2),
        }


class ReadWriteGate:
    """Many concurrent readers or one writer; waiting writers block new readers."""

    def __init__(self):
        self._condition = asyncio.Condition()
        self._readers = 0
        self._writing = False
        self._writers_waiting = 0

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def writing(self) -> bool:
        return self._writing

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._condition:
            await self._condition.wait_for(lambda: not self._writing and not self._writers_waiting)
            self._readers += 1
        try:
            yield
        finally:
            async with self._condition:
                self._readers -= 1
                self._condition.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._condition:
            self._writers_waiting += 1
            try:
                await self._condition.wait_for(lambda: not self._writing and self._readers == 0)
            finally:
                self._writers_waiting -= 1
            self._writing = True
        try:
            yield
        finally:
            async with self._condition:
                self._writing = False
                self._condition.notify_all()


class ChallengeGrader:
    def __init__(
        self,
        engine: AsyncEngine,
        statement_timeout_ms: int = 15000,
        reseed_after_mutation: bool = True,
    ):
        self.engine = engine
        self.statement_timeout_ms = statement_timeout_ms
        self.reseed_after_mutation = reseed_after_mutation
        self.gate = ReadWriteGate()

    async def _execute(self, conn: AsyncConnection, statements: list[Statement]) -> ExecutionOutcome:
        outcome = ExecutionOutcome()
        if conn.dialect.name == "postgresql" and self.statement_timeout_ms:
            await conn.exec_driver_sql(f"SET statement_timeout = {int(self.statement_timeout_ms)}")

        for statement in statements:
            result = await conn.exec_driver_sql(statement.text)
            if result.returns_rows:
                outcome.columns = list(result.keys())
                outcome.rows = [list(row) for row in result.fetchall()]
                outcome.result_statement = statement
                outcome.statuses.append(StatusTag(statement.command, len(outcome.rows)))
            else:
                rowcount = result.rowcount if result.rowcount is not None and result.rowcount >= 0 else None
                outcome.statuses.append(StatusTag(statement.command, rowcount))
        return outcome

    async def _run_read_only(self, statements: list[Statement]) -> ExecutionOutcome:
        async with self.gate.read():
            async with self.engine.connect() as conn:
                trans = await conn.begin()
                try:
                    return await self._execute(conn, statements)
                finally:
                    await trans.rollback()

    async def _reseed(self) -> dict:
        summary = await seed_company_db(self.engine)
        # pooled connections cache prepared statements for the dropped tables
        await self.engine.dispose()
        logger.info("grader.reseeded")
        return summary

    async def _run_mutating(self, statements: list[Statement]) -> ExecutionOutcome:
        async with self.gate.write():
            try:
                async with self.engine.connect() as conn:
                    autocommit = await conn.execution_options(isolation_level="AUTOCOMMIT")
                    try:
                        return await self._execute(autocommit, statements)
                    finally:
                        # no open transaction or session setting may leak into the pool
                        await conn.invalidate()
            finally:
                if self.reseed_after_mutation:
                    await self._reseed()

    async def reset(self) -> dict:
        """Reseed company_db once no grading run is in flight."""
        async with self.gate.write():
            return await self._reseed()

    def _evaluate(self, expected, outcome: ExecutionOutcome) -> tuple[str, list[str]]:
        if expected.kind == "any":
            return PASSED, ["output is plan dependent and was not compared"]

        if expected.kind == "status":
            problems = compare_statuses(expected.statuses, outcome.statuses)
            return (FAILED, problems) if problems else (PASSED, [])

        if outcome.result_statement is None:
            return FAILED, ["no statement returned rows"]
        ordered = outcome.result_statement.has_top_level_order_by
        problems = compare_table(expected, outcome.columns, outcome.rows, ordered=ordered)
        return (FAILED, problems) if problems else (PASSED, [])

    async def grade(self, challenge: Challenge, sql: str | None = None) -> GradeResult:
        """Grade the reference solution, or `sql` when a submission is given."""
        started = time.perf_counter()
        result = GradeResult(key=challenge.key, status=ERROR)

        try:
            expected = parse_expected_output(challenge.expected)
            statements = split_statements(sql if sql is not None else challenge.solution)
        except (ExpectedOutputError, StatementSplitError) as exc:
            result.messages = [str(exc)]
            return self._finish(result, started)

        if not statements:
            result.messages = ["no SQL statements to run"]
            return self._finish(result, started)

        read_only = all(s.read_only for s in statements)
        try:
            if read_only:
                outcome = await self._run_read_only(statements)
            else:
                outcome = await self._run_mutating(statements)
        except DBAPIError as exc:
            result.messages = [str(exc.orig).strip() if exc.orig is not None else str(exc)]
            return self._finish(result, started)

        result.columns = outcome.columns
        result.rows = [[None if cell is None else format_cell(cell) for cell in row] for row in outcome.rows]
        result.statuses = [str(tag) for tag in outcome.statuses]
        result.status, result.messages = self._evaluate(expected, outcome)
        return self._finish(result, started)

    def _finish(self, result: GradeResult, started: float) -> GradeResult:
        result.duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "grader.challenge_graded",
            key=result.key,
            status=result.status,
            duration_ms=round(result.duration_ms, 2),
        )
        return result

    async def grade_many(self, challenges: Iterable[Challenge]) -> list[GradeResult]:
        results = [await self.grade(challenge) for challenge in challenges]
        logger.info(
            "grader.run_completed",
            total=len(results),
            passed=sum(r.status == PASSED for r in results),
            failed=sum(r.status == FAILED for r in results),
            errors=sum(r.status == ERROR for r in results),
        )
        return results
