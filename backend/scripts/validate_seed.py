#!/usr/bin/env python3
"""
Validate a seeded company_db.

Checks:
  - completion summary counts
  - per-table row counts against the sample data
  - the three views exist and return rows
  - reseeding is idempotent
  - the order-total audit finds the known drift

Usage:
  python backend/scripts/validate_seed.py
  python backend/scripts/validate_seed.py --database-url sqlite+aiosqlite:///company.db --reseed
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import dataclass
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from sqlalchemy import inspect
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from core.config import get_settings
from db.integrity import audit_order_totals
from db.sample_data import EXPECTED_ROW_COUNTS
from db.seed import completion_summary, seed_company_db, table_row_counts
from db.session import build_engine
from db.views import VIEW_NAMES

EXPECTED_COMPLETION = {
    "employee_count": 37,
    "customer_count": 15,
    "product_count": 25,
    "order_count": 20,
}
EXPECTED_TOTAL_MISMATCHES = 14


@dataclass
class ValidationSummary:
    checks_run: int = 0
    checks_passed: int = 0
    checks_failed: int = 0

    def pass_check(self) -> None:
        self.checks_run += 1
        self.checks_passed += 1

    def fail_check(self) -> None:
        self.checks_run += 1
        self.checks_failed += 1


def expect(condition: bool, message: str, summary: ValidationSummary) -> None:
    if condition:
        print(f"  ✅ {message}")
        summary.pass_check()
    else:
        print(f"  ❌ {message}")
        summary.fail_check()


async def validate_completion(engine: AsyncEngine, summary: ValidationSummary) -> None:
    print("\n[1/5] Validating completion summary...")
    async with engine.connect() as conn:
        completion = await completion_summary(conn)
    for key, expected in EXPECTED_COMPLETION.items():
        expect(completion[key] == expected, f"{key} = {completion[key]} (expected {expected})", summary)


async def validate_row_counts(engine: AsyncEngine, summary: ValidationSummary) -> dict[str, int]:
    print("\n[2/5] Validating table row counts...")
    async with engine.connect() as conn:
        counts = await table_row_counts(conn)
    for table, count in counts.items():
        expected = EXPECTED_ROW_COUNTS.get(table, 0)
        expect(count == expected, f"{table}: {count} rows (expected {expected})", summary)
    return counts


async def validate_views(engine: AsyncEngine, summary: ValidationSummary) -> None:
    print("\n[3/5] Validating views...")
    async with engine.connect() as conn:
        present = set(await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_view_names()))
        for name in VIEW_NAMES:
            expect(name in present, f"View exists: {name}", summary)
            if name in present:
                result = await conn.exec_driver_sql(f"SELECT COUNT(*) FROM {name}")
                expect(result.scalar_one() > 0, f"View returns rows: {name}", summary)


async def validate_idempotency(engine: AsyncEngine, before: dict[str, int], summary: ValidationSummary) -> None:
    print("\n[4/5] Validating reseed idempotency...")
    await seed_company_db(engine)
    await seed_company_db(engine)
    async with engine.connect() as conn:
        after = await table_row_counts(conn)
    changed = sorted(t for t in before if before[t] != after.get(t))
    expect(not changed, f"Row counts unchanged after reseeding twice {changed or ''}".rstrip(), summary)


async def validate_order_totals(engine: AsyncEngine, summary: ValidationSummary) -> None:
    print("\n[5/5] Validating order total audit...")
    async with AsyncSession(engine) as db:
        mismatches = await audit_order_totals(db)
    expect(
        len(mismatches) == EXPECTED_TOTAL_MISMATCHES,
        f"{len(mismatches)} orders with drifted totals (expected {EXPECTED_TOTAL_MISMATCHES})",
        summary,
    )


async def _run(database_url: str, reseed: bool) -> ValidationSummary:
    summary = ValidationSummary()
    engine = build_engine(database_url)
    try:
        if reseed:
            print("Seeding company_db...")
            await seed_company_db(engine)
        await validate_completion(engine, summary)
        counts = await validate_row_counts(engine, summary)
        await validate_views(engine, summary)
        await validate_idempotency(engine, counts, summary)
        await validate_order_totals(engine, summary)
    except DBAPIError as exc:
        print(f"  ❌ Database query failed: {exc.orig}")
        summary.fail_check()
    finally:
        await engine.dispose()
    return summary


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate a seeded company_db")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    parser.add_argument("--reseed", action="store_true", help="Seed before validating")
    args = parser.parse_args()

    database_url = args.database_url or get_settings().database_url
    summary = asyncio.run(_run(database_url, args.reseed))

    status = "passed" if summary.checks_failed == 0 else "failed"
    print(
        json.dumps(
            {
                "status": status,
                "checks_run": summary.checks_run,
                "checks_passed": summary.checks_passed,
                "checks_failed": summary.checks_failed,
            }
        )
    )
    return 0 if status == "passed" else 1


if __name__ == "__main__":
    raise SystemExit(main())
