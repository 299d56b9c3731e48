#!/usr/bin/env python3
"""
Grade guide challenges against a seeded company_db.

Without a submission every selected challenge's reference solution is run,
which checks that the guide and the sample data still agree.

Usage:
  python backend/scripts/grade_challenges.py
  python backend/scripts/grade_challenges.py --part 4
  python backend/scripts/grade_challenges.py --challenge 2.7 --sql-file my_answer.sql
  python backend/scripts/grade_challenges.py --json --reseed
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.config import get_settings
from curriculum.catalog import Catalog, load_catalog
from curriculum.parser import Challenge
from db.seed import seed_company_db
from db.session import build_engine
from grading.runner import ERROR, FAILED, PASSED, ChallengeGrader, GradeResult

STATUS_ICONS = {PASSED: "✅", FAILED: "❌", ERROR: "💥"}


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grade company_db guide challenges")
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument("--part", type=int, default=None, help="Only grade this part")
    selection.add_argument("--challenge", default=None, help="Only grade this challenge, e.g. 2.7")
    parser.add_argument("--sql-file", type=Path, default=None, help="Submission to grade (requires --challenge)")
    parser.add_argument("--guide-dir", type=Path, default=None, help="Override GUIDE_DIR")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    parser.add_argument("--reseed", action="store_true", help="Seed company_db before grading")
    parser.add_argument("--json", action="store_true", help="Emit a JSON report on the last line")
    args = parser.parse_args()
    if args.sql_file is not None and args.challenge is None:
        parser.error("--sql-file requires --challenge")
    return args


def select_challenges(catalog: Catalog, part: int | None, challenge: str | None) -> list[Challenge]:
    if challenge is not None:
        return [catalog.get(challenge)]
    if part is not None:
        return catalog.for_part(part)
    return list(catalog)


def _print_result(result: GradeResult) -> None:
    print(f"  {STATUS_ICONS[result.status]} {result.key} ({result.duration_ms:.0f} ms)")
    for message in result.messages:
        print(f"      {message}")


async def _run(args: argparse.Namespace, challenges: list[Challenge]) -> list[GradeResult]:
    settings = get_settings()
    engine = build_engine(args.database_url or settings.database_url)
    grader = ChallengeGrader(
        engine,
        statement_timeout_ms=settings.grader_statement_timeout_ms,
        reseed_after_mutation=settings.grader_reseed_after_mutation,
    )
    try:
        if args.reseed:
            await seed_company_db(engine)
        if args.sql_file is not None:
            sql = args.sql_file.read_text(encoding="utf-8")
            return [await grader.grade(challenges[0], sql=sql)]
        return await grader.grade_many(challenges)
    finally:
        await engine.dispose()


def main() -> int:
    args = _parse_args()
    catalog = load_catalog(args.guide_dir or get_settings().guide_dir)
    try:
        challenges = select_challenges(catalog, args.part, args.challenge)
    except KeyError as exc:
        print(f"❌ {exc.args[0]}")
        return 2

    results = asyncio.run(_run(args, challenges))
    for result in results:
        _print_result(result)

    failed = [r.key for r in results if not r.passed]
    print(f"\n{len(results) - len(failed)}/{len(results)} challenges passed")
    if args.json:
        print(
            json.dumps(
                {
                    "status": "passed" if not failed else "failed",
                    "total": len(results),
                    "passed": len(results) - len(failed),
                    "failed": failed,
                    "results": [r.to_dict() for r in results],
                }
            )
        )
    return 0 if not failed else 1


if __name__ == "__main__":
    raise SystemExit(main())
