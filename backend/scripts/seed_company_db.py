#!/usr/bin/env python3
"""
Drop and rebuild the company_db practice database.

Usage:
  python backend/scripts/seed_company_db.py
  python backend/scripts/seed_company_db.py --database-url sqlite+aiosqlite:///company.db
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.config import get_settings
from db.seed import seed_company_db, table_row_counts
from db.session import build_engine


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drop and reseed company_db")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    return parser.parse_args()


async def _run(database_url: str) -> dict:
    engine = build_engine(database_url)
    try:
        summary = await seed_company_db(engine)
        async with engine.connect() as conn:
            row_counts = await table_row_counts(conn)
    finally:
        await engine.dispose()
    return {"status": "ok", "completion": summary, "row_counts": row_counts}


def main() -> int:
    args = _parse_args()
    database_url = args.database_url or get_settings().database_url
    payload = asyncio.run(_run(database_url))
    print(payload["completion"]["message"])
    print(json.dumps(payload, indent=2 if args.pretty else None, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
