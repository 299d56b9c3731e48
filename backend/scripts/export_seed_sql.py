#!/usr/bin/env python3
"""
Export the PostgreSQL setup script for company_db.

The script is rendered from the same models and sample data the seeder
uses, so `psql -f` on the output builds an identical database.

Usage:
  python backend/scripts/export_seed_sql.py --output company_db.sql
  python backend/scripts/export_seed_sql.py > company_db.sql
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from db.seed_script import render_seed_script


def main() -> int:
    parser = argparse.ArgumentParser(description="Render the company_db PostgreSQL setup script")
    parser.add_argument("--output", type=Path, default=None, help="Write to this file instead of stdout")
    args = parser.parse_args()

    script = render_seed_script()
    if args.output is None:
        sys.stdout.write(script)
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(script, encoding="utf-8")
    print(f"Wrote {args.output} ({len(script.splitlines())} lines)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
