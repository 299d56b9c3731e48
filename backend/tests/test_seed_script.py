"""
Tests for the exported PostgreSQL setup script.
"""

from datetime import datetime, timezone

import pytest

from db.seed_script import DROP_ORDER, render_seed_script
from db.session import Base


@pytest.fixture(scope="module")
def script():
    return render_seed_script(generated_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc))


def test_header_and_completion(script):
    assert script.startswith("-- company_db: SQL practice database")
    assert "-- Generated 2024-05-01 12:00 UTC" in script
    assert script.rstrip().endswith("AS order_count;")


def test_drops_every_table(script):
    assert sorted(DROP_ORDER) == sorted(Base.metadata.tables)
    assert script.count("DROP TABLE IF EXISTS") == 26


def test_creates_tables_then_deferred_manager_fk(script):
    assert script.count("CREATE TABLE") == 26
    create_departments = script.index("CREATE TABLE departments")
    add_manager_fk = script.index("ADD CONSTRAINT fk_dept_manager")
    assert create_departments < add_manager_fk < script.index("INSERT INTO locations")


def test_sample_rows_and_manager_updates(script):
    assert "'john.smith@company.com'" in script
    assert "UPDATE departments SET manager_id = 4 WHERE department_id = 2;" in script
    assert script.index("INSERT INTO employees") < script.index("UPDATE departments SET manager_id")


def test_indexes_and_views(script):
    assert script.count("CREATE INDEX") == 20
    assert "lower(email)" in script
    assert "WHERE status = 'ACTIVE'" in script
    assert script.count("CREATE OR REPLACE VIEW") == 3
    assert script.index("CREATE INDEX") < script.index("CREATE OR REPLACE VIEW")
