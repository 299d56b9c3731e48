"""
company_db Seeder

Rebuilds the practice database from scratch: drops every view and table
(including objects created while working through the guide), recreates
the schema from db.models, loads db.sample_data and recreates the views.

Running it twice leaves identical row counts, so it doubles as the
"reset" button after data-modification challenges.
"""

from datetime import date
from decimal import Decimal

import structlog
from sqlalchemy import Date, Numeric, Table, func, inspect, select, text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

import db.models  # noqa: F401  (registers tables on Base.metadata)
from db.sample_data import DEPARTMENT_MANAGERS, SAMPLE_ROWS
from db.session import Base
from db.views import VIEW_NAMES, create_views

logger = structlog.get_logger()

COMPLETION_QUERY = """
SELECT
    'Database setup completed successfully!' AS message,
    (SELECT COUNT(*) FROM employees) AS employee_count,
    (SELECT COUNT(*) FROM customers) AS customer_count,
    (SELECT COUNT(*) FROM products) AS product_count,
    (SELECT COUNT(*) FROM orders) AS order_count
""".strip()


def coerce_row(table: Table, row: dict) -> dict:
    """Convert literal sample values to the Python types the column expects."""
    coerced = {}
    for key, value in row.items():
        column_type = table.c[key].type
        if value is not None and isinstance(column_type, Numeric):
            value = Decimal(str(value))
        elif isinstance(value, str) and isinstance(column_type, Date):
            value = date.fromisoformat(value)
        coerced[key] = value
    return coerced


def _existing_views(sync_conn) -> tuple[list[str], list[str]]:
    inspector = inspect(sync_conn)
    views = inspector.get_view_names()
    materialized: list[str] = []
    if sync_conn.dialect.name == "postgresql":
        materialized = inspector.get_materialized_view_names()
    return views, materialized


async def reset_schema(conn: AsyncConnection) -> None:
    """Drop all views and company_db tables, then create the schema."""
    is_postgres = conn.dialect.name == "postgresql"
    cascade = " CASCADE" if is_postgres else ""

    views, materialized = await conn.run_sync(_existing_views)
    for name in materialized:
        await conn.exec_driver_sql(f"DROP MATERIALIZED VIEW IF EXISTS {name}{cascade}")
    for name in sorted(set(views) | set(VIEW_NAMES)):
        await conn.exec_driver_sql(f"DROP VIEW IF EXISTS {name}{cascade}")

    for table in reversed(Base.metadata.sorted_tables):
        await conn.exec_driver_sql(f"DROP TABLE IF EXISTS {table.name}{cascade}")

    await conn.run_sync(Base.metadata.create_all)
    logger.info("seed.schema_reset", dialect=conn.dialect.name, views_dropped=len(views) + len(materialized))


async def load_sample_data(conn: AsyncConnection) -> dict[str, int]:
    """Insert the sample rows in dependency order; returns rows inserted per table."""
    tables = Base.metadata.tables
    inserted: dict[str, int] = {}

    for name, rows in SAMPLE_ROWS.items():
        table = tables[name]
        await conn.execute(table.insert(), [coerce_row(table, row) for row in rows])
        inserted[name] = len(rows)

        if name == "employees":
            departments = tables["departments"]
            for department_id, manager_id in DEPARTMENT_MANAGERS.items():
                await conn.execute(
                    departments.update()
                    .where(departments.c.department_id == department_id)
                    .values(manager_id=manager_id)
                )

    return inserted


async def completion_summary(conn: AsyncConnection) -> dict:
    """The message and headline counts printed at the end of the seed script."""
    result = await conn.execute(text(COMPLETION_QUERY))
    return dict(result.mappings().one())


async def table_row_counts(conn: AsyncConnection) -> dict[str, int]:
    counts = {}
    for table in Base.metadata.sorted_tables:
        result = await conn.execute(select(func.count()).select_from(table))
        counts[table.name] = result.scalar_one()
    return counts


async def seed_company_db(engine: AsyncEngine) -> dict:
    """Reset, load and create views in one transaction; returns the completion summary."""
    async with engine.begin() as conn:
        await reset_schema(conn)
        inserted = await load_sample_data(conn)
        await create_views(conn)
        summary = await completion_summary(conn)

    logger.info(
        "seed.completed",
        tables=len(Base.metadata.tables),
        rows=sum(inserted.values()),
        employee_count=summary["employee_count"],
        order_count=summary["order_count"],
    )
    return summary
