"""
Render the company_db seed script as plain PostgreSQL SQL.

The output is what a learner runs with `psql -d company_db -f`: drop and
create all 26 tables, load the sample rows, add indexes and views, and
finish with the completion query.
"""

from datetime import datetime, timezone

from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import AddConstraint, CreateIndex, CreateTable

import db.models  # noqa: F401  (registers tables on Base.metadata)
from db.sample_data import DEPARTMENT_MANAGERS, SAMPLE_ROWS
from db.seed import COMPLETION_QUERY, coerce_row
from db.session import Base
from db.views import VIEW_DEFINITIONS

DIALECT = postgresql.dialect()

# Drop order of the published script (dependents first)
DROP_ORDER = [
    "trigger_debug_log",
    "billing_errors",
    "batch_log",
    "notification_queue",
    "usage_charges",
    "invoices",
    "error_log",
    "inventory_log",
    "inventory",
    "transaction_log",
    "employee_audit",
    "order_audit",
    "order_items",
    "orders",
    "products",
    "customers",
    "locations",
    "departments",
    "employees",
    "accounts",
    "sales",
    "exchange_rates",
    "bill_of_materials",
    "flights",
    "report_jobs",
    "audit_log",
]


def _compile(element) -> str:
    return str(element.compile(dialect=DIALECT, compile_kwargs={"literal_binds": True})).strip()


def _section(title: str) -> str:
    rule = "-- " + "=" * 60
    return f"{rule}\n-- {title}\n{rule}"


def render_seed_script(generated_at: datetime | None = None) -> str:
    """Return the full seed script for company_db."""
    tables = Base.metadata.tables
    generated_at = generated_at or datetime.now(timezone.utc)
    parts: list[str] = [
        "-- company_db: SQL practice database",
        f"-- Generated {generated_at:%Y-%m-%d %H:%M UTC} by backend/scripts/export_seed_sql.py",
        "-- Usage: psql -d company_db -f company_db.sql",
        "",
        _section("Drop existing tables"),
    ]
    parts += [f"DROP TABLE IF EXISTS {name} CASCADE;" for name in DROP_ORDER]

    parts += ["", _section("Create tables")]
    deferred = []
    for table in Base.metadata.sorted_tables:
        parts.append(_compile(CreateTable(table)) + ";")
        parts.append("")
        deferred += [fk for fk in table.foreign_key_constraints if fk.use_alter]
    for constraint in deferred:
        parts.append(_compile(AddConstraint(constraint)) + ";")

    parts += ["", _section("Sample data")]
    for name, rows in SAMPLE_ROWS.items():
        table = tables[name]
        parts.append(_compile(table.insert().values([coerce_row(table, row) for row in rows])) + ";")
        parts.append("")
        if name == "employees":
            parts += [
                f"UPDATE departments SET manager_id = {manager_id} WHERE department_id = {department_id};"
                for department_id, manager_id in DEPARTMENT_MANAGERS.items()
            ]
            parts.append("")

    parts += [_section("Indexes")]
    for table in Base.metadata.sorted_tables:
        for index in sorted(table.indexes, key=lambda ix: ix.name):
            parts.append(_compile(CreateIndex(index)) + ";")

    parts += ["", _section("Views")]
    for name, body in VIEW_DEFINITIONS.items():
        parts.append(f"CREATE OR REPLACE VIEW {name} AS\n{body};")
        parts.append("")

    parts += [_section("Completion"), COMPLETION_QUERY + ";", ""]
    return "\n".join(parts)
