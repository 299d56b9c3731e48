"""
company_db views.

Plain SQL definitions shared by the seeder (db.seed) and the psql script
exporter (db.seed_script). All three definitions run unchanged on
PostgreSQL and SQLite.
"""

from sqlalchemy.ext.asyncio import AsyncConnection

VIEW_DEFINITIONS: dict[str, str] = {
    "employee_hierarchy_view": """
SELECT
    e.employee_id,
    e.first_name || ' ' || e.last_name AS employee_name,
    e.job_title,
    e.department_id,
    d.department_name,
    m.first_name || ' ' || m.last_name AS manager_name
FROM employees e
LEFT JOIN employees m ON e.manager_id = m.employee_id
LEFT JOIN departments d ON e.department_id = d.department_id
WHERE e.status = 'ACTIVE'
""".strip(),
    "department_stats": """
SELECT
    d.department_id,
    d.department_name,
    COUNT(e.employee_id) AS employee_count,
    AVG(e.salary) AS avg_salary,
    MIN(e.salary) AS min_salary,
    MAX(e.salary) AS max_salary,
    SUM(e.salary) AS total_payroll
FROM departments d
LEFT JOIN employees e ON d.department_id = e.department_id AND e.status = 'ACTIVE'
GROUP BY d.department_id, d.department_name
""".strip(),
    "order_summary": """
SELECT
    o.order_id,
    o.order_date,
    c.customer_name,
    e.first_name || ' ' || e.last_name AS sales_rep,
    o.status,
    COUNT(oi.order_item_id) AS item_count,
    SUM(oi.quantity * oi.unit_price) AS calculated_total,
    o.total AS order_total
FROM orders o
JOIN customers c ON o.customer_id = c.customer_id
LEFT JOIN employees e ON o.employee_id = e.employee_id
LEFT JOIN order_items oi ON o.order_id = oi.order_id
GROUP BY o.order_id, o.order_date, c.customer_name, e.first_name, e.last_name, o.status, o.total
""".strip(),
}

VIEW_NAMES = tuple(VIEW_DEFINITIONS)


async def create_views(conn: AsyncConnection) -> None:
    """(Re)create the three company_db views."""
    for name, body in VIEW_DEFINITIONS.items():
        await conn.exec_driver_sql(f"DROP VIEW IF EXISTS {name}")
        await conn.exec_driver_sql(f"CREATE VIEW {name} AS\n{body}")
