"""
company_db Database Models

26 tables for the SQL practice guide's fictitious company.
Every challenge in guide/ runs against these tables after db.seed has
loaded the sample rows.

Tables:
  Core Business (1-8):
  1. locations          - Office addresses
  2. departments        - Org units (manager_id added after employees exist)
  3. employees          - Self-referencing reporting hierarchy
  4. customers          - Tiered B2B customers (GOLD, SILVER, BRONZE)
  5. products           - Catalog with price/cost/stock
  6. orders             - Sales orders (stored total, see order_items)
  7. order_items        - Order lines (cascade-deleted with their order)
  8. inventory          - Warehouse stock per product

  Financial (9-11):
  9. accounts           - Customer bank accounts for transaction examples
  10. sales             - Flat fact table for analytics examples
  11. exchange_rates    - Currency conversion rates

  Audit and Logging (12-17):
  12. employee_audit    - Trigger target for employee changes (JSONB)
  13. order_audit       - Trigger/archive target for orders
  14. transaction_log   - Money transfer ledger
  15. inventory_log     - Stock movement log
  16. error_log         - ETL rejects
  17. audit_log         - General purpose order actions

  Specialized (18-26):
  18. bill_of_materials - Component/part graph for recursive queries
  19. flights           - Route graph for path finding
  20. report_jobs       - Async report processing
  21. invoices          - Billing documents
  22. usage_charges     - Metered charges awaiting invoicing
  23. notification_queue - Outbound customer notifications (JSONB)
  24. batch_log         - Batch process runs
  25. billing_errors    - Billing batch rejects
  26. trigger_debug_log - Trigger tracing (JSONB)
"""

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from db.session import Base

# JSONB on PostgreSQL, JSON text everywhere else
JSONType = JSON().with_variant(JSONB(), "postgresql")


def created_at_column() -> Column:
    return Column(DateTime, server_default=func.now())


# ─── 1. Locations ──────────────────────────────────────────────────────────


class Location(Base):
    __tablename__ = "locations"

    location_id = Column(Integer, primary_key=True)
    street_address = Column(String(100))
    city = Column(String(50))
    state_province = Column(String(50))
    country = Column(String(50))
    postal_code = Column(String(20))
    created_at = created_at_column()


# ─── 2. Departments ────────────────────────────────────────────────────────


class Department(Base):
    __tablename__ = "departments"

    department_id = Column(Integer, primary_key=True)
    department_name = Column(String(100), nullable=False)
    location_id = Column(Integer, ForeignKey("locations.location_id"))
    # Cycle with employees.department_id: created by ALTER once both tables exist
    manager_id = Column(
        Integer,
        ForeignKey("employees.employee_id", use_alter=True, name="fk_dept_manager"),
    )
    budget = Column(Numeric(12, 2))
    created_at = created_at_column()


# ─── 3. Employees ──────────────────────────────────────────────────────────


class Employee(Base):
    __tablename__ = "employees"

    employee_id = Column(Integer, primary_key=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), unique=True)
    phone_number = Column(String(20))
    hire_date = Column(Date, server_default=func.current_date())
    job_title = Column(String(50))
    salary = Column(Numeric(10, 2))
    commission_pct = Column(Numeric(3, 2))
    manager_id = Column(Integer, ForeignKey("employees.employee_id"))
    department_id = Column(Integer, ForeignKey("departments.department_id"))
    status = Column(String(20), server_default="ACTIVE")
    deleted_at = Column(DateTime)
    updated_at = Column(DateTime)
    created_at = created_at_column()

    manager = relationship("Employee", remote_side=[employee_id], back_populates="direct_reports")
    direct_reports = relationship("Employee", back_populates="manager")


# ─── 4. Customers ──────────────────────────────────────────────────────────


class Customer(Base):
    __tablename__ = "customers"

    customer_id = Column(Integer, primary_key=True)
    customer_name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True)
    phone = Column(String(20))
    tier = Column(String(20), server_default="BRONZE")  # GOLD, SILVER, BRONZE
    credit_limit = Column(Numeric(10, 2), server_default=text("5000"))
    current_balance = Column(Numeric(10, 2), server_default=text("0"))
    status = Column(String(20), server_default="ACTIVE")
    billing_day = Column(Integer, server_default=text("1"))
    deleted_at = Column(DateTime)
    created_at = created_at_column()


# ─── 5. Products ───────────────────────────────────────────────────────────


class Product(Base):
    __tablename__ = "products"

    product_id = Column(Integer, primary_key=True)
    product_name = Column(String(100), nullable=False)
    category_id = Column(Integer)
    description = Column(Text)
    price = Column(Numeric(10, 2), CheckConstraint("price >= 0"), nullable=False)
    cost = Column(Numeric(10, 2))
    quantity = Column(Integer, server_default=text("0"))
    status = Column(String(20), server_default="ACTIVE")
    version = Column(Integer, server_default=text("0"))  # optimistic locking
    created_at = created_at_column()
    updated_at = Column(DateTime)


# ─── 6. Orders ─────────────────────────────────────────────────────────────


class Order(Base):
    __tablename__ = "orders"

    order_id = Column(Integer, primary_key=True)
    order_number = Column(String(50), unique=True)
    customer_id = Column(Integer, ForeignKey("customers.customer_id"))
    employee_id = Column(Integer, ForeignKey("employees.employee_id"))
    order_date = Column(Date, server_default=func.current_date())
    required_date = Column(Date)
    shipped_date = Column(Date)
    status = Column(String(20), server_default="pending")  # pending, processing, shipped, delivered, cancelled
    total = Column(Numeric(10, 2), server_default=text("0"))
    order_sequence = Column(Integer)
    deleted_at = Column(DateTime)
    created_at = created_at_column()
    updated_at = Column(DateTime)

    items = relationship("OrderItem", back_populates="order", order_by="OrderItem.order_item_id")


# ─── 7. Order Items ────────────────────────────────────────────────────────


class OrderItem(Base):
    __tablename__ = "order_items"

    order_item_id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.order_id", ondelete="CASCADE"))
    product_id = Column(Integer, ForeignKey("products.product_id"))
    quantity = Column(Integer, CheckConstraint("quantity > 0"), nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    discount = Column(Numeric(4, 2), server_default=text("0"))
    created_at = created_at_column()

    order = relationship("Order", back_populates="items")


# ─── 8. Inventory ──────────────────────────────────────────────────────────


class Inventory(Base):
    __tablename__ = "inventory"

    product_id = Column(Integer, ForeignKey("products.product_id"), primary_key=True, autoincrement=False)
    quantity = Column(Integer, CheckConstraint("quantity >= 0"), server_default=text("0"))
    reorder_level = Column(Integer, server_default=text("10"))
    warehouse_location = Column(String(50))
    updated_at = Column(DateTime)


# ─── 9. Accounts ───────────────────────────────────────────────────────────


class Account(Base):
    __tablename__ = "accounts"

    account_id = Column(Integer, primary_key=True)
    account_number = Column(String(20), unique=True)
    customer_id = Column(Integer, ForeignKey("customers.customer_id"))
    account_type = Column(String(20))  # checking, savings
    balance = Column(Numeric(12, 2), server_default=text("0"))
    status = Column(String(20), server_default="ACTIVE")
    created_at = created_at_column()


# ─── 10. Sales ─────────────────────────────────────────────────────────────


class Sale(Base):
    __tablename__ = "sales"

    sale_id = Column(Integer, primary_key=True)
    product_category = Column(String(50))
    region = Column(String(50))
    customer_segment = Column(String(50))
    sale_date = Column(Date)
    sale_amount = Column(Numeric(10, 2))
    quarter = Column(Integer)
    created_at = created_at_column()


# ─── 11. Exchange Rates ────────────────────────────────────────────────────


class ExchangeRate(Base):
    __tablename__ = "exchange_rates"

    currency_code = Column(String(3), primary_key=True)
    rate = Column(Numeric(10, 6))
    updated_at = Column(DateTime, server_default=func.now())


# ─── 12. Employee Audit ────────────────────────────────────────────────────


class EmployeeAudit(Base):
    __tablename__ = "employee_audit"

    audit_id = Column(Integer, primary_key=True)
    employee_id = Column(Integer)
    operation = Column(String(10))
    old_values = Column(JSONType)
    new_values = Column(JSONType)
    changed_by = Column(String(100))
    changed_at = Column(DateTime, server_default=func.now())


# ─── 13. Order Audit ───────────────────────────────────────────────────────


class OrderAudit(Base):
    __tablename__ = "order_audit"

    audit_id = Column(Integer, primary_key=True)
    order_id = Column(Integer)
    operation = Column(String(10))
    timestamp = Column(DateTime, server_default=func.now())


# ─── 14. Transaction Log ───────────────────────────────────────────────────


class TransactionLog(Base):
    __tablename__ = "transaction_log"

    transaction_id = Column(Integer, primary_key=True)
    from_account = Column(Integer)
    to_account = Column(Integer)
    amount = Column(Numeric(12, 2))
    timestamp = Column(DateTime, server_default=func.now())


# ─── 15. Inventory Log ─────────────────────────────────────────────────────


class InventoryLog(Base):
    __tablename__ = "inventory_log"

    log_id = Column(Integer, primary_key=True)
    product_id = Column(Integer)
    change_amount = Column(Integer)
    timestamp = Column(DateTime, server_default=func.now())


# ─── 16. Error Log ─────────────────────────────────────────────────────────


class ErrorLog(Base):
    __tablename__ = "error_log"

    error_id = Column(Integer, primary_key=True)
    error_message = Column(Text)
    error_time = Column(DateTime, server_default=func.now())


# ─── 17. Audit Log ─────────────────────────────────────────────────────────


class AuditLog(Base):
    __tablename__ = "audit_log"

    log_id = Column(Integer, primary_key=True)
    order_id = Column(Integer)
    action = Column(String(50))
    timestamp = Column(DateTime, server_default=func.now())


# ─── 18. Bill of Materials ─────────────────────────────────────────────────


class BillOfMaterials(Base):
    __tablename__ = "bill_of_materials"

    component_id = Column(String(20), primary_key=True)
    part_id = Column(String(20), primary_key=True)
    quantity = Column(Integer)


# ─── 19. Flights ───────────────────────────────────────────────────────────


class Flight(Base):
    __tablename__ = "flights"

    flight_id = Column(Integer, primary_key=True)
    origin = Column(String(3))
    destination = Column(String(3))
    distance = Column(Integer)
    price = Column(Numeric(8, 2))


# ─── 20. Report Jobs ───────────────────────────────────────────────────────


class ReportJob(Base):
    __tablename__ = "report_jobs"

    job_id = Column(Integer, primary_key=True)
    user_id = Column(Integer)
    status = Column(String(20))
    created_at = created_at_column()
    completed_at = Column(DateTime)
    result_location = Column(Text)


# ─── 21. Invoices ──────────────────────────────────────────────────────────


class Invoice(Base):
    __tablename__ = "invoices"

    invoice_id = Column(Integer, primary_key=True)
    customer_id = Column(Integer, ForeignKey("customers.customer_id"))
    amount = Column(Numeric(10, 2))
    invoice_date = Column(Date)
    due_date = Column(Date)
    status = Column(String(20), server_default="PENDING")
    created_at = created_at_column()


# ─── 22. Usage Charges ─────────────────────────────────────────────────────


class UsageCharge(Base):
    __tablename__ = "usage_charges"

    charge_id = Column(Integer, primary_key=True)
    customer_id = Column(Integer, ForeignKey("customers.customer_id"))
    amount = Column(Numeric(10, 2))
    charge_date = Column(Date)
    invoiced = Column(Boolean, server_default=text("FALSE"))
    invoice_id = Column(Integer, ForeignKey("invoices.invoice_id"))


# ─── 23. Notification Queue ────────────────────────────────────────────────


class NotificationQueue(Base):
    __tablename__ = "notification_queue"

    notification_id = Column(Integer, primary_key=True)
    customer_id = Column(Integer)
    type = Column(String(50))
    data = Column(JSONType)
    created_at = created_at_column()


# ─── 24. Batch Log ─────────────────────────────────────────────────────────


class BatchLog(Base):
    __tablename__ = "batch_log"

    log_id = Column(Integer, primary_key=True)
    process_name = Column(String(100))
    execution_time = Column(DateTime)
    error_count = Column(Integer, server_default=text("0"))


# ─── 25. Billing Errors ────────────────────────────────────────────────────


class BillingError(Base):
    __tablename__ = "billing_errors"

    error_id = Column(Integer, primary_key=True)
    customer_id = Column(Integer)
    error_message = Column(Text)
    error_time = Column(DateTime, server_default=func.now())


# ─── 26. Trigger Debug Log ─────────────────────────────────────────────────


class TriggerDebugLog(Base):
    __tablename__ = "trigger_debug_log"

    log_id = Column(Integer, primary_key=True)
    trigger_name = Column(String(100))
    table_name = Column(String(100))
    operation = Column(String(20))
    row_data = Column(JSONType)
    timestamp = Column(DateTime, server_default=func.now())


# ─── Indexes ───────────────────────────────────────────────────────────────

# Employee
Index("idx_employees_dept", Employee.department_id)
Index("idx_employees_manager", Employee.manager_id)
Index("idx_employees_salary", Employee.salary)
Index(
    "idx_employees_status",
    Employee.status,
    postgresql_where=text("status = 'ACTIVE'"),
    sqlite_where=text("status = 'ACTIVE'"),
)
Index("idx_employees_email", func.lower(Employee.email))

# Orders
Index("idx_orders_customer", Order.customer_id)
Index("idx_orders_employee", Order.employee_id)
Index("idx_orders_date", Order.order_date)
Index("idx_orders_status", Order.status)

# Order items
Index("idx_order_items_order", OrderItem.order_id)
Index("idx_order_items_product", OrderItem.product_id)

# Products
Index("idx_products_category", Product.category_id)
Index("idx_products_price", Product.price)

# Customers
Index("idx_customers_tier", Customer.tier)
Index("idx_customers_status", Customer.status)

# Accounts
Index("idx_accounts_customer", Account.customer_id)
Index("idx_accounts_number", Account.account_number)

# Sales
Index("idx_sales_date", Sale.sale_date)
Index("idx_sales_region", Sale.region)
Index("idx_sales_category", Sale.product_category)
