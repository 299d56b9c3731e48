"""
company_db sample rows.

Fixed data for every challenge in the guide. Rows are listed in insertion
order; SERIAL keys are assigned 1..N in that order, and the guide's expected
outputs depend on those ids.

Order totals are deliberately inconsistent with their line items for 14 of
the 20 orders (see db.integrity and Part 3 Challenge 12).
"""

# Numbers are written as strings where cents matter; db.seed coerces them
# to Decimal/date according to each column's type.


def _rows(columns: tuple[str, ...], values: list[tuple]) -> list[dict]:
    return [dict(zip(columns, row)) for row in values]


# ── Locations ─────────────────────────────────────────

LOCATIONS = _rows(
    ("street_address", "city", "state_province", "country", "postal_code"),
    [
        ("123 Main St", "New York", "NY", "USA", "10001"),
        ("456 Market St", "San Francisco", "CA", "USA", "94102"),
        ("789 Commerce Way", "Chicago", "IL", "USA", "60601"),
        ("321 Tech Blvd", "Seattle", "WA", "USA", "98101"),
        ("654 Innovation Dr", "Austin", "TX", "USA", "73301"),
        ("147 King St", "Toronto", "ON", "Canada", "M5H 1A1"),
        ("258 Oxford St", "London", "", "UK", "W1D 1BS"),
        ("369 Orchard Rd", "Singapore", "", "Singapore", "238874"),
    ],
)

# ── Departments (manager assigned after employees) ────

DEPARTMENTS = _rows(
    ("department_name", "location_id", "budget"),
    [
        ("Executive", 1, "500000.00"),
        ("Sales", 1, "300000.00"),
        ("Marketing", 2, "250000.00"),
        ("Engineering", 2, "800000.00"),
        ("Human Resources", 1, "150000.00"),
        ("Finance", 1, "200000.00"),
        ("Customer Support", 3, "180000.00"),
        ("Operations", 4, "350000.00"),
        ("Research & Development", 2, "600000.00"),
        ("IT", 4, "400000.00"),
    ],
)

# ── Employees ─────────────────────────────────────────

_EMPLOYEES = [
    # first, last, hire_date, job_title, salary, department_id, manager_id
    ("John", "Smith", "2010-01-15", "CEO", "250000.00", 1, None),
    ("Sarah", "Johnson", "2011-03-20", "CFO", "180000.00", 6, 1),
    ("Michael", "Williams", "2011-05-10", "CTO", "200000.00", 4, 1),
    ("Emily", "Brown", "2015-02-15", "VP Sales", "140000.00", 2, 1),
    ("David", "Jones", "2016-07-01", "Sales Manager", "95000.00", 2, 4),
    ("Lisa", "Davis", "2017-03-15", "Sales Representative", "65000.00", 2, 5),
    ("James", "Miller", "2017-08-20", "Sales Representative", "62000.00", 2, 5),
    ("Jennifer", "Wilson", "2018-01-10", "Sales Representative", "68000.00", 2, 5),
    ("Robert", "Moore", "2012-04-01", "VP Engineering", "160000.00", 4, 3),
    ("Patricia", "Taylor", "2014-06-15", "Engineering Manager", "120000.00", 4, 9),
    ("Daniel", "Anderson", "2016-09-01", "Senior Engineer", "110000.00", 4, 10),
    ("Mary", "Thomas", "2017-02-20", "Software Engineer", "95000.00", 4, 10),
    ("Christopher", "Jackson", "2018-05-15", "Software Engineer", "92000.00", 4, 10),
    ("Jessica", "White", "2019-03-01", "Junior Engineer", "75000.00", 4, 10),
    ("Matthew", "Harris", "2019-07-10", "Junior Engineer", "73000.00", 4, 10),
    ("Amanda", "Martin", "2014-11-01", "VP Marketing", "135000.00", 3, 1),
    ("Joshua", "Thompson", "2016-01-15", "Marketing Manager", "98000.00", 3, 16),
    ("Ashley", "Garcia", "2018-04-01", "Marketing Specialist", "72000.00", 3, 17),
    ("Andrew", "Martinez", "2019-02-15", "Marketing Specialist", "70000.00", 3, 17),
    ("Stephanie", "Robinson", "2013-08-01", "VP HR", "125000.00", 5, 1),
    ("Ryan", "Clark", "2016-10-15", "HR Manager", "88000.00", 5, 20),
    ("Michelle", "Rodriguez", "2018-06-01", "HR Specialist", "65000.00", 5, 21),
    ("Kevin", "Lewis", "2014-03-01", "Finance Manager", "105000.00", 6, 2),
    ("Laura", "Lee", "2017-09-15", "Financial Analyst", "78000.00", 6, 23),
    ("Brian", "Walker", "2019-01-10", "Accountant", "72000.00", 6, 23),
    ("Nicole", "Hall", "2015-05-20", "Support Manager", "82000.00", 7, 1),
    ("Jason", "Allen", "2017-11-01", "Support Specialist", "58000.00", 7, 26),
    ("Samantha", "Young", "2018-08-15", "Support Specialist", "56000.00", 7, 26),
    ("Eric", "King", "2019-04-20", "Support Specialist", "55000.00", 7, 26),
    ("Rachel", "Wright", "2013-12-01", "VP Operations", "145000.00", 8, 1),
    ("Justin", "Lopez", "2016-05-15", "Operations Manager", "96000.00", 8, 30),
    ("Heather", "Hill", "2014-07-01", "VP R&D", "155000.00", 9, 1),
    ("Tyler", "Scott", "2017-04-10", "Research Scientist", "105000.00", 9, 32),
    ("Rebecca", "Green", "2018-09-20", "Research Scientist", "98000.00", 9, 32),
    ("Brandon", "Adams", "2015-03-15", "IT Manager", "110000.00", 10, 3),
    ("Katherine", "Baker", "2018-02-01", "System Administrator", "82000.00", 10, 35),
    ("Jeremy", "Nelson", "2019-06-15", "IT Support", "68000.00", 10, 35),
]

EMPLOYEES = [
    {
        "first_name": first,
        "last_name": last,
        "email": f"{first.lower()}.{last.lower()}@company.com",
        "phone_number": f"555-{i:04d}",
        "hire_date": hire_date,
        "job_title": title,
        "salary": salary,
        "department_id": department_id,
        "manager_id": manager_id,
    }
    for i, (first, last, hire_date, title, salary, department_id, manager_id) in enumerate(_EMPLOYEES, start=1)
]

# department_id -> manager employee_id
DEPARTMENT_MANAGERS = {1: 1, 2: 4, 3: 16, 4: 9, 5: 20, 6: 2, 7: 26, 8: 30, 9: 32, 10: 35}

# ── Customers ─────────────────────────────────────────

_CUSTOMERS = [
    # name, email, tier, credit_limit, current_balance, billing_day
    ("Acme Corporation", "contact@acme.com", "GOLD", "50000.00", "12000.00", 1),
    ("TechStart Inc", "info@techstart.com", "GOLD", "45000.00", "8500.00", 5),
    ("Global Industries", "sales@globalind.com", "GOLD", "60000.00", "15000.00", 10),
    ("SmallBiz LLC", "owner@smallbiz.com", "SILVER", "25000.00", "5000.00", 15),
    ("MediumCorp", "purchasing@mediumcorp.com", "SILVER", "30000.00", "7500.00", 20),
    ("StartupXYZ", "hello@startupxyz.com", "BRONZE", "10000.00", "2000.00", 1),
    ("Enterprise Solutions", "contact@entsolutions.com", "GOLD", "75000.00", "20000.00", 5),
    ("Local Shop", "info@localshop.com", "BRONZE", "8000.00", "1500.00", 10),
    ("Mid-Size Business", "orders@midsizebiz.com", "SILVER", "35000.00", "9000.00", 15),
    ("Big Enterprise", "procurement@bigent.com", "GOLD", "100000.00", "25000.00", 1),
    ("Small Retailer", "contact@smallretail.com", "BRONZE", "12000.00", "3000.00", 20),
    ("Tech Giant Partners", "partner@techgiant.com", "GOLD", "80000.00", "18000.00", 5),
    ("Regional Chain", "buying@regionalchain.com", "SILVER", "40000.00", "11000.00", 10),
    ("Online Store", "support@onlinestore.com", "SILVER", "28000.00", "6500.00", 15),
    ("Wholesale Distributor", "orders@wholesale.com", "GOLD", "90000.00", "22000.00", 1),
]

CUSTOMERS = [
    {
        "customer_name": name,
        "email": email,
        "phone": f"555-{1000 + i:04d}",
        "tier": tier,
        "credit_limit": credit_limit,
        "current_balance": balance,
        "billing_day": billing_day,
    }
    for i, (name, email, tier, credit_limit, balance, billing_day) in enumerate(_CUSTOMERS, start=1)
]

# ── Products ──────────────────────────────────────────

PRODUCTS = _rows(
    ("product_name", "category_id", "description", "price", "cost", "quantity"),
    [
        ('Laptop Pro 15"', 1, "High-performance laptop", "1299.99", "800.00", 45),
        ("Desktop Workstation", 1, "Powerful desktop computer", "1899.99", "1200.00", 28),
        ("Wireless Mouse", 2, "Ergonomic wireless mouse", "29.99", "12.00", 250),
        ("Mechanical Keyboard", 2, "RGB mechanical keyboard", "129.99", "65.00", 120),
        ('27" Monitor', 3, "4K UHD monitor", "399.99", "220.00", 75),
        ("USB-C Hub", 2, "7-port USB-C hub", "49.99", "18.00", 180),
        ("Webcam HD", 3, "1080p webcam", "79.99", "35.00", 95),
        ("Headset Pro", 2, "Noise-cancelling headset", "159.99", "75.00", 110),
        ("External SSD 1TB", 4, "Portable SSD drive", "139.99", "70.00", 150),
        ("Router Mesh", 5, "Whole-home mesh WiFi", "299.99", "150.00", 60),
        ("Smart Speaker", 5, "Voice-controlled speaker", "99.99", "45.00", 200),
        ('Tablet 10"', 1, "Premium tablet", "599.99", "320.00", 85),
        ("Smartphone", 1, "Latest smartphone", "899.99", "500.00", 120),
        ("Smartwatch", 2, "Fitness smartwatch", "249.99", "110.00", 140),
        ("Wireless Charger", 2, "Fast wireless charger", "39.99", "15.00", 300),
        ("Phone Case", 2, "Protective phone case", "19.99", "5.00", 500),
        ("Screen Protector", 2, "Tempered glass protector", "12.99", "3.00", 450),
        ("Power Bank 20000mAh", 2, "High-capacity power bank", "49.99", "22.00", 175),
        ("Bluetooth Earbuds", 2, "True wireless earbuds", "129.99", "55.00", 220),
        ("Laptop Bag", 2, "Premium laptop bag", "59.99", "25.00", 160),
        ("Docking Station", 2, "Universal docking station", "199.99", "95.00", 70),
        ("Graphics Card", 4, "High-performance GPU", "699.99", "400.00", 35),
        ("RAM 16GB Kit", 4, "DDR4 memory kit", "89.99", "45.00", 200),
        ("SSD 512GB", 4, "Internal SSD", "79.99", "38.00", 180),
        ("Gaming Mouse", 2, "High-DPI gaming mouse", "69.99", "30.00", 130),
    ],
)

# ── Orders ────────────────────────────────────────────

ORDERS = _rows(
    ("customer_id", "employee_id", "order_date", "status", "total"),
    [
        (1, 6, "2024-01-15", "delivered", "2599.98"),
        (2, 6, "2024-01-18", "delivered", "1899.99"),
        (3, 7, "2024-01-22", "delivered", "4599.95"),
        (1, 6, "2024-02-05", "delivered", "1529.97"),
        (4, 8, "2024-02-10", "delivered", "759.96"),
        (5, 7, "2024-02-14", "delivered", "1199.97"),
        (2, 6, "2024-02-20", "delivered", "899.99"),
        (6, 8, "2024-03-01", "delivered", "329.98"),
        (3, 7, "2024-03-05", "delivered", "2999.94"),
        (7, 6, "2024-03-12", "delivered", "5499.93"),
        (1, 6, "2024-03-18", "shipped", "1799.97"),
        (8, 8, "2024-03-22", "shipped", "459.98"),
        (4, 7, "2024-03-25", "shipped", "999.96"),
        (9, 6, "2024-04-02", "processing", "3299.95"),
        (5, 8, "2024-04-05", "processing", "649.97"),
        (10, 7, "2024-04-08", "processing", "7899.90"),
        (2, 6, "2024-04-10", "pending", "1299.99"),
        (11, 8, "2024-04-12", "pending", "529.98"),
        (6, 7, "2024-04-15", "pending", "849.96"),
        (12, 6, "2024-04-18", "pending", "4199.94"),
    ],
)

ORDER_ITEMS = _rows(
    ("order_id", "product_id", "quantity", "unit_price"),
    [
        (1, 1, 2, "1299.99"),
        (2, 2, 1, "1899.99"),
        (3, 1, 2, "1299.99"),
        (3, 5, 2, "399.99"),
        (3, 8, 5, "159.99"),
        (4, 3, 10, "29.99"),
        (4, 4, 5, "129.99"),
        (4, 6, 15, "49.99"),
        (5, 7, 10, "79.99"),
        (6, 5, 3, "399.99"),
        (7, 13, 1, "899.99"),
        (8, 11, 3, "99.99"),
        (8, 15, 2, "39.99"),
        (9, 1, 2, "1299.99"),
        (9, 5, 1, "399.99"),
        (10, 2, 2, "1899.99"),
        (10, 22, 2, "699.99"),
        (10, 21, 3, "199.99"),
        (11, 12, 3, "599.99"),
        (12, 3, 5, "29.99"),
        (12, 16, 20, "19.99"),
        (13, 4, 5, "129.99"),
        (13, 8, 2, "159.99"),
        (14, 1, 2, "1299.99"),
        (14, 22, 1, "699.99"),
        (15, 11, 5, "99.99"),
        (15, 15, 5, "39.99"),
        (16, 2, 3, "1899.99"),
        (16, 21, 5, "199.99"),
        (17, 1, 1, "1299.99"),
        (18, 19, 4, "129.99"),
        (18, 15, 2, "39.99"),
        (19, 12, 1, "599.99"),
        (19, 14, 1, "249.99"),
        (20, 1, 2, "1299.99"),
        (20, 5, 2, "399.99"),
        (20, 8, 5, "159.99"),
    ],
)

# ── Inventory ─────────────────────────────────────────

INVENTORY = _rows(
    ("product_id", "quantity", "reorder_level", "warehouse_location"),
    [
        (1, 45, 20, "A-101"),
        (2, 28, 15, "A-102"),
        (3, 250, 100, "B-201"),
        (4, 120, 50, "B-202"),
        (5, 75, 30, "A-103"),
        (6, 180, 75, "B-203"),
        (7, 95, 40, "C-301"),
        (8, 110, 45, "B-204"),
        (9, 150, 60, "A-104"),
        (10, 60, 25, "C-302"),
        (11, 200, 80, "C-303"),
        (12, 85, 35, "A-105"),
        (13, 120, 50, "A-106"),
        (14, 140, 55, "B-205"),
        (15, 300, 120, "B-206"),
        (16, 500, 200, "C-304"),
        (17, 450, 180, "C-305"),
        (18, 175, 70, "B-207"),
        (19, 220, 90, "B-208"),
        (20, 160, 65, "C-306"),
        (21, 70, 28, "A-107"),
        (22, 35, 15, "A-108"),
        (23, 200, 80, "B-209"),
        (24, 180, 72, "B-210"),
        (25, 130, 52, "B-211"),
    ],
)

# ── Financial ─────────────────────────────────────────

ACCOUNTS = _rows(
    ("account_number", "customer_id", "account_type", "balance"),
    [
        ("ACC-1000001", 1, "checking", "25000.00"),
        ("ACC-1000002", 1, "savings", "50000.00"),
        ("ACC-1000003", 2, "checking", "18000.00"),
        ("ACC-1000004", 2, "savings", "35000.00"),
        ("ACC-1000005", 3, "checking", "42000.00"),
        ("ACC-1000006", 4, "checking", "12000.00"),
        ("ACC-1000007", 5, "checking", "22000.00"),
        ("ACC-1000008", 5, "savings", "28000.00"),
        ("ACC-1000009", 6, "checking", "8500.00"),
        ("ACC-1000010", 7, "checking", "55000.00"),
    ],
)

SALES = _rows(
    ("product_category", "region", "customer_segment", "sale_date", "sale_amount", "quarter"),
    [
        ("Electronics", "North", "Enterprise", "2024-01-15", "15000.00", 1),
        ("Electronics", "South", "SMB", "2024-01-20", "8500.00", 1),
        ("Electronics", "East", "Enterprise", "2024-01-25", "22000.00", 1),
        ("Software", "West", "SMB", "2024-02-10", "5500.00", 1),
        ("Software", "North", "Enterprise", "2024-02-15", "18000.00", 1),
        ("Hardware", "South", "SMB", "2024-02-20", "12000.00", 1),
        ("Electronics", "East", "Enterprise", "2024-03-05", "28000.00", 1),
        ("Software", "West", "SMB", "2024-03-10", "7200.00", 1),
        ("Hardware", "North", "Enterprise", "2024-03-15", "19500.00", 1),
        ("Electronics", "South", "SMB", "2024-04-02", "9800.00", 2),
        ("Software", "East", "Enterprise", "2024-04-08", "24000.00", 2),
        ("Hardware", "West", "SMB", "2024-04-12", "11000.00", 2),
        ("Electronics", "North", "Enterprise", "2024-05-05", "32000.00", 2),
        ("Software", "South", "SMB", "2024-05-10", "6700.00", 2),
        ("Hardware", "East", "Enterprise", "2024-05-18", "21500.00", 2),
        ("Electronics", "West", "SMB", "2024-06-03", "14200.00", 2),
        ("Software", "North", "Enterprise", "2024-06-15", "27000.00", 2),
        ("Hardware", "South", "SMB", "2024-06-22", "13500.00", 2),
    ],
)

EXCHANGE_RATES = _rows(
    ("currency_code", "rate"),
    [
        ("USD", "1.000000"),
        ("EUR", "0.850000"),
        ("GBP", "0.730000"),
        ("JPY", "110.500000"),
        ("CAD", "1.250000"),
        ("AUD", "1.350000"),
        ("CHF", "0.920000"),
        ("CNY", "6.450000"),
    ],
)

# ── Graphs (recursive CTE material) ───────────────────

BILL_OF_MATERIALS = _rows(
    ("component_id", "part_id", "quantity"),
    [
        ("LAPTOP-PRO", "SCREEN-15", 1),
        ("LAPTOP-PRO", "KEYBOARD", 1),
        ("LAPTOP-PRO", "MOTHERBOARD", 1),
        ("MOTHERBOARD", "CPU", 1),
        ("MOTHERBOARD", "RAM-SLOT", 2),
        ("MOTHERBOARD", "SSD-SLOT", 1),
        ("KEYBOARD", "KEY-SWITCH", 85),
        ("KEYBOARD", "PCB", 1),
        ("SCREEN-15", "LCD-PANEL", 1),
        ("SCREEN-15", "BEZEL", 1),
    ],
)

FLIGHTS = _rows(
    ("origin", "destination", "distance", "price"),
    [
        ("SFO", "LAX", 337, "150.00"),
        ("SFO", "SEA", 679, "200.00"),
        ("SFO", "DEN", 967, "250.00"),
        ("LAX", "DEN", 862, "220.00"),
        ("LAX", "PHX", 370, "160.00"),
        ("SEA", "DEN", 1024, "270.00"),
        ("DEN", "ORD", 888, "240.00"),
        ("DEN", "DFW", 641, "210.00"),
        ("ORD", "JFK", 740, "230.00"),
        ("DFW", "JFK", 1391, "320.00"),
        ("PHX", "DFW", 868, "240.00"),
        ("SEA", "SFO", 679, "200.00"),
    ],
)

# Table name -> rows, in insertion order (departments precede employees;
# the department -> manager link is applied after both are loaded)
SAMPLE_ROWS: dict[str, list[dict]] = {
    "locations": LOCATIONS,
    "departments": DEPARTMENTS,
    "employees": EMPLOYEES,
    "customers": CUSTOMERS,
    "products": PRODUCTS,
    "orders": ORDERS,
    "order_items": ORDER_ITEMS,
    "inventory": INVENTORY,
    "accounts": ACCOUNTS,
    "sales": SALES,
    "exchange_rates": EXCHANGE_RATES,
    "bill_of_materials": BILL_OF_MATERIALS,
    "flights": FLIGHTS,
}

EXPECTED_ROW_COUNTS = {name: len(rows) for name, rows in SAMPLE_ROWS.items()}
