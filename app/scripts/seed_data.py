# scripts/seed_data.py
import asyncio
import logging
from datetime import datetime, timezone
from decimal import Decimal

from app.core.db import init_db, close_db
from app.core.security import hash_password
from app.models import Client, Expense, Product, User
from app.services import client_service, expense_service, product_service

log = logging.getLogger("seed_data")

PRODUCTS = [
    {"name": "Wireless Mouse", "sku": "WM001", "description": "High-quality wireless mouse with ergonomic design",
     "category": "Electronics", "quantity": 25, "min_quantity": 10, "price": Decimal("29.99"), "cost": Decimal("15.00")},
    {"name": "USB Cable", "sku": "UC002", "description": "6ft USB-A to USB-C cable",
     "category": "Accessories", "quantity": 8, "min_quantity": 15, "price": Decimal("12.99"), "cost": Decimal("5.00")},
    {"name": "Laptop Stand", "sku": "LS003", "description": "Adjustable aluminum laptop stand",
     "category": "Accessories", "quantity": 12, "min_quantity": 5, "price": Decimal("49.99"), "cost": Decimal("25.00")},
]

CLIENTS = [
    {"name": "TechCorp Solutions", "email": "contact@techcorp.com", "phone": "(555) 123-4567",
     "address": "123 Business Ave, City, State 12345", "company": "TechCorp Solutions"},
    {"name": "Digital Innovations", "email": "info@digitalinnovations.com", "phone": "(555) 987-6543",
     "address": "456 Innovation Dr, City, State 67890", "company": "Digital Innovations"},
]

EXPENSES = [
    {"category": "Office Supplies", "amount": Decimal("250.00"),
     "date": datetime(2025, 1, 15, tzinfo=timezone.utc), "description": "Monthly office supplies order"},
    {"category": "Utilities", "amount": Decimal("180.00"),
     "date": datetime(2025, 1, 20, tzinfo=timezone.utc), "description": "Electricity bill"},
    {"category": "Marketing", "amount": Decimal("500.00"),
     "date": datetime(2025, 1, 25, tzinfo=timezone.utc), "description": "Online advertising campaign"},
]


async def seed():
    # Safe to run repeatedly: existing rows are left alone
    admin, created = await User.get_or_create(
        username="admin",
        defaults={
            "password": hash_password("admin123"),
            "name": "Administrator",
            "role": "admin",
            "email": "admin@company.com",
        },
    )
    log.info("Admin user: %s (%s)", admin.id, "created" if created else "existing")

    for data in PRODUCTS:
        if not await Product.filter(sku=data["sku"]).exists():
            await product_service.create_product(dict(data), user_id=admin.id)

    for data in CLIENTS:
        if not await Client.filter(name=data["name"]).exists():
            await client_service.create_client(dict(data), user_id=admin.id)

    if not await Expense.all().exists():
        for data in EXPENSES:
            await expense_service.create_expense(dict(data), user_id=admin.id)

    log.info("Demo data seeded.")


async def main():
    await init_db()
    try:
        await seed()
    finally:
        await close_db()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    asyncio.run(main())
