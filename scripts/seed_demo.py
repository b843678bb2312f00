"""Script to create a demo warehouse with one product."""
import sys
import os
from datetime import datetime

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal, init_db
from app.models.product import Product
from app.models.warehouse import Warehouse
from app.repositories.product import ProductRepository
from app.repositories.warehouse import WarehouseRepository


def seed_demo(db):
    """Create the demo warehouse unless any warehouse exists.

    Returns the new warehouse, or None if nothing was created.
    """
    warehouses = WarehouseRepository(db)
    if warehouses.count():
        return None
    
    warehouse = warehouses.save(Warehouse(
        name="Central",
        address="1 Main St",
        postal_code=1010,
        city="Vienna",
        country="Austria",
        timestamp=datetime.now(),
    ))
    ProductRepository(db).save(Product(
        name="Bolt",
        product_category="Hardware",
        product_quantity=500,
        product_unit="pcs",
        warehouse_id=warehouse.id,
    ))
    return warehouse


def main():
    # Create tables
    init_db()
    
    db = SessionLocal()
    try:
        warehouse = seed_demo(db)
        if warehouse is None:
            print("Warehouses already exist, nothing to seed.")
            return
        print(f"Demo warehouse created: {warehouse.name} (id={warehouse.id})")
    finally:
        db.close()


if __name__ == "__main__":
    main()
