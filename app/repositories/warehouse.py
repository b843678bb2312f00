"""Warehouse repository."""
from sqlalchemy import delete

from app.models.product import Product
from app.models.warehouse import Warehouse
from app.repositories.base import CrudRepository


class WarehouseRepository(CrudRepository[Warehouse]):
    model = Warehouse

    def delete(self, warehouse: Warehouse) -> None:
        """Delete the warehouse together with all of its products."""
        # SQLite ignores ON DELETE CASCADE unless foreign keys are enabled
        self.db.execute(delete(Product).where(Product.warehouse_id == warehouse.id))
        self.db.delete(warehouse)
        self.db.commit()
