"""Product repository."""
from typing import List

from sqlalchemy import select

from app.models.product import Product
from app.repositories.base import CrudRepository


class ProductRepository(CrudRepository[Product]):
    model = Product

    def find_by_warehouse_id(self, warehouse_id: int) -> List[Product]:
        """Products stored in a warehouse, in insertion order."""
        query = (
            select(Product)
            .where(Product.warehouse_id == warehouse_id)
            .order_by(Product.id)
        )
        return list(self.db.scalars(query))
