"""Product model."""
from sqlalchemy import Column, Integer, String, ForeignKey

from app.database import Base


class Product(Base):
    """Product model - optionally stored in a warehouse."""
    __tablename__ = "product"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    product_category = Column(String(255), nullable=False)
    product_quantity = Column(Integer, nullable=False, default=0)
    product_unit = Column(String(255), nullable=False)
    # Back-reference to the owning warehouse, never serialized
    warehouse_id = Column(
        Integer,
        ForeignKey("warehouse.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
