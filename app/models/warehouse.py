"""Warehouse model."""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from app.database import Base


class Warehouse(Base):
    """Warehouse model - owns products.

    Products are looked up by ``Product.warehouse_id`` rather than held
    in a relationship collection.
    """
    __tablename__ = "warehouse"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    postal_code = Column(Integer, nullable=False, default=0)
    city = Column(String(255), nullable=False)
    country = Column(String(255), nullable=False)
    timestamp = Column(DateTime, server_default=func.now())
