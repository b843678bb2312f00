"""Warehouse schemas for response serialization."""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field

from app.schemas.product import ProductResponse


class WarehouseResponse(BaseModel):
    """Schema for warehouse response with its products."""
    id: int
    name: str
    address: str
    postal_code: int = Field(serialization_alias="postalCode")
    city: str
    country: str
    timestamp: Optional[datetime] = None
    products: List[ProductResponse] = []
    
    class Config:
        from_attributes = True
