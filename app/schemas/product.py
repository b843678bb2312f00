"""Product schemas for response serialization."""
from pydantic import BaseModel, Field


class ProductResponse(BaseModel):
    """Schema for product response.

    The owning warehouse is deliberately absent so that nested output
    never refers back to its warehouse.
    """
    id: int
    name: str
    product_category: str = Field(serialization_alias="productCategory")
    product_quantity: int = Field(serialization_alias="productQuantity")
    product_unit: str = Field(serialization_alias="productUnit")
    
    class Config:
        from_attributes = True
