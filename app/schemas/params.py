"""Request parameter schemas for the create endpoints."""
from pydantic import BaseModel, Field


class ProductParams(BaseModel):
    """Parameters for creating a product."""
    name: str
    product_category: str = Field(alias="productCategory")
    product_quantity: int = Field(alias="productQuantity")
    product_unit: str = Field(alias="productUnit")


class WarehouseParams(BaseModel):
    """Parameters for creating a warehouse."""
    name: str
    address: str
    postal_code: int = Field(alias="postalCode")
    city: str
    country: str
