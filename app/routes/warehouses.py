"""Warehouse routes."""
import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import request_params
from app.models.product import Product
from app.models.warehouse import Warehouse
from app.repositories.product import ProductRepository
from app.repositories.warehouse import WarehouseRepository
from app.schemas.params import ProductParams, WarehouseParams
from app.schemas.product import ProductResponse
from app.schemas.warehouse import WarehouseResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/warehouse", tags=["Warehouse"])


def _with_products(warehouse: Warehouse, products: ProductRepository) -> WarehouseResponse:
    response = WarehouseResponse.model_validate(warehouse)
    response.products = [
        ProductResponse.model_validate(product)
        for product in products.find_by_warehouse_id(warehouse.id)
    ]
    return response


@router.post("/add", response_class=PlainTextResponse)
async def add_warehouse(
    params: WarehouseParams = Depends(request_params(WarehouseParams)),
    db: Session = Depends(get_db)
):
    """Create a new warehouse stamped with the current server time."""
    warehouse = WarehouseRepository(db).save(
        Warehouse(**params.model_dump(), timestamp=datetime.now())
    )
    logger.info("Saved warehouse %s (id=%s)", warehouse.name, warehouse.id)
    return f"Warehouse with the name {params.name} saved!"


@router.post("/{warehouse_id}/addProduct", response_class=PlainTextResponse)
async def add_product_to_warehouse(
    warehouse_id: int,
    params: ProductParams = Depends(request_params(ProductParams)),
    db: Session = Depends(get_db)
):
    """Create a product inside an existing warehouse."""
    warehouse = WarehouseRepository(db).find_by_id(warehouse_id)
    if warehouse is None:
        logger.warning("Cannot add product %s: warehouse %s not found", params.name, warehouse_id)
        return f"Warehouse with ID {warehouse_id} not found!"
    
    # Only the product row is written, the warehouse itself is untouched
    product = ProductRepository(db).save(
        Product(**params.model_dump(), warehouse_id=warehouse.id)
    )
    logger.info("Added product %s (id=%s) to warehouse %s", product.name, product.id, warehouse.id)
    return f"Product {params.name} added to warehouse {warehouse.name}"


@router.get("/all", response_model=List[WarehouseResponse])
async def list_warehouses(db: Session = Depends(get_db)):
    """List all warehouses with their products."""
    products = ProductRepository(db)
    return [_with_products(warehouse, products) for warehouse in WarehouseRepository(db).find_all()]


@router.get("/{warehouse_id}", response_model=Optional[WarehouseResponse])
async def get_warehouse(warehouse_id: int, db: Session = Depends(get_db)):
    """Get a specific warehouse with its products, or null if there is none."""
    warehouse = WarehouseRepository(db).find_by_id(warehouse_id)
    if warehouse is None:
        return None
    return _with_products(warehouse, ProductRepository(db))
