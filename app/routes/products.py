"""Product routes."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import request_params
from app.models.product import Product
from app.repositories.product import ProductRepository
from app.schemas.params import ProductParams
from app.schemas.product import ProductResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


@router.post("/add", response_class=PlainTextResponse)
async def add_product(
    params: ProductParams = Depends(request_params(ProductParams)),
    db: Session = Depends(get_db)
):
    """Create a product that is not stored in any warehouse."""
    product = ProductRepository(db).save(Product(**params.model_dump()))
    logger.info("Saved product %s (id=%s)", product.name, product.id)
    return f"Product with the name {params.name} saved!"


@router.get("/all", response_model=List[ProductResponse])
async def list_products(db: Session = Depends(get_db)):
    """List all products."""
    return ProductRepository(db).find_all()


@router.get("/{product_id}", response_model=Optional[ProductResponse])
async def get_product(product_id: int, db: Session = Depends(get_db)):
    """Get a specific product, or null if there is none with this id."""
    return ProductRepository(db).find_by_id(product_id)
