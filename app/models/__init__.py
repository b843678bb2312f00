# Models package
from app.models.product import Product
from app.models.warehouse import Warehouse
