# Repositories package
from app.repositories.base import CrudRepository
from app.repositories.product import ProductRepository
from app.repositories.warehouse import WarehouseRepository
