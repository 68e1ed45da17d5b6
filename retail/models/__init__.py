"""
Модели данных консольного клиента розничной сети.
"""

from .user import User
from .store import Store
from .product import Product
from .order import Order
from .product_update import ProductUpdate
from .supply_request import ProductSupplyRequest
from .warehouse import Warehouse

__all__ = [
    "User",
    "Store",
    "Product",
    "Order",
    "ProductUpdate",
    "ProductSupplyRequest",
    "Warehouse",
]
