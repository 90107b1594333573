"""
Modelos de base de datos
"""
from .catalog import ProductCategory
from .customer import CustomerDetails
from .cart import ShoppingCart, ProductOrder

__all__ = [
    "ProductCategory",
    "CustomerDetails",
    "ShoppingCart",
    "ProductOrder",
]
