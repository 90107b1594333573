"""
Domain Layer - API Schemas

Pydantic models representing each entity as the API sees it, plus the
partial-update (patch) schemas.

Author: TM3
Date: 2025-11-28
"""
from storefront.domain.enums import Gender, OrderStatus, PaymentMethod
from storefront.domain.catalog import ProductCategory, ProductCategoryPatch
from storefront.domain.cart import (
    ShoppingCart,
    ShoppingCartPatch,
    ShoppingCartSummary,
    ProductOrder,
    ProductOrderPatch,
)
from storefront.domain.customer import CustomerDetails, CustomerDetailsPatch

__all__ = [
    'Gender',
    'OrderStatus',
    'PaymentMethod',
    'ProductCategory',
    'ProductCategoryPatch',
    'CustomerDetails',
    'CustomerDetailsPatch',
    'ShoppingCart',
    'ShoppingCartPatch',
    'ShoppingCartSummary',
    'ProductOrder',
    'ProductOrderPatch',
]
