"""
Service Layer - create/read/update/delete use cases per entity
"""
from storefront.services.crud_service import CrudService, EagerLoadingCrudService
from storefront.services.catalog_service import ProductCategoryService
from storefront.services.customer_service import CustomerDetailsService
from storefront.services.cart_service import ShoppingCartService, ProductOrderService

__all__ = [
    'CrudService',
    'EagerLoadingCrudService',
    'ProductCategoryService',
    'CustomerDetailsService',
    'ShoppingCartService',
    'ProductOrderService',
]
