"""
Repository Layer - Data Access

This layer handles all database access and returns ORM entities.
Repositories abstract away SQLAlchemy details from the services.

Author: TM3
Date: 2025-11-28
"""
from storefront.repositories.base import SqlAlchemyRepository
from storefront.repositories.catalog_repository import ProductCategoryRepository
from storefront.repositories.customer_repository import CustomerDetailsRepository
from storefront.repositories.cart_repository import ShoppingCartRepository, ProductOrderRepository

__all__ = [
    'SqlAlchemyRepository',
    'ProductCategoryRepository',
    'CustomerDetailsRepository',
    'ShoppingCartRepository',
    'ProductOrderRepository'
]
