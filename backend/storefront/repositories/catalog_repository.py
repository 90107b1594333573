"""
Product Category Repository - Data Access Layer for categories
"""
from storefront.models.catalog import ProductCategory
from storefront.repositories.base import SqlAlchemyRepository


class ProductCategoryRepository(SqlAlchemyRepository[ProductCategory]):
    model = ProductCategory
