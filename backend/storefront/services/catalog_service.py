"""
Product Category Service
"""
from storefront.domain.catalog import ProductCategory
from storefront.repositories.catalog_repository import ProductCategoryRepository
from storefront.services.crud_service import CrudService


class ProductCategoryService(CrudService):
    entity_name = "ProductCategory"
    repository_cls = ProductCategoryRepository
    dto_cls = ProductCategory
