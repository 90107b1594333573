"""
Product Categories API Endpoints
Create, read, update, partially update and delete product categories

Author: TM3
Date: 2025-11-28
"""
from storefront.api.common import build_crud_router
from storefront.domain.catalog import ProductCategory, ProductCategoryPatch
from storefront.services.catalog_service import ProductCategoryService

ENTITY_NAME = "productCategory"

router = build_crud_router(
    ProductCategoryService,
    ProductCategory,
    ProductCategoryPatch,
    entity_name=ENTITY_NAME,
    resource_path="/api/product-categories",
    label="product category",
    paged=True,
)
