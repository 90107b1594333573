"""
Product Orders API Endpoints
Order lines of a shopping cart; single-record reads include the cart summary

Author: TM3
Date: 2025-11-28
"""
from storefront.api.common import build_crud_router
from storefront.domain.cart import ProductOrder, ProductOrderPatch
from storefront.services.cart_service import ProductOrderService

ENTITY_NAME = "productOrder"

router = build_crud_router(
    ProductOrderService,
    ProductOrder,
    ProductOrderPatch,
    entity_name=ENTITY_NAME,
    resource_path="/api/product-orders",
    label="product order",
)
