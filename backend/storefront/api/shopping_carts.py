"""
Shopping Carts API Endpoints

Author: TM3
Date: 2025-11-28
"""
from storefront.api.common import build_crud_router
from storefront.domain.cart import ShoppingCart, ShoppingCartPatch
from storefront.services.cart_service import ShoppingCartService

ENTITY_NAME = "shoppingCart"

router = build_crud_router(
    ShoppingCartService,
    ShoppingCart,
    ShoppingCartPatch,
    entity_name=ENTITY_NAME,
    resource_path="/api/shopping-carts",
    label="shopping cart",
)
