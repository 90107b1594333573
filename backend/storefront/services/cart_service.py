"""
Shopping Cart and Product Order Services
"""
from storefront.domain.cart import ShoppingCart, ProductOrder
from storefront.repositories.cart_repository import ShoppingCartRepository, ProductOrderRepository
from storefront.services.crud_service import CrudService, EagerLoadingCrudService


class ShoppingCartService(CrudService):
    entity_name = "ShoppingCart"
    repository_cls = ShoppingCartRepository
    dto_cls = ShoppingCart
    # Carts are embedded in customer and order views
    dependent_entities = ("CustomerDetails", "ProductOrder")


class ProductOrderService(EagerLoadingCrudService):
    """Order lines; single lookups include the parent cart"""
    entity_name = "ProductOrder"
    repository_cls = ProductOrderRepository
    dto_cls = ProductOrder
