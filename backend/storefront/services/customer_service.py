"""
Customer Details Service

Single-customer lookups always include the customer's shopping carts.
"""
from storefront.domain.customer import CustomerDetails
from storefront.repositories.customer_repository import CustomerDetailsRepository
from storefront.services.crud_service import EagerLoadingCrudService


class CustomerDetailsService(EagerLoadingCrudService):
    entity_name = "CustomerDetails"
    repository_cls = CustomerDetailsRepository
    dto_cls = CustomerDetails
    # Deleting a customer cascades to its carts and their order lines
    dependent_entities = ("ShoppingCart", "ProductOrder")
