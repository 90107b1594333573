"""
Customer Details API Endpoints
Customer contact/address records; eager loads include the customer's carts

Author: TM3
Date: 2025-11-28
"""
from storefront.api.common import build_crud_router
from storefront.domain.customer import CustomerDetails, CustomerDetailsPatch
from storefront.services.customer_service import CustomerDetailsService

ENTITY_NAME = "customerDetails"

router = build_crud_router(
    CustomerDetailsService,
    CustomerDetails,
    CustomerDetailsPatch,
    entity_name=ENTITY_NAME,
    resource_path="/api/customer-details",
    label="customer details",
    paged=True,
)
