"""
Customer Details Domain Models

Author: TM3
Date: 2025-11-28
"""
from pydantic import BaseModel, Field
from typing import ClassVar, List, Optional, Tuple

from storefront.domain.base import EntityDTO
from storefront.domain.cart import ShoppingCartSummary
from storefront.domain.enums import Gender


class CustomerDetails(EntityDTO):
    """
    Customer details - contact and address data of a customer

    Fields:
        id: Internal customer ID (absent on create)
        gender: MALE, FEMALE or OTHER
        phone: Contact phone
        address_line_1: Street address
        address_line_2: Additional address line (optional)
        city: City
        country: Country

        # Only on eager loads
        shopping_carts: Carts placed by this customer
    """

    relationship_fields: ClassVar[Tuple[str, ...]] = ("shopping_carts",)

    id: Optional[int] = Field(None, description="Customer ID")
    gender: Gender = Field(..., description="Customer gender")
    phone: str = Field(..., description="Contact phone")
    address_line_1: str = Field(..., description="Address line 1")
    address_line_2: Optional[str] = Field(None, description="Address line 2")
    city: str = Field(..., description="City")
    country: str = Field(..., description="Country")

    shopping_carts: Optional[List[ShoppingCartSummary]] = Field(
        None, description="Carts of this customer (eager loads only)"
    )

    @classmethod
    def load_relationships(cls, entity) -> dict:
        return {
            "shopping_carts": [ShoppingCartSummary.from_entity(cart) for cart in entity.shopping_carts]
        }


class CustomerDetailsPatch(BaseModel):
    """Schema for partially updating customer details"""
    id: Optional[int] = None
    gender: Optional[Gender] = None
    phone: Optional[str] = None
    address_line_1: Optional[str] = None
    address_line_2: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
