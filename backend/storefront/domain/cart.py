"""
Shopping Cart and Product Order Domain Models

Represents carts and the order lines they contain.

Author: TM3
Date: 2025-11-28
"""
from pydantic import BaseModel, Field
from typing import ClassVar, Optional, Tuple
from datetime import datetime
from decimal import Decimal

from storefront.domain.base import EntityDTO
from storefront.domain.enums import OrderStatus, PaymentMethod


class ShoppingCartSummary(EntityDTO):
    """Lightweight cart view embedded in eager loads"""

    id: int = Field(..., description="Cart ID")
    status: OrderStatus = Field(..., description="Cart status")
    total_price: Decimal = Field(..., description="Cart total")


class ShoppingCart(EntityDTO):
    """
    Shopping cart - a customer's purchase

    Fields:
        id: Internal cart ID (absent on create)
        placed_date: When the cart was placed
        status: COMPLETED, PAID, PENDING, CANCELLED or REFUNDED
        total_price: Total amount
        payment_method: CREDIT_CARD or IDEAL
        payment_reference: Payment provider reference (optional)
        customer_details_id: Owning customer
    """

    id: Optional[int] = Field(None, description="Cart ID")
    placed_date: datetime = Field(..., description="Placement timestamp")
    status: OrderStatus = Field(..., description="Cart status")
    total_price: Decimal = Field(..., description="Total price", ge=0)
    payment_method: PaymentMethod = Field(..., description="Payment method")
    payment_reference: Optional[str] = Field(None, description="Payment reference")
    customer_details_id: int = Field(..., description="Owning customer ID")


class ShoppingCartPatch(BaseModel):
    """
    Schema for partially updating a cart

    The owning customer cannot be changed through a partial update.
    """
    id: Optional[int] = None
    placed_date: Optional[datetime] = None
    status: Optional[OrderStatus] = None
    total_price: Optional[Decimal] = None
    payment_method: Optional[PaymentMethod] = None
    payment_reference: Optional[str] = None


class ProductOrder(EntityDTO):
    """
    Product order - one line of a cart

    Fields:
        id: Internal order ID (absent on create)
        quantity: Units ordered
        total_price: Line total
        cart_id: Cart this line belongs to

        # Only on eager loads
        cart: Summary of the parent cart
    """

    relationship_fields: ClassVar[Tuple[str, ...]] = ("cart",)

    id: Optional[int] = Field(None, description="Order ID")
    quantity: int = Field(..., description="Quantity ordered", ge=0)
    total_price: Decimal = Field(..., description="Line total", ge=0)
    cart_id: int = Field(..., description="Parent cart ID")

    cart: Optional[ShoppingCartSummary] = Field(None, description="Parent cart (eager loads only)")

    @classmethod
    def load_relationships(cls, entity) -> dict:
        return {"cart": ShoppingCartSummary.from_entity(entity.cart) if entity.cart else None}


class ProductOrderPatch(BaseModel):
    """Schema for partially updating an order line"""
    id: Optional[int] = None
    quantity: Optional[int] = None
    total_price: Optional[Decimal] = None
    cart_id: Optional[int] = None
