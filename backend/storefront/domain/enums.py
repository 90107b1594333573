"""
Enumerations shared by the ORM models and the API schemas
"""
from enum import Enum


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class OrderStatus(str, Enum):
    COMPLETED = "COMPLETED"
    PAID = "PAID"
    PENDING = "PENDING"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "CREDIT_CARD"
    IDEAL = "IDEAL"
