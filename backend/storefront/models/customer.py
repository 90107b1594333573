"""
Datos de clientes
"""
from sqlalchemy import Column, Integer, String, Enum
from sqlalchemy.orm import relationship
from storefront.core.database import Base
from storefront.domain.enums import Gender


class CustomerDetails(Base):
    """
    Datos de contacto y dirección del cliente
    """
    __tablename__ = "customer_details"

    id = Column(Integer, primary_key=True, index=True)

    gender = Column(Enum(Gender, name="gender"), nullable=False)
    phone = Column(String(50), nullable=False)

    # Dirección
    address_line_1 = Column(String(255), nullable=False)
    address_line_2 = Column(String(255))
    city = Column(String(100), nullable=False)
    country = Column(String(100), nullable=False)

    # Relationships
    shopping_carts = relationship(
        "ShoppingCart",
        back_populates="customer_details",
        cascade="all, delete-orphan",
        order_by="ShoppingCart.id",
    )

    def __repr__(self):
        return f"<CustomerDetails id={self.id} city={self.city!r}>"
