"""
Modelos relacionados con carritos y pedidos
"""
from sqlalchemy import Column, Integer, String, DateTime, DECIMAL, Enum, ForeignKey
from sqlalchemy.orm import relationship
from storefront.core.database import Base
from storefront.domain.enums import OrderStatus, PaymentMethod


class ShoppingCart(Base):
    """
    Carrito de compra de un cliente
    """
    __tablename__ = "shopping_cart"

    id = Column(Integer, primary_key=True, index=True)

    placed_date = Column(DateTime(timezone=True), nullable=False)
    status = Column(Enum(OrderStatus, name="order_status"), nullable=False, index=True)
    total_price = Column(DECIMAL(21, 2), nullable=False)

    # Pago
    payment_method = Column(Enum(PaymentMethod, name="payment_method"), nullable=False)
    payment_reference = Column(String(255))

    # Relaciones
    customer_details_id = Column(
        Integer,
        ForeignKey("customer_details.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    customer_details = relationship("CustomerDetails", back_populates="shopping_carts")
    orders = relationship(
        "ProductOrder",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="ProductOrder.id",
    )

    def __repr__(self):
        return f"<ShoppingCart id={self.id} status={self.status}>"


class ProductOrder(Base):
    """
    Línea de pedido dentro de un carrito
    """
    __tablename__ = "product_order"

    id = Column(Integer, primary_key=True, index=True)

    quantity = Column(Integer, nullable=False)
    total_price = Column(DECIMAL(21, 2), nullable=False)

    cart_id = Column(
        Integer,
        ForeignKey("shopping_cart.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    cart = relationship("ShoppingCart", back_populates="orders")

    def __repr__(self):
        return f"<ProductOrder id={self.id} quantity={self.quantity}>"
