"""
Catálogo de productos
"""
from sqlalchemy import Column, Integer, String, Text
from storefront.core.database import Base


class ProductCategory(Base):
    """
    Categorías de productos
    """
    __tablename__ = "product_category"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    description = Column(Text)

    def __repr__(self):
        return f"<ProductCategory id={self.id} name={self.name!r}>"
