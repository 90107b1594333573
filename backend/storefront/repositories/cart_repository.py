"""
Shopping Cart / Product Order Repositories
"""
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storefront.models.cart import ShoppingCart, ProductOrder
from storefront.repositories.base import SqlAlchemyRepository


class ShoppingCartRepository(SqlAlchemyRepository[ShoppingCart]):
    model = ShoppingCart


class ProductOrderRepository(SqlAlchemyRepository[ProductOrder]):
    model = ProductOrder

    def find_one_with_eager_relationships(self, order_id: int) -> Optional[ProductOrder]:
        """Find order by ID with its cart loaded"""
        stmt = (
            select(ProductOrder)
            .options(selectinload(ProductOrder.cart))
            .where(ProductOrder.id == order_id)
        )
        return self.db.scalars(stmt).first()

    def find_all_with_eager_relationships(
        self,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> Tuple[List[ProductOrder], int]:
        """Orders with their cart loaded, ordered by id"""
        stmt = (
            select(ProductOrder)
            .options(selectinload(ProductOrder.cart))
            .order_by(ProductOrder.id)
            .limit(limit)
            .offset(offset)
        )
        return list(self.db.scalars(stmt)), self.count()
