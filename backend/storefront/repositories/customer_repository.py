"""
Customer Details Repository - Data Access Layer for customers

Adds eager variants that load the customer's shopping carts in the same
round trip.

Author: TM3
Date: 2025-11-28
"""
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storefront.models.customer import CustomerDetails
from storefront.repositories.base import SqlAlchemyRepository


class CustomerDetailsRepository(SqlAlchemyRepository[CustomerDetails]):
    model = CustomerDetails

    def find_one_with_eager_relationships(self, customer_id: int) -> Optional[CustomerDetails]:
        """
        Find customer by ID with shopping carts loaded

        Returns:
            CustomerDetails or None if not found
        """
        stmt = (
            select(CustomerDetails)
            .options(selectinload(CustomerDetails.shopping_carts))
            .where(CustomerDetails.id == customer_id)
        )
        return self.db.scalars(stmt).first()

    def find_all_with_eager_relationships(
        self,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> Tuple[List[CustomerDetails], int]:
        """
        Find a page of customers with shopping carts loaded

        Returns:
            Tuple of (list of customers, total count)
        """
        stmt = (
            select(CustomerDetails)
            .options(selectinload(CustomerDetails.shopping_carts))
            .order_by(CustomerDetails.id)
            .limit(limit)
            .offset(offset)
        )
        return list(self.db.scalars(stmt)), self.count()
