"""
Tests for the SQLAlchemy repositories

Run against an in-memory SQLite database.

Author: TM3
Date: 2025-11-28
"""
from datetime import datetime
from decimal import Decimal

from storefront.domain.enums import OrderStatus, PaymentMethod
from storefront.models import ProductCategory, ProductOrder, ShoppingCart
from storefront.repositories import (
    CustomerDetailsRepository,
    ProductCategoryRepository,
    ProductOrderRepository,
    ShoppingCartRepository,
)


class TestProductCategoryRepository:
    """Test the generic repository operations through ProductCategoryRepository"""

    def test_save_assigns_id(self, db_session):
        repo = ProductCategoryRepository(db_session)

        category = repo.save(ProductCategory(name="Books"))

        assert category.id is not None
        assert repo.find_by_id(category.id).name == "Books"

    def test_find_by_id_returns_none_when_not_found(self, db_session):
        assert ProductCategoryRepository(db_session).find_by_id(999) is None

    def test_exists_by_id(self, db_session):
        repo = ProductCategoryRepository(db_session)
        category = repo.save(ProductCategory(name="Books"))

        assert repo.exists_by_id(category.id) is True
        assert repo.exists_by_id(category.id + 1) is False

    def test_find_all_pages_in_id_order(self, db_session):
        repo = ProductCategoryRepository(db_session)
        for name in ["A", "B", "C", "D", "E"]:
            repo.save(ProductCategory(name=name))

        page, total = repo.find_all(limit=2, offset=2)

        assert total == 5
        assert [c.name for c in page] == ["C", "D"]

    def test_find_all_without_limit_returns_everything(self, db_session):
        repo = ProductCategoryRepository(db_session)
        for name in ["A", "B", "C"]:
            repo.save(ProductCategory(name=name))

        items, total = repo.find_all()

        assert len(items) == total == 3

    def test_delete_by_id(self, db_session):
        repo = ProductCategoryRepository(db_session)
        category = repo.save(ProductCategory(name="Books"))

        assert repo.delete_by_id(category.id) is True
        assert repo.find_by_id(category.id) is None
        assert repo.delete_by_id(category.id) is False


class TestCustomerDetailsRepository:

    def test_find_one_with_eager_relationships_loads_carts(self, db_session, customer, cart):
        customer_id, cart_id = customer.id, cart.id
        db_session.expunge_all()
        repo = CustomerDetailsRepository(db_session)

        found = repo.find_one_with_eager_relationships(customer_id)

        # Loaded up front: still available once detached from the session
        db_session.expunge(found)
        assert [c.id for c in found.shopping_carts] == [cart_id]

    def test_find_one_with_eager_relationships_missing(self, db_session):
        assert CustomerDetailsRepository(db_session).find_one_with_eager_relationships(1) is None

    def test_find_all_with_eager_relationships(self, db_session, customer, cart):
        customers, total = CustomerDetailsRepository(db_session).find_all_with_eager_relationships(limit=10)

        assert total == 1
        assert customers[0].shopping_carts[0].id == cart.id

    def test_delete_cascades_to_carts(self, db_session, customer, cart):
        customer_id, cart_id = customer.id, cart.id

        CustomerDetailsRepository(db_session).delete_by_id(customer_id)

        assert ShoppingCartRepository(db_session).find_by_id(cart_id) is None


class TestProductOrderRepository:

    def _order(self, db_session, cart, quantity=1):
        return ProductOrderRepository(db_session).save(
            ProductOrder(quantity=quantity, total_price=Decimal("2.50"), cart_id=cart.id)
        )

    def test_find_one_with_eager_relationships_loads_cart(self, db_session, cart):
        order_id = self._order(db_session, cart).id
        cart_id = cart.id
        db_session.expunge_all()

        found = ProductOrderRepository(db_session).find_one_with_eager_relationships(order_id)

        db_session.expunge(found)
        assert found.cart.id == cart_id
        assert found.cart.status == OrderStatus.PENDING

    def test_find_all_with_eager_relationships(self, db_session, cart):
        self._order(db_session, cart, quantity=1)
        self._order(db_session, cart, quantity=2)

        orders, total = ProductOrderRepository(db_session).find_all_with_eager_relationships()

        assert total == 2
        assert [o.quantity for o in orders] == [1, 2]
        assert all(o.cart.id == cart.id for o in orders)

    def test_cart_delete_cascades_to_orders(self, db_session, cart):
        order_id = self._order(db_session, cart).id

        ShoppingCartRepository(db_session).delete_by_id(cart.id)

        assert ProductOrderRepository(db_session).find_by_id(order_id) is None


class TestShoppingCartRepository:

    def test_save_and_reload_enum_and_decimal_fields(self, db_session, customer):
        repo = ShoppingCartRepository(db_session)
        cart = repo.save(ShoppingCart(
            placed_date=datetime(2025, 1, 2, 3, 4),
            status=OrderStatus.PAID,
            total_price=Decimal("19.99"),
            payment_method=PaymentMethod.IDEAL,
            customer_details_id=customer.id,
        ))
        cart_id = cart.id
        db_session.expunge_all()

        found = repo.find_by_id(cart_id)

        assert found.status == OrderStatus.PAID
        assert found.payment_method == PaymentMethod.IDEAL
        assert found.total_price == Decimal("19.99")
        assert found.payment_reference is None
