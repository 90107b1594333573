"""
Pytest fixtures and configuration for Storefront Backend tests

This file provides shared fixtures that can be used across all test modules.
Every test gets a fresh in-memory SQLite database.

Author: TM3
Date: 2025-11-28
"""
import os

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["CACHE_ENABLED"] = "true"

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from storefront.core.cache import entity_cache
from storefront.core.database import Base, build_engine, create_tables, get_db
from storefront.main import app
from storefront.models import CustomerDetails, ShoppingCart
from storefront.domain.enums import Gender, OrderStatus, PaymentMethod


@pytest.fixture(scope="function")
def engine():
    """
    Provides an in-memory database with every table created

    Scope: function (new database per test)
    """
    engine = build_engine("sqlite://")
    create_tables(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    """
    Provides a SQLAlchemy session for each test

    Automatically closes the session after the test
    """
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(autouse=True)
def clear_entity_cache():
    """Start and end every test with an empty cache"""
    entity_cache.clear()
    yield
    entity_cache.clear()


@pytest.fixture(scope="function")
def client(session_factory):
    """
    Provides a TestClient whose requests use the test database
    """
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_category_data():
    return {
        "name": "Electronics",
        "description": "Phones, laptops and accessories"
    }


@pytest.fixture
def sample_customer_data():
    return {
        "gender": "FEMALE",
        "phone": "+31 20 123 4567",
        "address_line_1": "Damrak 1",
        "address_line_2": None,
        "city": "Amsterdam",
        "country": "Netherlands"
    }


@pytest.fixture
def customer(db_session):
    """A stored customer"""
    customer = CustomerDetails(
        gender=Gender.MALE,
        phone="555-0100",
        address_line_1="1 Main St",
        city="Springfield",
        country="USA",
    )
    db_session.add(customer)
    db_session.commit()
    db_session.refresh(customer)
    return customer


@pytest.fixture
def cart(db_session, customer):
    """A stored pending cart of ``customer``"""
    cart = ShoppingCart(
        placed_date=datetime(2025, 11, 1, 10, 30),
        status=OrderStatus.PENDING,
        total_price=Decimal("10.00"),
        payment_method=PaymentMethod.CREDIT_CARD,
        payment_reference="ref-001",
        customer_details_id=customer.id,
    )
    db_session.add(cart)
    db_session.commit()
    db_session.refresh(cart)
    return cart
