"""Pytest configuration and fixtures for integration tests."""

from datetime import datetime
from decimal import Decimal
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from northwind.data.models import (
    Base,
    CategoryModel,
    CustomerModel,
    EmployeeModel,
    ProductModel,
    ShipperModel,
    SupplierModel,
)
from northwind.data.repositories import SqlAlchemyOrderRepository
from northwind.domain.entities import Customer, Employee, Order, Product, Shipper
from northwind.domain.value_objects import CustomerCode, ShippingAddress
from northwind.infrastructure.database import create_session_factory


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class CountingSessionFactory:
    """Session factory wrapper that records how many sessions were opened."""

    def __init__(self, factory) -> None:
        self._factory = factory
        self.calls = 0

    def __call__(self) -> AsyncSession:
        self.calls += 1
        return self._factory()


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory with reference data seeded."""
    session_factory = create_session_factory(test_engine)

    async with session_factory() as session:
        session.add_all([
            CustomerModel(customer_id="ALFKI", company_name="Alfreds Futterkiste", country="Germany"),
            CustomerModel(customer_id="ANATR", company_name="Ana Trujillo Emparedados y helados", country="Mexico"),
        ])
        # Managers before their reports
        session.add_all([
            EmployeeModel(employee_id=2, first_name="Andrew", last_name="Fuller", country="USA", reports_to=None),
            EmployeeModel(employee_id=1, first_name="Nancy", last_name="Davolio", country="USA", reports_to=2),
            EmployeeModel(employee_id=5, first_name="Steven", last_name="Buchanan", country="UK", reports_to=2),
            EmployeeModel(employee_id=6, first_name="Michael", last_name="Suyama", country="UK", reports_to=5),
        ])
        session.add_all([
            ShipperModel(shipper_id=1, company_name="Speedy Express", phone="(503) 555-9831"),
            ShipperModel(shipper_id=3, company_name="Federal Shipping", phone="(503) 555-9931"),
        ])
        session.add_all([
            CategoryModel(category_id=1, category_name="Beverages"),
            CategoryModel(category_id=2, category_name="Condiments"),
            SupplierModel(supplier_id=1, company_name="Exotic Liquids"),
            SupplierModel(supplier_id=2, company_name="New Orleans Cajun Delights"),
        ])
        session.add_all([
            ProductModel(product_id=1, product_name="Chai", category_id=1, supplier_id=1, unit_price=Decimal("18.00")),
            ProductModel(product_id=2, product_name="Chang", category_id=1, supplier_id=1, unit_price=Decimal("19.00")),
            ProductModel(product_id=3, product_name="Aniseed Syrup", category_id=2, supplier_id=1, unit_price=Decimal("10.00")),
            ProductModel(product_id=4, product_name="Chef Anton's Cajun Seasoning", category_id=2, supplier_id=2, unit_price=Decimal("22.00")),
            ProductModel(product_id=5, product_name="Chef Anton's Gumbo Mix", category_id=2, supplier_id=2, unit_price=Decimal("21.35")),
        ])
        await session.commit()

    yield session_factory


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def counting_factory(test_session_factory) -> CountingSessionFactory:
    """Session factory that counts opened sessions."""
    return CountingSessionFactory(test_session_factory)


@pytest.fixture
def repository(counting_factory) -> SqlAlchemyOrderRepository:
    """Order repository bound to the seeded test database."""
    return SqlAlchemyOrderRepository(counting_factory)


PRODUCTS = {
    1: Product(id=1, product_name="Chai", category_id=1, category="Beverages", supplier_id=1, supplier="Exotic Liquids"),
    2: Product(id=2, product_name="Chang", category_id=1, category="Beverages", supplier_id=1, supplier="Exotic Liquids"),
    3: Product(id=3, product_name="Aniseed Syrup", category_id=2, category="Condiments", supplier_id=1, supplier="Exotic Liquids"),
    4: Product(
        id=4,
        product_name="Chef Anton's Cajun Seasoning",
        category_id=2,
        category="Condiments",
        supplier_id=2,
        supplier="New Orleans Cajun Delights",
    ),
    5: Product(
        id=5,
        product_name="Chef Anton's Gumbo Mix",
        category_id=2,
        category="Condiments",
        supplier_id=2,
        supplier="New Orleans Cajun Delights",
    ),
}


@pytest.fixture
def products() -> dict:
    """Domain projections of the seeded products, keyed by id."""
    return PRODUCTS


@pytest.fixture
def make_order() -> Callable[..., Order]:
    """Build a valid domain order; ``lines`` is a list of (product_id, price, qty, discount)."""

    def _make_order(lines=((1, 18.0, 10, 0.0), (3, 10.0, 5, 0.15)), **overrides) -> Order:
        fields = dict(
            customer=Customer(code=CustomerCode("ALFKI"), company_name="Alfreds Futterkiste"),
            employee=Employee(id=1, first_name="Nancy", last_name="Davolio", country="USA"),
            shipper=Shipper(id=3, company_name="Federal Shipping"),
            order_date=datetime(1997, 8, 25),
            required_date=datetime(1997, 9, 22),
            shipped_date=datetime(1997, 9, 2),
            freight=29.46,
            ship_name="Alfreds Futterkiste",
            shipping_address=ShippingAddress(
                address="Obere Str. 57",
                city="Berlin",
                region=None,
                postal_code="12209",
                country="Germany",
            ),
        )
        fields.update(overrides)
        order = Order(**fields)
        for product_id, unit_price, quantity, discount in lines:
            order.add_detail(PRODUCTS[product_id], unit_price, quantity, discount)
        return order

    return _make_order
