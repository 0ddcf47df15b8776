"""
Shared pytest fixtures for all tests.

Provides a controllable clock, an in-memory password hasher and entity
builders. Repositories are mocked per test module with AsyncMock.
"""

import os
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from storefront.core.shared.clock import SystemClock
from storefront.domains.ecommerce.domain.entities import (
    Order,
    OrderItem,
    Request,
    StoreManagerProfile,
    User,
)
from storefront.domains.ecommerce.domain.value_objects import RequestType, UserRole

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"

FIXED_NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


# ============================================================================
# CLOCK AND HASHER
# ============================================================================


class FakeClock(SystemClock):
    """Clock frozen at a fixed instant until moved explicitly."""

    def __init__(self, start: datetime = FIXED_NOW):
        self._now = start

    def now(self) -> datetime:
        return self._now

    def tick(self, **delta) -> datetime:
        self._now = self._now + timedelta(**delta)
        return self._now

    def set_time(self, value: datetime) -> None:
        self._now = value


class FakePasswordHasher:
    """Reversible hasher so tests can assert on stored hashes."""

    PREFIX = "hashed:"

    async def hash(self, plain_password: str) -> str:
        return f"{self.PREFIX}{plain_password}"

    async def compare(self, plain_password: str, hashed_password: str) -> bool:
        return hashed_password == f"{self.PREFIX}{plain_password}"


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


# ============================================================================
# ENTITY BUILDERS
# ============================================================================


@pytest.fixture
def make_user(fake_clock):
    """Build a User; keyword arguments override the defaults."""

    def _make(**overrides) -> User:
        data = {
            "id": "user1",
            "email": "user1@example.com",
            "name": "Test User",
            "password": "hashed:secret123",
            "role": UserRole.CUSTOMER,
            "clock": fake_clock,
        }
        data.update(overrides)
        return User(**data)

    return _make


@pytest.fixture
def admin_user(make_user) -> User:
    return make_user(id="admin1", email="admin@example.com", name="Admin", role=UserRole.ADMIN)


@pytest.fixture
def customer_user(make_user) -> User:
    return make_user(id="customer1", email="customer@example.com", name="Customer")


@pytest.fixture
def store_manager_user(make_user) -> User:
    return make_user(id="manager1", email="manager@example.com", name="Manager", role=UserRole.STORE_MANAGER)


@pytest.fixture
def make_profile(fake_clock):
    def _make(**overrides) -> StoreManagerProfile:
        data = {
            "id": "profile1",
            "user_id": "manager1",
            "store_name": "Corner Shop",
            "store_address": "1 Main St",
            "clock": fake_clock,
        }
        data.update(overrides)
        return StoreManagerProfile(**data)

    return _make


@pytest.fixture
def make_request(fake_clock):
    def _make(**overrides) -> Request:
        data = {
            "id": "request1",
            "type": RequestType.ACCOUNT_REGISTER,
            "requested_by": "manager1",
            "request_data": {
                "name": "Manager",
                "email": "manager@example.com",
                "phone": "555-0100",
                "store_name": "Corner Shop",
                "store_address": "1 Main St",
            },
            "clock": fake_clock,
        }
        data.update(overrides)
        return Request(**data)

    return _make


@pytest.fixture
def make_order(fake_clock):
    def _make(**overrides) -> Order:
        data = {
            "id": "order1",
            "order_number": "ORD-000001-ABCDE",
            "user_id": "user1",
            "items": [
                OrderItem(product_id="p1", product_name="Apples", product_price=Decimal("2.50"), quantity=4),
                OrderItem(product_id="p2", product_name="Bread", product_price=Decimal("3.00"), quantity=1),
            ],
            "clock": fake_clock,
        }
        data.update(overrides)
        order = Order(**data)
        order.calculate_totals()
        return order

    return _make
