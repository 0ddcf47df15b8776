"""
Ecommerce Application Ports

Interface definitions (ports) for the Ecommerce domain.
Uses Protocol for structural typing. Implementations are supplied by
the hosting application.
"""

from typing import Any, Protocol, runtime_checkable

from storefront.domains.ecommerce.domain.entities.order import Order
from storefront.domains.ecommerce.domain.entities.request import Request
from storefront.domains.ecommerce.domain.entities.store_manager_profile import StoreManagerProfile
from storefront.domains.ecommerce.domain.entities.user import User


@runtime_checkable
class IUserRepository(Protocol):
    """
    Interface for user repository.

    Defines the contract for user data access.
    """

    async def find_by_id(self, user_id: str) -> User | None:
        """Get user by ID"""
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Get user by email"""
        ...

    async def find_all(self) -> list[User]:
        """Get all users"""
        ...

    async def create(self, user: User) -> User:
        """Persist a new user and return it with its ID"""
        ...

    async def update(self, user: User) -> User:
        """Persist changes to an existing user"""
        ...


@runtime_checkable
class IStoreManagerProfileRepository(Protocol):
    """Interface for store manager profile repository."""

    async def find_by_user_id(self, user_id: str) -> StoreManagerProfile | None:
        ...

    async def create(self, profile: StoreManagerProfile) -> StoreManagerProfile:
        ...

    async def update(self, profile: StoreManagerProfile) -> StoreManagerProfile:
        ...


@runtime_checkable
class IRequestRepository(Protocol):
    """Interface for review request repository."""

    async def find_by_id(self, request_id: str) -> Request | None:
        ...

    async def find_by_user_and_type(self, user_id: str, request_type: str) -> list[Request]:
        """Get every request of the given type raised by a user"""
        ...

    async def find_all(self) -> list[Request]:
        ...

    async def create(self, request: Request) -> Request:
        ...

    async def update(self, request: Request) -> Request:
        ...


@runtime_checkable
class IOrderRepository(Protocol):
    """
    Interface for order repository.

    Defines the contract for order data access.
    """

    async def find_by_id(self, order_id: str) -> Order | None:
        """Get order by ID"""
        ...

    async def update(self, order: Order) -> Order:
        """Persist changes to an existing order"""
        ...


@runtime_checkable
class IProductRepository(Protocol):
    """Interface for product stock updates."""

    async def add_stock(self, product_id: str, quantity: int) -> Any:
        """Return quantity to a product's stock"""
        ...


@runtime_checkable
class ICategoryRepository(Protocol):
    """
    Interface for category repository.

    Categories are handled as plain dicts at this layer.
    """

    async def create(self, category_data: dict[str, Any]) -> dict[str, Any]:
        ...

    async def update(self, category_id: str, category_data: dict[str, Any]) -> dict[str, Any]:
        ...

    async def delete(self, category_id: str) -> bool:
        ...


@runtime_checkable
class IPasswordHasher(Protocol):
    """Password hashing adapter."""

    async def hash(self, plain_password: str) -> str:
        ...

    async def compare(self, plain_password: str, hashed_password: str) -> bool:
        ...


__all__ = [
    "IUserRepository",
    "IStoreManagerProfileRepository",
    "IRequestRepository",
    "IOrderRepository",
    "IProductRepository",
    "ICategoryRepository",
    "IPasswordHasher",
]
