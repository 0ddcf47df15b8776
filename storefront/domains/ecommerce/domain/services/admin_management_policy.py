"""
Admin Management Policy

Stateless rules for system bootstrap: the single-administrator invariant
and who may see or act on store-manager requests. The policy never loads
users itself; callers pass the collection they loaded.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from storefront.core.interfaces.clock import IClock
from storefront.core.shared.clock import SystemClock

from ..entities.user import User
from ..value_objects.user_role import UserRole

ONLY_ONE_ADMIN = "Only one administrator is allowed in the system"
NO_ADMIN_FOR_REGISTRATION = (
    "Store manager registration is not available. No administrator exists in the system. "
    "Please contact system support."
)
NOT_AUTHENTICATED = "User not authenticated"


@dataclass(frozen=True)
class PolicyDecision:
    """Outcome of a policy check. Truthy when the action is allowed."""

    allowed: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.allowed

    @classmethod
    def allow(cls) -> "PolicyDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "PolicyDecision":
        return cls(allowed=False, reason=reason)


@dataclass(frozen=True)
class SystemStatus:
    """Bootstrap state of the system."""

    is_initialized: bool
    needs_admin: bool
    admin_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_initialized": self.is_initialized,
            "needs_admin": self.needs_admin,
            "admin_count": self.admin_count,
        }


def _count_admins(users: Iterable[User]) -> int:
    return sum(1 for user in users if user.role == UserRole.ADMIN)


class AdminManagementPolicy:
    """
    Domain service for administrator bootstrap rules.

    Example:
        ```python
        policy = AdminManagementPolicy(clock)
        decision = policy.can_create_admin(users)
        if decision:
            admin = policy.create_first_admin({"email": "a@x.com", "name": "Admin", "password": hashed})
        ```
    """

    def __init__(self, clock: IClock | None = None):
        self.clock = clock or SystemClock()

    def can_create_admin(self, existing_users: Iterable[User] = ()) -> PolicyDecision:
        if _count_admins(existing_users) >= 1:
            return PolicyDecision.deny(ONLY_ONE_ADMIN)
        return PolicyDecision.allow()

    def has_admin(self, existing_users: Iterable[User] = ()) -> bool:
        return _count_admins(existing_users) > 0

    def can_register_store_manager(self, existing_users: Iterable[User] = ()) -> PolicyDecision:
        """Store-manager registration is only open once an administrator exists."""
        if not self.has_admin(existing_users):
            return PolicyDecision.deny(NO_ADMIN_FOR_REGISTRATION)
        return PolicyDecision.allow()

    def can_view_store_manager_requests(self, user: User | None) -> PolicyDecision:
        if user is None:
            return PolicyDecision.deny(NOT_AUTHENTICATED)
        if not user.is_admin():
            return PolicyDecision.deny("Only administrators can view store manager requests")
        return PolicyDecision.allow()

    def can_approve_store_manager_requests(self, user: User | None) -> PolicyDecision:
        if user is None:
            return PolicyDecision.deny(NOT_AUTHENTICATED)
        if not user.is_admin():
            return PolicyDecision.deny("Only administrators can approve store manager requests")
        return PolicyDecision.allow()

    def create_first_admin(self, admin_data: dict[str, Any]) -> User:
        """
        Build (but do not persist) the first administrator.

        Args:
            admin_data: email, name, password (already hashed), optional phone and address
        """
        return User(
            email=admin_data.get("email") or "",
            name=admin_data.get("name") or "",
            password=admin_data.get("password") or "",
            role=UserRole.ADMIN,
            phone=admin_data.get("phone") or "",
            address=admin_data.get("address") or "",
            is_email_verified=True,
            clock=self.clock,
        )

    def get_system_status(self, existing_users: Iterable[User] = ()) -> SystemStatus:
        admin_count = _count_admins(existing_users)
        return SystemStatus(
            is_initialized=admin_count > 0,
            needs_admin=admin_count == 0,
            admin_count=admin_count,
        )

    def needs_initialization(self, existing_users: Iterable[User] = ()) -> bool:
        return not self.has_admin(existing_users)

    def get_initialization_message(self, existing_users: Iterable[User] = ()) -> str:
        if self.needs_initialization(existing_users):
            return "System needs to be initialized. Please create the first administrator account."
        return "System is properly initialized with an administrator."
