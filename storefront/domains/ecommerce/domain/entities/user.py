"""
User Entity

Enterprise-wide rules for accounts: roles, capabilities, validation and
login-attempt tracking. Persistence and password hashing live elsewhere.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from storefront.core.domain import BusinessRuleViolationException, Entity
from storefront.core.interfaces.clock import IClock
from storefront.core.shared.clock import SystemClock

from ..value_objects.user_role import UserRole

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]+$")
MIN_PASSWORD_LENGTH = 8


@dataclass(eq=False)
class User(Entity[str]):
    """
    User aggregate.

    ``password`` always holds a hash. It is only exposed through
    ``to_persistence()``; ``to_dict()`` and ``to_public_dict()`` never
    include it.
    """

    email: str = ""
    name: str = ""
    password: str = ""
    role: UserRole = UserRole.CUSTOMER
    phone: str = ""
    address: str = ""
    is_email_verified: bool = False
    is_phone_verified: bool = False
    last_login_at: datetime | None = None
    login_attempts: int = 0
    locked_until: datetime | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        self.role = UserRole.coerce(self.role)

    # Roles

    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def is_store_manager(self) -> bool:
        return self.role == UserRole.STORE_MANAGER

    def is_customer(self) -> bool:
        return self.role == UserRole.CUSTOMER

    # Capabilities

    def can_manage_users(self) -> bool:
        return self.is_admin()

    def can_manage_products(self) -> bool:
        return self.is_admin() or self.is_store_manager()

    def can_manage_categories(self) -> bool:
        return self.is_admin()

    def can_approve_store_managers(self) -> bool:
        return self.is_admin()

    def can_place_orders(self) -> bool:
        return True

    def can_view_all_orders(self) -> bool:
        return self.is_admin() or self.is_store_manager()

    def can_view_user_details(self, other: "User") -> bool:
        return self.is_admin() or self.id == other.id

    def can_edit_user_details(self, other: "User") -> bool:
        if self.is_admin():
            return True
        return self.id == other.id and not other.is_admin()

    # Account security

    def is_account_locked(self) -> bool:
        """An account is locked while now < locked_until."""
        if self.locked_until is None:
            return False
        return self.clock.is_before(self.clock.now(), self.locked_until)

    def increment_login_attempts(self) -> None:
        self.login_attempts += 1
        self.touch()

    def lock_account(self, until: datetime) -> None:
        self.locked_until = until
        self.touch()

    def reset_login_attempts(self) -> None:
        self.login_attempts = 0
        self.locked_until = None
        self.touch()

    def record_login(self) -> None:
        """Successful login: clear failures and stamp last_login_at."""
        self.login_attempts = 0
        self.locked_until = None
        self.last_login_at = self.clock.now()
        self.touch()

    def verify_email(self) -> None:
        if self.is_email_verified:
            raise BusinessRuleViolationException(
                rule="EMAIL_ALREADY_VERIFIED",
                message="Email is already verified",
            )
        self.is_email_verified = True
        self.touch()

    def verify_phone(self) -> None:
        if self.is_phone_verified:
            raise BusinessRuleViolationException(
                rule="PHONE_ALREADY_VERIFIED",
                message="Phone is already verified",
            )
        self.is_phone_verified = True
        self.touch()

    # Validation

    def is_valid(self) -> bool:
        return self.validate_email() and self.validate_name() and self.validate_role()

    def validate_email(self) -> bool:
        return bool(self.email) and EMAIL_PATTERN.match(self.email) is not None

    def validate_name(self) -> bool:
        return bool(self.name) and len(self.name.strip()) >= 2

    def validate_role(self) -> bool:
        return UserRole.is_valid_value(self.role)

    def validate_phone(self) -> bool:
        # Phone is optional
        if not self.phone:
            return True
        return PHONE_PATTERN.match(self.phone) is not None

    @staticmethod
    def validate_password(password: str | None) -> bool:
        return bool(password) and len(password) >= MIN_PASSWORD_LENGTH

    # Display

    def get_display_name(self) -> str:
        return self.name or self.email

    def get_role_display_name(self) -> str:
        if isinstance(self.role, UserRole):
            return self.role.display_name
        return "Unknown"

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        return {
            **self._base_dict(),
            "email": self.email,
            "name": self.name,
            "role": str(getattr(self.role, "value", self.role)),
            "phone": self.phone,
            "address": self.address,
            "is_email_verified": self.is_email_verified,
            "is_phone_verified": self.is_phone_verified,
            "last_login_at": self.last_login_at.isoformat() if self.last_login_at else None,
            "login_attempts": self.login_attempts,
            "locked_until": self.locked_until.isoformat() if self.locked_until else None,
        }

    def to_public_dict(self) -> dict[str, Any]:
        data = self.to_dict()
        data.pop("login_attempts")
        data.pop("locked_until")
        return data

    def to_persistence(self) -> dict[str, Any]:
        return {**self.to_dict(), "password": self.password}

    @classmethod
    def from_dict(cls, data: dict[str, Any], clock: IClock | None = None) -> "User":
        clock = clock or SystemClock()
        return cls(
            id=data.get("id"),
            created_at=clock.create_date(data.get("created_at")),
            updated_at=clock.create_date(data.get("updated_at")),
            is_active=data.get("is_active", True),
            email=data.get("email") or "",
            name=data.get("name") or "",
            password=data.get("password") or "",
            role=data.get("role") or UserRole.CUSTOMER,
            phone=data.get("phone") or "",
            address=data.get("address") or "",
            is_email_verified=bool(data.get("is_email_verified", False)),
            is_phone_verified=bool(data.get("is_phone_verified", False)),
            last_login_at=clock.create_date(data.get("last_login_at")),
            login_attempts=int(data.get("login_attempts") or 0),
            locked_until=clock.create_date(data.get("locked_until")),
            clock=clock,
        )
