"""
User Role Value Object
"""

from storefront.core.domain import StatusEnum


class UserRole(StatusEnum):
    """Closed set of roles. At most one ADMIN exists system-wide."""

    ADMIN = "admin"
    STORE_MANAGER = "store_manager"
    CUSTOMER = "customer"

    @property
    def display_name(self) -> str:
        return {
            "admin": "Administrator",
            "store_manager": "Store Manager",
            "customer": "Customer",
        }[self.value]
