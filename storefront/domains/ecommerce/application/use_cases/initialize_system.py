"""
Initialize System Use Case

Creates the first (and only) administrator account.
"""

from dataclasses import dataclass
from typing import Any

from storefront.core.shared.logger import get_use_case_logger
from storefront.domains.ecommerce.application.ports import IPasswordHasher, IUserRepository
from storefront.domains.ecommerce.domain.entities.user import User
from storefront.domains.ecommerce.domain.services.admin_management_policy import AdminManagementPolicy

logger = get_use_case_logger("initialize_system")


@dataclass
class InitializeSystemResponse:
    """Response from system initialization."""

    success: bool = False
    message: str = ""
    user: User | None = None
    error: str | None = None


@dataclass
class InitializationStatusResponse:
    """Read-only bootstrap status."""

    needs_initialization: bool
    is_initialized: bool
    admin_count: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "needs_initialization": self.needs_initialization,
            "is_initialized": self.is_initialized,
            "admin_count": self.admin_count,
            "message": self.message,
        }


class InitializeSystemUseCase:
    """
    Use Case: Initialize System

    Responsibilities:
    - Enforce the single-administrator rule
    - Build and validate the administrator
    - Reject duplicate emails
    - Hash the password and persist
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
        admin_policy: AdminManagementPolicy,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.policy = admin_policy

    async def execute(self, admin_data: dict[str, Any]) -> InitializeSystemResponse:
        """
        Create the first administrator.

        Args:
            admin_data: email, name, password (plain), optional phone and address
        """
        try:
            existing_users = await self.user_repository.find_all()

            decision = self.policy.can_create_admin(existing_users)
            if not decision:
                return InitializeSystemResponse(success=False, message=decision.reason or "")

            admin = self.policy.create_first_admin(admin_data)
            if not admin.is_valid() or not admin.password:
                return InitializeSystemResponse(success=False, message="Invalid admin data provided")

            existing = await self.user_repository.find_by_email(admin.email)
            if existing:
                return InitializeSystemResponse(success=False, message="A user with this email already exists")

            admin.password = await self.password_hasher.hash(admin.password)
            saved_admin = await self.user_repository.create(admin)

            logger.info("System initialized with first administrator", user_id=saved_admin.id)

            return InitializeSystemResponse(
                success=True,
                message="System has been successfully initialized with the first administrator account.",
                user=saved_admin,
            )

        except Exception as e:
            logger.error(f"Error initializing system: {e}")
            return InitializeSystemResponse(
                success=False,
                message="System initialization failed. Please try again.",
                error=str(e),
            )

    async def check_initialization_status(self) -> InitializationStatusResponse:
        """Report whether an administrator exists. Never raises."""
        try:
            existing_users = await self.user_repository.find_all()
            status = self.policy.get_system_status(existing_users)
            return InitializationStatusResponse(
                needs_initialization=status.needs_admin,
                is_initialized=status.is_initialized,
                admin_count=status.admin_count,
                message=self.policy.get_initialization_message(existing_users),
            )
        except Exception as e:
            logger.error(f"Error checking initialization status: {e}")
            return InitializationStatusResponse(
                needs_initialization=True,
                is_initialized=False,
                admin_count=0,
                message="Unable to check system status. System may need initialization.",
            )


__all__ = ["InitializeSystemUseCase", "InitializeSystemResponse", "InitializationStatusResponse"]
