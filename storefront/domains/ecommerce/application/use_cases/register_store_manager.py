"""
Register Store Manager Use Case

Self-service registration of a store manager. The account starts
unapproved; a pending account_register_request is raised for an
administrator to review.
"""

from dataclasses import dataclass
from typing import Any

from storefront.core.shared.logger import get_use_case_logger
from storefront.domains.ecommerce.application.ports import (
    IPasswordHasher,
    IRequestRepository,
    IStoreManagerProfileRepository,
    IUserRepository,
)
from storefront.domains.ecommerce.domain.entities.request import Request
from storefront.domains.ecommerce.domain.entities.store_manager_profile import StoreManagerProfile
from storefront.domains.ecommerce.domain.entities.user import User
from storefront.domains.ecommerce.domain.services.store_manager_approval_policy import StoreManagerApprovalPolicy
from storefront.domains.ecommerce.domain.value_objects.user_role import UserRole

logger = get_use_case_logger("register_store_manager")


@dataclass
class RegisterStoreManagerResponse:
    """Response from store manager registration."""

    success: bool = False
    message: str = ""
    user: User | None = None
    profile: StoreManagerProfile | None = None
    request: Request | None = None
    error: str | None = None


class RegisterStoreManagerUseCase:
    """
    Use Case: Register Store Manager

    Persists the user, then the profile, then the approval request.
    The three writes are not atomic: a failure after the first write
    leaves the earlier rows in place.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        profile_repository: IStoreManagerProfileRepository,
        request_repository: IRequestRepository,
        password_hasher: IPasswordHasher,
        approval_policy: StoreManagerApprovalPolicy,
    ):
        self.user_repository = user_repository
        self.profile_repository = profile_repository
        self.request_repository = request_repository
        self.password_hasher = password_hasher
        self.policy = approval_policy

    async def execute(self, user_data: dict[str, Any]) -> RegisterStoreManagerResponse:
        """
        Register a store manager.

        Args:
            user_data: email, name, password, phone, optional address,
                store_name and store_address
        """
        try:
            existing_users = await self.user_repository.find_all()

            decision = self.policy.can_register_as_store_manager(user_data, existing_users)
            if not decision:
                return RegisterStoreManagerResponse(success=False, message=decision.reason or "")

            existing = await self.user_repository.find_by_email(user_data["email"])
            if existing:
                return RegisterStoreManagerResponse(
                    success=False, message="A user with this email already exists"
                )

            password = user_data.get("password")
            if not password:
                return RegisterStoreManagerResponse(success=False, message="Invalid user data provided")

            user = User(
                email=user_data["email"],
                name=user_data["name"],
                password=await self.password_hasher.hash(password),
                role=UserRole.STORE_MANAGER,
                phone=user_data.get("phone") or "",
                address=user_data.get("address") or "",
                clock=self.policy.clock,
            )
            if not user.is_valid():
                return RegisterStoreManagerResponse(success=False, message="Invalid user data provided")

            saved_user = await self.user_repository.create(user)

            profile = self.policy.create_store_manager_profile(saved_user.id, user_data)
            saved_profile = await self.profile_repository.create(profile)

            request = self.policy.create_store_manager_approval_request(user_data, saved_user.id)
            saved_request = await self.request_repository.create(request)

            logger.info(
                "Store manager registered, awaiting approval",
                user_id=saved_user.id,
                request_id=saved_request.id,
            )

            return RegisterStoreManagerResponse(
                success=True,
                message=(
                    "Store manager registration successful. "
                    "Your account is pending approval from an administrator."
                ),
                user=saved_user,
                profile=saved_profile,
                request=saved_request,
            )

        except Exception as e:
            logger.error(f"Error registering store manager: {e}")
            return RegisterStoreManagerResponse(
                success=False,
                message="Registration failed. Please try again.",
                error=str(e),
            )


__all__ = ["RegisterStoreManagerUseCase", "RegisterStoreManagerResponse"]
