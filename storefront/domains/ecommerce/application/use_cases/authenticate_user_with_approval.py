"""
Authenticate User With Approval Use Case

Password login that also enforces account lockout and store-manager
approval.
"""

from dataclasses import dataclass

from storefront.core.shared.logger import get_use_case_logger
from storefront.domains.ecommerce.application.ports import (
    IPasswordHasher,
    IStoreManagerProfileRepository,
    IUserRepository,
)
from storefront.domains.ecommerce.domain.entities.store_manager_profile import StoreManagerProfile
from storefront.domains.ecommerce.domain.entities.user import User
from storefront.domains.ecommerce.domain.services.login_policy import LoginPolicy
from storefront.domains.ecommerce.domain.services.store_manager_approval_policy import StoreManagerApprovalPolicy

logger = get_use_case_logger("authenticate_user_with_approval")

INVALID_CREDENTIALS = "Invalid email or password"
ACCOUNT_LOCKED = "Your account is temporarily locked due to multiple failed login attempts."


@dataclass
class AuthenticateUserResponse:
    """Response from authentication."""

    success: bool = False
    message: str = ""
    user: User | None = None
    profile: StoreManagerProfile | None = None
    error: str | None = None


class AuthenticateUserWithApprovalUseCase:
    """
    Use Case: Authenticate User With Approval

    Unknown emails and wrong passwords get the same message so the
    response never reveals whether an account exists.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        profile_repository: IStoreManagerProfileRepository,
        password_hasher: IPasswordHasher,
        approval_policy: StoreManagerApprovalPolicy,
        login_policy: LoginPolicy,
    ):
        self.user_repository = user_repository
        self.profile_repository = profile_repository
        self.password_hasher = password_hasher
        self.policy = approval_policy
        self.login_policy = login_policy

    async def execute(self, email: str, password: str) -> AuthenticateUserResponse:
        try:
            user = await self.user_repository.find_by_email(email)
            if user is None:
                return AuthenticateUserResponse(success=False, message=INVALID_CREDENTIALS)

            if not user.id:
                logger.error("User record has no id", email=email)
                return AuthenticateUserResponse(
                    success=False,
                    message="Authentication failed. Please try again.",
                    error="User record has no id",
                )

            if user.is_account_locked():
                return AuthenticateUserResponse(success=False, message=ACCOUNT_LOCKED)

            if not await self.password_hasher.compare(password, user.password):
                await self._record_failure(user)
                return AuthenticateUserResponse(success=False, message=INVALID_CREDENTIALS)

            profile = None
            if user.is_store_manager():
                profile = await self.profile_repository.find_by_user_id(user.id)
                if profile is None:
                    return AuthenticateUserResponse(
                        success=False,
                        message="Store manager profile not found. Please contact support.",
                    )

            decision = self.policy.can_user_login(user, profile)
            if not decision:
                return AuthenticateUserResponse(success=False, message=decision.reason or "")

            user.record_login()
            saved_user = await self.user_repository.update(user)

            logger.info("User logged in", user_id=user.id, role=user.get_role_display_name())

            return AuthenticateUserResponse(
                success=True,
                message="Login successful",
                user=saved_user,
                profile=profile,
            )

        except Exception as e:
            logger.error(f"Error authenticating user: {e}")
            return AuthenticateUserResponse(
                success=False,
                message="Authentication failed. Please try again.",
                error=str(e),
            )

    async def _record_failure(self, user: User) -> None:
        user.increment_login_attempts()
        if self.login_policy.should_lock(user):
            user.lock_account(self.login_policy.lockout_until())
            logger.warning("Account locked after failed logins", user_id=user.id, attempts=user.login_attempts)
        await self.user_repository.update(user)


__all__ = ["AuthenticateUserWithApprovalUseCase", "AuthenticateUserResponse"]
