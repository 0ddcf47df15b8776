"""
Create Store Manager Request Use Case

An existing customer asks to be promoted to store manager.
"""

from dataclasses import dataclass
from typing import Any

from storefront.core.interfaces.clock import IClock
from storefront.core.shared.logger import get_use_case_logger
from storefront.domains.ecommerce.application.ports import IRequestRepository, IUserRepository
from storefront.domains.ecommerce.domain.entities.request import Request
from storefront.domains.ecommerce.domain.value_objects.request_status import RequestType
from storefront.domains.ecommerce.domain.value_objects.user_role import UserRole

logger = get_use_case_logger("create_store_manager_request")

REQUIRED_FIELDS = (
    ("store_name", "Store name is required"),
    ("store_address", "Store address is required"),
    ("business_license", "Business license is required"),
)


@dataclass
class CreateStoreManagerRequestResponse:
    success: bool = False
    message: str = ""
    request: Request | None = None
    error: str | None = None


class CreateStoreManagerRequestUseCase:
    """Use Case: Create Store Manager Request"""

    def __init__(
        self,
        request_repository: IRequestRepository,
        user_repository: IUserRepository,
        clock: IClock | None = None,
    ):
        self.request_repository = request_repository
        self.user_repository = user_repository
        self.clock = clock

    async def execute(self, user_id: str, request_data: dict[str, Any] | None) -> CreateStoreManagerRequestResponse:
        try:
            if not user_id:
                return CreateStoreManagerRequestResponse(success=False, message="User ID is required")

            request_data = request_data or {}
            for key, message in REQUIRED_FIELDS:
                if not request_data.get(key):
                    return CreateStoreManagerRequestResponse(success=False, message=message)

            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                return CreateStoreManagerRequestResponse(success=False, message="User not found")

            if user.role in (UserRole.STORE_MANAGER, UserRole.ADMIN):
                return CreateStoreManagerRequestResponse(
                    success=False, message="User already has store manager privileges"
                )

            existing = await self.request_repository.find_by_user_and_type(
                user_id, RequestType.ACCOUNT_REGISTER.value
            )
            if any(r.is_pending() for r in existing or []):
                return CreateStoreManagerRequestResponse(
                    success=False, message="You already have a pending store manager request"
                )

            request = Request.create_store_manager_approval_request(
                requested_by=user_id,
                request_data={
                    "name": user.name,
                    "email": user.email,
                    "phone": user.phone,
                    "reason": request_data.get("reason") or "",
                    "experience": request_data.get("experience") or "",
                    "store_name": request_data["store_name"],
                    "store_address": request_data["store_address"],
                    "business_license": request_data["business_license"],
                    "role": UserRole.STORE_MANAGER.value,
                },
                clock=self.clock,
                notes=request_data.get("notes") or "",
            )
            saved = await self.request_repository.create(request)

            logger.info("Store manager request submitted", user_id=user_id, request_id=saved.id)

            return CreateStoreManagerRequestResponse(
                success=True,
                message="Store manager request submitted successfully",
                request=saved,
            )

        except Exception as e:
            logger.error(f"Error creating store manager request: {e}", user_id=user_id)
            return CreateStoreManagerRequestResponse(
                success=False,
                message="Failed to submit store manager request",
                error=str(e),
            )


__all__ = ["CreateStoreManagerRequestUseCase", "CreateStoreManagerRequestResponse"]
