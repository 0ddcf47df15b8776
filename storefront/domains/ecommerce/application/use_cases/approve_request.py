"""
Approve Request Use Case

Approves or rejects a pending review request and applies the
type-specific side effect of an approval (category changes, store
manager activation).
"""

from dataclasses import dataclass
from typing import Any

from storefront.core.domain import DomainException, EntityNotFoundException
from storefront.core.shared.logger import get_use_case_logger
from storefront.domains.ecommerce.application.ports import (
    ICategoryRepository,
    IRequestRepository,
    IStoreManagerProfileRepository,
    IUserRepository,
)
from storefront.domains.ecommerce.domain.entities.request import Request
from storefront.domains.ecommerce.domain.services.store_manager_approval_policy import StoreManagerApprovalPolicy
from storefront.domains.ecommerce.domain.value_objects.request_status import RequestType
from storefront.domains.ecommerce.domain.value_objects.user_role import UserRole

logger = get_use_case_logger("approve_request")

REVIEWER_ROLES = (UserRole.ADMIN.value, UserRole.STORE_MANAGER.value)


@dataclass
class ApproveRequestResponse:
    """Response from reviewing a request."""

    success: bool = False
    message: str = ""
    request: Request | None = None
    error: str | None = None


class ApproveRequestUseCase:
    """
    Use Case: Approve Request

    Authorization is by role string. The reviewer is only loaded for
    account registrations, where the approval policy needs the User.
    The side effect runs before the request is persisted, so a failed
    side effect never leaves an approved request behind.
    """

    def __init__(
        self,
        request_repository: IRequestRepository,
        user_repository: IUserRepository,
        category_repository: ICategoryRepository,
        profile_repository: IStoreManagerProfileRepository,
        approval_policy: StoreManagerApprovalPolicy,
    ):
        self.request_repository = request_repository
        self.user_repository = user_repository
        self.category_repository = category_repository
        self.profile_repository = profile_repository
        self.policy = approval_policy

    async def execute(
        self,
        request_id: str,
        reviewer_id: str,
        reviewer_role: str,
        action: str,
        reason: str | None = None,
    ) -> ApproveRequestResponse:
        """
        Review a request.

        Args:
            request_id: Request to review
            reviewer_id: ID of the reviewing user
            reviewer_role: Role string of the reviewing user
            action: "approve" or "reject"
            reason: Rejection reason
        """
        try:
            if reviewer_role not in REVIEWER_ROLES:
                return ApproveRequestResponse(success=False, message="Insufficient permissions to approve request")

            request = await self.request_repository.find_by_id(request_id)
            if request is None:
                return ApproveRequestResponse(success=False, message="Request not found")

            if not request.can_be_reviewed():
                return ApproveRequestResponse(
                    success=False, message="Request cannot be reviewed in current status"
                )

            if not request.validate_type():
                return ApproveRequestResponse(success=False, message="Unsupported request type")

            if action == "approve":
                return await self._approve(request, reviewer_id)
            if action == "reject":
                return await self._reject(request, reviewer_id, reason or "")

            return ApproveRequestResponse(success=False, message="Invalid action")

        except DomainException as e:
            logger.warning(f"Request not processed: {e.message}", request_id=request_id, code=e.code)
            return ApproveRequestResponse(success=False, message=e.message, error=e.message)
        except Exception as e:
            logger.error(f"Error processing request: {e}", request_id=request_id, action=action)
            return ApproveRequestResponse(success=False, message="Failed to process request", error=str(e))

    async def _approve(self, request: Request, reviewer_id: str) -> ApproveRequestResponse:
        if request.type == RequestType.ACCOUNT_REGISTER:
            return await self._approve_store_manager_registration(request, reviewer_id)

        request.approve(reviewer_id)

        if request.type == RequestType.CATEGORY_ADD:
            await self.category_repository.create(dict(request.request_data))
        elif request.type == RequestType.CATEGORY_UPDATE:
            category_id = self._category_id(request.request_data)
            await self.category_repository.update(
                category_id,
                {
                    "name": request.request_data.get("name"),
                    "description": request.request_data.get("description"),
                },
            )
        elif request.type == RequestType.CATEGORY_DELETE:
            await self.category_repository.delete(self._category_id(request.request_data))

        saved = await self.request_repository.update(request)
        logger.info(
            "Request approved",
            request_id=request.id,
            request_type=request.type.value,
            reviewer_id=reviewer_id,
        )
        return ApproveRequestResponse(success=True, message="Request approved successfully", request=saved)

    async def _approve_store_manager_registration(self, request: Request, reviewer_id: str) -> ApproveRequestResponse:
        approver = await self.user_repository.find_by_id(reviewer_id)

        user = await self.user_repository.find_by_id(request.requested_by)
        if user is None:
            raise EntityNotFoundException(
                "User", request.requested_by, "User not found for store manager registration"
            )

        profile = await self.profile_repository.find_by_user_id(user.id)
        if profile is None:
            raise EntityNotFoundException("StoreManagerProfile", user.id, "Store manager profile not found")

        result = self.policy.approve_store_manager_request(request, profile, approver)
        if not result:
            return ApproveRequestResponse(success=False, message=result.message, request=request)

        await self.profile_repository.update(profile)
        saved = await self.request_repository.update(request)
        logger.info("Store manager registration approved", request_id=request.id, reviewer_id=reviewer_id)
        return ApproveRequestResponse(success=True, message="Request approved successfully", request=saved)

    async def _reject(self, request: Request, reviewer_id: str, reason: str) -> ApproveRequestResponse:
        request.reject(reviewer_id, reason)
        saved = await self.request_repository.update(request)
        logger.info("Request rejected", request_id=request.id, reviewer_id=reviewer_id)
        return ApproveRequestResponse(success=True, message="Request rejected successfully", request=saved)

    @staticmethod
    def _category_id(request_data: dict[str, Any]) -> str:
        original = request_data.get("original_category") or {}
        category_id = original.get("id") or request_data.get("id")
        if not category_id:
            raise ValueError("Category ID not found in request data")
        return category_id


__all__ = ["ApproveRequestUseCase", "ApproveRequestResponse"]
