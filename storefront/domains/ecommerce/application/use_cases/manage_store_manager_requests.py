"""
Manage Store Manager Requests Use Case

Administrator operations over store-manager registration requests.
"""

from dataclasses import dataclass, field

from storefront.core.shared.logger import get_use_case_logger
from storefront.domains.ecommerce.application.ports import (
    IRequestRepository,
    IStoreManagerProfileRepository,
    IUserRepository,
)
from storefront.domains.ecommerce.domain.entities.request import Request
from storefront.domains.ecommerce.domain.entities.store_manager_profile import StoreManagerProfile
from storefront.domains.ecommerce.domain.services.admin_management_policy import SystemStatus
from storefront.domains.ecommerce.domain.services.store_manager_approval_policy import StoreManagerApprovalPolicy

logger = get_use_case_logger("manage_store_manager_requests")

ADMIN_NOT_FOUND = "Admin user not found"
REJECTION_NOTE = "Store manager request rejected by admin"


@dataclass
class PendingRequestsResponse:
    success: bool = False
    message: str = ""
    requests: list[Request] = field(default_factory=list)
    error: str | None = None


@dataclass
class ReviewRequestResponse:
    """Response from approving or rejecting a store manager request."""

    success: bool = False
    message: str = ""
    request: Request | None = None
    profile: StoreManagerProfile | None = None
    error: str | None = None


@dataclass
class SystemStatusResponse:
    success: bool = False
    message: str = ""
    status: SystemStatus | None = None
    error: str | None = None


class ManageStoreManagerRequestsUseCase:
    """
    Use Case: Manage Store Manager Requests

    Every operation loads the acting administrator first and checks
    authorization through the approval policy.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        request_repository: IRequestRepository,
        profile_repository: IStoreManagerProfileRepository,
        approval_policy: StoreManagerApprovalPolicy,
    ):
        self.user_repository = user_repository
        self.request_repository = request_repository
        self.profile_repository = profile_repository
        self.policy = approval_policy

    async def get_pending_requests(self, admin_user_id: str) -> PendingRequestsResponse:
        try:
            admin = await self.user_repository.find_by_id(admin_user_id)
            if admin is None:
                return PendingRequestsResponse(success=False, message=ADMIN_NOT_FOUND)

            decision = self.policy.can_view_store_manager_requests(admin)
            if not decision:
                return PendingRequestsResponse(success=False, message=decision.reason or "")

            all_requests = await self.request_repository.find_all()
            pending = self.policy.get_pending_store_manager_requests(all_requests)

            return PendingRequestsResponse(
                success=True,
                message=f"Found {len(pending)} pending store manager requests",
                requests=pending,
            )

        except Exception as e:
            logger.error(f"Error retrieving pending requests: {e}")
            return PendingRequestsResponse(
                success=False, message="Failed to retrieve pending requests", error=str(e)
            )

    async def approve_request(self, request_id: str, admin_user_id: str) -> ReviewRequestResponse:
        """
        Approve a registration request and its profile.

        Both are persisted only when the policy reports success; on
        failure the policy has already reverted the in-memory request.
        """
        try:
            admin = await self.user_repository.find_by_id(admin_user_id)
            if admin is None:
                return ReviewRequestResponse(success=False, message=ADMIN_NOT_FOUND)

            decision = self.policy.can_approve_store_manager_requests(admin)
            if not decision:
                return ReviewRequestResponse(success=False, message=decision.reason or "")

            request = await self.request_repository.find_by_id(request_id)
            if request is None:
                return ReviewRequestResponse(success=False, message="Request not found")

            profile = await self.profile_repository.find_by_user_id(request.requested_by)
            if profile is None:
                return ReviewRequestResponse(success=False, message="Store manager profile not found")

            result = self.policy.approve_store_manager_request(request, profile, admin)
            if not result:
                return ReviewRequestResponse(success=False, message=result.message, request=request)

            saved_request = await self.request_repository.update(request)
            saved_profile = await self.profile_repository.update(profile)

            logger.info("Store manager request approved", request_id=request_id, admin_id=admin_user_id)

            return ReviewRequestResponse(
                success=True,
                message=result.message,
                request=saved_request,
                profile=saved_profile,
            )

        except Exception as e:
            logger.error(f"Error approving store manager request: {e}", request_id=request_id)
            return ReviewRequestResponse(success=False, message="Failed to approve request", error=str(e))

    async def reject_request(self, request_id: str, admin_user_id: str, reason: str = "") -> ReviewRequestResponse:
        try:
            admin = await self.user_repository.find_by_id(admin_user_id)
            if admin is None:
                return ReviewRequestResponse(success=False, message=ADMIN_NOT_FOUND)

            decision = self.policy.can_approve_store_manager_requests(admin)
            if not decision:
                return ReviewRequestResponse(success=False, message=decision.reason or "")

            request = await self.request_repository.find_by_id(request_id)
            if request is None:
                return ReviewRequestResponse(success=False, message="Request not found")

            if not request.reject(admin.id, reason, REJECTION_NOTE):
                return ReviewRequestResponse(success=False, message="Failed to reject request", request=request)

            saved_request = await self.request_repository.update(request)

            logger.info("Store manager request rejected", request_id=request_id, admin_id=admin_user_id)

            return ReviewRequestResponse(
                success=True,
                message="Store manager request has been rejected",
                request=saved_request,
            )

        except Exception as e:
            logger.error(f"Error rejecting store manager request: {e}", request_id=request_id)
            return ReviewRequestResponse(success=False, message="Failed to reject request", error=str(e))

    async def get_system_status(self, admin_user_id: str) -> SystemStatusResponse:
        try:
            admin = await self.user_repository.find_by_id(admin_user_id)
            if admin is None:
                return SystemStatusResponse(success=False, message=ADMIN_NOT_FOUND)

            if not admin.is_admin():
                return SystemStatusResponse(success=False, message="Only administrators can view system status")

            all_users = await self.user_repository.find_all()
            status = self.policy.get_system_status(all_users)

            return SystemStatusResponse(
                success=True,
                message="System status retrieved successfully",
                status=status,
            )

        except Exception as e:
            logger.error(f"Error retrieving system status: {e}")
            return SystemStatusResponse(success=False, message="Failed to retrieve system status", error=str(e))


__all__ = [
    "ManageStoreManagerRequestsUseCase",
    "PendingRequestsResponse",
    "ReviewRequestResponse",
    "SystemStatusResponse",
]
