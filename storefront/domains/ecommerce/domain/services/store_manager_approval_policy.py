"""
Store Manager Approval Policy

Rules for onboarding store managers: who may register, what gets
created on registration, who may log in, and the compound approval of a
registration request together with its profile.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from storefront.core.domain import DomainException
from storefront.core.interfaces.clock import IClock
from storefront.core.shared.clock import SystemClock

from ..entities.request import Request
from ..entities.store_manager_profile import StoreManagerProfile
from ..entities.user import User
from ..value_objects.user_role import UserRole
from .admin_management_policy import AdminManagementPolicy, PolicyDecision, SystemStatus

DEFAULT_STORE_PLACEHOLDER = "TBD"
APPROVAL_NOTE = "Store manager approved by admin"


@dataclass(frozen=True)
class ApprovalResult:
    """Outcome of an approval step. Truthy on success."""

    success: bool
    message: str

    def __bool__(self) -> bool:
        return self.success


class StoreManagerApprovalPolicy:
    """
    Domain service for the store-manager approval workflow.

    Delegates administrator checks to AdminManagementPolicy.
    """

    def __init__(
        self,
        clock: IClock | None = None,
        admin_policy: AdminManagementPolicy | None = None,
        store_placeholder: str = DEFAULT_STORE_PLACEHOLDER,
    ):
        self.clock = clock or SystemClock()
        self.admin_policy = admin_policy or AdminManagementPolicy(self.clock)
        self.store_placeholder = store_placeholder

    # Registration

    def can_register_as_store_manager(
        self, user_data: dict[str, Any], existing_users: Iterable[User] = ()
    ) -> PolicyDecision:
        admin_check = self.admin_policy.can_register_store_manager(existing_users)
        if not admin_check:
            return admin_check

        if not user_data.get("email") or not user_data.get("name"):
            return PolicyDecision.deny("Email and name are required")

        return PolicyDecision.allow()

    def create_store_manager_approval_request(
        self, user_data: dict[str, Any], requested_by: str | None
    ) -> Request:
        request_data = {
            "name": user_data.get("name"),
            "email": user_data.get("email"),
            "phone": user_data.get("phone"),
            "store_name": user_data.get("store_name") or self.store_placeholder,
            "store_address": user_data.get("store_address") or self.store_placeholder,
            "role": UserRole.STORE_MANAGER.value,
        }
        return Request.create_store_manager_approval_request(
            requested_by=requested_by,
            request_data=request_data,
            clock=self.clock,
        )

    def create_store_manager_profile(
        self, user_id: str | None, store_data: dict[str, Any] | None = None
    ) -> StoreManagerProfile:
        store_data = store_data or {}
        return StoreManagerProfile(
            user_id=user_id,
            is_approved=False,
            store_name=store_data.get("store_name") or self.store_placeholder,
            store_address=store_data.get("store_address") or self.store_placeholder,
            clock=self.clock,
        )

    # Login

    def can_user_login(self, user: User, profile: StoreManagerProfile | None = None) -> PolicyDecision:
        """
        Decide whether a user who passed credential checks may log in.

        Locked accounts are refused for every role. Store managers also
        need an approved profile.
        """
        if user.is_account_locked():
            return PolicyDecision.deny(
                "Your account is temporarily locked due to multiple failed login attempts."
            )

        if not user.is_store_manager():
            return PolicyDecision.allow()

        if profile is None:
            return PolicyDecision.deny("Store manager profile not found. Please contact support.")

        if not profile.can_login():
            return PolicyDecision.deny(
                "Your store manager account is pending approval. "
                "Please wait for an administrator to approve your request."
            )

        return PolicyDecision.allow()

    # Authorization (delegated)

    def can_view_store_manager_requests(self, user: User | None) -> PolicyDecision:
        return self.admin_policy.can_view_store_manager_requests(user)

    def can_approve_store_manager_requests(self, user: User | None) -> PolicyDecision:
        return self.admin_policy.can_approve_store_manager_requests(user)

    # Approval

    def approve_store_manager(self, profile: StoreManagerProfile, approver: User | None) -> ApprovalResult:
        decision = self.can_approve_store_manager_requests(approver)
        if not decision:
            return ApprovalResult(False, decision.reason or "")

        try:
            profile.approve(approver.id)
        except DomainException as e:
            return ApprovalResult(False, e.message)

        return ApprovalResult(True, "Store manager has been successfully approved and can now login")

    def reject_store_manager(self, profile: StoreManagerProfile, approver: User | None) -> ApprovalResult:
        decision = self.can_approve_store_manager_requests(approver)
        if not decision:
            return ApprovalResult(False, decision.reason or "")

        if not profile.is_approved:
            return ApprovalResult(True, "Store manager was already not approved")

        try:
            profile.revoke_approval()
        except DomainException as e:
            return ApprovalResult(False, e.message)

        return ApprovalResult(True, "Store manager approval has been revoked")

    def approve_store_manager_request(
        self,
        request: Request,
        profile: StoreManagerProfile,
        approver: User | None,
    ) -> ApprovalResult:
        """
        Approve a registration request and its profile together.

        Nothing is persisted here. When the profile step fails the
        request's review is reverted, so the caller can persist both
        only when the result is successful.
        """
        decision = self.can_approve_store_manager_requests(approver)
        if not decision:
            return ApprovalResult(False, decision.reason or "")

        if not request.is_store_manager_approval_request():
            return ApprovalResult(False, "Invalid request type for store manager approval")

        if not request.can_be_reviewed():
            return ApprovalResult(False, "Request cannot be reviewed in its current state")

        previous_notes = request.notes
        if not request.approve(approver.id, APPROVAL_NOTE):
            return ApprovalResult(False, "Failed to approve request")

        profile_result = self.approve_store_manager(profile, approver)
        if not profile_result:
            request.revert_review(previous_notes)
            return profile_result

        return ApprovalResult(True, "Store manager request and profile have been successfully approved")

    # Queries

    def get_approval_status_message(self, user: User, profile: StoreManagerProfile | None = None) -> str:
        if not user.is_store_manager():
            return "User is not a store manager"
        if profile is None:
            return "Store manager profile not found"
        if profile.is_approved:
            return "Store manager account is approved and active"
        return "Store manager account is pending approval from an administrator"

    def get_pending_store_manager_requests(self, requests: Iterable[Request]) -> list[Request]:
        return [r for r in requests if r.is_store_manager_approval_request() and r.is_pending()]

    def get_system_status(self, existing_users: Iterable[User] = ()) -> SystemStatus:
        return self.admin_policy.get_system_status(existing_users)
