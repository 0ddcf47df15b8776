"""
E-commerce Domain Services

Stateless policies that decide whether an action is allowed. They never
touch repositories.
"""

from storefront.domains.ecommerce.domain.services.admin_management_policy import (
    AdminManagementPolicy,
    PolicyDecision,
    SystemStatus,
)
from storefront.domains.ecommerce.domain.services.login_policy import LoginPolicy
from storefront.domains.ecommerce.domain.services.store_manager_approval_policy import (
    ApprovalResult,
    StoreManagerApprovalPolicy,
)

__all__ = [
    "AdminManagementPolicy",
    "PolicyDecision",
    "SystemStatus",
    "LoginPolicy",
    "StoreManagerApprovalPolicy",
    "ApprovalResult",
]
