"""
E-commerce Use Cases

Business use cases for the e-commerce domain.
Each use case represents a single business operation and returns a
response dataclass instead of raising.
"""

from .approve_request import ApproveRequestResponse, ApproveRequestUseCase
from .authenticate_user_with_approval import (
    AuthenticateUserResponse,
    AuthenticateUserWithApprovalUseCase,
)
from .cancel_order import CancelOrderResponse, CancelOrderUseCase
from .create_store_manager_request import (
    CreateStoreManagerRequestResponse,
    CreateStoreManagerRequestUseCase,
)
from .initialize_system import (
    InitializationStatusResponse,
    InitializeSystemResponse,
    InitializeSystemUseCase,
)
from .manage_store_manager_requests import (
    ManageStoreManagerRequestsUseCase,
    PendingRequestsResponse,
    ReviewRequestResponse,
    SystemStatusResponse,
)
from .process_order import ProcessOrderResponse, ProcessOrderUseCase
from .register_store_manager import RegisterStoreManagerResponse, RegisterStoreManagerUseCase

__all__ = [
    # System bootstrap
    "InitializeSystemUseCase",
    "InitializeSystemResponse",
    "InitializationStatusResponse",
    # Store manager onboarding
    "RegisterStoreManagerUseCase",
    "RegisterStoreManagerResponse",
    "CreateStoreManagerRequestUseCase",
    "CreateStoreManagerRequestResponse",
    "ManageStoreManagerRequestsUseCase",
    "PendingRequestsResponse",
    "ReviewRequestResponse",
    "SystemStatusResponse",
    "ApproveRequestUseCase",
    "ApproveRequestResponse",
    # Authentication
    "AuthenticateUserWithApprovalUseCase",
    "AuthenticateUserResponse",
    # Orders
    "CancelOrderUseCase",
    "CancelOrderResponse",
    "ProcessOrderUseCase",
    "ProcessOrderResponse",
]
