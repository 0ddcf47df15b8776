"""
E-commerce Domain Container.

Single Responsibility: Wire all e-commerce domain dependencies.
Repository implementations are supplied by the hosting application.
"""

import logging
from dataclasses import dataclass

from storefront.config.settings import Settings, get_settings
from storefront.core.interfaces.clock import IClock
from storefront.core.shared.clock import SystemClock
from storefront.core.shared.logger import configure_logging
from storefront.domains.ecommerce.application.ports import (
    ICategoryRepository,
    IOrderRepository,
    IPasswordHasher,
    IProductRepository,
    IRequestRepository,
    IStoreManagerProfileRepository,
    IUserRepository,
)
from storefront.domains.ecommerce.application.use_cases import (
    ApproveRequestUseCase,
    AuthenticateUserWithApprovalUseCase,
    CancelOrderUseCase,
    CreateStoreManagerRequestUseCase,
    InitializeSystemUseCase,
    ManageStoreManagerRequestsUseCase,
    ProcessOrderUseCase,
    RegisterStoreManagerUseCase,
)
from storefront.domains.ecommerce.domain.services import (
    AdminManagementPolicy,
    LoginPolicy,
    StoreManagerApprovalPolicy,
)
from storefront.domains.ecommerce.infrastructure.services import BcryptPasswordHasher

logger = logging.getLogger(__name__)


@dataclass
class EcommerceRepositories:
    """Repository implementations used by the e-commerce use cases."""

    users: IUserRepository
    profiles: IStoreManagerProfileRepository
    requests: IRequestRepository
    orders: IOrderRepository
    products: IProductRepository
    categories: ICategoryRepository


def configure_logging_from_settings(settings: Settings) -> None:
    """Install root handlers from LOG_* settings. Meant for the host entry point."""
    configure_logging(
        level=settings.LOG_LEVEL,
        format_type=settings.LOG_FORMAT,
        log_file=settings.LOG_FILE,
    )


class EcommerceContainer:
    """
    E-commerce domain container.

    Single Responsibility: Create e-commerce policies and use cases.
    Policies, the clock and the password hasher are shared singletons;
    use cases are created on every call.
    """

    def __init__(
        self,
        repositories: EcommerceRepositories,
        settings: Settings | None = None,
        clock: IClock | None = None,
        password_hasher: IPasswordHasher | None = None,
        setup_logging: bool = False,
    ):
        """
        Initialize e-commerce container.

        Args:
            repositories: Repository implementations
            settings: Settings (defaults to the cached application settings)
            clock: Clock shared by every policy and entity factory
            password_hasher: Hasher (defaults to bcrypt with BCRYPT_ROUNDS)
            setup_logging: Reconfigure root logging from settings. Hosts that
                own their logging leave this off.
        """
        self.repositories = repositories
        self.settings = settings or get_settings()
        if setup_logging:
            configure_logging_from_settings(self.settings)

        self.clock = clock or SystemClock()
        self.password_hasher = password_hasher or BcryptPasswordHasher(rounds=self.settings.BCRYPT_ROUNDS)

        self.admin_policy = AdminManagementPolicy(self.clock)
        self.approval_policy = StoreManagerApprovalPolicy(
            clock=self.clock,
            admin_policy=self.admin_policy,
            store_placeholder=self.settings.STORE_PLACEHOLDER,
        )
        self.login_policy = LoginPolicy(
            max_attempts=self.settings.LOGIN_MAX_ATTEMPTS,
            lockout_duration=self.settings.login_lockout_duration,
            clock=self.clock,
        )

        logger.info(f"EcommerceContainer initialized ({self.settings.ENVIRONMENT})")

    # ==================== USE CASES ====================

    def create_initialize_system_use_case(self) -> InitializeSystemUseCase:
        return InitializeSystemUseCase(
            user_repository=self.repositories.users,
            password_hasher=self.password_hasher,
            admin_policy=self.admin_policy,
        )

    def create_register_store_manager_use_case(self) -> RegisterStoreManagerUseCase:
        return RegisterStoreManagerUseCase(
            user_repository=self.repositories.users,
            profile_repository=self.repositories.profiles,
            request_repository=self.repositories.requests,
            password_hasher=self.password_hasher,
            approval_policy=self.approval_policy,
        )

    def create_authenticate_user_use_case(self) -> AuthenticateUserWithApprovalUseCase:
        return AuthenticateUserWithApprovalUseCase(
            user_repository=self.repositories.users,
            profile_repository=self.repositories.profiles,
            password_hasher=self.password_hasher,
            approval_policy=self.approval_policy,
            login_policy=self.login_policy,
        )

    def create_manage_store_manager_requests_use_case(self) -> ManageStoreManagerRequestsUseCase:
        return ManageStoreManagerRequestsUseCase(
            user_repository=self.repositories.users,
            request_repository=self.repositories.requests,
            profile_repository=self.repositories.profiles,
            approval_policy=self.approval_policy,
        )

    def create_approve_request_use_case(self) -> ApproveRequestUseCase:
        return ApproveRequestUseCase(
            request_repository=self.repositories.requests,
            user_repository=self.repositories.users,
            category_repository=self.repositories.categories,
            profile_repository=self.repositories.profiles,
            approval_policy=self.approval_policy,
        )

    def create_create_store_manager_request_use_case(self) -> CreateStoreManagerRequestUseCase:
        return CreateStoreManagerRequestUseCase(
            request_repository=self.repositories.requests,
            user_repository=self.repositories.users,
            clock=self.clock,
        )

    def create_cancel_order_use_case(self) -> CancelOrderUseCase:
        return CancelOrderUseCase(
            order_repository=self.repositories.orders,
            product_repository=self.repositories.products,
        )

    def create_process_order_use_case(self) -> ProcessOrderUseCase:
        return ProcessOrderUseCase(order_repository=self.repositories.orders)
