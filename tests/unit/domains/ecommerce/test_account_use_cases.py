"""
Unit Tests for account use cases: system initialization, store manager
registration and authentication.

Repositories are AsyncMocks; entities are real.
"""

from unittest.mock import AsyncMock

import pytest

from storefront.domains.ecommerce.application.use_cases import (
    AuthenticateUserWithApprovalUseCase,
    InitializeSystemUseCase,
    RegisterStoreManagerUseCase,
)
from storefront.domains.ecommerce.domain.services import (
    AdminManagementPolicy,
    LoginPolicy,
    StoreManagerApprovalPolicy,
)
from storefront.domains.ecommerce.domain.value_objects import RequestStatus, RequestType, UserRole

pytestmark = [pytest.mark.unit, pytest.mark.use_case]


def _echo(entity):
    return entity


@pytest.fixture
def mock_user_repository():
    repo = AsyncMock()
    repo.find_all.return_value = []
    repo.find_by_email.return_value = None
    repo.create.side_effect = _echo
    repo.update.side_effect = _echo
    return repo


@pytest.fixture
def mock_profile_repository():
    repo = AsyncMock()
    repo.find_by_user_id.return_value = None
    repo.create.side_effect = _echo
    repo.update.side_effect = _echo
    return repo


@pytest.fixture
def mock_request_repository():
    repo = AsyncMock()
    repo.create.side_effect = _echo
    repo.update.side_effect = _echo
    return repo


# ============================================================================
# INITIALIZE SYSTEM
# ============================================================================


class TestInitializeSystemUseCase:
    @pytest.fixture
    def use_case(self, mock_user_repository, fake_hasher, fake_clock):
        return InitializeSystemUseCase(
            user_repository=mock_user_repository,
            password_hasher=fake_hasher,
            admin_policy=AdminManagementPolicy(fake_clock),
        )

    @pytest.mark.asyncio
    async def test_creates_first_admin(self, use_case, mock_user_repository):
        # Act
        response = await use_case.execute({"email": "root@example.com", "name": "Root", "password": "topsecret"})

        # Assert
        assert response.success is True
        assert response.user.role == UserRole.ADMIN
        assert response.user.password == "hashed:topsecret"
        assert response.message.startswith("System has been successfully initialized")
        mock_user_repository.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rejects_second_admin(self, use_case, mock_user_repository, admin_user):
        mock_user_repository.find_all.return_value = [admin_user]

        response = await use_case.execute({"email": "root@example.com", "name": "Root", "password": "topsecret"})

        assert response.success is False
        assert response.message == "Only one administrator is allowed in the system"
        mock_user_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rejects_invalid_data(self, use_case, mock_user_repository):
        response = await use_case.execute({"email": "bad", "name": "Root", "password": "topsecret"})

        assert response.success is False
        assert response.message == "Invalid admin data provided"

    @pytest.mark.asyncio
    async def test_rejects_duplicate_email(self, use_case, mock_user_repository, customer_user):
        mock_user_repository.find_by_email.return_value = customer_user

        response = await use_case.execute({"email": "customer@example.com", "name": "Root", "password": "x1"})

        assert response.success is False
        assert response.message == "A user with this email already exists"

    @pytest.mark.asyncio
    async def test_repository_failure_is_reported(self, use_case, mock_user_repository):
        mock_user_repository.find_all.side_effect = RuntimeError("db down")

        response = await use_case.execute({"email": "root@example.com", "name": "Root", "password": "x1"})

        assert response.success is False
        assert response.message == "System initialization failed. Please try again."
        assert response.error == "db down"

    @pytest.mark.asyncio
    async def test_check_status(self, use_case, mock_user_repository, admin_user):
        mock_user_repository.find_all.return_value = [admin_user]

        status = await use_case.check_initialization_status()

        assert status.is_initialized is True
        assert status.needs_initialization is False
        assert status.admin_count == 1

    @pytest.mark.asyncio
    async def test_check_status_never_raises(self, use_case, mock_user_repository):
        mock_user_repository.find_all.side_effect = RuntimeError("db down")

        status = await use_case.check_initialization_status()

        assert status.needs_initialization is True
        assert "Unable to check system status" in status.message


# ============================================================================
# REGISTER STORE MANAGER
# ============================================================================


class TestRegisterStoreManagerUseCase:
    @pytest.fixture
    def use_case(self, mock_user_repository, mock_profile_repository, mock_request_repository, fake_hasher, fake_clock):
        async def assign_id(user):
            user.id = "new-user"
            return user

        mock_user_repository.create.side_effect = assign_id
        return RegisterStoreManagerUseCase(
            user_repository=mock_user_repository,
            profile_repository=mock_profile_repository,
            request_repository=mock_request_repository,
            password_hasher=fake_hasher,
            approval_policy=StoreManagerApprovalPolicy(fake_clock),
        )

    @pytest.mark.asyncio
    async def test_no_admin_blocks_registration(self, use_case, mock_user_repository):
        response = await use_case.execute({"email": "m@s.com", "name": "M", "password": "p1", "phone": "1"})

        assert response.success is False
        assert "No administrator exists" in response.message
        mock_user_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_registers_pending_store_manager(
        self, use_case, mock_user_repository, mock_profile_repository, mock_request_repository, admin_user
    ):
        # Arrange
        mock_user_repository.find_all.return_value = [admin_user]

        # Act
        response = await use_case.execute(
            {"email": "m@s.com", "name": "Mia", "password": "p1", "phone": "1", "store_name": "Mia's"}
        )

        # Assert
        assert response.success is True
        assert response.user.role == UserRole.STORE_MANAGER
        assert response.user.password == "hashed:p1"
        assert response.profile.is_approved is False
        assert response.profile.user_id == "new-user"
        assert response.profile.store_name == "Mia's"
        assert response.request.type == RequestType.ACCOUNT_REGISTER
        assert response.request.status == RequestStatus.PENDING
        assert response.request.requested_by == "new-user"
        mock_profile_repository.create.assert_awaited_once()
        mock_request_repository.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_duplicate_email(self, use_case, mock_user_repository, admin_user, customer_user):
        mock_user_repository.find_all.return_value = [admin_user]
        mock_user_repository.find_by_email.return_value = customer_user

        response = await use_case.execute({"email": "customer@example.com", "name": "Mia", "password": "p1"})

        assert response.success is False
        assert response.message == "A user with this email already exists"

    @pytest.mark.asyncio
    async def test_invalid_user_data(self, use_case, mock_user_repository, admin_user):
        mock_user_repository.find_all.return_value = [admin_user]

        response = await use_case.execute({"email": "not-an-email", "name": "Mia", "password": "p1"})

        assert response.success is False
        assert response.message == "Invalid user data provided"
        mock_user_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_partial_failure_is_not_compensated(
        self, use_case, mock_user_repository, mock_request_repository, admin_user
    ):
        mock_user_repository.find_all.return_value = [admin_user]
        mock_request_repository.create.side_effect = RuntimeError("write failed")

        response = await use_case.execute({"email": "m@s.com", "name": "Mia", "password": "p1"})

        assert response.success is False
        assert response.message == "Registration failed. Please try again."
        assert response.error == "write failed"
        mock_user_repository.create.assert_awaited_once()


# ============================================================================
# AUTHENTICATE
# ============================================================================


class TestAuthenticateUserWithApprovalUseCase:
    @pytest.fixture
    def use_case(self, mock_user_repository, mock_profile_repository, fake_hasher, fake_clock):
        return AuthenticateUserWithApprovalUseCase(
            user_repository=mock_user_repository,
            profile_repository=mock_profile_repository,
            password_hasher=fake_hasher,
            approval_policy=StoreManagerApprovalPolicy(fake_clock),
            login_policy=LoginPolicy(clock=fake_clock),
        )

    @pytest.mark.asyncio
    async def test_unknown_email(self, use_case):
        response = await use_case.execute("nobody@example.com", "secret123")

        assert response.success is False
        assert response.message == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_successful_login(self, use_case, mock_user_repository, customer_user, fake_clock):
        customer_user.login_attempts = 2
        mock_user_repository.find_by_email.return_value = customer_user

        response = await use_case.execute("customer@example.com", "secret123")

        assert response.success is True
        assert response.message == "Login successful"
        assert response.user.login_attempts == 0
        assert response.user.last_login_at == fake_clock.now()
        assert response.profile is None

    @pytest.mark.asyncio
    async def test_wrong_password_counts_attempt(self, use_case, mock_user_repository, customer_user):
        mock_user_repository.find_by_email.return_value = customer_user

        response = await use_case.execute("customer@example.com", "wrong")

        assert response.message == "Invalid email or password"
        assert customer_user.login_attempts == 1
        mock_user_repository.update.assert_awaited_once_with(customer_user)

    @pytest.mark.asyncio
    async def test_five_failures_lock_the_account(self, use_case, mock_user_repository, customer_user):
        mock_user_repository.find_by_email.return_value = customer_user

        for _ in range(5):
            await use_case.execute("customer@example.com", "wrong")
        response = await use_case.execute("customer@example.com", "secret123")

        assert customer_user.is_account_locked()
        assert response.success is False
        assert "temporarily locked" in response.message

    @pytest.mark.asyncio
    async def test_lock_expires(self, use_case, mock_user_repository, customer_user, fake_clock):
        mock_user_repository.find_by_email.return_value = customer_user
        for _ in range(5):
            await use_case.execute("customer@example.com", "wrong")

        fake_clock.tick(hours=2, seconds=1)
        response = await use_case.execute("customer@example.com", "secret123")

        assert response.success is True

    @pytest.mark.asyncio
    async def test_store_manager_without_profile(self, use_case, mock_user_repository, store_manager_user):
        mock_user_repository.find_by_email.return_value = store_manager_user

        response = await use_case.execute("manager@example.com", "secret123")

        assert response.success is False
        assert response.message == "Store manager profile not found. Please contact support."

    @pytest.mark.asyncio
    async def test_unapproved_store_manager(
        self, use_case, mock_user_repository, mock_profile_repository, store_manager_user, make_profile
    ):
        mock_user_repository.find_by_email.return_value = store_manager_user
        mock_profile_repository.find_by_user_id.return_value = make_profile()

        response = await use_case.execute("manager@example.com", "secret123")

        assert response.success is False
        assert "pending approval" in response.message
        mock_user_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_approved_store_manager(
        self, use_case, mock_user_repository, mock_profile_repository, store_manager_user, make_profile
    ):
        profile = make_profile()
        profile.approve("admin1")
        mock_user_repository.find_by_email.return_value = store_manager_user
        mock_profile_repository.find_by_user_id.return_value = profile

        response = await use_case.execute("manager@example.com", "secret123")

        assert response.success is True
        assert response.profile is profile

    @pytest.mark.asyncio
    async def test_user_without_id(self, use_case, mock_user_repository, make_user):
        mock_user_repository.find_by_email.return_value = make_user(id=None)

        response = await use_case.execute("user1@example.com", "secret123")

        assert response.success is False
        assert response.error == "User record has no id"
