"""
Unit Tests for order use cases: customer cancellation and staff
fulfilment actions.
"""

import logging
from unittest.mock import AsyncMock

import pytest

from storefront.domains.ecommerce.application.use_cases import CancelOrderUseCase, ProcessOrderUseCase
from storefront.domains.ecommerce.domain.value_objects import OrderStatus

pytestmark = [pytest.mark.unit, pytest.mark.use_case]


@pytest.fixture
def mock_order_repository():
    repo = AsyncMock()
    repo.find_by_id.return_value = None
    repo.update.side_effect = lambda order: order
    return repo


@pytest.fixture
def mock_product_repository():
    repo = AsyncMock()
    repo.add_stock.return_value = True
    return repo


# ============================================================================
# CANCEL ORDER
# ============================================================================


class TestCancelOrderUseCase:
    @pytest.fixture
    def use_case(self, mock_order_repository, mock_product_repository):
        return CancelOrderUseCase(mock_order_repository, mock_product_repository)

    @pytest.mark.asyncio
    async def test_customer_cancels_own_order(
        self, use_case, mock_order_repository, mock_product_repository, make_order, fake_clock
    ):
        # Arrange
        mock_order_repository.find_by_id.return_value = make_order()

        # Act
        response = await use_case.execute("order1", "user1", "customer", "found it cheaper")

        # Assert
        assert response.success is True
        assert response.message == "Order cancelled successfully"
        assert response.order.status == OrderStatus.CANCELLED
        assert response.order.cancellation_reason == "found it cheaper"
        assert response.order.cancelled_at == fake_clock.now()
        assert mock_product_repository.add_stock.await_count == 2
        mock_product_repository.add_stock.assert_any_await("p1", 4)
        mock_product_repository.add_stock.assert_any_await("p2", 1)

    @pytest.mark.asyncio
    async def test_customer_cannot_cancel_others_order(
        self, use_case, mock_order_repository, mock_product_repository, make_order
    ):
        mock_order_repository.find_by_id.return_value = make_order(user_id="someone-else")

        response = await use_case.execute("order1", "user1", "customer")

        assert response.success is False
        assert response.message == "You can only cancel your own orders"
        mock_product_repository.add_stock.assert_not_awaited()
        mock_order_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_admin_cancels_any_order(self, use_case, mock_order_repository, make_order):
        mock_order_repository.find_by_id.return_value = make_order(user_id="someone-else", status="confirmed")

        response = await use_case.execute("order1", "admin1", "admin")

        assert response.success is True

    @pytest.mark.asyncio
    async def test_shipped_order_cannot_be_cancelled(
        self, use_case, mock_order_repository, mock_product_repository, make_order
    ):
        mock_order_repository.find_by_id.return_value = make_order(status="shipped")

        response = await use_case.execute("order1", "admin1", "admin")

        assert response.success is False
        assert response.message == "Order cannot be cancelled in its current status"
        mock_product_repository.add_stock.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_stock_failure_does_not_block_cancellation(
        self, use_case, mock_order_repository, mock_product_repository, make_order
    ):
        mock_order_repository.find_by_id.return_value = make_order()
        mock_product_repository.add_stock.side_effect = [RuntimeError("inventory offline"), False]

        response = await use_case.execute("order1", "user1", "customer")

        assert response.success is True
        assert response.order.is_cancelled()
        mock_order_repository.update.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_cancellation_logs_order_context(self, use_case, mock_order_repository, make_order, caplog):
        mock_order_repository.find_by_id.return_value = make_order()

        with caplog.at_level(logging.INFO, logger="use_case.cancel_order"):
            await use_case.execute("order1", "user1", "customer")

        record = next(r for r in caplog.records if r.getMessage() == "Order cancelled")
        assert record.extra_data["order_id"] == "order1"
        assert record.extra_data["user_id"] == "user1"
        assert record.extra_data["use_case"] == "cancel_order"

    @pytest.mark.asyncio
    async def test_missing_order_id(self, use_case, mock_order_repository):
        response = await use_case.execute("", "user1", "customer")

        assert response.message == "Order ID is required"
        mock_order_repository.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_role(self, use_case):
        response = await use_case.execute("order1", "user1", "guest")

        assert response.message == "Insufficient permissions to cancel order"

    @pytest.mark.asyncio
    async def test_order_not_found(self, use_case):
        response = await use_case.execute("order1", "user1", "customer")

        assert response.message == "Order not found"

    @pytest.mark.asyncio
    async def test_repository_failure(self, use_case, mock_order_repository, make_order):
        mock_order_repository.find_by_id.return_value = make_order()
        mock_order_repository.update.side_effect = RuntimeError("disk full")

        response = await use_case.execute("order1", "user1", "customer")

        assert response.success is False
        assert response.message == "Failed to cancel order"
        assert response.error == "disk full"


# ============================================================================
# PROCESS ORDER
# ============================================================================


class TestProcessOrderUseCase:
    @pytest.fixture
    def use_case(self, mock_order_repository):
        return ProcessOrderUseCase(mock_order_repository)

    @pytest.mark.asyncio
    async def test_confirm_moves_to_processing(self, use_case, mock_order_repository, make_order, fake_clock):
        mock_order_repository.find_by_id.return_value = make_order()

        response = await use_case.execute("order1", "confirm", "store_manager", "manager1")

        assert response.success is True
        assert response.message == "Order confirmed successfully"
        assert response.order.status == OrderStatus.PROCESSING
        assert response.order.processed_by == "manager1"
        assert response.order.processed_at == fake_clock.now()

    @pytest.mark.asyncio
    async def test_ship_sets_tracking_number(self, use_case, mock_order_repository, make_order):
        mock_order_repository.find_by_id.return_value = make_order(status="processing")

        response = await use_case.execute("order1", "ship", "admin", "admin1", tracking_number="TRK-99")

        assert response.success is True
        assert response.order.status == OrderStatus.SHIPPED
        assert response.order.tracking_number == "TRK-99"

    @pytest.mark.asyncio
    async def test_deliver_shipped_order(self, use_case, mock_order_repository, make_order):
        mock_order_repository.find_by_id.return_value = make_order(status="shipped")

        response = await use_case.execute("order1", "deliver", "admin", "admin1")

        assert response.success is True
        assert response.order.is_delivered()

    @pytest.mark.asyncio
    async def test_cancel_confirmed_order(self, use_case, mock_order_repository, make_order):
        mock_order_repository.find_by_id.return_value = make_order(status="confirmed")

        response = await use_case.execute("order1", "cancel", "admin", "admin1", reason="out of stock")

        assert response.success is True
        assert response.order.cancellation_reason == "out of stock"

    @pytest.mark.parametrize(
        "action,status",
        [
            ("confirm", "confirmed"),
            ("ship", "pending"),
            ("deliver", "processing"),
            ("cancel", "processing"),
        ],
    )
    @pytest.mark.asyncio
    async def test_wrong_source_status(self, use_case, mock_order_repository, make_order, action, status):
        mock_order_repository.find_by_id.return_value = make_order(status=status)

        response = await use_case.execute("order1", action, "admin", "admin1")

        assert response.success is False
        assert response.message == f"Cannot {action} order with status {status}"
        mock_order_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_customer_cannot_process(self, use_case, mock_order_repository):
        response = await use_case.execute("order1", "confirm", "customer", "user1")

        assert response.message == "Insufficient permissions to process order"
        mock_order_repository.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_action(self, use_case, mock_order_repository, make_order):
        mock_order_repository.find_by_id.return_value = make_order()

        response = await use_case.execute("order1", "refund", "admin", "admin1")

        assert response.message == "Invalid action"

    @pytest.mark.asyncio
    async def test_order_not_found(self, use_case):
        response = await use_case.execute("order1", "confirm", "admin", "admin1")

        assert response.message == "Order not found"
