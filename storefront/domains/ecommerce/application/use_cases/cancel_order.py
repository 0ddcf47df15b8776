"""
Cancel Order Use Case

Cancels a pending or confirmed order and returns its items to stock.
"""

from dataclasses import dataclass

from storefront.core.domain import DomainException
from storefront.core.shared.logger import get_use_case_logger
from storefront.domains.ecommerce.application.ports import IOrderRepository, IProductRepository
from storefront.domains.ecommerce.domain.entities.order import Order, OrderItem
from storefront.domains.ecommerce.domain.value_objects.user_role import UserRole

logger = get_use_case_logger("cancel_order")

CANCELLER_ROLES = (UserRole.CUSTOMER.value, UserRole.ADMIN.value, UserRole.STORE_MANAGER.value)


@dataclass
class CancelOrderResponse:
    """Response from order cancellation."""

    success: bool = False
    message: str = ""
    order: Order | None = None
    error: str | None = None


class CancelOrderUseCase:
    """
    Use Case: Cancel Order

    Customers may cancel only their own orders; admins and store
    managers may cancel any. Stock restoration is best effort: a failure
    is logged and the cancellation still goes through.
    """

    def __init__(self, order_repository: IOrderRepository, product_repository: IProductRepository):
        self.order_repository = order_repository
        self.product_repository = product_repository

    async def execute(
        self,
        order_id: str,
        user_id: str,
        user_role: str,
        reason: str = "",
    ) -> CancelOrderResponse:
        try:
            if not order_id:
                return CancelOrderResponse(success=False, message="Order ID is required")

            if user_role not in CANCELLER_ROLES:
                return CancelOrderResponse(success=False, message="Insufficient permissions to cancel order")

            order = await self.order_repository.find_by_id(order_id)
            if order is None:
                return CancelOrderResponse(success=False, message="Order not found")

            if user_role == UserRole.CUSTOMER.value and order.user_id != user_id:
                return CancelOrderResponse(success=False, message="You can only cancel your own orders")

            if not order.can_be_cancelled():
                return CancelOrderResponse(
                    success=False, message="Order cannot be cancelled in its current status"
                )

            await self._restore_stock(order.items)

            order.cancel(reason)
            saved_order = await self.order_repository.update(order)

            logger.info("Order cancelled", order_id=order_id, order_number=order.order_number, user_id=user_id)

            return CancelOrderResponse(success=True, message="Order cancelled successfully", order=saved_order)

        except DomainException as e:
            return CancelOrderResponse(success=False, message=e.message, error=e.message)
        except Exception as e:
            logger.error(f"Error cancelling order: {e}", order_id=order_id)
            return CancelOrderResponse(success=False, message="Failed to cancel order", error=str(e))

    async def _restore_stock(self, items: list[OrderItem]) -> bool:
        """Return each item's quantity to stock. Returns False if any item failed."""
        restored_all = True
        for item in items:
            try:
                restored = await self.product_repository.add_stock(item.product_id, item.quantity)
            except Exception as e:
                logger.warning(f"Failed to restore stock: {e}", product_id=item.product_id, quantity=item.quantity)
                restored_all = False
                continue
            if not restored:
                logger.warning("Failed to restore stock", product_id=item.product_id, quantity=item.quantity)
                restored_all = False
        return restored_all


__all__ = ["CancelOrderUseCase", "CancelOrderResponse"]
