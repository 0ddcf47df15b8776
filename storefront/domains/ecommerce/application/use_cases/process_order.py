"""
Process Order Use Case

Staff-driven fulfilment actions: confirm, ship, deliver, cancel.
"""

from dataclasses import dataclass

from storefront.core.domain import DomainException
from storefront.core.shared.logger import get_use_case_logger
from storefront.domains.ecommerce.application.ports import IOrderRepository
from storefront.domains.ecommerce.domain.entities.order import Order
from storefront.domains.ecommerce.domain.value_objects.order_status import OrderStatus
from storefront.domains.ecommerce.domain.value_objects.user_role import UserRole

logger = get_use_case_logger("process_order")

PROCESSOR_ROLES = (UserRole.ADMIN.value, UserRole.STORE_MANAGER.value)

# Status an order must be in for each action
ACTION_SOURCE_STATUSES: dict[str, tuple[OrderStatus, ...]] = {
    "confirm": (OrderStatus.PENDING,),
    "ship": (OrderStatus.PROCESSING,),
    "deliver": (OrderStatus.SHIPPED,),
    "cancel": (OrderStatus.PENDING, OrderStatus.CONFIRMED),
}

SUCCESS_MESSAGES = {
    "confirm": "Order confirmed successfully",
    "ship": "Order shipped successfully",
    "deliver": "Order delivered successfully",
    "cancel": "Order cancelled successfully",
}


@dataclass
class ProcessOrderResponse:
    """Response from an order processing action."""

    success: bool = False
    message: str = ""
    order: Order | None = None
    error: str | None = None


class ProcessOrderUseCase:
    """
    Use Case: Process Order

    ``confirm`` moves a pending order straight into processing. Every
    action stamps processed_by / processed_at.
    """

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(
        self,
        order_id: str,
        action: str,
        user_role: str,
        processor_id: str,
        tracking_number: str | None = None,
        reason: str | None = None,
    ) -> ProcessOrderResponse:
        """
        Apply a fulfilment action.

        Args:
            order_id: Order to process
            action: confirm, ship, deliver or cancel
            user_role: Role string of the acting user
            processor_id: ID of the acting user
            tracking_number: Carrier tracking number for ``ship``
            reason: Cancellation reason for ``cancel``
        """
        try:
            if user_role not in PROCESSOR_ROLES:
                return ProcessOrderResponse(success=False, message="Insufficient permissions to process order")

            order = await self.order_repository.find_by_id(order_id)
            if order is None:
                return ProcessOrderResponse(success=False, message="Order not found")

            if action not in ACTION_SOURCE_STATUSES:
                return ProcessOrderResponse(success=False, message="Invalid action")

            if order.status not in ACTION_SOURCE_STATUSES[action]:
                status = getattr(order.status, "value", order.status)
                return ProcessOrderResponse(
                    success=False,
                    message=f"Cannot {action} order with status {status}",
                )

            if action == "confirm":
                order.confirm()
                order.start_processing()
            elif action == "ship":
                order.ship(tracking_number)
            elif action == "deliver":
                order.deliver()
            else:
                order.cancel(reason)

            order.record_processing(processor_id)
            saved_order = await self.order_repository.update(order)

            logger.info(
                f"Order {action} applied",
                order_id=order_id,
                order_number=order.order_number,
                processor_id=processor_id,
            )

            return ProcessOrderResponse(success=True, message=SUCCESS_MESSAGES[action], order=saved_order)

        except DomainException as e:
            return ProcessOrderResponse(success=False, message=e.message, error=e.message)
        except Exception as e:
            logger.error(f"Error processing order: {e}", order_id=order_id, action=action)
            return ProcessOrderResponse(success=False, message="Failed to process order", error=str(e))


__all__ = ["ProcessOrderUseCase", "ProcessOrderResponse"]
