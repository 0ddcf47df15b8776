"""
Order Status Value Object for E-commerce Domain

Represents the lifecycle states of an order with transition rules.
"""

from storefront.core.domain import StatusEnum

_ORDER_TRANSITIONS: dict[str, list[str]] = {
    "pending": ["confirmed", "cancelled"],
    "confirmed": ["processing", "cancelled"],
    "processing": ["shipped"],
    "shipped": ["delivered"],
    "delivered": [],  # Terminal state
    "cancelled": [],  # Terminal state
}

_PAYMENT_TRANSITIONS: dict[str, list[str]] = {
    "pending": ["paid", "failed"],
    "paid": ["refunded"],
    "failed": [],
    "refunded": [],
}


class OrderStatus(StatusEnum):
    """
    Order lifecycle states.

    Valid transitions:
    - PENDING -> CONFIRMED, CANCELLED
    - CONFIRMED -> PROCESSING, CANCELLED
    - PROCESSING -> SHIPPED
    - SHIPPED -> DELIVERED
    - DELIVERED, CANCELLED -> (terminal states)
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def transitions(cls) -> dict[str, list[str]]:
        return _ORDER_TRANSITIONS

    def can_be_cancelled(self) -> bool:
        """Check if order can be cancelled in this state."""
        return self.can_transition_to(OrderStatus.CANCELLED)

    def is_in_progress(self) -> bool:
        return self.value in ["confirmed", "processing", "shipped"]


class PaymentStatus(StatusEnum):
    """
    Payment status for orders.

    Independent of the order lifecycle:
    - PENDING -> PAID, FAILED
    - PAID -> REFUNDED
    """

    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"

    @classmethod
    def transitions(cls) -> dict[str, list[str]]:
        return _PAYMENT_TRANSITIONS

    def is_successful(self) -> bool:
        return self == PaymentStatus.PAID
