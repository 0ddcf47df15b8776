"""
Order Entity for E-commerce Domain

Represents a customer order with items, status, and payment tracking.
Status changes go through guarded transition methods that raise
InvalidTransitionException; totals are only recomputed by
``calculate_totals()``.
"""

import secrets
import string
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from storefront.core.domain import Entity, InvalidTransitionException
from storefront.core.interfaces.clock import IClock
from storefront.core.shared.clock import SystemClock

from ..value_objects.order_status import OrderStatus, PaymentStatus

DEFAULT_ORDER_NUMBER_PREFIX = "ORD"
_BASE36 = string.digits + string.ascii_uppercase
ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """Convert a stored amount (int, float, str, Decimal, None) to Decimal."""
    if value is None or value == "":
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def generate_order_number(clock: IClock, prefix: str = DEFAULT_ORDER_NUMBER_PREFIX) -> str:
    """
    Build a human-readable order number.

    Format: ``<prefix>-<last 6 digits of clock ms>-<5 random base36 chars>``.
    """
    stamp = str(clock.timestamp())[-6:].rjust(6, "0")
    suffix = "".join(secrets.choice(_BASE36) for _ in range(5))
    return f"{prefix}-{stamp}-{suffix}"


@dataclass
class OrderItem:
    """
    Individual item in an order.

    Snapshot of the product at the time of purchase.
    """

    product_id: str | None = None
    product_name: str = ""
    product_price: Decimal = ZERO
    quantity: int = 1
    unit: str = "piece"
    product_image: str = ""

    def __post_init__(self) -> None:
        self.product_price = to_decimal(self.product_price)

    @property
    def line_total(self) -> Decimal:
        return self.product_price * self.quantity

    def is_valid(self) -> bool:
        return self.product_id is not None and self.quantity > 0 and self.product_price >= 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "product_price": float(self.product_price),
            "product_image": self.product_image,
            "quantity": self.quantity,
            "unit": self.unit,
            "total_price": float(self.line_total),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OrderItem":
        quantity = data.get("quantity")
        return cls(
            product_id=data.get("product_id"),
            product_name=data.get("product_name") or "",
            product_price=to_decimal(data.get("product_price")),
            quantity=1 if quantity is None else int(quantity),
            unit=data.get("unit") or "piece",
            product_image=data.get("product_image") or "",
        )


@dataclass(eq=False)
class Order(Entity[str]):
    """
    Order aggregate for e-commerce domain.

    Example:
        ```python
        order = Order(user_id="user1", items=[OrderItem(product_id="p1", product_price=Decimal("9.99"))])
        order.calculate_totals()
        order.confirm()
        order.start_processing()
        order.ship(tracking_number="TRK123")
        ```
    """

    order_number: str | None = None
    user_id: str | None = None
    items: list[OrderItem] = field(default_factory=list)

    # Status tracking
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING

    # Pricing
    total_amount: Decimal = ZERO
    discount_amount: Decimal = ZERO
    shipping_amount: Decimal = ZERO
    tax_amount: Decimal = ZERO
    final_amount: Decimal = ZERO

    # Addresses and payment
    shipping_address: dict[str, Any] | None = None
    billing_address: dict[str, Any] | None = None
    payment_method: str | None = None
    payment_id: str | None = None

    # Fulfilment
    notes: str = ""
    tracking_number: str | None = None
    cancelled_at: datetime | None = None
    cancellation_reason: str | None = None
    processed_by: str | None = None
    processed_at: datetime | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        self.status = OrderStatus.coerce(self.status)
        self.payment_status = PaymentStatus.coerce(self.payment_status)
        for name in ("total_amount", "discount_amount", "shipping_amount", "tax_amount", "final_amount"):
            setattr(self, name, to_decimal(getattr(self, name)))
        if not self.order_number:
            self.order_number = generate_order_number(self.clock)

    @classmethod
    def create(
        cls,
        user_id: str,
        items: list[OrderItem],
        clock: IClock | None = None,
        prefix: str = DEFAULT_ORDER_NUMBER_PREFIX,
    ) -> "Order":
        """Create a pending order with a fresh order number and computed totals."""
        clock = clock or SystemClock()
        order = cls(
            order_number=generate_order_number(clock, prefix),
            user_id=user_id,
            items=list(items),
            clock=clock,
        )
        order.calculate_totals()
        return order

    # Validation

    def is_valid(self) -> bool:
        return self.validate_user_id() and self.validate_items() and self.validate_amounts()

    def validate_user_id(self) -> bool:
        return self.user_id is not None

    def validate_items(self) -> bool:
        return len(self.items) > 0 and all(item.is_valid() for item in self.items)

    def validate_amounts(self) -> bool:
        amounts = (
            self.total_amount,
            self.discount_amount,
            self.shipping_amount,
            self.tax_amount,
            self.final_amount,
        )
        return all(amount >= 0 for amount in amounts)

    # State queries

    def can_be_cancelled(self) -> bool:
        return isinstance(self.status, OrderStatus) and self.status.can_be_cancelled()

    def can_be_modified(self) -> bool:
        return self.status == OrderStatus.PENDING

    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID

    def is_delivered(self) -> bool:
        return self.status == OrderStatus.DELIVERED

    def is_cancelled(self) -> bool:
        return self.status == OrderStatus.CANCELLED

    def is_in_progress(self) -> bool:
        return isinstance(self.status, OrderStatus) and self.status.is_in_progress()

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    # Status Transitions

    def _transition(self, target: OrderStatus, reason: str | None = None) -> None:
        current = self.status
        if not isinstance(current, OrderStatus) or not current.can_transition_to(target):
            raise InvalidTransitionException(
                from_status=str(getattr(current, "value", current)),
                to_status=target.value,
                reason=reason,
            )
        self.status = target

    def confirm(self) -> None:
        """
        Confirm a pending order.

        Raises:
            InvalidTransitionException: If the order is not pending
        """
        self._transition(OrderStatus.CONFIRMED)
        self.touch()

    def start_processing(self) -> None:
        self._transition(OrderStatus.PROCESSING)
        self.touch()

    def ship(self, tracking_number: str | None = None) -> None:
        """
        Mark order as shipped.

        Args:
            tracking_number: Optional carrier tracking number
        """
        self._transition(OrderStatus.SHIPPED)
        self.tracking_number = tracking_number
        self.touch()

    def deliver(self) -> None:
        self._transition(OrderStatus.DELIVERED)
        self.touch()

    def cancel(self, reason: str | None = None) -> None:
        """
        Cancel the order.

        Only pending and confirmed orders can be cancelled.
        """
        self._transition(OrderStatus.CANCELLED, "Order cannot be cancelled in its current status")
        self.cancelled_at = self.clock.now()
        self.cancellation_reason = reason
        self.touch()

    def record_processing(self, processor_id: str) -> None:
        """Stamp who last moved the order through fulfilment."""
        self.processed_by = processor_id
        self.processed_at = self.clock.now()
        self.touch()

    # Payment

    def _payment_transition(self, target: PaymentStatus, reason: str | None = None) -> None:
        current = self.payment_status
        if not isinstance(current, PaymentStatus) or not current.can_transition_to(target):
            raise InvalidTransitionException(
                from_status=str(getattr(current, "value", current)),
                to_status=target.value,
                reason=reason,
            )
        self.payment_status = target

    def mark_as_paid(self, payment_id: str | None = None) -> None:
        self._payment_transition(PaymentStatus.PAID)
        self.payment_id = payment_id
        self.touch()

    def mark_payment_failed(self) -> None:
        self._payment_transition(PaymentStatus.FAILED)
        self.touch()

    def refund(self) -> None:
        """
        Refund a paid order.

        Raises:
            InvalidTransitionException: If payment status is not paid
        """
        self._payment_transition(PaymentStatus.REFUNDED, "Only paid orders can be refunded")
        self.touch()

    # Totals

    def calculate_totals(self) -> None:
        """Recompute total_amount from items and final_amount from charges."""
        self.total_amount = sum((item.line_total for item in self.items), ZERO)
        final = self.total_amount + self.shipping_amount + self.tax_amount - self.discount_amount
        self.final_amount = max(ZERO, final)

    def update_charges(
        self,
        discount_amount: Any = None,
        shipping_amount: Any = None,
        tax_amount: Any = None,
    ) -> None:
        """Set charges. Call ``calculate_totals()`` afterwards to refresh final_amount."""
        if discount_amount is not None:
            self.discount_amount = to_decimal(discount_amount)
        if shipping_amount is not None:
            self.shipping_amount = to_decimal(shipping_amount)
        if tax_amount is not None:
            self.tax_amount = to_decimal(tax_amount)
        self.touch()

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        return {
            **self._base_dict(),
            "order_number": self.order_number,
            "user_id": self.user_id,
            "items": [item.to_dict() for item in self.items],
            "status": str(getattr(self.status, "value", self.status)),
            "payment_status": str(getattr(self.payment_status, "value", self.payment_status)),
            "total_amount": float(self.total_amount),
            "discount_amount": float(self.discount_amount),
            "shipping_amount": float(self.shipping_amount),
            "tax_amount": float(self.tax_amount),
            "final_amount": float(self.final_amount),
            "shipping_address": self.shipping_address,
            "billing_address": self.billing_address,
            "payment_method": self.payment_method,
            "payment_id": self.payment_id,
            "notes": self.notes,
            "tracking_number": self.tracking_number,
            "cancelled_at": self.cancelled_at.isoformat() if self.cancelled_at else None,
            "cancellation_reason": self.cancellation_reason,
            "processed_by": self.processed_by,
            "processed_at": self.processed_at.isoformat() if self.processed_at else None,
        }

    def to_persistence(self) -> dict[str, Any]:
        return self.to_dict()

    @classmethod
    def from_dict(cls, data: dict[str, Any], clock: IClock | None = None) -> "Order":
        clock = clock or SystemClock()
        return cls(
            id=data.get("id"),
            created_at=clock.create_date(data.get("created_at")),
            updated_at=clock.create_date(data.get("updated_at")),
            is_active=data.get("is_active", True),
            order_number=data.get("order_number"),
            user_id=data.get("user_id"),
            items=[OrderItem.from_dict(item) for item in data.get("items") or []],
            status=data.get("status") or OrderStatus.PENDING,
            payment_status=data.get("payment_status") or PaymentStatus.PENDING,
            total_amount=to_decimal(data.get("total_amount")),
            discount_amount=to_decimal(data.get("discount_amount")),
            shipping_amount=to_decimal(data.get("shipping_amount")),
            tax_amount=to_decimal(data.get("tax_amount")),
            final_amount=to_decimal(data.get("final_amount")),
            shipping_address=data.get("shipping_address"),
            billing_address=data.get("billing_address"),
            payment_method=data.get("payment_method"),
            payment_id=data.get("payment_id"),
            notes=data.get("notes") or "",
            tracking_number=data.get("tracking_number"),
            cancelled_at=clock.create_date(data.get("cancelled_at")),
            cancellation_reason=data.get("cancellation_reason"),
            processed_by=data.get("processed_by"),
            processed_at=clock.create_date(data.get("processed_at")),
            clock=clock,
        )
