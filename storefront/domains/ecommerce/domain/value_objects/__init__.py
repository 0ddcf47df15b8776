"""
E-commerce Value Objects
"""

from storefront.domains.ecommerce.domain.value_objects.order_status import OrderStatus, PaymentStatus
from storefront.domains.ecommerce.domain.value_objects.request_status import (
    RequestPriority,
    RequestStatus,
    RequestType,
)
from storefront.domains.ecommerce.domain.value_objects.user_role import UserRole

__all__ = [
    "OrderStatus",
    "PaymentStatus",
    "RequestType",
    "RequestStatus",
    "RequestPriority",
    "UserRole",
]
