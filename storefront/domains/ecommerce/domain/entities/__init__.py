"""
E-commerce Domain Entities
"""

from storefront.domains.ecommerce.domain.entities.order import Order, OrderItem, generate_order_number
from storefront.domains.ecommerce.domain.entities.request import Request
from storefront.domains.ecommerce.domain.entities.store_manager_profile import StoreManagerProfile
from storefront.domains.ecommerce.domain.entities.user import User

__all__ = [
    "Order",
    "OrderItem",
    "generate_order_number",
    "Request",
    "StoreManagerProfile",
    "User",
]
