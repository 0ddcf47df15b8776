"""
Dependency Injection Container.

Wires concrete implementations (bcrypt, system clock, settings) to the
e-commerce use cases.
"""

from .ecommerce import EcommerceContainer, EcommerceRepositories, configure_logging_from_settings

__all__ = ["EcommerceContainer", "EcommerceRepositories", "configure_logging_from_settings"]
