"""
Storefront - e-commerce domain and business-logic layer.

Entities, policies and use cases for orders, store-manager onboarding
and administrative approval workflows.
"""

__version__ = "0.1.0"
