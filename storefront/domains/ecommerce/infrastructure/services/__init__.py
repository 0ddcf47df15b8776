"""
E-commerce infrastructure services
"""

from storefront.domains.ecommerce.infrastructure.services.bcrypt_password_hasher import BcryptPasswordHasher

__all__ = ["BcryptPasswordHasher"]
