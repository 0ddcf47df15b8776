"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Status enums with transition tables
- Exceptions: Domain-specific error handling
"""

from storefront.core.domain.entities import Entity
from storefront.core.domain.exceptions import (
    AuthorizationException,
    BusinessRuleViolationException,
    DomainException,
    EntityNotFoundException,
    InvalidTransitionException,
    ValidationException,
)
from storefront.core.domain.value_objects import StatusEnum

__all__ = [
    # Entities
    "Entity",
    # Value Objects
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationException",
    "BusinessRuleViolationException",
    "InvalidTransitionException",
    "EntityNotFoundException",
    "AuthorizationException",
]
