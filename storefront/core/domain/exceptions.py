"""
Domain Exceptions for Domain-Driven Design

These exceptions represent invariant violations raised by entities.
Expected business-rule rejections are returned as results by policies
and use cases instead; use cases catch these exceptions at their
boundary and turn them into failed responses.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INVALID_TRANSITION")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Use for invalid field values passed to entity methods.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class BusinessRuleViolationException(DomainException):
    """
    Raised when a business rule is violated.

    Use for invariant violations, precondition failures, etc.
    """

    def __init__(self, rule: str, message: str | None = None, details: dict[str, Any] | None = None):
        self.rule = rule
        msg = message or f"Business rule violated: {rule}"
        details = details or {}
        details["rule"] = rule
        super().__init__(msg, "BUSINESS_RULE_VIOLATION", details)


class InvalidTransitionException(DomainException):
    """Raised when a state machine is asked for a transition it does not allow."""

    def __init__(self, from_status: str, to_status: str, reason: str | None = None):
        self.from_status = from_status
        self.to_status = to_status
        self.reason = reason
        msg = f"Invalid transition from {from_status} to {to_status}"
        if reason:
            msg += f": {reason}"
        details: dict[str, Any] = {"from": from_status, "to": to_status}
        if reason:
            details["reason"] = reason
        super().__init__(msg, "INVALID_TRANSITION", details)


class EntityNotFoundException(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any, message: str | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class AuthorizationException(DomainException):
    """Raised when a user is not allowed to perform an operation."""

    def __init__(self, operation: str, message: str | None = None, user_id: str | None = None):
        self.operation = operation
        self.user_id = user_id
        msg = message or f"Not authorized to perform '{operation}'"
        super().__init__(msg, "AUTHORIZATION_ERROR", {"operation": operation, "user_id": user_id})
