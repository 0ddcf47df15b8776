"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
Status enums are closed sets of values with an optional transition table.
"""

from enum import Enum
from typing import Any, Self


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Subclasses that model a state machine override ``transitions()``
    with a mapping of value -> allowed next values.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value.lower() == str(value).lower():
                return member
        raise ValueError(f"Invalid {cls.__name__}: {value}")

    @classmethod
    def is_valid_value(cls, value: str | None) -> bool:
        try:
            cls(value)
        except ValueError:
            return False
        return True

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Return the matching member, or the raw value when it is not one."""
        return cls(value) if cls.is_valid_value(value) else value

    @classmethod
    def transitions(cls) -> dict[str, list[str]]:
        return {}

    def can_transition_to(self, new_status: Self) -> bool:
        """
        Check if transition to new status is valid.

        Args:
            new_status: Target status

        Returns:
            True if transition is allowed
        """
        return new_status.value in self.transitions().get(self.value, [])

    def get_valid_transitions(self) -> list[Self]:
        """Get list of valid next statuses."""
        return [type(self)(v) for v in self.transitions().get(self.value, [])]

    def is_terminal(self) -> bool:
        """Check if this is a terminal (final) state."""
        return len(self.transitions().get(self.value, [])) == 0
