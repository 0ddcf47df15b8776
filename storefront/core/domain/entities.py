"""
Base Entity Classes for Domain-Driven Design

Entities are domain objects with identity and lifecycle.
They maintain their identity regardless of their attributes.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar

from storefront.core.interfaces.clock import IClock
from storefront.core.shared.clock import SystemClock

# Type variable for entity ID (int, str, UUID, etc.)
TId = TypeVar("TId")


@dataclass(eq=False)
class Entity(ABC, Generic[TId]):
    """
    Base class for all domain entities.

    An entity is a domain object that has a distinct identity
    that runs through time and different states.

    Time is never read from the system directly: every entity carries
    an injected clock, so ``touch()`` and every state transition are
    deterministic under test.

    Type Parameters:
        TId: Type of entity identifier (int, str, UUID)

    Example:
        ```python
        @dataclass(eq=False)
        class Category(Entity[str]):
            name: str = ""

            def rename(self, name: str) -> None:
                self.name = name
                self.touch()
        ```
    """

    id: TId | None = field(default=None)
    created_at: datetime | None = field(default=None)
    updated_at: datetime | None = field(default=None)
    is_active: bool = field(default=True)
    clock: IClock = field(default_factory=SystemClock, repr=False, compare=False)

    def __post_init__(self) -> None:
        now = self.clock.now()
        if self.created_at is None:
            self.created_at = now
        if self.updated_at is None:
            self.updated_at = now

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID."""
        if not isinstance(other, Entity):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id) if self.id is not None else id(self)

    def is_new(self) -> bool:
        """Check if entity is new (not yet persisted)."""
        return self.id is None

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = self.clock.now()

    def activate(self) -> None:
        self.is_active = True
        self.touch()

    def deactivate(self) -> None:
        self.is_active = False
        self.touch()

    def is_valid(self) -> bool:
        """Override in subclasses with the entity's validation rules."""
        return True

    def _base_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "is_active": self.is_active,
        }
