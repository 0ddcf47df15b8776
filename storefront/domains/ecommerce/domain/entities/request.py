"""
Request Entity

A change that needs administrative review: a store-manager account
registration or a category add/update/delete. Reviews are one-way
(pending -> approved | rejected).

Unlike Order and StoreManagerProfile, ``approve()`` and ``reject()``
report a refused review by returning False instead of raising; callers
check the return value.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from storefront.core.domain import Entity
from storefront.core.interfaces.clock import IClock
from storefront.core.shared.clock import SystemClock

from ..value_objects.request_status import RequestPriority, RequestStatus, RequestType


@dataclass(eq=False)
class Request(Entity[str]):
    """Review request. ``request_data`` is a snapshot owned by the request."""

    type: RequestType | str = ""
    status: RequestStatus = RequestStatus.PENDING
    requested_by: str | None = None
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    rejection_reason: str | None = None
    request_data: dict[str, Any] = field(default_factory=dict)
    priority: RequestPriority = RequestPriority.NORMAL
    notes: str = ""

    def __post_init__(self) -> None:
        super().__post_init__()
        self.type = RequestType.coerce(self.type)
        self.status = RequestStatus.coerce(self.status)
        self.priority = RequestPriority.coerce(self.priority)
        self.request_data = dict(self.request_data or {})

    # Validation

    def is_valid(self) -> bool:
        return (
            self.validate_type()
            and self.validate_status()
            and self.validate_requested_by()
            and self.validate_request_data()
        )

    def validate_type(self) -> bool:
        return isinstance(self.type, RequestType)

    def validate_status(self) -> bool:
        return isinstance(self.status, RequestStatus)

    def validate_requested_by(self) -> bool:
        return self.requested_by is not None

    def validate_request_data(self) -> bool:
        """Every key required for this request type must be present and non-empty."""
        if not isinstance(self.type, RequestType):
            return False
        return all(self.request_data.get(key) for key in self.type.required_fields())

    # State queries

    def is_pending(self) -> bool:
        return self.status == RequestStatus.PENDING

    def is_approved(self) -> bool:
        return self.status == RequestStatus.APPROVED

    def is_rejected(self) -> bool:
        return self.status == RequestStatus.REJECTED

    def can_be_reviewed(self) -> bool:
        return self.is_pending()

    def is_store_manager_approval_request(self) -> bool:
        return self.type == RequestType.ACCOUNT_REGISTER

    def is_category_request(self) -> bool:
        return isinstance(self.type, RequestType) and self.type.is_category_request()

    def is_high_priority(self) -> bool:
        return isinstance(self.priority, RequestPriority) and self.priority.is_high()

    # Review

    def approve(self, reviewed_by: str, notes: str = "") -> bool:
        if not self.can_be_reviewed():
            return False

        self.status = RequestStatus.APPROVED
        self.reviewed_by = reviewed_by
        self.reviewed_at = self.clock.now()
        self.notes = notes
        self.touch()
        return True

    def reject(self, reviewed_by: str, reason: str = "", notes: str = "") -> bool:
        if not self.can_be_reviewed():
            return False

        self.status = RequestStatus.REJECTED
        self.reviewed_by = reviewed_by
        self.reviewed_at = self.clock.now()
        self.rejection_reason = reason
        self.notes = notes
        self.touch()
        return True

    def revert_review(self, notes: str | None = None) -> None:
        """
        Return an unpersisted review to pending (compensating action).

        Args:
            notes: Notes held before the review; restored when given
        """
        self.status = RequestStatus.PENDING
        self.reviewed_by = None
        self.reviewed_at = None
        self.rejection_reason = None
        if notes is not None:
            self.notes = notes
        self.touch()

    def set_priority(self, priority: str) -> None:
        if RequestPriority.is_valid_value(priority):
            self.priority = RequestPriority(priority)
            self.touch()

    def add_note(self, note: str) -> None:
        if note:
            self.notes = f"{self.notes}\n{note}" if self.notes else note
            self.touch()

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        return {
            **self._base_dict(),
            "type": str(getattr(self.type, "value", self.type)),
            "status": str(getattr(self.status, "value", self.status)),
            "requested_by": self.requested_by,
            "reviewed_by": self.reviewed_by,
            "reviewed_at": self.reviewed_at.isoformat() if self.reviewed_at else None,
            "rejection_reason": self.rejection_reason,
            "request_data": dict(self.request_data),
            "priority": str(getattr(self.priority, "value", self.priority)),
            "notes": self.notes,
        }

    def to_persistence(self) -> dict[str, Any]:
        return self.to_dict()

    @classmethod
    def from_dict(cls, data: dict[str, Any], clock: IClock | None = None) -> "Request":
        clock = clock or SystemClock()
        return cls(
            id=data.get("id"),
            created_at=clock.create_date(data.get("created_at")),
            updated_at=clock.create_date(data.get("updated_at")),
            is_active=data.get("is_active", True),
            type=data.get("type") or "",
            status=data.get("status") or RequestStatus.PENDING,
            requested_by=data.get("requested_by"),
            reviewed_by=data.get("reviewed_by"),
            reviewed_at=clock.create_date(data.get("reviewed_at")),
            rejection_reason=data.get("rejection_reason"),
            request_data=data.get("request_data") or {},
            priority=data.get("priority") or RequestPriority.NORMAL,
            notes=data.get("notes") or "",
            clock=clock,
        )

    # Factories

    @classmethod
    def create_store_manager_approval_request(
        cls,
        requested_by: str | None,
        request_data: dict[str, Any],
        clock: IClock | None = None,
        notes: str = "",
    ) -> "Request":
        return cls(
            type=RequestType.ACCOUNT_REGISTER,
            status=RequestStatus.PENDING,
            requested_by=requested_by,
            request_data=request_data,
            priority=RequestPriority.NORMAL,
            notes=notes,
            clock=clock or SystemClock(),
        )

    @classmethod
    def create_category_request(
        cls,
        request_type: RequestType,
        requested_by: str,
        request_data: dict[str, Any],
        clock: IClock | None = None,
    ) -> "Request":
        if not request_type.is_category_request():
            raise ValueError(f"{request_type.value} is not a category request type")
        return cls(
            type=request_type,
            requested_by=requested_by,
            request_data=request_data,
            clock=clock or SystemClock(),
        )
