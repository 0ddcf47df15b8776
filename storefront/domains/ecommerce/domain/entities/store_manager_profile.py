"""
Store Manager Profile Entity

Approval state for a store-manager account. Paired 1:1 with a User
through ``user_id`` and persisted independently of it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from storefront.core.domain import BusinessRuleViolationException, Entity
from storefront.core.interfaces.clock import IClock
from storefront.core.shared.clock import SystemClock


@dataclass(eq=False)
class StoreManagerProfile(Entity[str]):
    """
    Store manager profile.

    Invariant: ``is_approved`` implies ``approved_at`` and ``approved_by``
    are set. Only ``approve()`` and ``revoke_approval()`` change it, and
    both raise when the profile is already in the requested state.
    """

    user_id: str | None = None
    is_approved: bool = False
    approved_at: datetime | None = None
    approved_by: str | None = None
    store_name: str = ""
    store_address: str = ""
    notes: str = ""

    def approve(self, approved_by: str) -> None:
        """
        Approve the store manager.

        Raises:
            BusinessRuleViolationException: If already approved
        """
        if self.is_approved:
            raise BusinessRuleViolationException(
                rule="STORE_MANAGER_ALREADY_APPROVED",
                message="Store manager is already approved",
            )

        self.is_approved = True
        self.approved_at = self.clock.now()
        self.approved_by = approved_by
        self.touch()

    def revoke_approval(self) -> None:
        """
        Revoke a previous approval.

        Raises:
            BusinessRuleViolationException: If not approved
        """
        if not self.is_approved:
            raise BusinessRuleViolationException(
                rule="STORE_MANAGER_NOT_APPROVED",
                message="Store manager is not approved",
            )

        self.is_approved = False
        self.approved_at = None
        self.approved_by = None
        self.touch()

    def can_login(self) -> bool:
        return self.is_approved

    def needs_approval(self) -> bool:
        return not self.is_approved

    def update_store_info(self, store_name: str | None = None, store_address: str | None = None) -> None:
        if store_name:
            self.store_name = store_name
        if store_address:
            self.store_address = store_address
        self.touch()

    def add_note(self, note: str) -> None:
        if note:
            self.notes = f"{self.notes}\n{note}" if self.notes else note
            self.touch()

    def is_valid(self) -> bool:
        return isinstance(self.user_id, str) and bool(self.user_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self._base_dict(),
            "user_id": self.user_id,
            "is_approved": self.is_approved,
            "approved_at": self.approved_at.isoformat() if self.approved_at else None,
            "approved_by": self.approved_by,
            "store_name": self.store_name,
            "store_address": self.store_address,
            "notes": self.notes,
        }

    def to_persistence(self) -> dict[str, Any]:
        return self.to_dict()

    @classmethod
    def from_dict(cls, data: dict[str, Any], clock: IClock | None = None) -> "StoreManagerProfile":
        clock = clock or SystemClock()
        return cls(
            id=data.get("id"),
            created_at=clock.create_date(data.get("created_at")),
            updated_at=clock.create_date(data.get("updated_at")),
            is_active=data.get("is_active", True),
            user_id=data.get("user_id"),
            is_approved=bool(data.get("is_approved", False)),
            approved_at=clock.create_date(data.get("approved_at")),
            approved_by=data.get("approved_by"),
            store_name=data.get("store_name") or "",
            store_address=data.get("store_address") or "",
            notes=data.get("notes") or "",
            clock=clock,
        )
