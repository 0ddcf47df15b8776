"""
Request value objects: type, review status and priority.
"""

from storefront.core.domain import StatusEnum

_REQUEST_TRANSITIONS: dict[str, list[str]] = {
    "pending": ["approved", "rejected"],
    "approved": [],
    "rejected": [],
}

STORE_MANAGER_REQUIRED_FIELDS = ("name", "email", "phone", "store_name", "store_address")
CATEGORY_REQUIRED_FIELDS = ("name", "description")


class RequestType(StatusEnum):
    """Kinds of requests that go through administrative review."""

    ACCOUNT_REGISTER = "account_register_request"
    CATEGORY_ADD = "category_add_request"
    CATEGORY_UPDATE = "category_update_request"
    CATEGORY_DELETE = "category_delete_request"

    def is_category_request(self) -> bool:
        return self in (RequestType.CATEGORY_ADD, RequestType.CATEGORY_UPDATE, RequestType.CATEGORY_DELETE)

    def required_fields(self) -> tuple[str, ...]:
        """Keys that must be present and non-empty in the request payload."""
        if self == RequestType.ACCOUNT_REGISTER:
            return STORE_MANAGER_REQUIRED_FIELDS
        return CATEGORY_REQUIRED_FIELDS


class RequestStatus(StatusEnum):
    """Review status. Reviews are one-way: pending -> approved | rejected."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def transitions(cls) -> dict[str, list[str]]:
        return _REQUEST_TRANSITIONS


class RequestPriority(StatusEnum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"

    def is_high(self) -> bool:
        return self in (RequestPriority.HIGH, RequestPriority.URGENT)
