"""Notification Schemas — messages sent to project members or organization users.

Invariants:
    - message is at most 10000 characters
    - userIds and role are mutually exclusive; role is owner or manager when set
"""

from enum import Enum

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import Request


MAX_MESSAGE_LENGTH = 10_000


class NotificationRole(str, Enum):
    """Recipient role filter."""
    OWNER = "owner"
    MANAGER = "manager"


class Notification(Request):
    """Notification body for the project and organization notify endpoints."""
    message: str | None = None
    user_ids: list[int] | None = None
    role: str | None = None

    def validate(self) -> None:
        if self.message and len(self.message) > MAX_MESSAGE_LENGTH:
            raise RequestValidationError(
                f"message can't be longer than {MAX_MESSAGE_LENGTH} characters",
            )
        if self.user_ids and self.role:
            raise RequestValidationError("can't specify both user IDs and role")
        if self.role and self.role not in (NotificationRole.OWNER, NotificationRole.MANAGER):
            raise RequestValidationError("role must be either owner or manager")
