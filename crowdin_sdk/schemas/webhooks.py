"""Webhook Schemas — project webhooks, events and delivery settings.

Invariants:
    - WebhookAddRequest requires name, url, events and a GET/POST requestType
    - Webhook.headers decodes any JSON array as an empty mapping
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListResponse,
    Request,
)


class Event(str, Enum):
    FILE_ADDED = "file.added"
    FILE_UPDATED = "file.updated"
    FILE_REVERTED = "file.reverted"
    FILE_DELETED = "file.deleted"
    FILE_TRANSLATED = "file.translated"
    FILE_APPROVED = "file.approved"
    PROJECT_TRANSLATED = "project.translated"
    PROJECT_APPROVED = "project.approved"
    PROJECT_BUILT = "project.built"
    TRANSLATION_UPDATED = "translation.updated"
    STRING_ADDED = "string.added"
    STRING_UPDATED = "string.updated"
    STRING_DELETED = "string.deleted"
    STRING_COMMENT_CREATED = "stringComment.created"
    STRING_COMMENT_UPDATED = "stringComment.updated"
    STRING_COMMENT_DELETED = "stringComment.deleted"
    STRING_COMMENT_RESTORED = "stringComment.restored"
    SUGGESTION_ADDED = "suggestion.added"
    SUGGESTION_UPDATED = "suggestion.updated"
    SUGGESTION_DELETED = "suggestion.deleted"
    SUGGESTION_APPROVED = "suggestion.approved"
    SUGGESTION_DISAPPROVED = "suggestion.disapproved"
    TASK_ADDED = "task.added"
    TASK_STATUS_CHANGED = "task.statusChanged"
    TASK_DELETED = "task.deleted"
    PROJECT_CREATED = "project.created"
    PROJECT_DELETED = "project.deleted"


class WebhookContentType(str, Enum):
    JSON = "application/json"
    FORM = "application/x-www-form-urlencoded"
    MULTIPART = "multipart/form-data"


REQUEST_TYPES = ("GET", "POST")


def _headers_from_wire(value: Any) -> Any:
    # the API sends [] (or any array) when no headers are configured
    if isinstance(value, list):
        return {}
    return value


class Webhook(CrowdinModel):
    id: int = 0
    project_id: int = 0
    name: str = ""
    url: str = ""
    events: list[str] = []
    headers: Annotated[dict[str, str], BeforeValidator(_headers_from_wire)] = {}
    payload: dict[str, Any] | None = None
    is_active: bool = False
    batching_enabled: bool = False
    request_type: str = ""
    content_type: str = ""
    created_at: str = ""
    updated_at: str = ""


WebhookResponse = DataResponse[Webhook]
WebhooksListResponse = ListResponse[Webhook]


class WebhookAddRequest(Request):
    """New webhook; payload is an arbitrary per-event template."""
    name: str = ""
    url: str = ""
    events: list[str] = []
    request_type: str = ""
    is_active: bool | None = None
    batching_enabled: bool | None = None
    content_type: str | None = None
    headers: dict[str, str] | None = None
    payload: Any = None

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if not self.url:
            raise RequestValidationError("url is required")
        if not self.events:
            raise RequestValidationError("events is required")
        if not self.request_type:
            raise RequestValidationError("requestType is required")
        if self.request_type not in REQUEST_TYPES:
            raise RequestValidationError("requestType must be GET or POST")
