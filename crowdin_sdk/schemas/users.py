"""User Schemas — account users, project members and translator roles.

Invariants:
    - ProjectMemberAddRequest needs at least one of userIds, usernames or emails
    - InviteUserRequest requires an email
    - RolePermissions.languages_access decodes `[]` as an empty mapping
    - ProjectMembersListOptions sends workflowStepId only when positive
"""

from enum import Enum
from typing import Annotated, Any

from crowdin_sdk.core.domain_types import EmptyListDict
from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
)


class Role(str, Enum):
    TRANSLATOR = "translator"
    PROOFREADER = "proofreader"
    LANGUAGE_COORDINATOR = "language_coordinator"


# ─── Roles ───────────────────────────────────────────────────────

class LanguageAccess(CrowdinModel):
    all_content: bool | None = None
    workflow_step_ids: list[int] | None = None


class RolePermissions(CrowdinModel):
    all_languages: bool | None = None
    languages_access: Annotated[dict[str, LanguageAccess | None], EmptyListDict] | None = None


class TranslatorRole(CrowdinModel):
    """Role granted to a member or team, optionally scoped to languages."""
    name: str | None = None
    permissions: RolePermissions | None = None


# ─── Project members ─────────────────────────────────────────────

class ManagerOfGroup(CrowdinModel):
    id: int = 0
    name: str = ""


class ProjectMember(CrowdinModel):
    """Member of a project with their roles and access."""
    id: int = 0
    username: str = ""
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    role: str | None = None
    permissions: dict[str, Any] | None = None
    roles: list[TranslatorRole | None] = []
    is_manager: bool | None = None
    is_developer: bool | None = None
    manager_of_group: ManagerOfGroup | None = None
    access_to_all_workflow_steps: bool | None = None
    given_access_at: str | None = None
    avatar_url: str | None = None
    joined_at: str | None = None
    timezone: str | None = None


ProjectMemberResponse = DataResponse[ProjectMember]
ProjectMembersListResponse = ListResponse[ProjectMember]


class ProjectMemberAddResponse(CrowdinModel):
    skipped: list[ProjectMemberResponse] = []
    added: list[ProjectMemberResponse] = []


class ProjectMembersListOptions(ListOptions):
    order_by: str = ""
    search: str = ""
    role: str = ""
    language_id: str = ""
    workflow_step_id: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.search:
            params["search"] = self.search
        if self.role:
            params["role"] = self.role
        if self.language_id:
            params["languageId"] = self.language_id
        if self.workflow_step_id > 0:
            params["workflowStepId"] = str(self.workflow_step_id)
        return params


class ProjectMemberAddRequest(Request):
    user_ids: list[int] | None = None
    usernames: list[str] | None = None
    emails: list[str] | None = None
    manager_access: bool | None = None
    developer_access: bool | None = None
    roles: list[TranslatorRole] | None = None

    def validate(self) -> None:
        if not self.user_ids and not self.usernames and not self.emails:
            raise RequestValidationError(
                "one of fields `userIds`, `usernames` or `emails` is required"
            )


class ProjectMemberReplaceRequest(Request):
    manager_access: bool | None = None
    developer_access: bool | None = None
    roles: list[TranslatorRole] | None = None


# ─── Users ───────────────────────────────────────────────────────

class User(CrowdinModel):
    """Account user. status: active, pending or blocked; twoFactor: enabled or disabled."""
    id: int = 0
    username: str = ""
    email: str = ""
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    status: str | None = None
    avatar_url: str = ""
    created_at: str = ""
    last_seen: str = ""
    two_factor: str = ""
    is_admin: bool | None = None
    timezone: str = ""
    fields: dict[str, Any] | None = None


class ShortUser(CrowdinModel):
    id: int = 0
    username: str = ""
    full_name: str = ""
    avatar_url: str = ""


UserResponse = DataResponse[User]
UsersListResponse = ListResponse[User]


class UsersListOptions(ListOptions):
    order_by: str = ""
    status: str = ""
    search: str = ""
    two_factor: str = ""

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.status:
            params["status"] = self.status
        if self.search:
            params["search"] = self.search
        if self.two_factor:
            params["twoFactor"] = self.two_factor
        return params


class InviteUserRequest(Request):
    email: str = ""
    first_name: str | None = None
    last_name: str | None = None
    timezone: str | None = None
    admin_access: bool | None = None

    def validate(self) -> None:
        if not self.email:
            raise RequestValidationError("email is required")
