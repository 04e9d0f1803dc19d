"""Team Schemas — teams, members and project team access.

Invariants:
    - TeamsListOptions filters are pre-joined strings sent verbatim
    - TeamAddRequest requires a name, TeamMemberAddRequest at least one user id
    - ProjectTeamAddRequest requires a non-zero teamId
"""

from typing import Any

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
)
from crowdin_sdk.schemas.users import TranslatorRole


class Team(CrowdinModel):
    id: int = 0
    name: str = ""
    total_members: int = 0
    web_url: str = ""
    created_at: str = ""
    updated_at: str = ""


TeamResponse = DataResponse[Team]
TeamsListResponse = ListResponse[Team]


class TeamsListOptions(ListOptions):
    """Team filters; id and role lists are comma-separated strings."""
    search: str = ""
    project_ids: str = ""
    project_roles: str = ""
    language_ids: str = ""
    group_ids: str = ""
    order_by: str = ""

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        for key, value in (
            ("search", self.search),
            ("projectIds", self.project_ids),
            ("projectRoles", self.project_roles),
            ("languageIds", self.language_ids),
            ("groupIds", self.group_ids),
            ("orderBy", self.order_by),
        ):
            if value:
                params[key] = value
        return params


class TeamAddRequest(Request):
    name: str = ""

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")


# --- Members ------------------------------------------------------------------

class TeamMember(CrowdinModel):
    id: int = 0
    username: str = ""
    first_name: str = ""
    last_name: str = ""
    avatar_url: str = ""
    added_at: str = ""


TeamMemberResponse = DataResponse[TeamMember]
TeamMembersListResponse = ListResponse[TeamMember]


class TeamMemberAddRequest(Request):
    user_ids: list[int] = []

    def validate(self) -> None:
        if not self.user_ids:
            raise RequestValidationError("userIds is required")


class TeamMemberAddResponse(CrowdinModel):
    skipped: list[TeamMemberResponse] = []
    added: list[TeamMemberResponse] = []


# --- Project access -----------------------------------------------------------

class ProjectTeam(CrowdinModel):
    id: int = 0
    has_manager_access: bool = False
    has_developer_access: bool = False
    has_access_to_all_workflow_steps: bool = False
    permissions: dict[str, Any] = {}
    roles: list[TranslatorRole | None] = []


class ProjectTeamAddRequest(Request):
    team_id: int = 0
    manager_access: bool | None = None
    developer_access: bool | None = None
    roles: list[TranslatorRole] | None = None

    def validate(self) -> None:
        if self.team_id == 0:
            raise RequestValidationError("teamId is required")


class ProjectTeamAddResponse(CrowdinModel):
    skipped: ProjectTeam | None = None
    added: ProjectTeam | None = None


# --- Group teams --------------------------------------------------------------

class GroupsTeam(CrowdinModel):
    """Team attached to a group; the API nests the team under "user"."""
    id: int = 0
    user: Team | None = None


TeamsGetResponse = DataResponse[GroupsTeam]
GroupsTeamsListResponse = ListResponse[GroupsTeam]
