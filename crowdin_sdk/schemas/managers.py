"""Manager Schemas — group managers and their teams."""

from pydantic import Field

from crowdin_sdk.schemas.base import CrowdinModel, DataResponse, ListOptions, ListResponse
from crowdin_sdk.schemas.teams import Team
from crowdin_sdk.schemas.users import User


class Manager(CrowdinModel):
    id: int = 0
    user: User = Field(default_factory=User)
    teams: list[Team] = []


ManagerGetResponse = DataResponse[Manager]
ManagerListResponse = ListResponse[Manager]


class ManagerEditResponse(CrowdinModel):
    data: list[ManagerGetResponse] = []


class ManagerListOptions(ListOptions):
    """Manager filters; team_ids is a single team id sent when positive."""
    team_ids: int = 0
    order_by: str = ""

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.team_ids > 0:
            params["teamIds"] = str(self.team_ids)
        if self.order_by:
            params["orderBy"] = self.order_by
        return params
