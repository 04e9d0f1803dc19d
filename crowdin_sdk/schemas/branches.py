"""Branch Schemas — project version branches, merges and clones.

Invariants:
    - BranchesAddRequest and BranchesCloneRequest require a name
    - BranchesMergeRequest requires a non-zero sourceBranchId
"""

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
)


class Branch(CrowdinModel):
    """Project branch."""
    id: int = 0
    project_id: int = 0
    name: str = ""
    title: str = ""
    created_at: str = ""
    updated_at: str = ""
    export_pattern: str | None = None
    priority: str | None = None


BranchesGetResponse = DataResponse[Branch]
BranchesListResponse = ListResponse[Branch]


class BranchesListOptions(ListOptions):
    """Filters for listing branches."""
    order_by: str = ""
    name: str = ""

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.name:
            params["name"] = self.name
        return params


class BranchesAddRequest(Request):
    name: str = ""
    title: str | None = None
    export_pattern: str | None = None
    priority: str | None = None

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")


# --- Merge --------------------------------------------------------------------

class BranchMergeAttributes(CrowdinModel):
    source_branch_id: int = 0
    delete_after_merge: bool = False


class BranchMerge(CrowdinModel):
    """Asynchronous merge operation status."""
    identifier: str = ""
    status: str = ""
    progress: int = 0
    attributes: BranchMergeAttributes | None = None
    created_at: str = ""
    updated_at: str = ""
    started_at: str = ""
    finished_at: str = ""


BranchesMergeResponse = DataResponse[BranchMerge]


class BranchMergeSummary(CrowdinModel):
    """Result of a finished (or dry-run) merge."""
    status: str = ""
    source_branch_id: int = 0
    target_branch_id: int = 0
    dry_run: bool = False
    details: dict[str, int] = {}


BranchesMergeSummaryResponse = DataResponse[BranchMergeSummary]


class BranchesMergeRequest(Request):
    source_branch_id: int = 0
    delete_after_merge: bool | None = None
    accept_source_changes: bool | None = None
    dry_run: bool | None = None

    def validate(self) -> None:
        if self.source_branch_id == 0:
            raise RequestValidationError("sourceBranchId is required")


class BranchesCloneRequest(Request):
    name: str = ""
    title: str | None = None

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
