"""Workflow Schemas — workflow steps, templates and step strings.

Invariants:
    - WorkflowTemplatesListOptions.group_id=0 is sent; None is omitted
    - WorkflowStepStringsListOptions joins language ids with commas
"""

from typing import Any

from pydantic import Field

from crowdin_sdk.core.encode_query import join_slice
from crowdin_sdk.schemas.base import CrowdinModel, DataResponse, ListOptions, ListResponse


class WorkflowStep(CrowdinModel):
    id: int = 0
    title: str = ""
    type: str = ""
    languages: list[str] = []
    config: dict[str, Any] = {}


WorkflowStepResponse = DataResponse[WorkflowStep]
WorkflowStepsResponse = ListResponse[WorkflowStep]


# --- Templates ----------------------------------------------------------------

class WorkflowTemplateStepConfig(CrowdinModel):
    min_relevant: int | None = None
    auto_substitution: bool | None = None


class WorkflowTemplateStep(CrowdinModel):
    id: int | None = None
    languages: list[int] | None = None
    assignees: list[int] | None = None
    vendor_id: int | None = None
    config: WorkflowTemplateStepConfig = Field(default_factory=WorkflowTemplateStepConfig)
    mt_id: int | None = None


class WorkflowTemplate(CrowdinModel):
    id: int = 0
    title: str = ""
    description: str = ""
    group_id: int = 0
    is_default: bool = False
    steps: list[WorkflowTemplateStep | None] = []
    web_url: str = ""


WorkflowTemplateResponse = DataResponse[WorkflowTemplate]
WorkflowTemplatesListResponse = ListResponse[WorkflowTemplate]


class WorkflowTemplatesListOptions(ListOptions):
    group_id: int | None = None

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.group_id is not None:
            params["groupId"] = str(self.group_id)
        return params


# --- Step strings -------------------------------------------------------------

class WorkflowStepString(CrowdinModel):
    """Source string waiting on a workflow step."""
    id: int = 0
    project_id: int = 0
    branch_id: int | None = None
    identifier: str = ""
    text: str = ""
    type: str = ""
    context: str = ""
    max_length: int = 0
    is_hidden: bool = False
    is_duplicate: bool = False
    master_string_id: int | None = None
    label_ids: list[int] = []
    web_url: str = ""
    created_at: str | None = None
    updated_at: str | None = None
    revision: int = 0
    file_id: int = 0
    directory_id: int | None = None
    fields: Any = None


WorkflowStepStringsResponse = ListResponse[WorkflowStepString]


class WorkflowStepStringsListOptions(ListOptions):
    language_ids: list[str] = []
    order_by: str = ""
    status: str = ""

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.language_ids:
            params["languageIds"] = join_slice(self.language_ids)
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.status:
            params["status"] = self.status
        return params
