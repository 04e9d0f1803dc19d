"""Task Schemas — task entities, create forms per task kind, templates and comments.

Invariants:
    - Crowdin-mode forms check title, languageId, type, vendor, then content ids, in that order
    - Pending forms check precedingTaskId, type, vendor (where present), then title
    - EnterpriseTaskCreateForm takes exactly one of workflowStepId or type
    - UserTasksListOptions.is_archived is sent only as 0 or 1

Design Decisions:
    - One class per create form instead of one union model: each form has its own
      required type/vendor pair and error text (ADR: explicit forms over flags)
    - TaskType is an IntEnum; error text formats its integer value
"""

from enum import Enum, IntEnum
from typing import Any

from pydantic import Field

from crowdin_sdk.core.domain_types import UserId
from crowdin_sdk.core.encode_query import join_slice, tri_state
from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
)
from crowdin_sdk.schemas.languages import Language


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    CLOSED = "closed"


class TaskType(IntEnum):
    TRANSLATE = 0
    PROOFREAD = 1
    TRANSLATE_BY_VENDOR = 2
    PROOFREAD_BY_VENDOR = 3


class TaskVendor(str, Enum):
    CROWDIN_LANGUAGE_SERVICE = "crowdin_language_service"
    OHT = "oht"
    GENGO = "gengo"
    MANUAL = "manual"
    ALCONOST = "alconost"
    BABBLEON = "babbleon"
    TOMEDES = "tomedes"
    E2F = "e2f"
    WRITE_PATH_ADMIN = "write_path_admin"
    INLINGO = "inlingo"
    ACCLARO = "acclaro"
    TRANSLATE_BY_HUMANS = "translate_by_humans"
    LINGO24 = "lingo24"
    ASSERTIO_LANGUAGE_SERVICES = "assertio_language_services"
    GTE_LOCALIZE = "gte_localize"
    KETTU_SOLUTIONS = "kettu_solutions"
    LANGUAGELINE_SOLUTIONS = "languageline_solutions"


# ─── Entities ────────────────────────────────────────────────────

class TaskAssignee(CrowdinModel):
    id: int = 0
    username: str = ""
    full_name: str = ""
    avatar_url: str = ""
    words_count: int = 0
    words_left: int = 0


class TaskAssignedTeam(CrowdinModel):
    id: int = 0
    words_count: int = 0


class TaskProgress(CrowdinModel):
    total: int = 0
    done: int = 0
    percent: int = 0


class Task(CrowdinModel):
    """Project task."""
    id: int = 0
    project_id: int = 0
    creator_id: int = 0
    type: int = 0
    status: str = ""
    title: str = ""
    assignees: list[TaskAssignee | None] = []
    assigned_teams: list[TaskAssignedTeam | None] = []
    progress: TaskProgress = Field(default_factory=TaskProgress)
    source_language_id: str = ""
    target_language_id: str = ""
    description: str = ""
    translation_url: str = ""
    web_url: str = ""
    words_count: int = 0
    comments_count: int = 0
    deadline: str = ""
    started_at: str = ""
    resolved_at: str = ""
    time_range: str = ""
    workflow_step_id: int = 0
    buy_url: str = ""
    created_at: str = ""
    updated_at: str = ""
    source_language: Language | None = None
    target_languages: list[Language | None] = []
    label_ids: list[int] = []
    exclude_label_ids: list[int] = []
    preceding_task_id: int = 0
    files_count: int = 0
    file_ids: list[int] | None = None
    vendor: str | None = None
    branch_ids: list[int] | None = None
    is_archived: bool | None = None
    fields: Any = None


TaskResponse = DataResponse[Task]
TasksListResponse = ListResponse[Task]


# ─── List options ────────────────────────────────────────────────

class TasksListOptions(ListOptions):
    order_by: str = ""
    status: list[str] = []
    assignee_id: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.status:
            params["status"] = join_slice(self.status)
        if self.assignee_id > 0:
            params["assigneeId"] = str(self.assignee_id)
        return params


class UserTasksListOptions(ListOptions):
    """Tasks of the authenticated user; is_archived is 0 or 1."""
    order_by: str = ""
    status: list[str] = []
    is_archived: int | None = None

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.status:
            params["status"] = join_slice(self.status)
        archived = tri_state(self.is_archived)
        if archived is not None:
            params["isArchived"] = archived
        return params


# ─── Create forms ────────────────────────────────────────────────

def _one_of(*types: TaskType) -> str:
    return ", ".join(str(int(t)) for t in types)


def _require_title_and_language(form) -> None:
    if not form.title:
        raise RequestValidationError("title is required")
    if not form.language_id:
        raise RequestValidationError("languageId is required")


def _require_content(form) -> None:
    if not form.string_ids and not form.file_ids and not form.branch_ids:
        raise RequestValidationError("one of stringIds, fileIds or branchIds is required")


def _require_vendor_type(form) -> None:
    if form.type not in (TaskType.TRANSLATE_BY_VENDOR, TaskType.PROOFREAD_BY_VENDOR):
        raise RequestValidationError(
            "type is required and must be one of "
            + _one_of(TaskType.TRANSLATE_BY_VENDOR, TaskType.PROOFREAD_BY_VENDOR)
        )


def _require_vendor(form, vendor: TaskVendor) -> None:
    if form.vendor != vendor.value:
        raise RequestValidationError(f'vendor is required and must be "{vendor.value}"')


class CrowdinTaskAssignee(CrowdinModel):
    id: int = 0
    words_count: int | None = None


class _TaskContent(Request):
    """Fields shared by every form that selects strings for a new task."""
    title: str = ""
    language_id: str = ""
    branch_ids: list[int] | None = None
    string_ids: list[int] | None = None
    file_ids: list[int] | None = None
    label_ids: list[int] | None = None
    exclude_label_ids: list[int] | None = None
    status: str | None = None
    description: str | None = None
    date_from: str | None = None
    date_to: str | None = None


class TaskCreateForm(_TaskContent):
    """Crowdin task; type must be translate (0) or proofread (1)."""
    type: int | None = None
    split_content: bool | None = None
    skip_assigned_strings: bool | None = None
    include_pre_translated_strings_only: bool | None = None
    assignees: list[CrowdinTaskAssignee] | None = None
    deadline: str | None = None
    started_at: str | None = None

    def validate(self) -> None:
        _require_title_and_language(self)
        if self.type is None or self.type not in (TaskType.TRANSLATE, TaskType.PROOFREAD):
            raise RequestValidationError(
                "type is required and must be one of "
                + _one_of(TaskType.TRANSLATE, TaskType.PROOFREAD)
            )
        _require_content(self)


class LanguageServiceTaskCreateForm(_TaskContent):
    type: int = 0
    vendor: str = ""
    include_pre_translated_strings_only: bool | None = None

    def validate(self) -> None:
        _require_title_and_language(self)
        _require_vendor_type(self)
        _require_vendor(self, TaskVendor.CROWDIN_LANGUAGE_SERVICE)
        _require_content(self)


class VendorOhtTaskCreateForm(_TaskContent):
    type: int = 0
    vendor: str = ""
    expertise: str | None = None
    edit_service: bool | None = None
    include_pre_translated_strings_only: bool | None = None

    def validate(self) -> None:
        _require_title_and_language(self)
        _require_vendor_type(self)
        _require_vendor(self, TaskVendor.OHT)
        _require_content(self)


class VendorGengoTaskCreateForm(_TaskContent):
    """Gengo only takes translation tasks."""
    type: int = 0
    vendor: str = ""
    expertise: str | None = None
    tone: str | None = None
    purpose: str | None = None
    customer_message: str | None = None
    use_preferred: bool | None = None
    edit_service: bool | None = None

    def validate(self) -> None:
        _require_title_and_language(self)
        if self.type != TaskType.TRANSLATE_BY_VENDOR:
            raise RequestValidationError(
                f"type is required and must be {int(TaskType.TRANSLATE_BY_VENDOR)}"
            )
        _require_vendor(self, TaskVendor.GENGO)
        _require_content(self)


class VendorManualTaskCreateForm(_TaskContent):
    """Manual vendor task; any vendor name is accepted."""
    type: int = 0
    vendor: str = ""
    skip_assigned_strings: bool | None = None
    include_pre_translated_strings_only: bool | None = None
    assignees: list[CrowdinTaskAssignee] | None = None
    deadline: str | None = None
    started_at: str | None = None

    def validate(self) -> None:
        _require_title_and_language(self)
        _require_vendor_type(self)
        if not self.vendor:
            raise RequestValidationError("vendor is required")
        _require_content(self)


# --- Pending forms ------------------------------------------------------------

def _require_preceding_and_type(form, task_type: TaskType) -> None:
    if form.preceding_task_id == 0:
        raise RequestValidationError("precedingTaskId is required")
    if form.type != task_type:
        raise RequestValidationError(f"type is required and must be {int(task_type)}")


def _require_title(form) -> None:
    if not form.title:
        raise RequestValidationError("title is required")


class PendingTaskCreateForm(Request):
    """Proofreading task that starts when its preceding task completes."""
    preceding_task_id: int = 0
    type: int = 0
    title: str = ""
    description: str | None = None
    assignees: list[CrowdinTaskAssignee] | None = None
    deadline: str | None = None

    def validate(self) -> None:
        _require_preceding_and_type(self, TaskType.PROOFREAD)
        _require_title(self)


class LanguageServicePendingTaskCreateForm(Request):
    preceding_task_id: int = 0
    type: int = 0
    vendor: str = ""
    title: str = ""
    description: str | None = None
    deadline: str | None = None

    def validate(self) -> None:
        _require_preceding_and_type(self, TaskType.PROOFREAD_BY_VENDOR)
        _require_title(self)


class VendorManualPendingTaskCreateForm(Request):
    preceding_task_id: int = 0
    type: int = 0
    vendor: str = ""
    title: str = ""
    description: str | None = None
    assignees: list[CrowdinTaskAssignee] | None = None
    deadline: str | None = None

    def validate(self) -> None:
        _require_preceding_and_type(self, TaskType.PROOFREAD_BY_VENDOR)
        if not self.vendor:
            raise RequestValidationError("vendor is required")
        _require_title(self)


# --- Enterprise forms ---------------------------------------------------------

def _require_strings_or_files(form) -> None:
    if not form.string_ids and not form.file_ids:
        raise RequestValidationError("one of stringIds or fileIds is required")


class EnterpriseTaskCreateForm(Request):
    """Enterprise task bound either to a workflow step or to a task type."""
    type: int | None = None
    workflow_step_id: int | None = None
    title: str = ""
    language_id: str = ""
    string_ids: list[int] | None = None
    file_ids: list[int] | None = None
    label_ids: list[int] | None = None
    exclude_label_ids: list[int] | None = None
    status: str | None = None
    description: str | None = None
    split_content: bool | None = None
    skip_assigned_strings: bool | None = None
    assignees: list[CrowdinTaskAssignee] | None = None
    assigned_teams: list[TaskAssignedTeam] | None = None
    include_pre_translated_strings_only: bool | None = None
    deadline: str | None = None
    started_at: str | None = None
    date_from: str | None = None
    date_to: str | None = None
    fields: dict[str, Any] | None = None

    def validate(self) -> None:
        step = self.workflow_step_id or 0
        if step == 0 and self.type is None:
            raise RequestValidationError("workflowStepId or type is required")
        if step > 0 and self.type is not None:
            raise RequestValidationError(
                "workflowStepId and type can't be used in the same request"
            )
        if self.type is not None and self.type not in (TaskType.TRANSLATE, TaskType.PROOFREAD):
            raise RequestValidationError(
                "type must be one of " + _one_of(TaskType.TRANSLATE, TaskType.PROOFREAD)
            )
        _require_title_and_language(self)
        _require_strings_or_files(self)


class EnterpriseVendorTaskCreateForm(Request):
    workflow_step_id: int = 0
    title: str = ""
    language_id: str = ""
    string_ids: list[int] | None = None
    file_ids: list[int] | None = None
    label_ids: list[int] | None = None
    exclude_label_ids: list[int] | None = None
    description: str | None = None
    skip_assigned_strings: bool | None = None
    include_pre_translated_strings_only: bool | None = None
    deadline: str | None = None
    started_at: str | None = None
    date_to: str | None = None
    fields: dict[str, Any] | None = None

    def validate(self) -> None:
        if self.workflow_step_id == 0:
            raise RequestValidationError("workflowStepId is required")
        _require_title_and_language(self)
        _require_strings_or_files(self)


class EnterprisePendingTaskCreateForm(Request):
    preceding_task_id: int = 0
    type: int = 0
    title: str = ""
    description: str | None = None
    assignees: list[CrowdinTaskAssignee] | None = None
    assigned_teams: list[TaskAssignedTeam] | None = None
    deadline: str | None = None

    def validate(self) -> None:
        _require_preceding_and_type(self, TaskType.PROOFREAD)
        _require_title(self)


# ─── Settings templates ──────────────────────────────────────────

class TaskSettingsTemplateLanguage(CrowdinModel):
    language_id: str = ""
    user_ids: list[UserId] = []
    team_ids: list[int] | None = None


class TaskSettingsTemplateConfig(CrowdinModel):
    languages: list[TaskSettingsTemplateLanguage] = []


class TaskSettingsTemplate(CrowdinModel):
    id: int = 0
    name: str = ""
    config: TaskSettingsTemplateConfig = Field(default_factory=TaskSettingsTemplateConfig)
    created_at: str = ""
    updated_at: str = ""


TaskSettingsTemplateResponse = DataResponse[TaskSettingsTemplate]
TaskSettingsTemplatesListResponse = ListResponse[TaskSettingsTemplate]


class TaskSettingsTemplateAddRequest(Request):
    name: str = ""
    config: TaskSettingsTemplateConfig = Field(default_factory=TaskSettingsTemplateConfig)

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if not self.config.languages:
            raise RequestValidationError("config languages is required")


# ─── Comments ────────────────────────────────────────────────────

class TaskComment(CrowdinModel):
    id: int = 0
    user_id: int = 0
    task_id: int = 0
    text: str = ""
    time_spent: int = 0
    created_at: str = ""
    updated_at: str = ""


TaskCommentResponse = DataResponse[TaskComment]
TaskCommentsListResponse = ListResponse[TaskComment]


class TaskCommentAddRequest(Request):
    text: str | None = None
    time_spent: int | None = None
