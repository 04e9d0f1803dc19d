"""Custom Field Schemas — organization-defined fields attached to projects, tasks, files...

Invariants:
    - FieldAddRequest requires name, slug, type and at least one entity, in that order
"""

from enum import Enum

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
)


class FieldType(str, Enum):
    CHECKBOX = "checkbox"
    RADIOBUTTONS = "radiobuttons"
    DATE = "date"
    DATETIME = "datetime"
    NUMBER = "number"
    LABELS = "labels"
    SELECT = "select"
    MULTISELECT = "multiselect"
    TEXT = "text"
    TEXTAREA = "textarea"
    URL = "url"


class FieldEntity(str, Enum):
    PROJECT = "project"
    USER = "user"
    TASK = "task"
    FILE = "file"
    TRANSLATION = "translation"
    STRING = "string"


class FieldPlace(str, Enum):
    """UI location where a field is displayed."""
    PROJECT_CREATE_MODAL = "projectCreateModal"
    PROJECT_HEADER = "projectHeader"
    PROJECT_DETAILS = "projectDetails"
    PROJECT_CROWDSOURCE_DETAILS = "projectCrowdsourceDetails"
    PROJECT_SETTINGS = "projectSettings"
    PROJECT_TASK_EDIT_CREATE = "projectTaskEditCreate"
    PROJECT_TASK_DETAILS = "projectTaskDetails"
    FILE_DETAILS = "fileDetails"
    FILE_SETTINGS = "fileSettings"
    USER_EDIT_MODAL = "userEditModal"
    USER_DETAILS = "userDetails"
    USER_POPOVER = "userPopover"
    STRING_EDIT_MODAL = "stringEditModal"
    STRING_DETAILS = "stringDetails"
    TRANSLATION_UNDER_CONTENT = "translationUnderContent"


class FieldOption(CrowdinModel):
    label: str | None = None
    value: str | None = None


class FieldLocation(CrowdinModel):
    place: str | None = None


class FieldConfig(CrowdinModel):
    """Type-specific config: options for selects, min/max/units for numbers."""
    options: list[FieldOption] | None = None
    locations: list[FieldLocation] | None = None
    min: int | None = None
    max: int | None = None
    units: str | None = None


class Field(CrowdinModel):
    id: int = 0
    name: str = ""
    slug: str = ""
    description: str = ""
    type: str = ""
    config: FieldConfig | None = None
    entities: list[str] = []
    created_at: str = ""
    updated_at: str = ""


FieldResponse = DataResponse[Field]
FieldsListResponse = ListResponse[Field]


class FieldsListOptions(ListOptions):
    search: str = ""
    entity: str = ""
    type: str = ""

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.search:
            params["search"] = self.search
        if self.entity:
            params["entity"] = self.entity
        if self.type:
            params["type"] = self.type
        return params


class FieldAddRequest(Request):
    name: str = ""
    slug: str = ""
    type: str = ""
    entities: list[str] = []
    description: str | None = None
    config: FieldConfig | None = None

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if not self.slug:
            raise RequestValidationError("slug is required")
        if not self.type:
            raise RequestValidationError("type is required")
        if not self.entities:
            raise RequestValidationError("entities is required")
