"""Bundle Schemas — groups of source files exported together in one format."""

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import CrowdinModel, DataResponse, ListResponse, Request


class Bundle(CrowdinModel):
    id: int = 0
    name: str = ""
    format: str = ""
    source_patterns: list[str] = []
    ignore_patterns: list[str] = []
    export_pattern: str = ""
    is_multilingual: bool = False
    include_project_source_language: bool = False
    label_ids: list[int] = []
    exclude_label_ids: list[int] = []
    created_at: str = ""
    updated_at: str = ""


BundleResponse = DataResponse[Bundle]
BundlesListResponse = ListResponse[Bundle]


class BundleAddRequest(Request):
    name: str = ""
    format: str = ""
    source_patterns: list[str] = []
    ignore_patterns: list[str] = []
    export_pattern: str = ""
    is_multilingual: bool | None = None
    include_project_source_language: bool | None = None
    label_ids: list[int] = []
    exclude_label_ids: list[int] = []

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if not self.format:
            raise RequestValidationError("format is required")
        if not self.source_patterns:
            raise RequestValidationError("sourcePatterns is required")
        if not self.export_pattern:
            raise RequestValidationError("exportPattern is required")


class BundleExportAttributes(CrowdinModel):
    bundle_id: int = 0


class BundleExport(CrowdinModel):
    """Asynchronous bundle export status."""
    identifier: str = ""
    status: str = ""
    progress: int = 0
    attributes: BundleExportAttributes | None = None
    created_at: str = ""
    updated_at: str = ""
    started_at: str = ""
    finished_at: str = ""


BundleExportResponse = DataResponse[BundleExport]
