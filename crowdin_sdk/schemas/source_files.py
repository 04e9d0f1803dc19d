"""Source File Schemas — directories, files, revisions and reviewed source builds.

Invariants:
    - DirectoryAddRequest and FileAddRequest reject branchId together with directoryId
    - FileUpdateRestoreRequest takes exactly one of revisionId or storageId
    - `recursion` reaches the query only when it was given as a string

Design Decisions:
    - importOptions/exportOptions are closed families (FileImportOptions,
      FileExportOptions) serialized via SerializeAsAny; outer requests run the
      options' validate() once their own checks pass (ADR: validate-self capability)
    - Option mappings are built into the shape registered for the file type; the
      update/restore request has no type, so it falls back to the generic shapes
"""

from typing import Any

from pydantic import Field, SerializeAsAny, ValidationInfo, field_validator

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
    resolve_variant,
)

BRANCH_DIRECTORY_CONFLICT = "branchId and directoryId cannot be used in the same request"


class _LocationListOptions(ListOptions):
    order_by: str = ""
    branch_id: int = 0
    directory_id: int = 0
    filter: str = ""
    recursion: Any = None

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        if self.branch_id > 0:
            params["branchId"] = str(self.branch_id)
        if self.directory_id > 0:
            params["directoryId"] = str(self.directory_id)
        if self.filter:
            params["filter"] = self.filter
        if isinstance(self.recursion, str):
            params["recursion"] = self.recursion
        return params


# --- Directories --------------------------------------------------------------

class Directory(CrowdinModel):
    id: int = 0
    project_id: int = 0
    branch_id: int = 0
    directory_id: int = 0
    name: str = ""
    title: str = ""
    export_pattern: str = ""
    path: str = ""
    priority: str = ""
    created_at: str = ""
    updated_at: str = ""


DirectoryGetResponse = DataResponse[Directory]
DirectoryListResponse = ListResponse[Directory]


class DirectoryListOptions(_LocationListOptions):
    pass


class DirectoryAddRequest(Request):
    name: str = ""
    branch_id: int | None = None
    directory_id: int | None = None
    title: str | None = None
    export_pattern: str | None = None
    priority: str | None = None

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if self.branch_id and self.directory_id:
            raise RequestValidationError(BRANCH_DIRECTORY_CONFLICT)


# ─── Import / export options ─────────────────────────────────────

class FileImportOptions(CrowdinModel):
    """Base of the per-file-type import option shapes."""

    def validate(self) -> None:
        return None


class CommonFileImportOptions(FileImportOptions):
    content_segmentation: bool | None = None
    srx_storage_id: int | None = None


class SpreadsheetFileImportOptions(CommonFileImportOptions):
    first_line_contains_header: bool | None = None
    import_hidden_sheets: bool | None = None
    import_translations: bool | None = None
    scheme: dict[str, int] | None = None


class XMLFileImportOptions(CommonFileImportOptions):
    translate_content: bool | None = None
    translate_attributes: bool | None = None
    translatable_elements: list[str] | None = None


class DOCXFileImportOptions(CommonFileImportOptions):
    clean_tags_aggressively: bool | None = None
    translate_hidden_text: bool | None = None
    translate_hyperlink_urls: bool | None = None
    translate_hidden_rows_and_columns: bool | None = None
    import_notes: bool | None = None
    import_hidden_slides: bool | None = None


class HTMLFileImportOptions(CommonFileImportOptions):
    excluded_elements: list[str] | None = None


class HTMLWithFrontMatterFileImportOptions(CommonFileImportOptions):
    excluded_elements: list[str] | None = None
    excluded_front_matter_elements: list[str] | None = None


class MDXV1FileImportOptions(CommonFileImportOptions):
    excluded_front_matter_elements: list[str] | None = None
    exclude_code_blocks: bool | None = None


class MDXV2FileImportOptions(MDXV1FileImportOptions):
    pass


class StringCatalogFileImportOptions(FileImportOptions):
    import_key_as_source: bool | None = None


class AdocFileImportOptions(FileImportOptions):
    exclude_include_directives: bool | None = None


class OtherFileImportOptions(CommonFileImportOptions):
    pass


class FileExportOptions(CrowdinModel):
    """Base of the per-file-type export option shapes."""

    def validate(self) -> None:
        return None


class GeneralFileExportOptions(FileExportOptions):
    export_pattern: str | None = None


class PropertyFileExportOptions(FileExportOptions):
    export_pattern: str | None = None
    escape_quotes: int | None = None
    escape_special_characters: int | None = None


class JavaScriptFileExportOptions(FileExportOptions):
    export_pattern: str | None = None
    export_quotes: str | None = None


IMPORT_OPTIONS: dict[str, type[FileImportOptions]] = {
    "csv": SpreadsheetFileImportOptions,
    "xlsx": SpreadsheetFileImportOptions,
    "xml": XMLFileImportOptions,
    "docx": DOCXFileImportOptions,
    "html": HTMLFileImportOptions,
    "fm_html": HTMLWithFrontMatterFileImportOptions,
    "mdx_v1": MDXV1FileImportOptions,
    "mdx_v2": MDXV2FileImportOptions,
    "xcstrings": StringCatalogFileImportOptions,
    "adoc": AdocFileImportOptions,
}

EXPORT_OPTIONS: dict[str, type[FileExportOptions]] = {
    "properties": PropertyFileExportOptions,
    "js": JavaScriptFileExportOptions,
}


def _import_options_for(value: Any, file_type: Any) -> Any:
    return resolve_variant(
        value, FileImportOptions, IMPORT_OPTIONS, file_type, default=OtherFileImportOptions,
    )


def _export_options_for(value: Any, file_type: Any) -> Any:
    return resolve_variant(
        value, FileExportOptions, EXPORT_OPTIONS, file_type, default=GeneralFileExportOptions,
    )


def _validate_options(req) -> None:
    if req.import_options is not None:
        req.import_options.validate()
    if req.export_options is not None:
        req.export_options.validate()


# ─── Files ───────────────────────────────────────────────────────

class File(CrowdinModel):
    """Source file; import/export options come back as raw mappings."""
    id: int = 0
    project_id: int = 0
    branch_id: int | None = None
    directory_id: int | None = None
    name: str = ""
    title: str | None = None
    context: str | None = None
    type: str = ""
    path: str = ""
    status: str = ""
    revision_id: int = 0
    priority: str = ""
    import_options: dict[str, Any] | None = None
    export_options: dict[str, Any] | None = None
    excluded_target_languages: list[str] | None = None
    parser_version: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    fields: Any = None


FileGetResponse = DataResponse[File]
FileListResponse = ListResponse[File]


class FileListOptions(_LocationListOptions):
    pass


class FileAddRequest(Request):
    storage_id: int = 0
    name: str = ""
    branch_id: int | None = None
    directory_id: int | None = None
    title: str | None = None
    context: str | None = None
    type: str | None = None
    parser_version: int | None = None
    import_options: SerializeAsAny[FileImportOptions] | None = None
    export_options: SerializeAsAny[FileExportOptions] | None = None
    excluded_target_languages: list[str] | None = None
    attach_label_ids: list[int] | None = None
    fields: dict[str, Any] | None = None

    @field_validator("import_options", mode="before")
    @classmethod
    def import_options_for_type(cls, v: Any, info: ValidationInfo) -> Any:
        return _import_options_for(v, info.data.get("type"))

    @field_validator("export_options", mode="before")
    @classmethod
    def export_options_for_type(cls, v: Any, info: ValidationInfo) -> Any:
        return _export_options_for(v, info.data.get("type"))

    def validate(self) -> None:
        if self.storage_id == 0:
            raise RequestValidationError("storageId is required")
        if not self.name:
            raise RequestValidationError("name is required")
        if (self.branch_id or 0) > 0 and (self.directory_id or 0) > 0:
            raise RequestValidationError(BRANCH_DIRECTORY_CONFLICT)
        _validate_options(self)


class FileUpdateRestoreRequest(Request):
    """Update from a new storage upload, or restore an earlier revision."""
    revision_id: int | None = None
    storage_id: int | None = None
    name: str | None = None
    update_option: str | None = None
    import_options: SerializeAsAny[FileImportOptions] | None = None
    export_options: SerializeAsAny[FileExportOptions] | None = None
    attach_label_ids: list[int] | None = None
    detach_label_ids: list[int] | None = None
    replace_modified_context: bool | None = None

    @field_validator("import_options", mode="before")
    @classmethod
    def import_options_untyped(cls, v: Any) -> Any:
        return _import_options_for(v, None)

    @field_validator("export_options", mode="before")
    @classmethod
    def export_options_untyped(cls, v: Any) -> Any:
        return _export_options_for(v, None)

    def validate(self) -> None:
        if not self.revision_id and not self.storage_id:
            raise RequestValidationError("one of revisionId or storageId is required")
        if self.revision_id and self.storage_id:
            raise RequestValidationError("use only one of revisionId or storageId")
        _validate_options(self)


# --- Revisions ----------------------------------------------------------------

class RevisionInfo(CrowdinModel):
    strings: int = 0
    words: int = 0


class FileRevisionInfo(CrowdinModel):
    added: RevisionInfo = Field(default_factory=RevisionInfo)
    deleted: RevisionInfo = Field(default_factory=RevisionInfo)
    updated: RevisionInfo = Field(default_factory=RevisionInfo)


class FileRevision(CrowdinModel):
    id: int = 0
    project_id: int = 0
    file_id: int = 0
    restore_to_revision: int | None = None
    info: FileRevisionInfo = Field(default_factory=FileRevisionInfo)
    date: str = ""


FileRevisionResponse = DataResponse[FileRevision]
FileRevisionListResponse = ListResponse[FileRevision]


# --- Reviewed source builds ---------------------------------------------------

class ReviewedBuildAttributes(CrowdinModel):
    branch_id: int | None = None
    target_language_id: str = ""


class ReviewedBuild(CrowdinModel):
    id: int = 0
    project_id: int = 0
    status: str = ""
    progress: int = 0
    attributes: ReviewedBuildAttributes = Field(default_factory=ReviewedBuildAttributes)


ReviewedBuildResponse = DataResponse[ReviewedBuild]
ReviewedBuildListResponse = ListResponse[ReviewedBuild]


class ReviewedBuildListOptions(ListOptions):
    branch_id: int = 0

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.branch_id > 0:
            params["branchId"] = str(self.branch_id)
        return params


class ReviewedBuildRequest(Request):
    branch_id: int | None = None
