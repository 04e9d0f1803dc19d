"""Distribution Schemas — over-the-air content delivery releases.

Invariants:
    - DistributionAddRequest requires a name
    - bundle export mode requires bundleIds; default export mode requires fileIds
"""

from enum import Enum

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import CrowdinModel, DataResponse, ListResponse, Request


class ExportMode(str, Enum):
    """What a distribution exports."""
    DEFAULT = "default"
    BUNDLE = "bundle"


class Distribution(CrowdinModel):
    hash: str = ""
    name: str = ""
    bundle_ids: list[int] = []
    created_at: str = ""
    updated_at: str = ""
    export_mode: str = ""
    file_ids: list[int] = []


DistributionResponse = DataResponse[Distribution]
DistributionsListResponse = ListResponse[Distribution]


class DistributionAddRequest(Request):
    name: str = ""
    export_mode: str | None = None
    file_ids: list[int] | None = None
    bundle_ids: list[int] | None = None

    def validate(self) -> None:
        if not self.name:
            raise RequestValidationError("name is required")
        if self.export_mode == ExportMode.BUNDLE and not self.bundle_ids:
            raise RequestValidationError("bundleIds is required for bundle export mode")
        if self.export_mode == ExportMode.DEFAULT and not self.file_ids:
            raise RequestValidationError("fileIds is required for default export mode")


class DistributionRelease(CrowdinModel):
    """Release progress; status is inProgress, success or failed."""
    status: str = ""
    progress: int = 0
    current_language_id: str = ""
    date: str = ""
    current_file_id: int = 0


DistributionReleaseResponse = DataResponse[DistributionRelease]
