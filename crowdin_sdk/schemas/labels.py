"""Label Schemas — project labels and their assignment to strings and screenshots."""

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import (
    CrowdinModel,
    DataResponse,
    ListOptions,
    ListResponse,
    Request,
)


class Label(CrowdinModel):
    id: int = 0
    title: str = ""


LabelResponse = DataResponse[Label]
LabelsListResponse = ListResponse[Label]


class LabelsListOptions(ListOptions):
    order_by: str = ""

    def query_params(self) -> dict[str, str]:
        params = super().query_params()
        if self.order_by:
            params["orderBy"] = self.order_by
        return params


class LabelAddRequest(Request):
    title: str = ""

    def validate(self) -> None:
        if not self.title:
            raise RequestValidationError("title is required")


class AssignToStringsRequest(Request):
    string_ids: list[int] = []

    def validate(self) -> None:
        if not self.string_ids:
            raise RequestValidationError("stringIds cannot be empty")


class AssignToScreenshotsRequest(Request):
    screenshot_ids: list[int] = []

    def validate(self) -> None:
        if not self.screenshot_ids:
            raise RequestValidationError("screenshotIds cannot be empty")
