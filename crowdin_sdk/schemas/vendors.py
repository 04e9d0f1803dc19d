"""Vendor Schemas — translation vendors available to an organization."""

from crowdin_sdk.schemas.base import CrowdinModel, DataResponse, ListResponse


class Vendor(CrowdinModel):
    """Translation vendor."""
    id: int = 0
    name: str = ""
    description: str = ""
    status: str = ""
    web_url: str = ""


VendorResponse = DataResponse[Vendor]
VendorsListResponse = ListResponse[Vendor]
