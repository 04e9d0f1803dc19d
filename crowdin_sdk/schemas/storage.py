"""Storage Schemas — uploaded file handles referenced by storageId elsewhere."""

from crowdin_sdk.schemas.base import CrowdinModel, DataResponse, ListResponse


class Storage(CrowdinModel):
    """Uploaded file handle."""
    id: int = 0
    file_name: str = ""


StorageGetResponse = DataResponse[Storage]
StorageListResponse = ListResponse[Storage]
