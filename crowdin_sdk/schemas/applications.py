"""Application Schemas — installed Crowdin apps, their modules and permissions.

Invariants:
    - InstallApplicationRequest requires the manifest url
    - Permission values come from PermissionValue; unknown values are passed through
"""

from enum import Enum
from typing import Any

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.base import CrowdinModel, DataResponse, ListResponse, Request


class PermissionValue(str, Enum):
    """Who may use an application or module."""
    OWN = "own"                # all projects (Enterprise) / own project
    OWNER = "owner"            # organization admins (Enterprise) / all project members
    MANAGERS = "managers"      # organization admins, project managers and developers
    ALL = "all"                # all users in the organization projects
    GUESTS = "guests"          # all users, including unauthenticated guests
    RESTRICTED = "restricted"  # selected projects


class Permission(CrowdinModel):
    """Permission value, optionally restricted to a set of ids."""
    value: str | None = None
    ids: list[int] | None = None


class ProjectPermission(CrowdinModel):
    project: Permission | None = None


class UserPermission(CrowdinModel):
    user: Permission | None = None


class DefaultPermissions(CrowdinModel):
    user: str = ""
    project: str = ""


class ApplicationModule(CrowdinModel):
    """Module exposed by an installed application."""
    key: str = ""
    type: str = ""
    data: Any = None
    permissions: UserPermission | None = None
    authentication_type: str = ""
    identifier: str | None = None
    scopes: Any = None
    iframe: Any = None


class Installation(CrowdinModel):
    """Installed application."""
    identifier: str = ""
    name: str = ""
    description: str = ""
    logo: str = ""
    base_url: str = ""
    manifest_url: str = ""
    created_at: str = ""
    modules: list[ApplicationModule] = []
    scopes: list[str] = []
    permissions: ProjectPermission | None = None
    default_permissions: DefaultPermissions | None = None
    limit_reached: bool = False


InstallationResponse = DataResponse[Installation]
InstallationsListResponse = ListResponse[Installation]


class InstallationModule(CrowdinModel):
    """Module permission override sent at install time."""
    key: str | None = None
    permissions: UserPermission | None = None


class InstallationReplaceValue(CrowdinModel):
    """Value for a `/permissions` replace patch."""
    user: Permission | None = None
    project: Permission | None = None


class InstallApplicationRequest(Request):
    url: str = ""
    permissions: ProjectPermission | None = None
    modules: list[InstallationModule] | None = None

    def validate(self) -> None:
        if not self.url:
            raise RequestValidationError("url is required")


class ApplicationDataResponse(CrowdinModel):
    """Free-form data returned by an application's own API."""
    data: Any = None
