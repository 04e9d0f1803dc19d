"""Users — member/user list encoding, add/invite validation and role decoding.

Tests cover:
    - ProjectMembersListOptions and UsersListOptions encode sorted by key
    - ProjectMemberAddRequest needs one identifier list
    - languagesAccess `[]` decodes as an empty mapping
"""

import pytest

from crowdin_sdk.core.encode_query import encode
from crowdin_sdk.core.errors import NilRequestError, RequestValidationError
from crowdin_sdk.core.validate_request import validate_request
from crowdin_sdk.schemas.users import (
    InviteUserRequest,
    ProjectMemberAddRequest,
    ProjectMemberReplaceRequest,
    ProjectMemberResponse,
    ProjectMembersListOptions,
    Role,
    RolePermissions,
    TranslatorRole,
    UsersListOptions,
)

MEMBER_ADD_ERROR = "one of fields `userIds`, `usernames` or `emails` is required"


def test_project_members_list_options():
    assert ProjectMembersListOptions().values()[1] is False
    opts = ProjectMembersListOptions(
        order_by="createdAt desc,name,priority", search="test", role="all",
        language_id="en", workflow_step_id=1, limit=10, offset=1,
    )
    query, ok = opts.values()
    assert ok is True
    assert encode(query) == (
        "languageId=en&limit=10&offset=1&orderBy=createdAt+desc%2Cname%2Cpriority"
        "&role=all&search=test&workflowStepId=1"
    )


def test_project_members_list_options_skip_non_positive_step():
    query, _ = ProjectMembersListOptions(workflow_step_id=-1, role="all").values()
    assert encode(query) == "role=all"


@pytest.mark.parametrize("req", [
    ProjectMemberAddRequest(),
    ProjectMemberAddRequest(user_ids=[], usernames=[], emails=[], manager_access=True),
])
def test_project_member_add_request_needs_identifier(req):
    with pytest.raises(RequestValidationError) as exc:
        req.validate()
    assert str(exc.value) == MEMBER_ADD_ERROR


@pytest.mark.parametrize("req", [
    ProjectMemberAddRequest(user_ids=[1]),
    ProjectMemberAddRequest(usernames=["john"]),
    ProjectMemberAddRequest(emails=["john@example.com"]),
])
def test_project_member_add_request_valid(req):
    req.validate()


def test_project_member_add_payload_with_roles():
    req = ProjectMemberAddRequest(
        user_ids=[1],
        roles=[TranslatorRole(
            name=Role.TRANSLATOR,
            permissions=RolePermissions(all_languages=False, languages_access={"uk": {"allContent": True}}),
        )],
    )
    assert req.to_payload() == {
        "userIds": [1],
        "roles": [{
            "name": "translator",
            "permissions": {"allLanguages": False, "languagesAccess": {"uk": {"allContent": True}}},
        }],
    }


def test_project_member_replace_always_valid():
    validate_request(ProjectMemberReplaceRequest())
    with pytest.raises(NilRequestError, match="^request cannot be nil$"):
        validate_request(None)


def test_users_list_options():
    opts = UsersListOptions(
        order_by="createdAt desc,name,priority", status="active", search="test",
        two_factor="enabled", limit=10, offset=1,
    )
    query, _ = opts.values()
    assert encode(query) == (
        "limit=10&offset=1&orderBy=createdAt+desc%2Cname%2Cpriority"
        "&search=test&status=active&twoFactor=enabled"
    )


def test_invite_user_requires_email():
    with pytest.raises(RequestValidationError, match="^email is required$"):
        InviteUserRequest(first_name="John").validate()
    req = InviteUserRequest(email="john@example.com", admin_access=True)
    req.validate()
    assert req.to_payload() == {"email": "john@example.com", "adminAccess": True}


def test_project_member_decodes_empty_languages_access():
    resp = ProjectMemberResponse.from_payload({"data": {
        "id": 12, "username": "john_smith", "isManager": False,
        "roles": [{"name": "translator", "permissions": {"allLanguages": True, "languagesAccess": []}}],
        "managerOfGroup": {"id": 1, "name": "KB materials"},
    }})
    member = resp.data
    assert member.roles[0].permissions.languages_access == {}
    assert member.manager_of_group.name == "KB materials"
    assert member.first_name is None


def test_project_member_decodes_languages_access_map():
    resp = ProjectMemberResponse.from_payload({"data": {
        "id": 12,
        "roles": [{"name": "proofreader", "permissions": {
            "allLanguages": False,
            "languagesAccess": {"uk": {"allContent": False, "workflowStepIds": [882]}},
        }}],
    }})
    access = resp.data.roles[0].permissions.languages_access["uk"]
    assert access.workflow_step_ids == [882]
