"""Branches — list encoding and add/merge/clone validation.

Tests cover:
    - BranchesListOptions encodes orderBy/name sorted by key
    - Required-field errors for add, merge and clone requests
    - Entities decode from camelCase payloads
"""

import pytest

from crowdin_sdk.core.encode_query import encode
from crowdin_sdk.core.errors import NilRequestError, RequestValidationError
from crowdin_sdk.core.validate_request import query_values, validate_request
from crowdin_sdk.schemas.branches import (
    BranchesAddRequest,
    BranchesCloneRequest,
    BranchesGetResponse,
    BranchesListOptions,
    BranchesMergeRequest,
)


# ─── BranchesListOptions ─────────────────────────────────────────

def test_list_options_nil():
    query, ok = query_values(None)
    assert encode(query) == ""
    assert ok is False


def test_list_options_empty():
    query, ok = BranchesListOptions().values()
    assert encode(query) == ""
    assert ok is False


@pytest.mark.parametrize("opts, expected", [
    (BranchesListOptions(name="test"), "name=test"),
    (BranchesListOptions(order_by="createdAt desc,name,priority"), "orderBy=createdAt+desc%2Cname%2Cpriority"),
    (
        BranchesListOptions(name="test", order_by="createdAt desc,name,priority"),
        "name=test&orderBy=createdAt+desc%2Cname%2Cpriority",
    ),
    (BranchesListOptions(limit=10, offset=5, name="main"), "limit=10&name=main&offset=5"),
])
def test_list_options_values(opts, expected):
    query, ok = opts.values()
    assert encode(query) == expected
    assert ok is True


# ─── Requests ────────────────────────────────────────────────────

def test_nil_requests():
    with pytest.raises(NilRequestError):
        validate_request(None)


def test_add_requires_name():
    with pytest.raises(RequestValidationError, match="^name is required$"):
        BranchesAddRequest().validate()
    BranchesAddRequest(name="main", title="Main", export_pattern="%three_letters_code%").validate()


def test_merge_requires_source_branch():
    with pytest.raises(RequestValidationError, match="^sourceBranchId is required$"):
        BranchesMergeRequest().validate()
    req = BranchesMergeRequest(
        source_branch_id=1, delete_after_merge=True, accept_source_changes=False, dry_run=False,
    )
    req.validate()
    assert req.to_payload() == {
        "sourceBranchId": 1,
        "deleteAfterMerge": True,
        "acceptSourceChanges": False,
        "dryRun": False,
    }


def test_clone_requires_name():
    with pytest.raises(RequestValidationError, match="^name is required$"):
        BranchesCloneRequest(title="copy").validate()
    BranchesCloneRequest(name="copy").validate()


# ─── Entities ────────────────────────────────────────────────────

def test_branch_decodes_from_payload():
    resp = BranchesGetResponse.from_payload({
        "data": {"id": 34, "projectId": 2, "name": "develop-master", "title": "Master branch",
                 "createdAt": "2023-09-16T13:48:04+00:00", "exportPattern": "%three_letters_code%"},
    })
    assert resp.data.project_id == 2
    assert resp.data.export_pattern == "%three_letters_code%"
    assert resp.data.priority is None
