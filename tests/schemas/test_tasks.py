"""Tasks — list encoding and the per-kind create form rules.

Tests cover:
    - TasksListOptions / UserTasksListOptions encoding, isArchived tri-state
    - Crowdin, vendor, pending and enterprise create forms: error order and text
    - Settings templates accept string user ids
"""

import pytest

from crowdin_sdk.core.encode_query import encode
from crowdin_sdk.core.errors import DecodeError, NilRequestError, RequestValidationError
from crowdin_sdk.core.validate_request import validate_request
from crowdin_sdk.schemas.tasks import (
    EnterprisePendingTaskCreateForm,
    EnterpriseTaskCreateForm,
    EnterpriseVendorTaskCreateForm,
    LanguageServicePendingTaskCreateForm,
    LanguageServiceTaskCreateForm,
    PendingTaskCreateForm,
    TaskCommentAddRequest,
    TaskCreateForm,
    TaskResponse,
    TaskSettingsTemplateAddRequest,
    TaskSettingsTemplateResponse,
    TaskStatus,
    TasksListOptions,
    TaskType,
    TaskVendor,
    UserTasksListOptions,
    VendorGengoTaskCreateForm,
    VendorManualPendingTaskCreateForm,
    VendorManualTaskCreateForm,
    VendorOhtTaskCreateForm,
)

CONTENT_ERROR = "one of stringIds, fileIds or branchIds is required"


def assert_invalid(req, message):
    with pytest.raises(RequestValidationError) as exc:
        validate_request(req)
    assert str(exc.value) == message


# ─── List options ────────────────────────────────────────────────

def test_tasks_list_options():
    assert TasksListOptions().values()[1] is False
    opts = TasksListOptions(
        order_by="createdAt desc,name", status=[TaskStatus.TODO, TaskStatus.DONE],
        assignee_id=1, limit=10, offset=5,
    )
    query, ok = opts.values()
    assert ok is True
    assert encode(query) == "assigneeId=1&limit=10&offset=5&orderBy=createdAt+desc%2Cname&status=todo%2Cdone"


@pytest.mark.parametrize("opts, expected", [
    (UserTasksListOptions(is_archived=0), "isArchived=0"),
    (UserTasksListOptions(is_archived=2), ""),
    (UserTasksListOptions(is_archived=-1), ""),
    (
        UserTasksListOptions(
            order_by="createdAt desc,name", status=["todo", "done"], is_archived=1, limit=10, offset=5,
        ),
        "isArchived=1&limit=10&offset=5&orderBy=createdAt+desc%2Cname&status=todo%2Cdone",
    ),
])
def test_user_tasks_list_options(opts, expected):
    query, ok = opts.values()
    assert encode(query) == expected
    assert ok is bool(expected)


# ─── Crowdin task ────────────────────────────────────────────────

def test_task_create_form_valid():
    req = TaskCreateForm(title="Test task", language_id="uk", type=TaskType.PROOFREAD, file_ids=[1, 2])
    validate_request(req)
    assert req.to_payload() == {
        "title": "Test task", "languageId": "uk", "fileIds": [1, 2], "type": 1,
    }


@pytest.mark.parametrize("req, message", [
    (TaskCreateForm(), "title is required"),
    (TaskCreateForm(title="Test task"), "languageId is required"),
    (TaskCreateForm(title="Test task", language_id="uk"), "type is required and must be one of 0, 1"),
    (
        TaskCreateForm(title="Test task", language_id="uk", type=TaskType.TRANSLATE_BY_VENDOR),
        "type is required and must be one of 0, 1",
    ),
    (TaskCreateForm(title="Test task", language_id="uk", type=TaskType.PROOFREAD), CONTENT_ERROR),
])
def test_task_create_form_errors(req, message):
    assert_invalid(req, message)


def test_task_create_form_translate_type_is_valid():
    validate_request(TaskCreateForm(title="t", language_id="uk", type=TaskType.TRANSLATE, branch_ids=[3]))


def test_nil_task_form():
    with pytest.raises(NilRequestError, match="^request cannot be nil$"):
        validate_request(None)


# ─── Vendor tasks ────────────────────────────────────────────────

@pytest.mark.parametrize("req, message", [
    (LanguageServiceTaskCreateForm(), "title is required"),
    (LanguageServiceTaskCreateForm(title="t"), "languageId is required"),
    (LanguageServiceTaskCreateForm(title="t", language_id="uk"), "type is required and must be one of 2, 3"),
    (
        LanguageServiceTaskCreateForm(title="t", language_id="uk", type=TaskType.TRANSLATE_BY_VENDOR),
        'vendor is required and must be "crowdin_language_service"',
    ),
    (
        LanguageServiceTaskCreateForm(title="t", language_id="uk", type=3, vendor="oht"),
        'vendor is required and must be "crowdin_language_service"',
    ),
    (
        LanguageServiceTaskCreateForm(
            title="t", language_id="uk", type=3, vendor=TaskVendor.CROWDIN_LANGUAGE_SERVICE,
        ),
        CONTENT_ERROR,
    ),
])
def test_language_service_task_errors(req, message):
    assert_invalid(req, message)


@pytest.mark.parametrize("req, message", [
    (VendorOhtTaskCreateForm(title="t", language_id="uk", type=1), "type is required and must be one of 2, 3"),
    (VendorOhtTaskCreateForm(title="t", language_id="uk", type=2), 'vendor is required and must be "oht"'),
    (VendorOhtTaskCreateForm(title="t", language_id="uk", type=2, vendor="oht"), CONTENT_ERROR),
])
def test_oht_task_errors(req, message):
    assert_invalid(req, message)


@pytest.mark.parametrize("req, message", [
    (VendorGengoTaskCreateForm(title="t", language_id="uk"), "type is required and must be 2"),
    (VendorGengoTaskCreateForm(title="t", language_id="uk", type=3), "type is required and must be 2"),
    (VendorGengoTaskCreateForm(title="t", language_id="uk", type=2, vendor="oht"), 'vendor is required and must be "gengo"'),
    (VendorGengoTaskCreateForm(title="t", language_id="uk", type=2, vendor="gengo"), CONTENT_ERROR),
])
def test_gengo_task_errors(req, message):
    assert_invalid(req, message)


@pytest.mark.parametrize("req, message", [
    (VendorManualTaskCreateForm(title="t", language_id="uk", type=0), "type is required and must be one of 2, 3"),
    (VendorManualTaskCreateForm(title="t", language_id="uk", type=2), "vendor is required"),
    (VendorManualTaskCreateForm(title="t", language_id="uk", type=2, vendor="alconost"), CONTENT_ERROR),
])
def test_manual_vendor_task_errors(req, message):
    assert_invalid(req, message)


def test_vendor_tasks_valid():
    validate_request(VendorOhtTaskCreateForm(
        title="t", language_id="uk", type=2, vendor="oht", string_ids=[1], edit_service=True,
    ))
    validate_request(VendorGengoTaskCreateForm(
        title="t", language_id="uk", type=2, vendor="gengo", file_ids=[1], tone="formal",
    ))
    validate_request(VendorManualTaskCreateForm(
        title="t", language_id="uk", type=3, vendor=TaskVendor.TOMEDES, branch_ids=[1],
    ))


# ─── Pending tasks ───────────────────────────────────────────────

@pytest.mark.parametrize("req, message", [
    (PendingTaskCreateForm(), "precedingTaskId is required"),
    (PendingTaskCreateForm(preceding_task_id=1), "type is required and must be 1"),
    (PendingTaskCreateForm(preceding_task_id=1, type=1), "title is required"),
    (LanguageServicePendingTaskCreateForm(preceding_task_id=1, type=1), "type is required and must be 3"),
    (LanguageServicePendingTaskCreateForm(preceding_task_id=1, type=3), "title is required"),
    (VendorManualPendingTaskCreateForm(preceding_task_id=1, type=3), "vendor is required"),
    (VendorManualPendingTaskCreateForm(preceding_task_id=1, type=3, vendor="manual"), "title is required"),
    (EnterprisePendingTaskCreateForm(), "precedingTaskId is required"),
    (EnterprisePendingTaskCreateForm(preceding_task_id=1, type=3), "type is required and must be 1"),
])
def test_pending_task_errors(req, message):
    assert_invalid(req, message)


def test_pending_task_payload_always_has_type():
    req = PendingTaskCreateForm(preceding_task_id=1, type=TaskType.PROOFREAD, title="Proofread")
    validate_request(req)
    assert req.to_payload() == {"precedingTaskId": 1, "type": 1, "title": "Proofread"}


# ─── Enterprise tasks ────────────────────────────────────────────

@pytest.mark.parametrize("req, message", [
    (EnterpriseTaskCreateForm(), "workflowStepId or type is required"),
    (EnterpriseTaskCreateForm(workflow_step_id=1, type=0), "workflowStepId and type can't be used in the same request"),
    (EnterpriseTaskCreateForm(type=2), "type must be one of 0, 1"),
    (EnterpriseTaskCreateForm(workflow_step_id=1), "title is required"),
    (EnterpriseTaskCreateForm(type=0, title="t"), "languageId is required"),
    (EnterpriseTaskCreateForm(type=0, title="t", language_id="uk", branch_ids=[1]), "one of stringIds or fileIds is required"),
    (EnterpriseVendorTaskCreateForm(), "workflowStepId is required"),
    (EnterpriseVendorTaskCreateForm(workflow_step_id=1), "title is required"),
    (EnterpriseVendorTaskCreateForm(workflow_step_id=1, title="t"), "languageId is required"),
    (EnterpriseVendorTaskCreateForm(workflow_step_id=1, title="t", language_id="uk"), "one of stringIds or fileIds is required"),
])
def test_enterprise_task_errors(req, message):
    assert_invalid(req, message)


def test_enterprise_task_valid():
    validate_request(EnterpriseTaskCreateForm(workflow_step_id=10, title="t", language_id="uk", file_ids=[1]))
    validate_request(EnterpriseTaskCreateForm(type=TaskType.TRANSLATE, title="t", language_id="uk", string_ids=[1]))
    validate_request(EnterpriseVendorTaskCreateForm(workflow_step_id=10, title="t", language_id="uk", string_ids=[1]))


# ─── Templates and comments ──────────────────────────────────────

def test_settings_template_add_request():
    assert_invalid(TaskSettingsTemplateAddRequest(), "name is required")
    assert_invalid(TaskSettingsTemplateAddRequest(name="Default"), "config languages is required")
    req = TaskSettingsTemplateAddRequest(
        name="Default", config={"languages": [{"languageId": "uk", "userIds": [1]}]},
    )
    validate_request(req)
    assert req.to_payload() == {
        "name": "Default", "config": {"languages": [{"languageId": "uk", "userIds": [1]}]},
    }


def test_settings_template_decodes_string_user_ids():
    resp = TaskSettingsTemplateResponse.from_payload({"data": {
        "id": 1, "name": "Default template",
        "config": {"languages": [{"languageId": "uk", "userIds": ["1", 2], "teamIds": [3]}]},
    }})
    assert resp.data.config.languages[0].user_ids == [1, 2]


def test_settings_template_rejects_bad_user_id():
    with pytest.raises(DecodeError, match="invalid userId value: abc"):
        TaskSettingsTemplateResponse.from_payload({"data": {
            "config": {"languages": [{"languageId": "uk", "userIds": ["abc"]}]},
        }})


def test_task_comment_add_always_valid():
    validate_request(TaskCommentAddRequest())
    assert TaskCommentAddRequest(text="done", time_spent=3600).to_payload() == {
        "text": "done", "timeSpent": 3600,
    }


def test_task_decodes_from_payload():
    resp = TaskResponse.from_payload({"data": {
        "id": 2, "projectId": 2, "type": 1, "status": "todo", "title": "French",
        "assignees": [{"id": 12, "username": "John Smith", "wordsCount": 5}],
        "progress": {"total": 24, "done": 15, "percent": 62},
        "sourceLanguage": {"id": "en", "name": "English"},
        "isArchived": False,
    }})
    task = resp.data
    assert task.progress.percent == 62
    assert task.assignees[0].words_count == 5
    assert task.source_language.name == "English"
    assert task.is_archived is False
    assert task.status == TaskStatus.TODO
