"""AI — prompt/provider validation, fine-tuning requests and prompt filters.

Tests cover:
    - AIPromptsListOptions encodes projectId and action
    - PromptAddRequest and ProviderAddRequest error order
    - Fine-tuning dataset and job requirements
    - Proxy completion bodies pass through unchanged
"""

import pytest

from crowdin_sdk.core.encode_query import encode
from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.core.validate_request import validate_request
from crowdin_sdk.schemas.ai import (
    AIPromptsListOptions,
    CreateProxyChatCompletionRequest,
    FineTuningDatasetAttributes,
    FineTuningJobCreateRequest,
    FineTuningJobOptions,
    FineTuningJobResponse,
    FineTuningJobsListOptions,
    PromptAction,
    PromptAddRequest,
    PromptConfig,
    PromptMode,
    ProviderAddRequest,
    ProviderType,
    ProxyChatCompletionResponse,
)


def assert_invalid(req, message):
    with pytest.raises(RequestValidationError) as exc:
        validate_request(req)
    assert str(exc.value) == message


@pytest.mark.parametrize("opts, expected", [
    (AIPromptsListOptions(), ""),
    (AIPromptsListOptions(project_id=1), "projectId=1"),
    (AIPromptsListOptions(action=PromptAction.ASSIST), "action=assist"),
    (AIPromptsListOptions(project_id=2, action="pre_translate"), "action=pre_translate&projectId=2"),
])
def test_prompts_list_options(opts, expected):
    query, ok = opts.values()
    assert encode(query) == expected
    assert ok is bool(expected)


def test_fine_tuning_jobs_list_options():
    query, _ = FineTuningJobsListOptions(statuses=["created", "finished"], order_by="createdAt desc").values()
    assert encode(query) == "orderBy=createdAt+desc&statuses=created%2Cfinished"


PROMPT = {"name": "Pre-translate prompt", "action": "pre_translate", "ai_provider_id": 1}


@pytest.mark.parametrize("req, message", [
    (PromptAddRequest(), "name is required"),
    (PromptAddRequest(name="Pre-translate prompt"), "action is required"),
    (PromptAddRequest(name="Pre-translate prompt", action="pre_translate"), "aiProviderId is required"),
    (PromptAddRequest(**PROMPT), "aiModelId is required"),
    (PromptAddRequest(**PROMPT, ai_model_id="gpt-3.5-turbo-instruct", config=PromptConfig()), "config.mode is required"),
])
def test_prompt_add_errors(req, message):
    assert_invalid(req, message)


def test_prompt_add_valid_payload():
    req = PromptAddRequest(
        **PROMPT, ai_model_id="gpt-3.5-turbo-instruct",
        config=PromptConfig(mode=PromptMode.BASIC, glossary_terms=True, company_description="Acme"),
    )
    validate_request(req)
    assert req.to_payload() == {
        "name": "Pre-translate prompt",
        "action": "pre_translate",
        "aiProviderId": 1,
        "aiModelId": "gpt-3.5-turbo-instruct",
        "config": {"mode": "basic", "companyDescription": "Acme", "glossaryTerms": True},
    }


def test_provider_add_request():
    assert_invalid(ProviderAddRequest(), "name is required")
    assert_invalid(ProviderAddRequest(name="OpenAI"), "type is required")
    validate_request(ProviderAddRequest(name="OpenAI", type=ProviderType.OPEN_AI, credentials={"apiKey": "key"}))


def test_fine_tuning_dataset_needs_sources():
    assert_invalid(FineTuningDatasetAttributes(purpose="training"), "projectIds or tmIds are required")
    validate_request(FineTuningDatasetAttributes(tm_ids=[1]))
    validate_request(FineTuningDatasetAttributes(project_ids=[1]))


def test_fine_tuning_job_needs_training_options():
    assert_invalid(FineTuningJobCreateRequest(dry_run=True), "trainingOptions is required")
    req = FineTuningJobCreateRequest(training_options=FineTuningJobOptions(project_ids=[1], max_file_size=10))
    validate_request(req)
    assert req.to_payload() == {"trainingOptions": {"projectIds": [1], "maxFileSize": 10}}


def test_proxy_chat_completion():
    validate_request(CreateProxyChatCompletionRequest())
    assert CreateProxyChatCompletionRequest(model_id="gpt-4o", stream=False).to_payload() == {
        "modelId": "gpt-4o", "stream": False,
    }
    resp = ProxyChatCompletionResponse.from_payload({"data": {"id": "chatcmpl-1", "choices": []}})
    assert resp.data.model_extra == {"id": "chatcmpl-1", "choices": []}


def test_fine_tuning_job_decodes():
    resp = FineTuningJobResponse.from_payload({"data": {
        "identifier": "id", "status": "finished", "progress": 100,
        "attributes": {
            "dryRun": False, "aiPromptId": 1,
            "hyperparameters": {"batchSize": 4, "learningRateMultiplier": 0.5, "nEpochs": 3},
            "metadata": {"cost": 1.5, "costCurrency": "USD"},
        },
    }})
    attrs = resp.data.attributes
    assert attrs.hyperparameters.n_epochs == 3
    assert attrs.metadata.cost_currency == "USD"
