"""HTTP tests for the prompt template builder API."""
import json

import pytest
from fastapi.testclient import TestClient

from fastapi_app import create_app
from gateway.completion_gateway import CompletionGateway
from llm_providers.base_provider import AuthenticationError, LLMProviderError, QuotaExceededError

from conftest import VALID_REPLY, FakeProvider


def _client(content=None, error=None, api_key="sk-test"):
    provider = FakeProvider(content=content, error=error, api_key=api_key)
    app = create_app(gateway=CompletionGateway(provider))
    return TestClient(app, raise_server_exceptions=False), provider


@pytest.fixture
def client():
    test_client, _ = _client(content=json.dumps(VALID_REPLY))
    return test_client


# ---------------------------------------------------------------------------
# Health and catalog
# ---------------------------------------------------------------------------

def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["credentialConfigured"] is True
    assert body["completionModel"] == "gpt-4o"


def test_health_reports_missing_credential():
    test_client, _ = _client(api_key=None)
    assert test_client.get("/health").json()["credentialConfigured"] is False


def test_catalog(client):
    body = client.get("/api/catalog").json()
    assert body["models"][0] == "gpt-4o"
    assert "other" in body["taskTypes"]
    assert set(body["tones"]) == {"friendly", "formal", "technical", "direct", "playful"}
    assert body["guidance"]["o3"]["formattingTips"]
    assert "gpt-4-turbo" in body["guidance"]


# ---------------------------------------------------------------------------
# Task analysis
# ---------------------------------------------------------------------------

def test_analyze_task(client):
    r = client.post("/api/analyze-task", json={"taskDescription": "Prove this mathematical theorem using formal logic"})
    assert r.status_code == 200
    body = r.json()
    assert body["recommendedModel"] == "o3"
    assert body["confidence"] == pytest.approx(0.90)
    assert body["taskComplexity"] == "complex"
    assert len(body["alternatives"]) == 3
    assert "o3" not in [alt["model"] for alt in body["alternatives"]]


def test_analyze_task_rejects_short_description(client):
    r = client.post("/api/analyze-task", json={"taskDescription": "too short"})
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Invalid input parameters"
    assert body["errors"][0]["field"] == "taskDescription"


# ---------------------------------------------------------------------------
# Prompt generation
# ---------------------------------------------------------------------------

def test_generate_prompt_returns_reply_unchanged():
    test_client, provider = _client(content=json.dumps(VALID_REPLY))
    r = test_client.post("/api/generate-prompt", json={"model": "gpt-4.1", "taskType": "sql-generation", "tone": "technical"})
    assert r.status_code == 200
    assert r.json() == VALID_REPLY
    assert "- Task: sql-generation" in provider.requests[0].prompt


def test_generate_prompt_narrows_reply_to_contract_fields():
    reply = dict(VALID_REPLY, confidence="high")
    test_client, _ = _client(content=json.dumps(reply))
    r = test_client.post("/api/generate-prompt", json={"model": "gpt-4o", "taskType": "summarization", "tone": "formal"})
    assert r.status_code == 200
    assert r.json() == VALID_REPLY


def test_generate_prompt_rewrites_custom_prompt():
    test_client, provider = _client(content=json.dumps(VALID_REPLY))
    r = test_client.post("/api/generate-prompt", json={
        "model": "gpt-4o", "taskType": "email-writing", "tone": "friendly",
        "customPrompt": "Write me a good email"
    })
    assert r.status_code == 200
    assert 'Original prompt: "Write me a good email"' in provider.requests[0].prompt


@pytest.mark.parametrize("custom_prompt", [None, "", "   "])
def test_other_without_custom_prompt_is_rejected(custom_prompt):
    test_client, provider = _client(content=json.dumps(VALID_REPLY))
    payload = {"model": "gpt-4o", "taskType": "other", "tone": "formal"}
    if custom_prompt is not None:
        payload["customPrompt"] = custom_prompt
    r = test_client.post("/api/generate-prompt", json=payload)
    assert r.status_code == 400
    fields = [error["field"] for error in r.json()["errors"]]
    assert fields == ["customPrompt"]
    assert provider.requests == []


@pytest.mark.parametrize("payload, field_name", [
    ({"model": "gpt-9", "taskType": "summarization", "tone": "formal"}, "model"),
    ({"model": "gpt-4o", "taskType": "poetry", "tone": "formal"}, "taskType"),
    ({"model": "gpt-4o", "taskType": "summarization"}, "tone"),
])
def test_invalid_generate_prompt_fields(client, payload, field_name):
    r = client.post("/api/generate-prompt", json=payload)
    assert r.status_code == 400
    assert field_name in [error["field"] for error in r.json()["errors"]]


def test_generate_task_prompt():
    test_client, provider = _client(content=json.dumps(VALID_REPLY))
    r = test_client.post("/api/generate-task-prompt", json={
        "taskDescription": "Turn support tickets into weekly trend reports",
        "selectedModel": "o3",
        "tone": "direct"
    })
    assert r.status_code == 200
    assert r.json() == VALID_REPLY
    assert "Turn support tickets into weekly trend reports" in provider.requests[0].prompt


# ---------------------------------------------------------------------------
# Upstream failures
# ---------------------------------------------------------------------------

GENERATE = {"model": "gpt-4o", "taskType": "summarization", "tone": "formal"}


@pytest.mark.parametrize("error, status", [
    (AuthenticationError("Incorrect API key provided", "openai"), 401),
    (QuotaExceededError("You exceeded your current quota", "openai"), 402),
    (LLMProviderError("Connection reset by peer", "openai"), 500),
    (RuntimeError("unexpected"), 500),
])
def test_provider_failures_map_to_status(error, status):
    test_client, _ = _client(error=error)
    r = test_client.post("/api/generate-prompt", json=GENERATE)
    assert r.status_code == status
    assert r.json()["message"]


def test_unclassified_failure_carries_raw_message():
    test_client, _ = _client(error=LLMProviderError("Connection reset by peer", "openai"))
    body = test_client.post("/api/generate-prompt", json=GENERATE).json()
    assert body == {"message": "Failed to generate prompt. Please try again.", "error": "Connection reset by peer"}


@pytest.mark.parametrize("content", ["not json at all", "", json.dumps({"systemPrompt": "only one field"})])
def test_bad_reply_is_500_not_partial_success(content):
    test_client, _ = _client(content=content)
    r = test_client.post("/api/generate-prompt", json=GENERATE)
    assert r.status_code == 500
    assert "systemPrompt" not in r.json()


def test_missing_credential_is_401_on_task_prompt():
    test_client, _ = _client(error=AuthenticationError("OpenAI API key not configured", "openai"), api_key=None)
    r = test_client.post("/api/generate-task-prompt", json={
        "taskDescription": "Turn support tickets into weekly trend reports",
        "selectedModel": "gpt-4o",
        "tone": "formal"
    })
    assert r.status_code == 401


# ---------------------------------------------------------------------------
# Validation error field names
# ---------------------------------------------------------------------------

def test_omitted_custom_prompt_is_reported_under_json_name(client):
    r = client.post("/api/generate-prompt", json={"model": "gpt-4o", "taskType": "other", "tone": "formal"})
    assert r.status_code == 400
    error = r.json()["errors"][0]
    assert error["field"] == "customPrompt"
    assert error["message"].endswith("Please describe your task when selecting 'Other'")


def test_task_prompt_errors_use_json_names(client):
    r = client.post("/api/generate-task-prompt", json={"taskDescription": "short", "tone": "formal"})
    assert r.status_code == 400
    fields = {error["field"] for error in r.json()["errors"]}
    assert fields == {"taskDescription", "selectedModel"}
