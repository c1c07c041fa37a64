"""Shared fixtures: a scripted completion provider and ready-made components."""
import json

import pytest

from catalogs import create_guidance_catalog, create_tone_catalog
from gateway.completion_gateway import CompletionGateway
from llm_providers.base_provider import (
    BaseLLMProvider, LLMProviderType, LLMResponse, ModelInfo
)
from prompting.request_builder import PromptRequestBuilder


VALID_REPLY = {
    "systemPrompt": "You are a concise summarization assistant.",
    "userPrompt": "Summarize [article text] for [target audience] in [number] bullet points.",
    "formattingTips": ["Use markdown bullet points", "State the desired length"],
    "behavioralNotes": ["May compress detail unless asked to expand"],
}


class FakeProvider(BaseLLMProvider):
    """Provider returning a canned reply (or raising a canned error) and recording requests."""

    def __init__(self, content=None, error=None, api_key="sk-test", model_name="gpt-4o"):
        super().__init__(api_key, model_name)
        self.content = content
        self.error = error
        self.requests = []

    def generate_response(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return LLMResponse(
            content=self.content,
            model_name=self.model_name,
            provider="openai",
            generation_time=0.01,
            token_count=42,
            finish_reason="stop",
        )

    def get_model_info(self):
        return ModelInfo(self.model_name, "openai", 2000, 128000, ["text"], "fake")

    def get_provider_type(self):
        return LLMProviderType.OPENAI


@pytest.fixture
def valid_reply():
    return dict(VALID_REPLY)


@pytest.fixture
def fake_provider():
    return FakeProvider(content=json.dumps(VALID_REPLY))


@pytest.fixture
def gateway(fake_provider):
    return CompletionGateway(fake_provider, temperature=0.3, max_tokens=2000)


@pytest.fixture
def builder():
    return PromptRequestBuilder(create_guidance_catalog(), create_tone_catalog())
