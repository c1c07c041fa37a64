"""
OpenAI Chat Completions Provider Implementation.

This module provides integration with the OpenAI chat completions API used
to turn a system/user instruction pair into a JSON prompt template.
"""

import time
from typing import Dict, Any, Optional

import openai
from openai import OpenAI

from ..base_provider import (
    BaseLLMProvider, LLMRequest, LLMResponse, ModelInfo, LLMProviderType,
    LLMProviderError, AuthenticationError, QuotaExceededError, ModelNotFoundError
)


PROVIDER_NAME = "openai"

# Error codes OpenAI uses for exhausted credit or missing billing setup
QUOTA_ERROR_CODES = {"insufficient_quota", "billing_hard_limit_reached", "billing_not_active"}


class OpenAIProvider(BaseLLMProvider):
    """
    OpenAI chat completions provider.

    The underlying client is created lazily so the service can start (and
    report a credential error per request) without an API key configured.
    """

    # Model configuration
    SUPPORTED_MODELS = {
        "gpt-4o": {
            "max_tokens": 16384,
            "context_window": 128000,
            "capabilities": ["text", "vision", "json_mode", "function_calling"],
            "token_param": "max_tokens"
        },
        "gpt-4o-mini": {
            "max_tokens": 16384,
            "context_window": 128000,
            "capabilities": ["text", "vision", "json_mode", "function_calling"],
            "token_param": "max_tokens"
        },
        "gpt-4.1": {
            "max_tokens": 32768,
            "context_window": 1047576,
            "capabilities": ["text", "vision", "json_mode", "function_calling"],
            "token_param": "max_tokens"
        },
        "gpt-4.1-mini": {
            "max_tokens": 32768,
            "context_window": 1047576,
            "capabilities": ["text", "vision", "json_mode", "function_calling"],
            "token_param": "max_tokens"
        }
    }

    def __init__(self, api_key: Optional[str], model_name: str = "gpt-4o",
                 timeout: float = 30.0, max_retries: int = 0,
                 base_url: Optional[str] = None, client: Optional[OpenAI] = None, **kwargs):
        """
        Initialize the OpenAI provider.

        Args:
            api_key: OpenAI API key; empty means every call fails with AuthenticationError
            model_name: Chat model used for completions
            timeout: Request timeout in seconds
            max_retries: Client-level retries (0 disables them)
            base_url: Optional API base URL override
            client: Pre-built client, mainly for tests

        Raises:
            ModelNotFoundError: If model_name is not supported
        """
        super().__init__(api_key, model_name, **kwargs)

        if model_name not in self.SUPPORTED_MODELS:
            raise ModelNotFoundError(
                f"Model {model_name} not supported. Available: {list(self.SUPPORTED_MODELS.keys())}",
                PROVIDER_NAME
            )

        self.model_config = self.SUPPORTED_MODELS[model_name]
        self.timeout = timeout
        self.max_retries = max_retries
        self.base_url = base_url
        self._client = client

    def get_provider_type(self) -> LLMProviderType:
        return LLMProviderType.OPENAI

    def _get_client(self) -> OpenAI:
        if self._client is not None:
            return self._client

        if not self.has_credentials:
            raise AuthenticationError(
                "OpenAI API key not configured. Set OPENAI_API_KEY, OPENAI_KEY or API_KEY.",
                PROVIDER_NAME,
                "missing_api_key"
            )

        try:
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=self.max_retries
            )
        except Exception as e:
            raise self._handle_provider_error(e) from e
        return self._client

    def generate_response(self, request: LLMRequest) -> LLMResponse:
        """
        Generate a chat completion.

        Args:
            request: Standardized LLM request

        Returns:
            LLMResponse: Generated response

        Raises:
            AuthenticationError: Missing or rejected API key
            QuotaExceededError: Quota exhausted or billing problem
            LLMProviderError: Any other API fault
        """
        client = self._get_client()
        start_time = time.time()

        messages = []
        if request.system_prompt:
            messages.append({"role": "system", "content": request.system_prompt})
        messages.append({"role": "user", "content": request.prompt})

        api_params: Dict[str, Any] = {
            "model": self.model_name,
            "messages": messages,
            "temperature": request.temperature,
        }
        if request.max_tokens:
            api_params[self.model_config.get("token_param", "max_tokens")] = request.max_tokens
        if request.response_format:
            api_params["response_format"] = {"type": request.response_format}

        try:
            response = client.chat.completions.create(**api_params)
        except Exception as e:
            raise self._handle_provider_error(e) from e

        generation_time = time.time() - start_time
        choice = response.choices[0]
        usage = response.usage

        return LLMResponse(
            content=choice.message.content,
            model_name=self.model_name,
            provider=PROVIDER_NAME,
            generation_time=generation_time,
            token_count=usage.total_tokens if usage else 0,
            finish_reason=choice.finish_reason,
            metadata={
                "input_tokens": usage.prompt_tokens if usage else 0,
                "output_tokens": usage.completion_tokens if usage else 0,
                "model_id": getattr(response, "model", self.model_name)
            }
        )

    def get_model_info(self) -> ModelInfo:
        return ModelInfo(
            name=self.model_name,
            provider=PROVIDER_NAME,
            max_tokens=self.model_config["max_tokens"],
            context_window=self.model_config["context_window"],
            capabilities=self.model_config["capabilities"],
            description=f"OpenAI {self.model_name} chat completions model"
        )

    def _handle_provider_error(self, error: Exception) -> LLMProviderError:
        """
        Map an OpenAI client fault onto the provider error taxonomy.

        Structured error types and codes are checked first. Matching on the
        message text ("api key", "quota", "billing") is a last resort for
        faults that carry no usable type or code, and can misclassify
        messages that merely mention those words.
        """
        if isinstance(error, LLMProviderError):
            return error

        message = str(error)
        code = _error_code(error)

        if isinstance(error, openai.AuthenticationError):
            return AuthenticationError(message, PROVIDER_NAME, code or "invalid_api_key")
        if isinstance(error, openai.APIStatusError):
            if code in QUOTA_ERROR_CODES or error.status_code == 402:
                return QuotaExceededError(message, PROVIDER_NAME, code)
            if isinstance(error, openai.NotFoundError):
                return ModelNotFoundError(message, PROVIDER_NAME, code)

        lowered = message.lower()
        if "api key" in lowered or "api_key" in lowered:
            return AuthenticationError(message, PROVIDER_NAME, code)
        if "quota" in lowered or "billing" in lowered:
            return QuotaExceededError(message, PROVIDER_NAME, code)
        return LLMProviderError(message, PROVIDER_NAME, code)


def _error_code(error: Exception) -> Optional[str]:
    code = getattr(error, "code", None)
    if code:
        return str(code)
    body = getattr(error, "body", None)
    if isinstance(body, dict):
        nested = body.get("error")
        if isinstance(nested, dict) and nested.get("code"):
            return str(nested["code"])
        if body.get("code"):
            return str(body["code"])
    return None


def create_openai_provider(api_key: Optional[str], model_name: str = "gpt-4o", **kwargs) -> OpenAIProvider:
    """
    Factory function to create an OpenAI provider.

    Args:
        api_key: OpenAI API key (may be empty)
        model_name: Model to use
        **kwargs: Additional configuration (timeout, max_retries, base_url)

    Returns:
        OpenAIProvider: Configured provider instance
    """
    if not model_name or not model_name.strip():
        raise ValueError("model_name is required and cannot be empty")
    return OpenAIProvider(api_key, model_name, **kwargs)
