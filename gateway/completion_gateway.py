"""
Completion Gateway.

Wraps the call to the completion API, parses the JSON reply and validates it
against the PromptResponse contract:

    systemPrompt     non-empty string
    userPrompt       non-empty string
    formattingTips   array of strings (may be empty)
    behavioralNotes  array of strings (may be empty)

A valid reply is returned unchanged.
"""

import json
import logging
import re
from typing import Dict, Any, List

from llm_providers.base_provider import BaseLLMProvider, LLMRequest

logger = logging.getLogger(__name__)


TEXT_FIELDS = ("systemPrompt", "userPrompt")
LIST_FIELDS = ("formattingTips", "behavioralNotes")

_PLACEHOLDER_PATTERN = re.compile(r"\[[^\[\]]+\]")


class CompletionGatewayError(Exception):
    """Base exception for completion reply failures"""
    pass


class MalformedReplyError(CompletionGatewayError):
    """Raised when the reply body is empty or not valid JSON"""
    pass


class ContractViolationError(CompletionGatewayError):
    """Raised when the parsed reply does not match the PromptResponse shape"""
    def __init__(self, errors: List[str]):
        super().__init__("Invalid response structure from completion API: " + "; ".join(errors))
        self.errors = errors


def validate_prompt_response(result: Any) -> List[str]:
    """
    Check a parsed reply against the PromptResponse contract.

    Args:
        result: Parsed JSON value

    Returns:
        List[str]: Problems found (empty when the reply is valid)
    """
    if not isinstance(result, dict):
        return [f"Reply must be a JSON object, got {type(result).__name__}"]

    errors = []
    for field_name in TEXT_FIELDS:
        value = result.get(field_name)
        if field_name not in result or value is None:
            errors.append(f"Missing required field: {field_name}")
        elif not isinstance(value, str):
            errors.append(f"Field {field_name} must be a string")
        elif not value.strip():
            errors.append(f"Field {field_name} must not be empty")

    for field_name in LIST_FIELDS:
        value = result.get(field_name)
        if field_name not in result or value is None:
            errors.append(f"Missing required field: {field_name}")
        elif not isinstance(value, list):
            errors.append(f"Field {field_name} must be an array")
        elif not all(isinstance(item, str) for item in value):
            errors.append(f"Field {field_name} must contain only strings")

    return errors


def has_placeholders(text: str) -> bool:
    return bool(_PLACEHOLDER_PATTERN.search(text))


class CompletionGateway:
    """Sends instruction pairs to the completion API and validates the reply"""

    def __init__(self, provider: BaseLLMProvider, temperature: float = 0.3, max_tokens: int = 2000):
        """
        Initialize the gateway.

        Args:
            provider: Completion provider (fixed target model)
            temperature: Sampling temperature for every call
            max_tokens: Output size cap for every call
        """
        self.provider = provider
        self.temperature = temperature
        self.max_tokens = max_tokens

    @property
    def model_name(self) -> str:
        return self.provider.model_name

    def complete(self, system_instruction: str, user_instruction: str) -> Dict[str, Any]:
        """
        Request a prompt template from the completion API.

        Args:
            system_instruction: System message text
            user_instruction: User message text

        Returns:
            Dict[str, Any]: Reply object satisfying the PromptResponse contract

        Raises:
            LLMProviderError: Provider faults (credential, quota, other)
            MalformedReplyError: Empty or non-JSON reply
            ContractViolationError: Reply does not match the contract
        """
        request = LLMRequest(
            prompt=user_instruction,
            system_prompt=system_instruction,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            response_format="json_object"
        )

        response = self.provider.generate_response(request)
        logger.info(
            f"Completion received from {response.model_name} in {response.generation_time:.2f}s "
            f"({response.token_count} tokens)"
        )

        content = response.content
        if not content:
            raise MalformedReplyError("No content received from completion API")

        try:
            result = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Reply is not valid JSON: {e}")
            raise MalformedReplyError(f"Invalid JSON response from completion API: {e}") from e

        errors = validate_prompt_response(result)
        if errors:
            logger.error(f"Reply violates response contract: {errors}")
            raise ContractViolationError(errors)

        # Advisory only: the instructions ask for placeholders but replies are not rejected without them
        if not has_placeholders(result["userPrompt"]):
            logger.warning("Generated userPrompt contains no [bracketed] placeholders")

        return result
