"""
Completion Providers Package.

This package provides a unified interface to the completion API used to
generate prompt templates.
"""

# Base classes and types
from .base_provider import (
    BaseLLMProvider,
    LLMRequest,
    LLMResponse,
    ModelInfo,
    LLMProviderType,
    LLMProviderError,
    AuthenticationError,
    QuotaExceededError,
    ModelNotFoundError
)

# Provider implementations
from .openai import OpenAIProvider, create_openai_provider

# Factory
from .factory import ProviderFactory, create_provider

__all__ = [
    # Base classes and types
    "BaseLLMProvider",
    "LLMRequest",
    "LLMResponse",
    "ModelInfo",
    "LLMProviderType",
    "LLMProviderError",
    "AuthenticationError",
    "QuotaExceededError",
    "ModelNotFoundError",

    # Provider implementations
    "OpenAIProvider",
    "create_openai_provider",

    # Factory
    "ProviderFactory",
    "create_provider"
]

