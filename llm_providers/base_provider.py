"""
Abstract Base Class for Completion API Providers.

This module defines the base interface the completion gateway relies on,
together with the standardized request/response formats and error taxonomy.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from enum import Enum


class LLMProviderType(Enum):
    """Enumeration of supported completion API providers"""
    OPENAI = "openai"


@dataclass
class LLMRequest:
    """Standardized request format for completion providers"""
    prompt: str
    system_prompt: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: float = 0.7
    response_format: Optional[str] = None  # "json_object" requests a JSON reply
    metadata: Optional[Dict[str, Any]] = None


@dataclass
class LLMResponse:
    """Standardized response format from completion providers"""
    content: Optional[str]
    model_name: str
    provider: str
    generation_time: float
    token_count: int
    finish_reason: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


@dataclass
class ModelInfo:
    """Information about the completion model in use"""
    name: str
    provider: str
    max_tokens: int
    context_window: int
    capabilities: List[str]
    description: str


class LLMProviderError(Exception):
    """Base exception for completion provider errors"""
    def __init__(self, message: str, provider: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.provider = provider
        self.error_code = error_code


class AuthenticationError(LLMProviderError):
    """Raised when the API credential is missing or rejected"""
    pass


class QuotaExceededError(LLMProviderError):
    """Raised when the account quota is exhausted or billing is not set up"""
    pass


class ModelNotFoundError(LLMProviderError):
    """Raised when the requested model is not available"""
    pass


class BaseLLMProvider(ABC):
    """
    Abstract base class for completion providers.

    Concrete implementations translate an LLMRequest into a provider call and
    map provider faults onto the LLMProviderError taxonomy.
    """

    def __init__(self, api_key: Optional[str], model_name: str, **kwargs):
        """
        Initialize the provider.

        Args:
            api_key: API key for the provider (may be empty; calls then fail
                with AuthenticationError)
            model_name: Name of the model to use
            **kwargs: Additional provider-specific configuration
        """
        self.api_key = api_key
        self.model_name = model_name
        self.config = kwargs

    @abstractmethod
    def generate_response(self, request: LLMRequest) -> LLMResponse:
        """
        Generate a response from the model.

        Args:
            request: Standardized request object

        Returns:
            LLMResponse: Standardized response object

        Raises:
            AuthenticationError: When the credential is missing or invalid
            QuotaExceededError: When quota or billing limits are hit
            LLMProviderError: For any other provider fault
        """
        pass

    @abstractmethod
    def get_model_info(self) -> ModelInfo:
        """Get information about the current model."""
        pass

    @abstractmethod
    def get_provider_type(self) -> LLMProviderType:
        """Get the provider type enum"""
        pass

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    def _handle_provider_error(self, error: Exception) -> LLMProviderError:
        """
        Convert provider-specific errors to standardized errors.

        Concrete implementations override this to inspect their client
        library's structured error types first.
        """
        return LLMProviderError(
            message=str(error),
            provider=self.get_provider_type().value
        )

    def __str__(self) -> str:
        """String representation of the provider"""
        return f"{self.get_provider_type().value.title()}Provider(model={self.model_name})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model_name='{self.model_name}')"
