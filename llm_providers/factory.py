"""
Completion Provider Factory.

This module provides factory methods for creating completion provider
instances from a provider type name.
"""

from typing import Dict, Any, Optional, List, Union

from .base_provider import BaseLLMProvider, LLMProviderType, LLMProviderError
from .openai import OpenAIProvider, create_openai_provider


class ProviderFactory:
    """
    Factory class for creating completion providers.

    Provides a unified interface for instantiating providers with
    consistent configuration and error handling.
    """

    # Registry of available providers
    PROVIDERS = {
        LLMProviderType.OPENAI: {
            "class": OpenAIProvider,
            "factory": create_openai_provider,
            "default_models": ["gpt-4o", "gpt-4o-mini", "gpt-4.1", "gpt-4.1-mini"]
        }
    }

    @classmethod
    def _resolve_type(cls, provider_type: Union[str, LLMProviderType]) -> LLMProviderType:
        if isinstance(provider_type, str):
            try:
                provider_type = LLMProviderType(provider_type.lower())
            except ValueError:
                raise LLMProviderError(
                    f"Unsupported provider type: {provider_type}. "
                    f"Available: {[p.value for p in LLMProviderType]}",
                    provider=provider_type
                )

        if provider_type not in cls.PROVIDERS:
            raise LLMProviderError(
                f"Provider {provider_type.value} not registered",
                provider=provider_type.value
            )
        return provider_type

    @classmethod
    def create_provider(
        cls,
        provider_type: Union[str, LLMProviderType],
        api_key: Optional[str],
        model_name: Optional[str] = None,
        **kwargs
    ) -> BaseLLMProvider:
        """
        Create a provider instance.

        Args:
            provider_type: Type of provider ("openai" or enum)
            api_key: API key for the provider
            model_name: Model to use (uses default if not specified)
            **kwargs: Additional provider-specific configuration

        Returns:
            BaseLLMProvider: Configured provider instance

        Raises:
            LLMProviderError: If provider type is not supported
        """
        provider_info = cls.PROVIDERS[cls._resolve_type(provider_type)]

        if not model_name:
            model_name = provider_info["default_models"][0]

        return provider_info["factory"](api_key, model_name, **kwargs)

    @classmethod
    def get_provider_models(cls, provider_type: Union[str, LLMProviderType]) -> List[str]:
        """Get the default model list for a provider."""
        return cls.PROVIDERS[cls._resolve_type(provider_type)]["default_models"].copy()

    @classmethod
    def get_provider_info(cls, provider_type: Union[str, LLMProviderType]) -> Dict[str, Any]:
        provider_type = cls._resolve_type(provider_type)
        provider_info = cls.PROVIDERS[provider_type]
        return {
            "type": provider_type.value,
            "class_name": provider_info["class"].__name__,
            "default_models": provider_info["default_models"],
            "total_models": len(provider_info["default_models"])
        }


def create_provider(provider_type: str, api_key: Optional[str], model_name: str = None, **kwargs) -> BaseLLMProvider:
    """Convenience wrapper around ProviderFactory.create_provider."""
    return ProviderFactory.create_provider(provider_type, api_key, model_name, **kwargs)
