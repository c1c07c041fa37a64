"""
OpenAI Provider Package.

This package provides integration with the OpenAI chat completions API.
"""

from .openai_provider import OpenAIProvider, create_openai_provider

__all__ = [
    "OpenAIProvider",
    "create_openai_provider"
]
