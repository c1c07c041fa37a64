"""
Prompt Request Builder Package.

Assembles the instruction pair sent to the completion API.
"""

from .request_builder import PromptRequestBuilder, PromptRequestError, MissingCustomPromptError

__all__ = ["PromptRequestBuilder", "PromptRequestError", "MissingCustomPromptError"]
