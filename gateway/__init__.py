"""
Completion Gateway Package.
"""

from .completion_gateway import (
    CompletionGateway,
    CompletionGatewayError,
    MalformedReplyError,
    ContractViolationError,
    validate_prompt_response,
)

__all__ = [
    "CompletionGateway",
    "CompletionGatewayError",
    "MalformedReplyError",
    "ContractViolationError",
    "validate_prompt_response",
]
