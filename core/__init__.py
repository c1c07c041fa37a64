"""
Core Components Package.

This package contains foundational data structures used throughout the prompt builder.
"""

from .data_models import (
    ModelIdentifier,
    TaskType,
    Tone,
    TaskComplexity,
    GuidanceEntry,
    ToneEntry,
    ModelProfile,
    PromptRequest,
    PromptInstructions,
    ModelAlternative,
    ModelRecommendation,
    MODEL_ROSTER,
    PRIMARY_MODEL,
)

__all__ = [
    "ModelIdentifier",
    "TaskType",
    "Tone",
    "TaskComplexity",
    "GuidanceEntry",
    "ToneEntry",
    "ModelProfile",
    "PromptRequest",
    "PromptInstructions",
    "ModelAlternative",
    "ModelRecommendation",
    "MODEL_ROSTER",
    "PRIMARY_MODEL",
]
