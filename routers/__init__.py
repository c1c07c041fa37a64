"""
Model Recommendation Package.

This package contains the heuristic task analyzer that recommends a target
model for a free-text task description.
"""

from .task_analyzer import TaskAnalyzer
from .model_profiles import MODEL_PROFILES

__all__ = ["TaskAnalyzer", "MODEL_PROFILES"]
