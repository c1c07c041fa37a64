"""
Task Analyzer for heuristic model recommendation.

This module classifies a free-text task description into a complexity tier
and recommends a target model using fixed keyword sets and an ordered rule
cascade. The first matching rule wins; rules are never scored against each
other, so descriptions matching several keyword sets resolve by rule order.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from core.data_models import (
    ModelIdentifier, ModelProfile, ModelAlternative, ModelRecommendation,
    TaskComplexity, MODEL_ROSTER, PRIMARY_MODEL
)
from .model_profiles import MODEL_PROFILES

logger = logging.getLogger(__name__)


COMPLEXITY_KEYWORDS: Tuple[str, ...] = (
    "legal", "reasoning", "complex", "analysis", "research",
    "math", "logic", "proof", "algorithm", "deep",
)
# A leading space anchors a keyword to the start of a word ("story" vs "history")
CODING_KEYWORDS: Tuple[str, ...] = (
    " code", "coding", "program", "debug", " function", "python", "javascript",
    "sql", "software", "bug", "refactor", "compile", "developer",
)
CREATIVE_KEYWORDS: Tuple[str, ...] = (
    "creative", " story", " stories", "poem", "poetry", "fiction", "narrative",
    "blog", "marketing", "slogan", "lyrics", "brainstorm", "social media",
)
MULTIMODAL_KEYWORDS: Tuple[str, ...] = (
    "image", "photo", "picture", "visual", "diagram", " chart ", " charts",
    "bar chart", "pie chart", "flowchart", "audio", "video", "screenshot",
)
SPEED_KEYWORDS: Tuple[str, ...] = (
    "quick", " fast", "simple", "summary", "summarize", "classify",
    "extract", "short", "brief", "instant",
)

COMPLEX_LENGTH_THRESHOLD = 100
MODERATE_LENGTH_THRESHOLD = 50
MAX_ALTERNATIVES = 3

# Model roles used by the cascade
REASONING_MODEL = ModelIdentifier.O3
CODING_MODEL = ModelIdentifier.GPT_4_1
EMOTIONAL_MODEL = ModelIdentifier.GPT_4_5
MULTIMODAL_MODEL = ModelIdentifier.GPT_4O
LIGHTWEIGHT_MODEL = ModelIdentifier.GPT_4_1_MINI
FLAGSHIP_MODEL = ModelIdentifier.GPT_4O


def _contains_any(text: str, keywords: Sequence[str]) -> bool:
    padded = f" {text} "
    return any(keyword in padded for keyword in keywords)


class TaskAnalyzer:
    """Recommends a target model for a free-text task description"""

    def __init__(self, roster: Optional[Sequence[ModelIdentifier]] = None,
                 profiles: Optional[Mapping[ModelIdentifier, ModelProfile]] = None,
                 fallback_model: ModelIdentifier = PRIMARY_MODEL):
        """
        Initialize the analyzer.

        Args:
            roster: Ordered model roster; alternatives are taken from it in order
            profiles: Per-model profile table used for alternatives
            fallback_model: Model whose profile is used when one is missing
        """
        self.roster: Tuple[ModelIdentifier, ...] = tuple(roster or MODEL_ROSTER)
        self.profiles: Dict[ModelIdentifier, ModelProfile] = dict(profiles or MODEL_PROFILES)
        self.fallback_model = fallback_model

    def analyze(self, task_description: str) -> ModelRecommendation:
        """
        Classify a task description and recommend a model.

        Args:
            task_description: Free-text description of what the user wants done

        Returns:
            ModelRecommendation: Recommended model, confidence, reasoning,
            complexity tier and up to three alternatives
        """
        text = task_description.lower()

        has_complexity = _contains_any(text, COMPLEXITY_KEYWORDS)
        has_coding = _contains_any(text, CODING_KEYWORDS)
        has_creative = _contains_any(text, CREATIVE_KEYWORDS)
        has_multimodal = _contains_any(text, MULTIMODAL_KEYWORDS)
        has_speed = _contains_any(text, SPEED_KEYWORDS)

        if has_complexity or (has_coding and len(text) > COMPLEX_LENGTH_THRESHOLD):
            complexity = TaskComplexity.COMPLEX
        elif has_coding or has_creative or len(text) > MODERATE_LENGTH_THRESHOLD:
            complexity = TaskComplexity.MODERATE
        else:
            complexity = TaskComplexity.SIMPLE

        if has_complexity and ("math" in text or "logic" in text or "proof" in text):
            model, confidence = REASONING_MODEL, 0.90
            reasoning = ("This task involves mathematical or logical reasoning that benefits from "
                         "o3's state-of-the-art step-by-step problem solving.")
        elif "legal" in text or "contract" in text:
            model, confidence = REASONING_MODEL, 0.88
            reasoning = ("Legal and contractual work demands precision and careful analysis, "
                         "which o3's deep reasoning handles best.")
        elif has_coding and not has_speed:
            model, confidence = CODING_MODEL, 0.85
            reasoning = ("This is a coding task; GPT-4.1 is specialized for precise code generation, "
                         "debugging, and instruction-following.")
        elif has_creative or "emotion" in text or "empathy" in text:
            model, confidence = EMOTIONAL_MODEL, 0.85
            reasoning = ("Creative or emotionally nuanced writing suits GPT-4.5's natural tone "
                         "control and emotional intelligence.")
        elif has_multimodal:
            model, confidence = MULTIMODAL_MODEL, 0.90
            reasoning = ("The task works with images, audio, or other visual input, where GPT-4o's "
                         "multimodal reasoning excels.")
        elif has_speed or complexity == TaskComplexity.SIMPLE:
            model, confidence = LIGHTWEIGHT_MODEL, 0.80
            reasoning = ("This is a simple, well-defined task; GPT-4.1 Mini delivers fast, "
                         "cost-efficient results.")
        else:
            model, confidence = FLAGSHIP_MODEL, 0.75
            reasoning = ("GPT-4o is a strong general-purpose choice that balances speed, quality, "
                         "and versatility for this task.")

        logger.debug(f"Task analyzed: complexity={complexity.value}, model={model.value}")

        return ModelRecommendation(
            recommended_model=model,
            confidence=confidence,
            reasoning=reasoning,
            task_complexity=complexity,
            alternatives=self._build_alternatives(model),
        )

    def _build_alternatives(self, recommended: ModelIdentifier) -> List[ModelAlternative]:
        """First MAX_ALTERNATIVES roster models other than the recommended one"""
        candidates = [model for model in self.roster if model != recommended][:MAX_ALTERNATIVES]
        fallback = self.profiles[self.fallback_model]

        alternatives = []
        for model in candidates:
            profile = self.profiles.get(model, fallback)
            alternatives.append(ModelAlternative(
                model=model,
                reason=profile.reason,
                pros=list(profile.pros),
                cons=list(profile.cons),
            ))
        return alternatives
