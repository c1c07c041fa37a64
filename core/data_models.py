"""
Data models for the prompt template builder.

This module contains the core data structures used throughout the system.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, List, Optional, Tuple


class ModelIdentifier(str, Enum):
    """Target models a prompt pair can be generated for.

    Declaration order is the recommendation roster order.
    """
    GPT_4O = "gpt-4o"
    GPT_4_5 = "gpt-4.5"
    GPT_4_1 = "gpt-4.1"
    GPT_4_1_MINI = "gpt-4.1-mini"
    O3 = "o3"
    O4_MINI = "o4-mini"
    O1 = "o1"
    O1_MINI = "o1-mini"


# Fixed roster used when surfacing alternative models
MODEL_ROSTER: Tuple[ModelIdentifier, ...] = tuple(ModelIdentifier)
PRIMARY_MODEL = ModelIdentifier.GPT_4O


class TaskType(str, Enum):
    """Task categories; OTHER means the free-text custom prompt describes the task"""
    SUMMARIZATION = "summarization"
    CODE_EXPLANATION = "code-explanation"
    EMAIL_WRITING = "email-writing"
    LEGAL_REASONING = "legal-reasoning"
    DATA_EXTRACTION = "data-extraction"
    MULTIMODAL_REASONING = "multimodal-reasoning"
    CREATIVE_WRITING = "creative-writing"
    SQL_GENERATION = "sql-generation"
    JSON_FORMATTING = "json-formatting"
    MATH_LOGIC_PROOFS = "math-logic-proofs"
    CHATBOT_CONVERSATIONS = "chatbot-conversations"
    OTHER = "other"


class Tone(str, Enum):
    """Stylistic tones selectable by the user"""
    FRIENDLY = "friendly"
    FORMAL = "formal"
    TECHNICAL = "technical"
    DIRECT = "direct"
    PLAYFUL = "playful"


class TaskComplexity(str, Enum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


@dataclass(frozen=True)
class GuidanceEntry:
    """Per-model prompting guidance"""
    system_prompt: str
    formatting_tips: Tuple[str, ...]
    user_prompt_notes: Tuple[str, ...]
    ideal_user_prompt_example: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "systemPrompt": self.system_prompt,
            "formattingTips": list(self.formatting_tips),
            "userPromptNotes": list(self.user_prompt_notes),
            "idealUserPromptExample": self.ideal_user_prompt_example,
        }


@dataclass(frozen=True)
class ToneEntry:
    """Per-tone system prompt modifier and descriptive metadata"""
    system_prompt_modifier: str
    vocabulary: str
    structure: str
    cta: str


@dataclass(frozen=True)
class ModelProfile:
    """Static strengths/weaknesses of a model, shown for alternatives"""
    reason: str
    pros: Tuple[str, ...]
    cons: Tuple[str, ...]


@dataclass
class PromptRequest:
    """Structure for a prompt generation request"""
    model: ModelIdentifier
    task_type: TaskType
    tone: Tone
    custom_prompt: Optional[str] = None


@dataclass
class PromptInstructions:
    """Instruction pair sent to the completion API"""
    system_instruction: str
    user_instruction: str


@dataclass
class ModelAlternative:
    model: ModelIdentifier
    reason: str
    pros: List[str] = field(default_factory=list)
    cons: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": self.model.value,
            "reason": self.reason,
            "pros": list(self.pros),
            "cons": list(self.cons),
        }


@dataclass
class ModelRecommendation:
    """Result of analyzing a free-text task description"""
    recommended_model: ModelIdentifier
    confidence: float
    reasoning: str
    task_complexity: TaskComplexity
    alternatives: List[ModelAlternative] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert recommendation to its JSON wire format"""
        return {
            "recommendedModel": self.recommended_model.value,
            "confidence": self.confidence,
            "reasoning": self.reasoning,
            "taskComplexity": self.task_complexity.value,
            "alternatives": [alt.to_dict() for alt in self.alternatives],
        }
