"""
Prompt Request Builder.

Assembles the system/user instruction pair sent to the completion API from a
prompt request, the per-model guidance catalog and the tone catalog.

Branch precedence:
1. taskType "other" with a custom prompt -> analysis-style instruction
2. any other taskType with a custom prompt -> rewrite into a placeholder template
3. no custom prompt -> new placeholder template from scratch
"""

import logging
from enum import Enum
from typing import Optional, Type, TypeVar, Union

from catalogs.model_guidance import GuidanceCatalog
from catalogs.tone_adjustments import ToneCatalog
from core.data_models import ModelIdentifier, PromptInstructions, PromptRequest, TaskType, Tone
from . import templates

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class PromptRequestError(ValueError):
    """Raised when a prompt request violates its input constraints"""
    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class MissingCustomPromptError(PromptRequestError):
    """Raised when taskType is "other" but no custom prompt was given"""
    def __init__(self, field: str = "customPrompt"):
        super().__init__("Please describe your task when selecting 'Other'", field)


def _bullets(items) -> str:
    return "\n".join(f"- {item}" for item in items)


def _coerce(enum_cls: Type[E], value: Union[str, E], field: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise PromptRequestError(f"Invalid value '{value}'. Expected one of: {allowed}", field)


class PromptRequestBuilder:
    """Builds completion API instructions for prompt generation requests"""

    def __init__(self, guidance_catalog: GuidanceCatalog, tone_catalog: ToneCatalog):
        self.guidance_catalog = guidance_catalog
        self.tone_catalog = tone_catalog

    def build(self, request: PromptRequest) -> PromptInstructions:
        """
        Build the instruction pair for a prompt request.

        Args:
            request: Model, task type, tone and optional custom prompt

        Returns:
            PromptInstructions: System and user instruction text

        Raises:
            PromptRequestError: If model, task type or tone is not supported
            MissingCustomPromptError: If taskType is "other" without a custom prompt
        """
        model = _coerce(ModelIdentifier, request.model, "model")
        task_type = _coerce(TaskType, request.task_type, "taskType")
        tone = _coerce(Tone, request.tone, "tone")
        custom_prompt = request.custom_prompt
        has_custom_prompt = bool(custom_prompt and custom_prompt.strip())

        if task_type == TaskType.OTHER:
            if not has_custom_prompt:
                raise MissingCustomPromptError()
            logger.debug(f"Building analysis instructions for custom task (model={model.value})")
            return self._analysis_instructions(custom_prompt, model, tone, "custom task description")

        if has_custom_prompt:
            logger.debug(f"Building rewrite instructions (model={model.value}, task={task_type.value})")
            return PromptInstructions(
                system_instruction=self._system(templates.REWRITE_SYSTEM, model, tone),
                user_instruction=templates.REWRITE_USER.format(
                    model=model.value,
                    custom_prompt=custom_prompt,
                    task_type=task_type.value,
                    tone=tone.value,
                ),
            )

        logger.debug(f"Building template instructions (model={model.value}, task={task_type.value})")
        return PromptInstructions(
            system_instruction=self._system(templates.TEMPLATE_SYSTEM, model, tone),
            user_instruction=templates.TEMPLATE_USER.format(
                model=model.value,
                task_type=task_type.value,
                tone=tone.value,
            ),
        )

    def build_for_task(self, task_description: str, model: Union[str, ModelIdentifier],
                       tone: Union[str, Tone]) -> PromptInstructions:
        """Build analysis-style instructions from a free-text task description."""
        model = _coerce(ModelIdentifier, model, "selectedModel")
        tone = _coerce(Tone, tone, "tone")
        if not task_description or not task_description.strip():
            raise PromptRequestError("Task description must not be blank", "taskDescription")
        return self._analysis_instructions(task_description, model, tone, "task description")

    def _analysis_instructions(self, task_text: str, model: ModelIdentifier, tone: Tone,
                               source_label: str) -> PromptInstructions:
        return PromptInstructions(
            system_instruction=self._system(templates.ANALYSIS_SYSTEM, model, tone),
            user_instruction=templates.ANALYSIS_USER.format(
                source_label=source_label,
                source_label_title=source_label.capitalize(),
                task_text=task_text,
                model=model.value,
                tone=tone.value,
            ),
        )

    def _system(self, template: str, model: ModelIdentifier, tone: Tone) -> str:
        return template.format(
            model=model.value,
            tone=tone.value,
            contract=templates.RESPONSE_CONTRACT,
            placeholder_rules=templates.PLACEHOLDER_RULES,
            guidance=self.guidance_text(model),
            tone_modifier=self.tone_catalog.lookup(tone).system_prompt_modifier,
        )

    def guidance_text(self, model: Optional[Union[str, ModelIdentifier]]) -> str:
        """Render the catalog guidance for ``model`` as instruction text."""
        entry = self.guidance_catalog.lookup(model)
        name = getattr(model, "value", model) or self.guidance_catalog.default_key
        return templates.MODEL_GUIDANCE_BLOCK.format(
            model=name,
            formatting_tips=_bullets(entry.formatting_tips),
            user_prompt_notes=_bullets(entry.user_prompt_notes),
            ideal_example=entry.ideal_user_prompt_example,
        )
