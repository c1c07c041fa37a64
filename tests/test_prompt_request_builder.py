"""Tests for building completion instructions from prompt requests."""
import pytest

from catalogs import create_tone_catalog
from core.data_models import ModelIdentifier, PromptRequest, TaskType, Tone
from prompting.request_builder import MissingCustomPromptError, PromptRequestError


def _request(task_type="summarization", custom_prompt=None, model="gpt-4o", tone="formal"):
    return PromptRequest(model=model, task_type=task_type, tone=tone, custom_prompt=custom_prompt)


def test_template_branch_without_custom_prompt(builder):
    instructions = builder.build(_request())
    assert "world-class prompt engineering assistant" in instructions.system_instruction
    assert "- Task: summarization" in instructions.user_instruction
    assert "- Model: gpt-4o" in instructions.user_instruction


def test_rewrite_branch_embeds_custom_prompt_verbatim(builder):
    text = "Write me a good email to my landlord about the broken heater"
    instructions = builder.build(_request(task_type="email-writing", custom_prompt=text))
    assert f'Original prompt: "{text}"' in instructions.user_instruction
    assert "optimizing and reformatting prompts" in instructions.system_instruction


def test_other_branch_uses_analysis_instructions(builder):
    text = "Turn meeting transcripts into action items per attendee"
    instructions = builder.build(_request(task_type="other", custom_prompt=text, model="o3"))
    assert text in instructions.user_instruction
    assert "Custom task description:" in instructions.user_instruction
    assert "described their task in their own words" in instructions.system_instruction
    assert "optimized for o3" in instructions.system_instruction


@pytest.mark.parametrize("custom_prompt", [None, "", "   "])
def test_other_without_custom_prompt_is_rejected(builder, custom_prompt):
    with pytest.raises(MissingCustomPromptError) as excinfo:
        builder.build(_request(task_type="other", custom_prompt=custom_prompt))
    assert excinfo.value.field == "customPrompt"
    assert "Other" in str(excinfo.value)


def test_blank_custom_prompt_falls_through_to_template(builder):
    instructions = builder.build(_request(custom_prompt="  "))
    assert "Original prompt" not in instructions.user_instruction
    assert "Generate an optimized prompt template" in instructions.user_instruction


def test_custom_prompt_with_braces_is_not_formatted(builder):
    text = "Fill in {name} and {date} for the invite"
    instructions = builder.build(_request(task_type="email-writing", custom_prompt=text))
    assert text in instructions.user_instruction


def test_system_instruction_carries_contract_guidance_and_tone(builder):
    instructions = builder.build(_request(model="gpt-4.1", tone="playful"))
    system = instructions.system_instruction
    for field_name in ("systemPrompt", "userPrompt", "formattingTips", "behavioralNotes"):
        assert field_name in system
    assert "Prompting guidance for gpt-4.1" in system
    assert create_tone_catalog().lookup("playful").system_prompt_modifier.strip() in system


def test_enum_members_are_accepted(builder):
    request = PromptRequest(model=ModelIdentifier.O4_MINI, task_type=TaskType.SQL_GENERATION, tone=Tone.DIRECT)
    instructions = builder.build(request)
    assert "- Model: o4-mini" in instructions.user_instruction


@pytest.mark.parametrize("kwargs, field_name", [
    ({"model": "gpt-9"}, "model"),
    ({"task_type": "poetry"}, "taskType"),
    ({"tone": "sarcastic"}, "tone"),
])
def test_unknown_values_are_rejected(builder, kwargs, field_name):
    with pytest.raises(PromptRequestError) as excinfo:
        builder.build(_request(**kwargs))
    assert excinfo.value.field == field_name


def test_build_for_task(builder):
    instructions = builder.build_for_task("Draft onboarding checklists for new hires", "gpt-4.5", "friendly")
    assert "Task description:" in instructions.user_instruction
    assert "Draft onboarding checklists for new hires" in instructions.user_instruction
    assert "- Tone: friendly" in instructions.user_instruction


def test_build_for_task_rejects_blank_description(builder):
    with pytest.raises(PromptRequestError) as excinfo:
        builder.build_for_task("   ", "gpt-4o", "formal")
    assert excinfo.value.field == "taskDescription"


def test_build_for_task_reports_selected_model_field(builder):
    with pytest.raises(PromptRequestError) as excinfo:
        builder.build_for_task("Draft onboarding checklists", "claude", "formal")
    assert excinfo.value.field == "selectedModel"


def test_guidance_text_for_unknown_model_uses_default(builder):
    text = builder.guidance_text(None)
    assert text.startswith("Prompting guidance for gpt-4o")
