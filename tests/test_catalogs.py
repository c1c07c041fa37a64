"""Tests for the model guidance and tone catalogs."""
import pytest

from catalogs import create_guidance_catalog, create_tone_catalog
from catalogs.model_guidance import MODEL_GUIDANCE
from catalogs.tone_adjustments import DEFAULT_TONE, TONE_ADJUSTMENTS
from core.data_models import ModelIdentifier, Tone


@pytest.fixture
def guidance():
    return create_guidance_catalog()


@pytest.fixture
def tones():
    return create_tone_catalog()


@pytest.mark.parametrize("model", list(ModelIdentifier))
def test_every_roster_model_has_guidance(guidance, model):
    entry = guidance.lookup(model)
    assert model in guidance
    assert entry.system_prompt.strip()
    assert entry.formatting_tips
    assert entry.user_prompt_notes
    assert entry.ideal_user_prompt_example.strip()


def test_lookup_accepts_plain_string(guidance):
    assert guidance.lookup("o3") == guidance.lookup(ModelIdentifier.O3)


@pytest.mark.parametrize("key", ["gpt-9", "", None])
def test_unknown_model_falls_back_to_default(guidance, key):
    assert guidance.lookup(key) == guidance.lookup(ModelIdentifier.GPT_4O)


def test_legacy_models_are_kept(guidance):
    for legacy in ("gpt-4-turbo", "gpt-4", "gpt-3.5"):
        assert legacy in guidance
    assert len(guidance) == len(MODEL_GUIDANCE)


def test_guidance_entry_wire_format(guidance):
    data = guidance.lookup("gpt-4.1").to_dict()
    assert set(data) == {"systemPrompt", "formattingTips", "userPromptNotes", "idealUserPromptExample"}
    assert isinstance(data["formattingTips"], list)


def test_guidance_catalog_is_read_only(guidance):
    with pytest.raises(TypeError):
        guidance._entries["gpt-4o"] = None


def test_missing_default_entry_is_rejected():
    with pytest.raises(ValueError):
        create_guidance_catalog(data={}, default_key="gpt-4o")


@pytest.mark.parametrize("tone", list(Tone))
def test_every_selectable_tone_has_modifier(tones, tone):
    entry = tones.lookup(tone)
    assert tone in tones
    assert entry.system_prompt_modifier.strip()
    assert entry.vocabulary and entry.structure and entry.cta


def test_unknown_tone_falls_back_to_professional(tones):
    assert DEFAULT_TONE == "professional"
    assert tones.lookup("sarcastic") == tones.lookup("professional")
    assert tones.lookup(None) == tones.lookup("professional")


def test_tone_catalog_lists_all_tables(tones):
    assert tones.tones() == list(TONE_ADJUSTMENTS)
    assert {"casual", "persuasive"} <= set(tones)
