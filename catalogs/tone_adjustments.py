"""
Tone Adjustment Catalog.

Per-tone system prompt modifiers plus descriptive metadata (vocabulary,
structure, call-to-action style). Unknown tones resolve to "professional".
"""

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from core.data_models import ToneEntry


DEFAULT_TONE = "professional"

TONE_ADJUSTMENTS: Dict[str, Dict[str, str]] = {
    "friendly": {
        "system_prompt_modifier": """
Additional tone requirements:
- Use warm, approachable language with a conversational feel
- Include gentle transitions and connecting phrases
- Show empathy and understanding in responses
- Use inclusive language that makes the reader feel valued
- Maintain professionalism while being personable""",
        "vocabulary": "warm, welcoming, personable",
        "structure": "conversational flow with smooth transitions",
        "cta": "inviting and encouraging",
    },
    "formal": {
        "system_prompt_modifier": """
Additional tone requirements:
- Use professional, polished language appropriate for executive communication
- Maintain respectful distance and proper etiquette
- Structure responses with clear hierarchy and organization
- Use sophisticated vocabulary and complete sentences
- Avoid contractions and casual expressions""",
        "vocabulary": "sophisticated, respectful, authoritative",
        "structure": "hierarchical with clear sections and formal transitions",
        "cta": "respectful and professionally assertive",
    },
    "technical": {
        "system_prompt_modifier": """
Additional tone requirements:
- Use precise, domain-specific terminology and define it where needed
- Prefer exact figures, units, and concrete examples over generalities
- Organize content into numbered steps, lists, or labelled sections
- Keep sentences neutral and free of marketing language
- State assumptions and limitations explicitly""",
        "vocabulary": "precise, domain-specific, unambiguous",
        "structure": "numbered steps and labelled sections",
        "cta": "specific and verifiable",
    },
    "direct": {
        "system_prompt_modifier": """
Additional tone requirements:
- Be blunt and action-oriented with no unnecessary pleasantries
- Cut straight to the point without padding or filler
- Use short, punchy sentences that drive action
- Focus on immediate next steps and clear outcomes
- Eliminate hedge words and uncertain language""",
        "vocabulary": "concise, decisive, action-oriented",
        "structure": "short sentences with immediate focus on outcomes",
        "cta": "commanding and specific with clear next steps",
    },
    "playful": {
        "system_prompt_modifier": """
Additional tone requirements:
- Use light humor, wordplay, and an upbeat rhythm
- Keep energy high with vivid verbs and lively phrasing
- Stay friendly and inclusive; never mock the reader
- Balance fun with a clear, useful message
- Keep jokes short so they do not bury the point""",
        "vocabulary": "lively, witty, upbeat",
        "structure": "short punchy sections with a light-hearted flow",
        "cta": "fun and energetic with a clear invitation",
    },
    "professional": {
        "system_prompt_modifier": """
Additional tone requirements:
- Maintain business-appropriate language and demeanor
- Balance authority with accessibility
- Use industry-standard terminology when appropriate
- Structure responses logically with clear value propositions
- Be confident but not aggressive""",
        "vocabulary": "competent, reliable, business-focused",
        "structure": "logical progression with clear value statements",
        "cta": "confident and results-oriented",
    },
    "casual": {
        "system_prompt_modifier": """
Additional tone requirements:
- Use relaxed, everyday language that feels natural
- Include contractions and conversational expressions
- Be approachable without being unprofessional
- Use simple vocabulary that anyone can understand
- Maintain a laid-back but still purposeful approach""",
        "vocabulary": "relaxed, everyday, accessible",
        "structure": "natural flow with simple, clear expressions",
        "cta": "easy-going but still motivating",
    },
    "persuasive": {
        "system_prompt_modifier": """
Additional tone requirements:
- Use compelling language that drives action and decision-making
- Include psychological triggers and motivational elements
- Structure arguments with clear benefits and value propositions
- Create urgency without being pushy
- Focus on outcomes and transformation""",
        "vocabulary": "compelling, motivational, results-focused",
        "structure": "persuasive flow with clear benefits and urgency",
        "cta": "action-driving with clear value and urgency",
    },
}


class ToneCatalog:
    """Read-only lookup of tone adjustments with fallback to the default tone"""

    def __init__(self, entries: Mapping[str, ToneEntry], default_key: str = DEFAULT_TONE):
        if default_key not in entries:
            raise ValueError(f"Default tone '{default_key}' missing from catalog")
        self._entries = MappingProxyType(dict(entries))
        self.default_key = default_key

    def lookup(self, tone: Optional[str]) -> ToneEntry:
        key = getattr(tone, "value", tone)
        return self._entries.get(key, self._entries[self.default_key])

    def tones(self) -> List[str]:
        return list(self._entries.keys())

    def __contains__(self, tone: object) -> bool:
        return getattr(tone, "value", tone) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def create_tone_catalog(
    data: Optional[Mapping[str, Mapping[str, str]]] = None,
    default_key: str = DEFAULT_TONE
) -> ToneCatalog:
    """Build the tone catalog from raw table data (defaults to TONE_ADJUSTMENTS)."""
    data = TONE_ADJUSTMENTS if data is None else data
    entries = {tone: ToneEntry(**raw) for tone, raw in data.items()}
    return ToneCatalog(entries, default_key)
