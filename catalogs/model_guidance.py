"""
Model Prompt Guidance Catalog.

Static, per-model reference data used to enrich generated prompt templates:
formatting tips, behavioural notes, an ideal user prompt example and a canned
system prompt. Lookups never fail; unknown models resolve to the default entry.
"""

from types import MappingProxyType
from typing import Dict, Any, Iterator, List, Mapping, Optional

from core.data_models import GuidanceEntry, PRIMARY_MODEL


MODEL_GUIDANCE: Dict[str, Dict[str, Any]] = {
    "gpt-4o": {
        "system_prompt": (
            "You are a fast, capable assistant. Answer clearly in natural language, "
            "use markdown structure when it helps readability, and state assumptions "
            "briefly. Expand on details only when the user asks for depth."
        ),
        "formatting_tips": [
            "Supports markdown, bullet points, and code blocks",
            "Use clear instructions but natural language is fine",
            "Specify desired length (it may default to short answers)",
        ],
        "user_prompt_notes": [
            "Tends to be more conversational unless constrained",
            "Responds quickly but may compress info unless told to expand",
        ],
        "ideal_user_prompt_example": (
            "Summarize the following article using bullet points and simple language. "
            "Keep the core ideas but avoid repetition.\n\n[Paste text here]"
        ),
    },
    "gpt-4.5": {
        "system_prompt": (
            "You are an emotionally intelligent writing partner. Match the requested "
            "voice and audience, keep the message warm and human, and follow the "
            "user's intent closely without inventing facts."
        ),
        "formatting_tips": [
            "Supports markdown, bullet points, and code blocks",
            "Use light formatting and explicit voice guidance (e.g. 'friendly but direct')",
            "Define tone, audience, and output goal up front",
        ],
        "user_prompt_notes": [
            "Enhanced emotional intelligence and creativity",
            "Strong at following intent with reduced hallucinations",
        ],
        "ideal_user_prompt_example": (
            "Write a short, empathetic reply to this customer who is frustrated about a "
            "delayed order. Keep it warm but professional.\n\n[Paste message here]"
        ),
    },
    "gpt-4.1": {
        "system_prompt": (
            "You are a precise senior software engineer. Follow instructions exactly, "
            "explain code step by step, and return complete, runnable snippets in "
            "fenced code blocks."
        ),
        "formatting_tips": [
            "Prefers clear step-by-step or numbered instructions",
            "Excellent for code-related tasks and debugging",
            "Handles technical documentation very well",
        ],
        "user_prompt_notes": [
            "Specialized for coding and instruction-following",
            "More precise than GPT-4o for development tasks",
        ],
        "ideal_user_prompt_example": (
            "Explain the following code in plain English. Use bullet points and include "
            "code snippets for reference.\n\n[Insert code here]"
        ),
    },
    "gpt-4.1-mini": {
        "system_prompt": (
            "You are a fast, deterministic assistant. Follow the instruction literally, "
            "keep answers short, and use the exact output format requested."
        ),
        "formatting_tips": [
            "Use simple, rule-based language (like a tagger or classifier)",
            "Good for lightweight coding tasks",
            "Keep instructions clear and concise",
        ],
        "user_prompt_notes": [
            "Lightweight version optimized for speed",
            "Best for simple, well-defined tasks",
        ],
        "ideal_user_prompt_example": (
            "Fix the syntax error in this code and explain what was wrong:\n\n[Insert code here]"
        ),
    },
    "o3": {
        "system_prompt": (
            "You are a rigorous analyst. Work through the problem step by step, verify "
            "each intermediate result, and present the final answer with a concise "
            "justification."
        ),
        "formatting_tips": [
            "Excellent for complex reasoning and analysis",
            "Use structured problem statements",
            "Great for mathematical and logical proofs",
        ],
        "user_prompt_notes": [
            "State-of-the-art reasoning capabilities",
            "Ideal for deep analysis and problem-solving",
        ],
        "ideal_user_prompt_example": (
            "Analyze the following problem step-by-step and provide a detailed solution "
            "with your reasoning:\n\n[Insert problem here]"
        ),
    },
    "o4-mini": {
        "system_prompt": (
            "You are an efficient reasoning assistant. Solve the problem methodically, "
            "show the key steps, and keep the explanation compact."
        ),
        "formatting_tips": [
            "Efficient for reasoning tasks with good performance",
            "Use clear problem statements",
            "Great for math, data science, and coding",
        ],
        "user_prompt_notes": [
            "High-performance reasoning model",
            "Cost-efficient with fast throughput",
        ],
        "ideal_user_prompt_example": "Solve this step-by-step and show your work:\n\n[Insert problem here]",
    },
    "o1": {
        "system_prompt": (
            "You are a careful problem solver. Break the task into parts, reason "
            "through each one, and summarize the solution at the end."
        ),
        "formatting_tips": [
            "Good for complex problem-solving",
            "Use structured reasoning prompts",
            "Works well with coding and math problems",
        ],
        "user_prompt_notes": [
            "Solid reasoning capabilities",
            "Less advanced than o3/o4-mini models",
        ],
        "ideal_user_prompt_example": "Break down this problem and solve it step-by-step:\n\n[Insert problem here]",
    },
    "o1-mini": {
        "system_prompt": (
            "You are a compact reasoning assistant. Give a direct solution with a short "
            "explanation of the approach."
        ),
        "formatting_tips": [
            "Compact reasoning model",
            "Use clear, direct problem statements",
            "Good for moderate complexity tasks",
        ],
        "user_prompt_notes": [
            "Lightweight reasoning model",
            "Best for simpler analytical tasks",
        ],
        "ideal_user_prompt_example": "Solve this problem and explain your approach:\n\n[Insert problem here]",
    },
    # Legacy models kept for older saved selections
    "gpt-4-turbo": {
        "system_prompt": (
            "You are a thorough assistant. Follow numbered instructions in order and "
            "keep responses as short as the task allows."
        ),
        "formatting_tips": [
            "Prefers clear step-by-step or numbered instructions",
            "Works well with few-shot formatting (e.g., Input/Output pairs)",
            "Handles large context windows; great for long prompts",
        ],
        "user_prompt_notes": [
            "Can be verbose unless told to keep it short",
            "Respects formatting and tone constraints reliably",
        ],
        "ideal_user_prompt_example": (
            "Explain the following code in plain English. Use bullet points and include "
            "code snippets for reference.\n\n[Insert code here]"
        ),
    },
    "gpt-4": {
        "system_prompt": (
            "You are a deliberate assistant. Respect section delimiters, answer only "
            "within the requested scope, and structure output with markdown headings."
        ),
        "formatting_tips": [
            "Use delimiters like --- or ``` to separate sections",
            "Be explicit in instructions; prefers structured prompts",
            "Markdown support is strong, but slower output",
        ],
        "user_prompt_notes": [
            "Most deliberate reasoning, but also the slowest",
            "Needs clear scoping to avoid vague responses",
        ],
        "ideal_user_prompt_example": (
            "Write a one-paragraph summary of the following legal text. Focus on the "
            "constitutional arguments made by each side.\n\n---\n[Insert legal passage here]"
        ),
    },
    "gpt-3.5": {
        "system_prompt": (
            "You are a literal assistant. Do exactly what is asked, in the format shown, "
            "and say so when the information is not in the input."
        ),
        "formatting_tips": [
            "Keep prompts short and literal; no ambiguity",
            "Use plain instructions and define expected output format",
            "Wrap examples in delimiters like ``` or === for clarity",
        ],
        "user_prompt_notes": [
            "Can hallucinate or make confident errors",
            "Not good at open-ended or abstract tasks",
        ],
        "ideal_user_prompt_example": (
            "Extract all email addresses from the following text and return them as a "
            "list:\n\n===\n[Paste text here]\n==="
        ),
    },
    "gpt-3.5-turbo-instruct": {
        "system_prompt": "Execute the instruction and return only the result.",
        "formatting_tips": [
            "Treat like CLI input; concise and directive",
            "Avoid chatty language; just tell it what to do",
        ],
        "user_prompt_notes": [
            "Ideal for tools, scripts, or single-turn commands",
            "No chat history or memory; stateless interaction",
        ],
        "ideal_user_prompt_example": (
            "Rewrite this sentence to sound more professional:\n"
            "\"Hey, I need that report ASAP or we're gonna be in trouble.\""
        ),
    },
    "gpt-4o-mini": {
        "system_prompt": (
            "You are a classifier. Return only one of the allowed labels, with no "
            "explanation unless asked."
        ),
        "formatting_tips": [
            "Use simple, rule-based language (like a tagger or classifier)",
            "Avoid creative or open-ended tasks",
        ],
        "user_prompt_notes": [
            "Optimized for deterministic, fast responses",
            "Lower quality for nuanced writing or reasoning",
        ],
        "ideal_user_prompt_example": (
            "Classify this support request into one of the following categories: "
            "Billing, Technical, or Account Access.\n\n[Paste request here]"
        ),
    },
}


class GuidanceCatalog:
    """Read-only lookup of per-model guidance with fallback to a default entry"""

    def __init__(self, entries: Mapping[str, GuidanceEntry], default_key: str):
        if default_key not in entries:
            raise ValueError(f"Default guidance entry '{default_key}' missing from catalog")
        self._entries = MappingProxyType(dict(entries))
        self.default_key = default_key

    def lookup(self, model: Optional[str]) -> GuidanceEntry:
        """Return guidance for ``model``; unknown or empty keys get the default entry."""
        key = getattr(model, "value", model)
        return self._entries.get(key, self._entries[self.default_key])

    def models(self) -> List[str]:
        return list(self._entries.keys())

    def __contains__(self, model: object) -> bool:
        return getattr(model, "value", model) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def create_guidance_catalog(
    data: Optional[Mapping[str, Mapping[str, Any]]] = None,
    default_key: str = PRIMARY_MODEL.value
) -> GuidanceCatalog:
    """
    Build the guidance catalog from raw table data.

    Args:
        data: Raw per-model table (defaults to MODEL_GUIDANCE)
        default_key: Entry returned for unknown models

    Returns:
        GuidanceCatalog: Immutable catalog instance
    """
    data = MODEL_GUIDANCE if data is None else data
    entries = {
        model: GuidanceEntry(
            system_prompt=raw["system_prompt"],
            formatting_tips=tuple(raw["formatting_tips"]),
            user_prompt_notes=tuple(raw["user_prompt_notes"]),
            ideal_user_prompt_example=raw["ideal_user_prompt_example"],
        )
        for model, raw in data.items()
    }
    return GuidanceCatalog(entries, default_key)
