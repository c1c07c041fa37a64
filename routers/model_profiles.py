"""
Static model profiles used to describe alternative recommendations.
"""

from typing import Dict

from core.data_models import ModelIdentifier, ModelProfile


MODEL_PROFILES: Dict[ModelIdentifier, ModelProfile] = {
    ModelIdentifier.GPT_4O: ModelProfile(
        reason="Best all-purpose model with fast multimodal reasoning across text, vision, and audio",
        pros=("Fast responses", "Handles images and audio", "Strong tool use"),
        cons=("May compress detail unless asked to elaborate", "Less rigorous on deep multi-step reasoning"),
    ),
    ModelIdentifier.GPT_4_5: ModelProfile(
        reason="Natural, emotionally intelligent writing with reduced hallucinations",
        pros=("Excellent tone control", "Creative and empathetic writing", "Follows intent closely"),
        cons=("Less focused on reasoning", "Slower and more expensive than lighter models"),
    ),
    ModelIdentifier.GPT_4_1: ModelProfile(
        reason="Specialized for coding and precise instruction-following",
        pros=("Precise code generation", "Strong at debugging and web tasks", "Reliable instruction adherence"),
        cons=("Less suited to emotional or creative writing", "Overkill for trivial tasks"),
    ),
    ModelIdentifier.GPT_4_1_MINI: ModelProfile(
        reason="Lightweight, fast instruction-following model for simple tasks",
        pros=("Very fast", "Low cost", "Good for well-defined tasks"),
        cons=("Weaker on nuanced writing", "Limited multi-step reasoning"),
    ),
    ModelIdentifier.O3: ModelProfile(
        reason="State-of-the-art reasoning for deep analysis in math, science, and programming",
        pros=("Deepest reasoning", "Verifies intermediate steps", "Handles visual problem-solving"),
        cons=("Slower responses", "Higher cost per request"),
    ),
    ModelIdentifier.O4_MINI: ModelProfile(
        reason="Cost-efficient reasoning with fast throughput for STEM tasks",
        pros=("Fast reasoning", "Cost-efficient", "Strong at math and data science"),
        cons=("Less depth than o3 on the hardest problems", "Terse explanations"),
    ),
    ModelIdentifier.O1: ModelProfile(
        reason="Solid reasoning model for complex problem-solving",
        pros=("Reliable step-by-step reasoning", "Good at coding and math"),
        cons=("Less capable than o3/o4-mini", "No tool access"),
    ),
    ModelIdentifier.O1_MINI: ModelProfile(
        reason="Compact reasoning model for moderate analytical tasks",
        pros=("Lower cost", "Quick reasoning on moderate problems"),
        cons=("Limited depth", "No tool access"),
    ),
}
