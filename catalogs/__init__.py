"""
Guidance Catalogs Package.

Static per-model and per-tone reference data used when assembling prompt templates.
"""

from .model_guidance import GuidanceCatalog, MODEL_GUIDANCE, create_guidance_catalog
from .tone_adjustments import ToneCatalog, TONE_ADJUSTMENTS, DEFAULT_TONE, create_tone_catalog

__all__ = [
    "GuidanceCatalog",
    "MODEL_GUIDANCE",
    "create_guidance_catalog",
    "ToneCatalog",
    "TONE_ADJUSTMENTS",
    "DEFAULT_TONE",
    "create_tone_catalog",
]
