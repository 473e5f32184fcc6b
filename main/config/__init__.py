"""
Content generation configuration models.

``GeminiSettings`` describes how to reach the model service and which models to
try; ``PodcastConfig`` describes a single episode.
"""

from .gemini import GeminiSettings, DEFAULT_MODEL, FALLBACK_MODELS
from .podcast import PodcastConfig

__all__ = [
    "GeminiSettings",
    "DEFAULT_MODEL",
    "FALLBACK_MODELS",
    "PodcastConfig",
]
