"""
Content Generator Agent.

Generates cricket podcast content (recent matches, dialogue scripts, topic
ideas and transcript summaries) with Gemini, falling back across models.
"""

from .agent import (
    ContentGenerationClient,
    PLACEHOLDER_MATCHES,
    build_speaker_profiles,
    build_topic_instruction,
    persona_for,
)
from .parsing import (
    MalformedResponseError,
    flatten_transcript,
    strip_emotion_cue,
)

__all__ = [
    "ContentGenerationClient",
    "PLACEHOLDER_MATCHES",
    "build_speaker_profiles",
    "build_topic_instruction",
    "persona_for",
    "MalformedResponseError",
    "flatten_transcript",
    "strip_emotion_cue",
]
