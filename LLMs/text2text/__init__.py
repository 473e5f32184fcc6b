"""
Factory utilities for building text-to-text LLM clients.

This module exposes a simple factory so that agents can request a chat model
without knowing the underlying provider, plus the sequential model fallback used
to try several models of that provider in order. Adding new providers only
requires registering another builder in ``factory.py``.
"""

from .factory import (
    available_text_llms,
    create_text_llm,
    resolve_text_model_name,
)
from .fallback import (
    AllModelsFailedError,
    LLMBuilder,
    first_successful,
    invoke_with_fallback,
    strip_fences,
)

__all__ = [
    "available_text_llms",
    "create_text_llm",
    "resolve_text_model_name",
    "AllModelsFailedError",
    "LLMBuilder",
    "first_successful",
    "invoke_with_fallback",
    "strip_fences",
]
