"""Gemini connection configuration."""

import os

from pydantic import BaseModel, Field, field_validator

from LLMs.text2text import resolve_text_model_name

DEFAULT_MODEL = "gemini-1.5-flash"
FALLBACK_MODELS = ["gemini-1.5-flash-8b", "gemini-1.5-pro"]


class GeminiSettings(BaseModel):
    """API credentials and model selection for content generation."""

    api_key: str = Field(
        ...,
        description="Gemini API key (GEMINI_API_KEY or GOOGLE_API_KEY)"
    )
    preferred_model: str = Field(
        default=DEFAULT_MODEL,
        description="Model tried first (GEMINI_MODEL_NAME overrides)"
    )
    fallback_models: list[str] = Field(
        default_factory=lambda: list(FALLBACK_MODELS),
        description="Models tried in order when the preferred model fails"
    )
    temperature: float = Field(
        default=0.7,
        description="Sampling temperature passed to every model"
    )

    @field_validator("api_key")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Gemini API key must not be empty")
        return value

    @classmethod
    def from_env(cls) -> "GeminiSettings":
        """Load settings from the environment, failing fast if the API key is missing."""
        api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
        if not api_key:
            raise ValueError("GEMINI_API_KEY environment variable must be set")
        return cls(
            api_key=api_key,
            preferred_model=resolve_text_model_name("gemini") or DEFAULT_MODEL,
        )

    @property
    def candidate_models(self) -> list[str]:
        """Preferred model followed by the fallbacks, without duplicates."""
        ordered = [self.preferred_model, *self.fallback_models]
        return list(dict.fromkeys(name for name in ordered if name))
