import os
from typing import Callable, Dict

from langchain_core.language_models.chat_models import BaseChatModel

from .gemini.client import build_gemini_chat_model

Builder = Callable[..., BaseChatModel]

BUILDERS: Dict[str, Builder] = {
    "gemini": build_gemini_chat_model,
}

MODEL_ENV_VARS = {
    "gemini": "GEMINI_MODEL_NAME",
}


def available_text_llms() -> list[str]:
    """Return the list of registered providers."""
    return sorted(BUILDERS.keys())


def create_text_llm(provider: str = "gemini", **kwargs) -> BaseChatModel:
    """
    Instantiate a text-to-text LLM using the registered factory builders.

    Args:
        provider: Registered provider name (case-insensitive).
        **kwargs: Extra keyword arguments forwarded to the underlying builder
            (``model_name``, ``temperature``, ``response_schema``, ``api_key``...).

    Returns:
        A ``BaseChatModel`` ready for use in LangChain pipelines.
    """
    key = provider.lower()
    try:
        builder = BUILDERS[key]
    except KeyError as exc:
        available = ", ".join(available_text_llms())
        raise ValueError(
            f"Unsupported text LLM provider '{provider}'. "
            f"Available providers: {available}"
        ) from exc

    return builder(**kwargs)


def resolve_text_model_name(provider: str = "gemini") -> str | None:
    """
    Return the provider-specific model override env (if any).
    """
    env_var = MODEL_ENV_VARS.get(provider.lower())
    return os.getenv(env_var) if env_var else None
