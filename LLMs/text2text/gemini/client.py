import os
from typing import Any

from langchain_google_genai import ChatGoogleGenerativeAI


def build_gemini_chat_model(
    model_name: str | None = None,
    temperature: float = 0.2,
    response_schema: dict[str, Any] | None = None,
    **kwargs,
) -> ChatGoogleGenerativeAI:
    """
    Build a ``ChatGoogleGenerativeAI`` client that requires the model name to be
    provided either as a parameter or via the GEMINI_MODEL_NAME environment variable.

    When ``response_schema`` is given the model is asked to answer with JSON
    matching it; otherwise the output is free text.
    """
    model = model_name or os.getenv("GEMINI_MODEL_NAME")
    if not model:
        raise ValueError("GEMINI_MODEL_NAME environment variable must be set")
    api_key = (
        kwargs.pop("google_api_key", None)
        or kwargs.pop("api_key", None)
        or os.getenv("GEMINI_API_KEY")
        or os.getenv("GOOGLE_API_KEY")
    )

    client_kwargs = {
        "model": model,
        "temperature": temperature,
        "max_retries": 0,  # Disable internal retries
        **kwargs,
    }
    if api_key:
        client_kwargs["google_api_key"] = api_key
    if response_schema is not None:
        client_kwargs["response_mime_type"] = "application/json"
        client_kwargs["response_schema"] = response_schema

    return ChatGoogleGenerativeAI(**client_kwargs)
