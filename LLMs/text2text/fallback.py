"""
Sequential model fallback for text generation.

A request is attempted against an ordered list of model names (preferred model
first, then the fixed fallbacks). The first model that answers wins; each
failure is logged and the next model is tried. There is no backoff and no model
is attempted twice.
"""

import logging
import re
from typing import Any, Awaitable, Callable, Optional, Sequence, TypeVar

from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.runnables import Runnable
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt

logger = logging.getLogger(__name__)

T = TypeVar("T")
C = TypeVar("C")

# (model_name, response_schema) -> chat model
LLMBuilder = Callable[[str, Optional[dict]], Runnable]

_OPENING_FENCE = re.compile(r"^\s*```(?:json)?\s*", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\s*```\s*$")


class AllModelsFailedError(RuntimeError):
    """Raised when every candidate model failed to produce a response."""

    def __init__(self, message: str, last_error: BaseException | None = None):
        super().__init__(message)
        self.last_error = last_error


def strip_fences(text: str) -> str:
    """Remove markdown code fences (``` or ```json) wrapped around LLM output.

    Nested fences are peeled until none remain.
    """
    while True:
        stripped = _CLOSING_FENCE.sub("", _OPENING_FENCE.sub("", text, count=1), count=1).strip()
        if stripped == text:
            return stripped
        text = stripped


async def first_successful(
    candidates: Sequence[C],
    attempt: Callable[[C], Awaitable[T]],
    label: str = "Model",
) -> T:
    """
    Return the result of the first candidate whose attempt succeeds.

    Candidates are tried strictly in order, once each. A warning naming the
    failed candidate is logged after every failure.

    Raises:
        AllModelsFailedError: If every attempt failed (``last_error`` holds the
            last exception) or ``candidates`` is empty.
    """
    if not candidates:
        raise AllModelsFailedError("All model attempts failed")

    def _log_failure(retry_state):
        failed = candidates[retry_state.attempt_number - 1]
        logger.warning(
            f"{label} {failed} failed, trying next... ({retry_state.outcome.exception()})"
        )

    retrying = AsyncRetrying(
        stop=stop_after_attempt(len(candidates)),
        retry=retry_if_exception_type(Exception),
        after=_log_failure,
        reraise=True,
    )
    try:
        async for attempt_state in retrying:
            with attempt_state:
                candidate = candidates[attempt_state.retry_state.attempt_number - 1]
                return await attempt(candidate)
    except Exception as exc:
        raise AllModelsFailedError(
            f"All {len(candidates)} model attempts failed; last error: {exc}",
            last_error=exc,
        ) from exc
    # Unreachable: AsyncRetrying either returns or raises.
    raise AllModelsFailedError("All model attempts failed")


async def invoke_with_fallback(
    models: Sequence[str],
    prompt: ChatPromptTemplate,
    variables: dict[str, Any],
    llm_builder: LLMBuilder,
    schema: dict | None = None,
) -> str:
    """
    Run ``prompt`` against each model in turn and return the first answer.

    Args:
        models: Ordered model names, preferred model first
        prompt: Prompt template to fill with ``variables``
        variables: Template variables
        llm_builder: Builds a chat model for a model name and optional schema
        schema: JSON schema hint; ``None`` requests free text

    Returns:
        The response text with any surrounding code fence removed
    """

    async def _attempt(model_name: str) -> str:
        llm = llm_builder(model_name, schema)
        chain = prompt | llm | StrOutputParser()
        text = await chain.ainvoke(variables)
        logger.debug(f"Model {model_name} answered with {len(text)} characters")
        return strip_fences(text)

    return await first_successful(models, _attempt)
