"""Parsing helpers for model responses and transcripts."""

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from main.state import MatchData, TranscriptMessage

logger = logging.getLogger(__name__)

_EMOTION_CUE = re.compile(r"^\[(.*?)\]\s*")
_NON_DIALOGUE_SPEAKERS = re.compile(r"break|announcer", re.IGNORECASE)


class MalformedResponseError(ValueError):
    """Raised when a model response is not valid JSON of the expected shape."""


def _load_json_array(raw_response: str) -> list[Any]:
    try:
        data = json.loads(raw_response)
    except json.JSONDecodeError as e:
        logger.debug(f"Response was: {raw_response[:500]}")
        raise MalformedResponseError(f"Response is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise MalformedResponseError(
            f"Expected a JSON array, got {type(data).__name__}"
        )
    return data


def parse_matches(raw_response: str) -> list[MatchData]:
    """Parse a JSON array of match objects."""
    data = _load_json_array(raw_response)
    try:
        return [MatchData(**item) for item in data]
    except (TypeError, ValidationError) as e:
        raise MalformedResponseError(f"Invalid match entry: {e}") from e


def parse_transcript(raw_response: str) -> list[TranscriptMessage]:
    """Parse a JSON array of ``{"speaker", "line"}`` objects."""
    data = _load_json_array(raw_response)
    try:
        return [TranscriptMessage(**item) for item in data]
    except (TypeError, ValidationError) as e:
        raise MalformedResponseError(f"Invalid transcript entry: {e}") from e


def parse_string_list(raw_response: str) -> list[str]:
    """Parse a JSON array of strings."""
    data = _load_json_array(raw_response)
    if not all(isinstance(item, str) for item in data):
        raise MalformedResponseError("Expected a JSON array of strings")
    return data


def strip_emotion_cue(line: str) -> str:
    """Remove the leading ``[cue]`` from a dialogue line.

    >>> strip_emotion_cue("[excited] Bumrah strikes!")
    'Bumrah strikes!'
    """
    return _EMOTION_CUE.sub("", line, count=1)


def is_dialogue_speaker(speaker: str) -> bool:
    """False for break segments and announcer lines."""
    return not _NON_DIALOGUE_SPEAKERS.search(speaker)


def flatten_transcript(transcript: list[TranscriptMessage]) -> str:
    """Render the spoken dialogue as ``speaker: line`` rows, one per message.

    Break segments and announcer lines are dropped and emotion cues removed.
    """
    return "\n".join(
        f"{message.speaker}: {strip_emotion_cue(message.line)}"
        for message in transcript
        if is_dialogue_speaker(message.speaker)
    )
