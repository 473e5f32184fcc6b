"""Tests for response parsing and transcript flattening."""

import pytest

from agents.content_generator.parsing import (
    MalformedResponseError,
    flatten_transcript,
    is_dialogue_speaker,
    parse_matches,
    parse_string_list,
    parse_transcript,
    strip_emotion_cue,
)
from main.state import TranscriptMessage


def test_strip_emotion_cue():
    assert strip_emotion_cue("[excited] Bumrah strikes!") == "Bumrah strikes!"


def test_strip_emotion_cue_only_removes_leading_cue():
    assert strip_emotion_cue("[thoughtful]   He said [sic] it twice") == "He said [sic] it twice"
    assert strip_emotion_cue("No cue [here]") == "No cue [here]"


@pytest.mark.parametrize("speaker,expected", [
    ("BREAK", False),
    ("break", False),
    ("Announcer", False),
    ("Stadium ANNOUNCER", False),
    ("AI StatBot", True),
    ("Harsha", True),
])
def test_is_dialogue_speaker(speaker, expected):
    assert is_dialogue_speaker(speaker) is expected


def test_flatten_transcript(sample_transcript):
    flattened = flatten_transcript(sample_transcript)
    assert flattened.splitlines() == [
        "Harsha: Welcome to The Cricket Diner!",
        "Nasser: That batting collapse was avoidable.",
        "AI StatBot: Siraj bowled 185.3 overs in the series.",
        "Isa: Bumrah strikes!",
    ]


def test_flatten_transcript_of_only_breaks_is_empty():
    transcript = [
        TranscriptMessage(speaker="BREAK", line="[neutral] ..."),
        TranscriptMessage(speaker="Announcer", line="Next week!"),
    ]
    assert flatten_transcript(transcript) == ""


def test_parse_transcript():
    messages = parse_transcript('[{"speaker": "Nasser", "line": "[chuckling] Not again."}]')
    assert messages == [TranscriptMessage(speaker="Nasser", line="[chuckling] Not again.")]


def test_parse_matches_rejects_non_objects():
    with pytest.raises(MalformedResponseError):
        parse_matches('["just a string"]')


def test_parse_string_list_rejects_object():
    with pytest.raises(MalformedResponseError):
        parse_string_list('{"topics": ["a"]}')


def test_invalid_json_is_malformed():
    with pytest.raises(MalformedResponseError):
        parse_transcript("[{'speaker': 'single quotes'}]")


def test_parse_matches_requires_top_performers():
    with pytest.raises(MalformedResponseError):
        parse_matches(
            '[{"id": "a", "matchTitle": "A vs B", "venue": "V", '
            '"result": "A won", "scoreSummary": "A 200, B 150"}]'
        )
