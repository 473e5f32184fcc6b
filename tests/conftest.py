"""Shared fixtures for content generator tests."""

import pytest
from langchain_core.runnables import RunnableLambda

from agents.content_generator import ContentGenerationClient
from main.config import GeminiSettings
from main.state import MatchData, Speaker, TranscriptMessage


class FakeModels:
    """Stand-in for the Gemini builder.

    ``responses`` maps a model name to the text it answers with, or to an
    exception it raises. Unknown models fail. Every call is recorded as
    ``(model_name, schema, prompt_text)``.
    """

    def __init__(self, responses: dict):
        self.responses = responses
        self.calls = []

    def __call__(self, model_name, schema):
        def _respond(prompt_value):
            self.calls.append((model_name, schema, prompt_value.to_string()))
            outcome = self.responses.get(model_name, RuntimeError(f"{model_name} unavailable"))
            if isinstance(outcome, Exception):
                raise outcome
            return outcome
        return RunnableLambda(_respond)

    @property
    def models_called(self):
        return [call[0] for call in self.calls]

    @property
    def last_prompt(self):
        return self.calls[-1][2]

    @property
    def last_schema(self):
        return self.calls[-1][1]


@pytest.fixture
def fake_models():
    return FakeModels


@pytest.fixture
def settings():
    return GeminiSettings(api_key="test-key")


@pytest.fixture
def make_client(settings):
    """Build a client whose models answer with the given responses."""
    def _make(responses):
        fake = FakeModels(responses)
        return ContentGenerationClient(settings, llm_builder=fake), fake
    return _make


@pytest.fixture
def roster():
    return [
        Speaker(id="1", name="Harsha"),
        Speaker(id="2", name="Nasser"),
        Speaker(id="3", name="Isa"),
    ]


@pytest.fixture
def sample_matches():
    return [
        MatchData(
            id="eng-vs-ind-5th-test-2025",
            matchTitle="England vs India, 5th Test",
            venue="London, The Oval",
            result="India won by 6 runs",
            scoreSummary="IND 224 & 396, ENG 247 & 367",
            topPerformers=["Mohammed Siraj: 5/104", "Yashasvi Jaiswal: 118"],
        ),
        MatchData(
            id="aus-vs-sa-1st-odi-2025",
            matchTitle="Australia vs South Africa, 1st O-D-I",
            venue="Cairns, Cazaly's Stadium",
            result="South Africa won by 98 runs",
            scoreSummary="SA 296/8 (50), AUS 198 (40.5)",
            topPerformers=["Keshav Maharaj: 5/33"],
        ),
    ]


@pytest.fixture
def sample_transcript():
    return [
        TranscriptMessage(speaker="Harsha", line="[excited] Welcome to The Cricket Diner!"),
        TranscriptMessage(speaker="Nasser", line="[skeptical] That batting collapse was avoidable."),
        TranscriptMessage(speaker="BREAK", line="[neutral] Coming up: India vs South Africa, Nov 14, 9:30 AM EST."),
        TranscriptMessage(speaker="AI StatBot", line="[neutral] Siraj bowled 185.3 overs in the series."),
        TranscriptMessage(speaker="Announcer", line="[dramatic] Next week: the Ashes preview!"),
        TranscriptMessage(speaker="Isa", line="[excited] Bumrah strikes!"),
    ]
