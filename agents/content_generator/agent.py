"""
Content Generator Agent.

Generates cricket podcast content with Gemini:
1. Recent match summaries (falls back to a placeholder match on any failure)
2. Multi-speaker dialogue scripts with personas, breaks and an optional stat bot
3. Fresh topic suggestions
4. Summaries of generated transcripts

Every request goes through ``invoke_with_fallback`` so the preferred model is
tried first and the fixed fallback models after it.
"""

import logging
from datetime import date
from typing import Optional

from langchain_core.prompts import ChatPromptTemplate
from langchain_core.runnables import Runnable
from langsmith import traceable

from LLMs.text2text import LLMBuilder, create_text_llm, invoke_with_fallback, strip_fences
from main.config import GeminiSettings, PodcastConfig
from main.state import MatchData, Speaker, TranscriptMessage
from .parsing import (
    flatten_transcript,
    parse_matches,
    parse_string_list,
    parse_transcript,
)
from .prompts import (
    FREEFORM_TOPIC_INSTRUCTION,
    MATCHES_TOPIC_INSTRUCTION,
    PERSONAS,
    SHOW_NAME,
    STAT_BOT_OFF_INSTRUCTION,
    STAT_BOT_ON_INSTRUCTION,
    podcast_script_prompt,
    podcast_summary_prompt,
    recent_matches_prompt,
    topic_suggestions_prompt,
)
from .schemas import (
    PODCAST_SCRIPT_SCHEMA,
    RECENT_MATCHES_SCHEMA,
    TOPIC_SUGGESTIONS_SCHEMA,
)

logger = logging.getLogger(__name__)

# Returned when recent matches cannot be generated so callers always get data
PLACEHOLDER_MATCHES = [
    MatchData(
        id="ind-vs-aus-1st-t20i-2025",
        matchTitle="India vs Australia, 1st T-Twenty-I",
        venue="Nagpur, VCA Stadium",
        result="India won by 6 wickets",
        scoreSummary="AUS 175/8 (20), IND 176/4 (19.2)",
        topPerformers=["Virat Kohli: 82* (53)", "Jasprit Bumrah: 2/26 (4)"],
    ),
]


def persona_for(index: int) -> str:
    """Persona archetype for the speaker at ``index`` in the roster."""
    return PERSONAS[index % len(PERSONAS)]


def build_speaker_profiles(config: PodcastConfig, speakers: list[Speaker]) -> str:
    """Format one ``Name (Host|Guest): persona`` line per speaker."""
    lines = []
    for i, speaker in enumerate(speakers):
        role = "Host" if config.is_host(speaker) else "Guest"
        lines.append(f"{speaker.name} ({role}): {persona_for(i)}")
    return "\n".join(lines)


def build_topic_instruction(topic: str, matches: Optional[list[MatchData]]) -> str:
    """Frame the episode around the given matches, or around ``topic`` if there are none."""
    if matches:
        match_lines = "\n".join(
            f"- **Match:** {m.matchTitle}\n  - **Result:** {m.result}"
            for m in matches
        )
        return MATCHES_TOPIC_INSTRUCTION.format(match_lines=match_lines)
    return FREEFORM_TOPIC_INSTRUCTION.format(topic=topic)


def build_stat_bot_instruction(include_stat_bot: bool) -> str:
    return STAT_BOT_ON_INSTRUCTION if include_stat_bot else STAT_BOT_OFF_INSTRUCTION


def format_prompt_date(day: date) -> str:
    """Render a date like ``October 19, 2026``."""
    return f"{day:%B} {day.day}, {day.year}"


class ContentGenerationClient:
    """
    Client for the four content generation operations.

    Construct it once at startup (``ContentGenerationClient.from_env()``) and
    share it; it only holds immutable settings. Tests can pass ``llm_builder``
    to replace the Gemini chat model.
    """

    def __init__(
        self,
        settings: GeminiSettings,
        llm_builder: Optional[LLMBuilder] = None,
    ):
        self.settings = settings
        self._llm_builder = llm_builder or self._build_gemini

    @classmethod
    def from_env(cls) -> "ContentGenerationClient":
        return cls(GeminiSettings.from_env())

    @property
    def models(self) -> list[str]:
        return self.settings.candidate_models

    def _build_gemini(self, model_name: str, schema: Optional[dict]) -> Runnable:
        return create_text_llm(
            provider="gemini",
            model_name=model_name,
            temperature=self.settings.temperature,
            response_schema=schema,
            api_key=self.settings.api_key,
        )

    async def _generate(
        self,
        prompt: ChatPromptTemplate,
        variables: dict,
        schema: Optional[dict] = None,
    ) -> str:
        return await invoke_with_fallback(
            self.models,
            prompt,
            variables,
            llm_builder=self._llm_builder,
            schema=schema,
        )

    @traceable(name="fetch_recent_matches")
    async def fetch_recent_matches(self, count: int = 7) -> list[MatchData]:
        """
        Generate ``count`` recent high-profile international matches.

        Never raises: on any failure the error is logged and
        ``PLACEHOLDER_MATCHES`` is returned so the caller stays usable.
        """
        try:
            raw_response = await self._generate(
                recent_matches_prompt,
                {"count": count},
                schema=RECENT_MATCHES_SCHEMA,
            )
            matches = parse_matches(raw_response)
            if not matches:
                raise ValueError("Model returned no matches")
            logger.info(f"Fetched {len(matches)} recent matches")
            return matches
        except Exception as e:
            logger.error(f"Error fetching recent matches: {e}")
            return list(PLACEHOLDER_MATCHES)

    @traceable(name="generate_podcast_script")
    async def generate_podcast_script(
        self,
        config: PodcastConfig,
        topic: str,
        speakers: list[Speaker],
        matches: Optional[list[MatchData]] = None,
        *,
        today: Optional[date] = None,
    ) -> list[TranscriptMessage]:
        """
        Generate a seven-act podcast script.

        Args:
            config: Tone, hosts and stat bot toggle
            topic: Free-text topic, used when no matches are given
            speakers: Full roster; personas are assigned by position
            matches: Optional matches to analyse instead of ``topic``
            today: Date the break segments count from (default: today)

        Returns:
            Ordered transcript messages

        Raises:
            AllModelsFailedError: If no model produced a response
            MalformedResponseError: If the response is not a transcript array
        """
        variables = {
            "show_name": SHOW_NAME,
            "topic_instruction": build_topic_instruction(topic, matches),
            "speaker_profiles": build_speaker_profiles(config, speakers),
            "tone": config.tone,
            "today": format_prompt_date(today or date.today()),
            "stat_bot_instruction": build_stat_bot_instruction(config.includeStatBot),
        }
        raw_response = await self._generate(
            podcast_script_prompt,
            variables,
            schema=PODCAST_SCRIPT_SCHEMA,
        )
        transcript = parse_transcript(raw_response)
        logger.info(f"Generated script with {len(transcript)} lines")
        return transcript

    @traceable(name="generate_topic_suggestions")
    async def generate_topic_suggestions(self, count: int = 5) -> list[str]:
        """Generate ``count`` podcast topic titles. Failures propagate."""
        raw_response = await self._generate(
            topic_suggestions_prompt,
            {"count": count},
            schema=TOPIC_SUGGESTIONS_SCHEMA,
        )
        return parse_string_list(raw_response)

    @traceable(name="generate_podcast_summary")
    async def generate_podcast_summary(self, transcript: list[TranscriptMessage]) -> str:
        """Summarize the spoken part of a transcript as free text. Failures propagate."""
        text = await self._generate(
            podcast_summary_prompt,
            {"show_name": SHOW_NAME, "transcript": flatten_transcript(transcript)},
        )
        return strip_fences(text)
