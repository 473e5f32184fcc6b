"""
Prompt templates for cricket podcast content generation.

Every template is a single user turn. JSON-returning prompts are paired with a
response schema in ``schemas.py``.
"""

from langchain_core.prompts import ChatPromptTemplate

SHOW_NAME = "The Cricket Diner"

# ---- Recent matches ----
RECENT_MATCHES_PROMPT = """Generate {count} recent, completed, high-profile international cricket matches (Test, O-D-I, or T-Twenty-I) from the last two months.
Return ONLY a JSON array; each object must include:
- id (slug like "ind-vs-aus-1st-t20i-2025")
- matchTitle
- venue
- result
- scoreSummary
- topPerformers (array of strings)"""

# ---- Podcast script ----
PERSONAS = [
    "The thoughtful, analytical anchor who keeps the conversation on track.",
    "The excitable, passionate commentator who reacts emotionally to big moments.",
    "The cynical ex-player who is hard to impress and focuses on technical flaws.",
    "The optimistic fan-turned-pundit who always sees the bright side.",
    "The data-driven analyst who loves obscure stats and trends.",
    "The host who loves to stir the pot and ask controversial questions.",
]

MATCHES_TOPIC_INSTRUCTION = """**Podcast Topic:** Deep analysis of the following recent matches:
{match_lines}"""

FREEFORM_TOPIC_INSTRUCTION = (
    '**Podcast Topic:** A deep-dive discussion on "{topic}". '
    "Explore viewpoints, context, key players, and current trends."
)

STAT_BOT_ON_INSTRUCTION = (
    "Include 'AI StatBot' ~5-6 times. Its lines MUST be speaker 'AI StatBot' "
    "with ONLY the statistic/fact."
)

STAT_BOT_OFF_INSTRUCTION = "No AI StatBot in this episode."

PODCAST_SCRIPT_PROMPT = """You are an expert cricket podcast script generator for "{show_name}".

{topic_instruction}

**Participants & Personas**
{speaker_profiles}
- Announcer: voice for teasers and breaks.

**Tone:** {tone}

**Structure (7 acts)**
1) Intro by a host (welcome, introduce all speakers, state topic).
2) Main Discussion 1 (~8-10 lines). A host announces a break at the end.
3) BREAK (speaker "BREAK"): list 2-3 upcoming *international* matches after {today} with date/time in EST. Start with an emotion cue in [].
4) Main Discussion 2 (~8-10 lines). A host announces a break at the end.
5) Second BREAK (same rules; different matches if possible).
6) Closing remarks: host asks each guest for final opinion; each responds.
7) Outro + Teaser: host thanks all; 'Announcer' gives a teaser for a fictional next episode.

**Dialogue Rules**
- EVERY line begins with an emotion cue in square brackets (e.g., [excited], [analytical], [skeptical], [chuckling], [thoughtful]).
- Keep personas consistent; use pauses "...", reactions, and banter.
- Use phonetics: "T-Twenty-I", "O-D-I".
- Weave in match analysis: top performers, turning points, tactics.

**AI StatBot**
{stat_bot_instruction}

**Output:**
Return ONLY a JSON array of objects:
{{ "speaker": string, "line": string }}
"line" MUST begin with the emotion cue."""

# ---- Topic suggestions ----
TOPIC_SUGGESTIONS_PROMPT = """Generate {count} fresh, topical cricket podcast titles.
Use phonetics for terms: "T-Twenty-I".
Return ONLY a JSON array of strings."""

# ---- Summary ----
PODCAST_SUMMARY_PROMPT = """Summarize the following "{show_name}" transcript into a concise, well-structured text:
- Heading first
- Bullets or short paragraphs
- Highlight key stats
- Capture final/differing opinions

Transcript:
{transcript}"""

recent_matches_prompt = ChatPromptTemplate.from_messages([
    ("user", RECENT_MATCHES_PROMPT),
])

podcast_script_prompt = ChatPromptTemplate.from_messages([
    ("user", PODCAST_SCRIPT_PROMPT),
])

topic_suggestions_prompt = ChatPromptTemplate.from_messages([
    ("user", TOPIC_SUGGESTIONS_PROMPT),
])

podcast_summary_prompt = ChatPromptTemplate.from_messages([
    ("user", PODCAST_SUMMARY_PROMPT),
])
