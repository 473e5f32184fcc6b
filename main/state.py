from typing import List
from pydantic import BaseModel, ConfigDict, Field

# ---- Participants ----
class Speaker(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable speaker identifier")
    name: str = Field(..., description="Display name used in the transcript")

# ---- Match Models ----
class MatchData(BaseModel):
    """A completed match as returned by the match fetcher."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Slug like 'ind-vs-aus-1st-t20i-2025'")
    matchTitle: str = Field(..., description="Human readable match title")
    venue: str = Field(..., description="Ground and city")
    result: str = Field(..., description="Outcome of the match")
    scoreSummary: str = Field(..., description="Compact scorecard summary")
    topPerformers: List[str] = Field(..., description="Standout performances, best first")

# ---- Transcript Models ----
class TranscriptMessage(BaseModel):
    """A single line of podcast dialogue.

    ``speaker`` is a participant name or one of the sentinel roles
    ("BREAK", "Announcer", "AI StatBot"). ``line`` opens with an emotion cue
    such as ``[excited]``.
    """
    speaker: str = Field(..., description="Speaker name or sentinel role")
    line: str = Field(..., description="Spoken line, starting with a bracketed emotion cue")
