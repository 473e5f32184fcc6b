"""Podcast episode configuration."""

from pydantic import BaseModel, Field

from main.state import Speaker


class PodcastConfig(BaseModel):
    """Configuration for a single generated episode."""

    tone: str = Field(
        default="Lively and insightful",
        description="Overall tone of the conversation"
    )
    hosts: list[Speaker] = Field(
        default_factory=list,
        description="Speakers acting as hosts; everyone else in the roster is a guest"
    )
    includeStatBot: bool = Field(
        default=False,
        description="Whether the 'AI StatBot' chimes in with short facts"
    )

    def is_host(self, speaker: Speaker) -> bool:
        """Return True if ``speaker`` (matched on id and name) is one of the hosts."""
        return any(h.id == speaker.id and h.name == speaker.name for h in self.hosts)
