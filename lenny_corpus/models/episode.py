"""Models for loaded episodes and search results."""

from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class Episode:
    """A single loaded episode transcript.

    Attributes:
        guest: The display name of the guest.
        content: The transcript body, without the metadata block.
        path: The transcript file the episode was loaded from.
    """

    guest: str
    content: str
    path: str


@dataclass(frozen=True)
class SearchResult:
    """An episode that matched a search, with the text surrounding the match.

    Attributes:
        guest: The display name of the guest.
        path: The transcript file of the episode.
        snippet: The excerpt around the earliest match.
        timestamp: The HH:MM:SS offset closest to the match, if the transcript has one.
    """

    guest: str
    path: str
    snippet: str
    timestamp: str | None = None
