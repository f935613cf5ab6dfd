"""
Structured output lesson.

Embeds a parser's format instructions in the prompt and parses the reply as a
list, a mapping or an ArtistSongs record.

Dependencies: ai_lessons.boundary.llm, ai_lessons.core.output_parsers
System role: Service layer for the song lookup endpoints
"""

import logging
from typing import Any

from langchain_core.prompts import PromptTemplate

from ai_lessons.boundary.llm.completion_client import CompletionClient
from ai_lessons.core.exceptions import InvalidArgumentError
from ai_lessons.core.output_parsers import ListOutputParser, MapOutputParser, RecordOutputParser
from ai_lessons.core.prompts.songs_prompts import (
    SONGS_LIST_PROMPT,
    SONGS_MAP_PROMPT,
    SONGS_RECORD_PROMPT,
)
from ai_lessons.models.songs import ArtistSongs

logger = logging.getLogger(__name__)


class SongsService:
    """Ask for songs by an artist and parse the reply into a structure."""

    def __init__(self, completion_client: CompletionClient) -> None:
        self._completion = completion_client
        self._list_parser = ListOutputParser()
        self._map_parser = MapOutputParser()
        self._record_parser = RecordOutputParser(ArtistSongs)

    def songs_list(self, artist: str) -> list[str]:
        """Return song titles as an ordered list."""
        reply = self._ask(SONGS_LIST_PROMPT, artist, self._list_parser.format_instructions)
        return self._list_parser.parse(reply)

    def songs_map(self, artist: str) -> dict[str, Any]:
        """Return songs as a key-value mapping."""
        reply = self._ask(SONGS_MAP_PROMPT, artist, self._map_parser.format_instructions)
        return self._map_parser.parse(reply)

    def songs_record(self, artist: str) -> ArtistSongs:
        """Return songs as an ArtistSongs record."""
        reply = self._ask(SONGS_RECORD_PROMPT, artist, self._record_parser.format_instructions)
        return self._record_parser.parse(reply)

    def _ask(self, template: PromptTemplate, artist: str, format_instructions: str) -> str:
        if not artist or not artist.strip():
            raise InvalidArgumentError("artist must not be empty", field="artist")
        prompt = template.invoke({"artist": artist.strip(), "format": format_instructions})
        return self._completion.complete(prompt)
