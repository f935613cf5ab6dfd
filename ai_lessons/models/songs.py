"""
Song lookup models for the structured output lesson.

Dependencies: pydantic
System role: Fixed-schema record parsed from model output
"""

from pydantic import BaseModel, Field


class ArtistSongs(BaseModel):
    """An artist and a selection of their songs."""

    artist: str = Field(description="Name of the artist")
    songs: list[str] = Field(description="Titles of songs by the artist")
