"""Prompt templates for every lesson."""

from ai_lessons.core.prompts.chat_prompts import DAD_JOKE_PROMPT, DAD_PROMPT, YOUTUBE_PROMPT
from ai_lessons.core.prompts.john_prompts import RAG_PROMPT, STUFFING_PROMPT
from ai_lessons.core.prompts.songs_prompts import (
    SONGS_LIST_PROMPT,
    SONGS_MAP_PROMPT,
    SONGS_RECORD_PROMPT,
)

__all__ = [
    "DAD_JOKE_PROMPT",
    "DAD_PROMPT",
    "RAG_PROMPT",
    "SONGS_LIST_PROMPT",
    "SONGS_MAP_PROMPT",
    "SONGS_RECORD_PROMPT",
    "STUFFING_PROMPT",
    "YOUTUBE_PROMPT",
]
