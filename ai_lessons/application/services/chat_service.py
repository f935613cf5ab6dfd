"""
Chat and prompt template lessons.

Dependencies: ai_lessons.boundary.llm, ai_lessons.core.prompts
System role: Service layer for the plain chat and templating endpoints
"""

import logging

from ai_lessons.boundary.llm.completion_client import CompletionClient
from ai_lessons.core.exceptions import InvalidArgumentError
from ai_lessons.core.prompts.chat_prompts import DAD_JOKE_PROMPT, DAD_PROMPT, YOUTUBE_PROMPT

logger = logging.getLogger(__name__)


class ChatService:
    """Send fixed and templated prompts to the chat model."""

    def __init__(self, completion_client: CompletionClient) -> None:
        self._completion = completion_client

    def tell_dad_joke(self) -> str:
        """Ask the model for a dad joke."""
        return self._completion.complete(DAD_JOKE_PROMPT)

    def youtubers(self, genre: str) -> str:
        """
        Ask for popular YouTubers in a genre.

        Args:
            genre: Genre substituted into the template

        Returns:
            str: Model reply

        Raises:
            InvalidArgumentError: When genre is blank
        """
        if not genre or not genre.strip():
            raise InvalidArgumentError("genre must not be empty", field="genre")
        prompt = YOUTUBE_PROMPT.invoke({"genre": genre.strip()})
        return self._completion.complete(prompt)

    def dad_persona(self) -> str:
        """Send a system message and a user message that tries to derail it."""
        return self._completion.complete(DAD_PROMPT.invoke({}))
