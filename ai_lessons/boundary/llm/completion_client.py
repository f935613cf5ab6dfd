"""
Chat completion client.

Sends a prompt (plain text, rendered PromptValue or message list) to a
LangChain chat model and returns the reply text.

Dependencies: langchain_core, ai_lessons.boundary.llm.upstream
System role: CompletionService used by every lesson
"""

import logging

from langchain_core.language_models import BaseChatModel, LanguageModelInput
from langchain_core.output_parsers import StrOutputParser

from ai_lessons.boundary.llm.upstream import call_with_timeout

logger = logging.getLogger(__name__)


class CompletionClient:
    """Thin wrapper around a chat model with timeout and error mapping."""

    def __init__(self, model: BaseChatModel, timeout_seconds: float = 60.0) -> None:
        """
        Initialize completion client.

        Args:
            model: Any LangChain chat model
            timeout_seconds: Maximum wait for one completion
        """
        self._model = model
        self._timeout = timeout_seconds
        self._parser = StrOutputParser()

    def complete(self, prompt: LanguageModelInput) -> str:
        """
        Send prompt to the model and return its text reply.

        Args:
            prompt: Prompt text, PromptValue or list of messages

        Returns:
            str: Model reply content

        Raises:
            UpstreamServiceError: When the model call fails or times out
        """
        message = call_with_timeout(
            self._model.invoke,
            prompt,
            timeout=self._timeout,
            operation="complete",
        )
        content = self._parser.invoke(message)
        logger.debug(f"{__name__}:complete - reply_len={len(content)}")
        return content
