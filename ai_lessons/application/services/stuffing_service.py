"""
Prompt stuffing lesson.

Places the whole content of a packaged text file into the prompt as context.

Dependencies: ai_lessons.boundary.llm, ai_lessons.core.prompts
System role: Service layer for the prompt stuffing endpoint
"""

import logging
from pathlib import Path

from ai_lessons.boundary.llm.completion_client import CompletionClient
from ai_lessons.core.exceptions import ResourceNotFoundError
from ai_lessons.core.prompts.john_prompts import STUFFING_PROMPT

logger = logging.getLogger(__name__)


class StuffingService:
    """Answer a fixed question with a whole document as context."""

    def __init__(self, completion_client: CompletionClient, context_path: Path | str) -> None:
        """
        Initialize stuffing service.

        Args:
            completion_client: Chat completion client
            context_path: Text file stuffed into the prompt
        """
        self._completion = completion_client
        self._context_path = Path(context_path)

    def answer(self) -> str:
        """
        Ask the stuffing question.

        Raises:
            ResourceNotFoundError: When the context file is missing
        """
        if not self._context_path.is_file():
            raise ResourceNotFoundError(
                f"Context file not found: {self._context_path}",
                location=str(self._context_path),
            )
        context = self._context_path.read_text(encoding="utf-8")
        logger.info(f"{__name__}:answer - context_len={len(context)}")
        return self._completion.complete(STUFFING_PROMPT.invoke({"context": context}))
