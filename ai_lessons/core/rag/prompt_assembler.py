"""
RAG prompt assembly.

Joins retrieved chunk texts with a newline in retrieval order and fills the
{input} and {documents} slots of the RAG prompt template. When the joined
text exceeds ``max_context_chars`` the lowest-ranked chunks are dropped whole
until it fits.

Dependencies: langchain_core.prompts, ai_lessons.core.prompts
System role: Prompt construction for the RAG lesson
"""

import logging

from langchain_core.prompts import PromptTemplate

from ai_lessons.core.exceptions import InvalidArgumentError
from ai_lessons.core.prompts.john_prompts import RAG_PROMPT
from ai_lessons.models.chunk import Chunk

logger = logging.getLogger(__name__)

SEPARATOR = "\n"


class PromptAssembler:
    """Merge a query and retrieved chunks into a prompt."""

    def __init__(
        self,
        template: PromptTemplate = RAG_PROMPT,
        max_context_chars: int = 12000,
    ) -> None:
        """
        Initialize assembler.

        Args:
            template: Template with {input} and {documents} slots
            max_context_chars: Bound on the joined documents and on the query

        Raises:
            InvalidArgumentError: When the template lacks a required slot
        """
        missing = {"input", "documents"} - set(template.input_variables)
        if missing:
            raise InvalidArgumentError(
                f"Prompt template is missing slots: {sorted(missing)}",
                field="template",
            )
        if max_context_chars <= 0:
            raise InvalidArgumentError("max_context_chars must be positive", field="max_context_chars")

        self._template = template
        self._max_context_chars = max_context_chars

    def join_documents(self, chunks: list[Chunk]) -> str:
        """
        Join chunk texts in order, keeping the longest prefix within the bound.

        Args:
            chunks: Retrieved chunks, best first

        Returns:
            str: Newline-joined chunk texts
        """
        kept: list[str] = []
        length = 0
        for chunk in chunks:
            added = len(chunk.content) + (len(SEPARATOR) if kept else 0)
            if length + added > self._max_context_chars:
                break
            kept.append(chunk.content)
            length += added

        dropped = len(chunks) - len(kept)
        if dropped:
            logger.warning(
                "Dropped %d of %d retrieved chunks to fit max_context_chars=%d",
                dropped, len(chunks), self._max_context_chars,
            )
        return SEPARATOR.join(kept)

    def assemble(self, query: str, chunks: list[Chunk]) -> str:
        """
        Render the prompt for a query and its retrieved chunks.

        Args:
            query: User question
            chunks: Retrieved chunks, best first

        Returns:
            str: Rendered prompt text

        Raises:
            InvalidArgumentError: When the query itself exceeds the bound
        """
        if len(query) > self._max_context_chars:
            raise InvalidArgumentError(
                f"query exceeds {self._max_context_chars} characters",
                field="query",
            )
        return self._template.format(input=query, documents=self.join_documents(chunks))
