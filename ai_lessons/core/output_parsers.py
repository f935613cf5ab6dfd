"""
Structured output parsers.

List, mapping and fixed-schema record parsers built on LangChain core output
parsers. Each exposes the format instructions embedded in the prompt and
raises MalformedOutputError when the reply does not follow them. Nothing is
retried or repaired.

Dependencies: langchain_core.output_parsers, pydantic
System role: Reply parsing for the structured output lesson
"""

import logging
from typing import Any, Generic, TypeVar

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import (
    JsonOutputParser,
    NumberedListOutputParser,
    PydanticOutputParser,
)
from pydantic import BaseModel

from ai_lessons.core.exceptions import MalformedOutputError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# An item must start its own line, so "in 1999. They" is not a list
ITEM_PATTERN = r"(?m)^[ \t]*\d+\.[ \t]+(.+)$"

MAP_FORMAT_INSTRUCTIONS = (
    "Your response should be a single JSON object (RFC 8259) mapping keys to values. "
    "Do not include any explanations, only provide the JSON object without deviation. "
    "Do not wrap the JSON in markdown code fences."
)


class ListOutputParser:
    """Parse a numbered list (``1. foo``) into its items."""

    def __init__(self) -> None:
        self._parser = NumberedListOutputParser(pattern=ITEM_PATTERN)

    @property
    def format_instructions(self) -> str:
        return self._parser.get_format_instructions()

    def parse(self, text: str) -> list[str]:
        """
        Parse numbered list items in order.

        Raises:
            MalformedOutputError: When no numbered item is found
        """
        items = [item.strip() for item in self._parser.parse(text) if item.strip()]
        if not items:
            logger.warning("Reply is not a numbered list: %r", text[:100])
            raise MalformedOutputError("Expected a numbered list", output=text)
        return items


class MapOutputParser:
    """Parse a JSON object, optionally fenced in markdown."""

    def __init__(self) -> None:
        self._parser = JsonOutputParser()

    @property
    def format_instructions(self) -> str:
        return MAP_FORMAT_INSTRUCTIONS

    def parse(self, text: str) -> dict[str, Any]:
        """
        Parse a JSON object.

        Raises:
            MalformedOutputError: When the reply is not JSON or not an object
        """
        try:
            result = self._parser.parse(text)
        except OutputParserException as e:
            raise MalformedOutputError(f"Expected a JSON object: {e}", output=text) from e
        if not isinstance(result, dict):
            raise MalformedOutputError(
                f"Expected a JSON object, got {type(result).__name__}",
                output=text,
            )
        return result


class RecordOutputParser(Generic[T]):
    """Parse JSON into a fixed pydantic schema."""

    def __init__(self, model: type[T]) -> None:
        self._model = model
        self._parser = PydanticOutputParser(pydantic_object=model)

    @property
    def format_instructions(self) -> str:
        return self._parser.get_format_instructions()

    def parse(self, text: str) -> T:
        """
        Parse and validate a record.

        Raises:
            MalformedOutputError: When the reply does not match the schema
        """
        try:
            return self._parser.parse(text)
        except OutputParserException as e:
            raise MalformedOutputError(
                f"Expected a {self._model.__name__} record: {e}",
                output=text,
            ) from e
