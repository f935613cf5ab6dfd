"""
Token-window chunker.

Splits documents into chunks of at most ``chunk_size`` tokens by greedy
accumulation over the token sequence, so chunk boundaries always fall between
tokens. Uses LangChain's token splitting helper on top of a tiktoken encoding.

Dependencies: langchain_text_splitters, tiktoken, ai_lessons.models.chunk
System role: Second stage of the RAG ingestion pipeline
"""

import functools
import hashlib
import logging
from typing import Protocol

import tiktoken
from langchain_text_splitters.base import Tokenizer, split_text_on_tokens

from ai_lessons.core.exceptions import InvalidArgumentError
from ai_lessons.models.chunk import Chunk
from ai_lessons.models.document import Document

logger = logging.getLogger(__name__)


class TextEncoding(Protocol):
    """Anything that maps text to token ids and back."""

    def encode(self, text: str) -> list[int]: ...

    def decode(self, tokens: list[int]) -> str: ...


class TokenChunker:
    """Split documents into fixed-size token chunks."""

    def __init__(
        self,
        chunk_size: int = 300,
        encoding_name: str = "cl100k_base",
        encoding: TextEncoding | None = None,
    ) -> None:
        """
        Initialize chunker.

        Args:
            chunk_size: Maximum tokens per chunk
            encoding_name: tiktoken encoding, used when encoding is None
            encoding: Explicit encoding (encode/decode pair)

        Raises:
            InvalidArgumentError: When chunk_size is not positive
        """
        if chunk_size <= 0:
            raise InvalidArgumentError("chunk_size must be positive", field="chunk_size")

        self._chunk_size = chunk_size
        self._encoding_name = encoding_name
        self._encoding = encoding
        self._tokenizer: Tokenizer | None = None

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def _get_tokenizer(self) -> Tokenizer:
        if self._tokenizer is None:
            if self._encoding is not None:
                encode = self._encoding.encode
                decode = self._encoding.decode
            else:
                encoding = tiktoken.get_encoding(self._encoding_name)
                # Special-token text in documents is ordinary text here
                encode = functools.partial(encoding.encode, disallowed_special=())
                decode = encoding.decode
            self._tokenizer = Tokenizer(
                chunk_overlap=0,
                tokens_per_chunk=self._chunk_size,
                decode=decode,
                encode=encode,
            )
        return self._tokenizer

    def split_text(self, text: str) -> list[str]:
        """
        Split one text into stripped, non-empty chunk texts.

        Args:
            text: Text to split

        Returns:
            list[str]: Chunk texts in document order
        """
        pieces = split_text_on_tokens(text=text, tokenizer=self._get_tokenizer())
        return [piece.strip() for piece in pieces if piece.strip()]

    def chunk(self, documents: list[Document]) -> list[Chunk]:
        """
        Split documents into chunks.

        Args:
            documents: Loaded documents

        Returns:
            list[Chunk]: Flat list of chunks, document order then position
        """
        chunks: list[Chunk] = []
        for document in documents:
            for index, text in enumerate(self.split_text(document.content)):
                chunks.append(
                    Chunk(
                        id=self._generate_chunk_id(document.filename, index, text),
                        content=text,
                        index=index,
                        document_id=document.filename,
                        metadata=dict(document.metadata),
                    )
                )

        logger.info("Number of split chunks: %d", len(chunks))
        return chunks

    def _generate_chunk_id(self, document_id: str, index: int, content: str) -> str:
        """
        Generate deterministic chunk ID.

        Returns:
            str: SHA-256 hash prefix of document id, position and content
        """
        hash_input = f"{document_id}:{index}:{content}"
        return hashlib.sha256(hash_input.encode()).hexdigest()[:16]
