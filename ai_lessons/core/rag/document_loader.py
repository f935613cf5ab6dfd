"""
Plain-text document loader.

Reads every file matching a glob pattern under the data directory and wraps
it as a Document carrying its filename as metadata.

Dependencies: pathlib, ai_lessons.models.document
System role: First stage of the RAG ingestion pipeline
"""

import logging
from pathlib import Path

from ai_lessons.core.exceptions import ResourceNotFoundError
from ai_lessons.models.document import Document

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Load text resources from a directory."""

    def __init__(self, data_dir: Path | str, pattern: str = "*.txt", encoding: str = "utf-8") -> None:
        """
        Initialize loader.

        Args:
            data_dir: Directory containing source documents
            pattern: Glob pattern relative to data_dir
            encoding: Text encoding of the files
        """
        self._data_dir = Path(data_dir)
        self._pattern = pattern
        self._encoding = encoding

    @property
    def location(self) -> str:
        """Directory and pattern as a single string."""
        return str(self._data_dir / self._pattern)

    def load(self) -> list[Document]:
        """
        Load all matching documents ordered by filename.

        Returns:
            list[Document]: Loaded documents

        Raises:
            ResourceNotFoundError: When the directory is missing or nothing matches
        """
        if not self._data_dir.is_dir():
            raise ResourceNotFoundError(
                f"Document directory does not exist: {self._data_dir}",
                location=self.location,
            )

        paths = sorted(
            (path for path in self._data_dir.glob(self._pattern) if path.is_file()),
            key=lambda path: path.relative_to(self._data_dir).as_posix(),
        )
        if not paths:
            raise ResourceNotFoundError(
                f"No documents match {self.location}",
                location=self.location,
            )

        documents = [self._read(path) for path in paths]
        logger.info("Loaded data files: %s", [doc.filename for doc in documents])
        return documents

    def _read(self, path: Path) -> Document:
        filename = path.relative_to(self._data_dir).as_posix()
        return Document(
            filename=filename,
            content=path.read_text(encoding=self._encoding),
            metadata={"filename": filename, "source": str(path)},
        )
