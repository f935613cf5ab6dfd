"""
Vector index builder.

Usage:
    python -m ai_lessons.scripts.build_index
    python -m ai_lessons.scripts.build_index --rebuild

Builds the persisted vector index from the data directory, or loads and
reports the existing one. Exits non-zero when the index cannot be prepared.

Dependencies: ai_lessons.core.rag, ai_lessons.configs
System role: CLI helper to prepare the vector index before serving
"""

import logging
import sys

from ai_lessons.configs import get_settings
from ai_lessons.core.exceptions import AILessonsException
from ai_lessons.core.rag.pipeline import create_rag_pipeline
from ai_lessons.observability import configure_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    configure_logging(settings.log_level)

    if "--rebuild" in args and settings.rag.vectorstore.exists():
        logger.info(f"Removing existing index: {settings.rag.vectorstore}")
        settings.rag.vectorstore.unlink()

    try:
        pipeline = create_rag_pipeline(settings)
        index = pipeline.build_index()
    except AILessonsException as e:
        logger.error(f"Index build failed: {e}")
        return 1

    logger.info(
        f"Index ready at {settings.rag.vectorstore}: "
        f"{len(index)} entries, dimension={index.dimension}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
