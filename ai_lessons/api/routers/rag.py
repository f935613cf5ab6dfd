"""
RAG API endpoints.

Routes:
- GET /rag/search?message=&top_k= - Semantic search over the vector index
- GET /rag/ask?message=&top_k= - Answer from retrieved chunks

Dependencies: ai_lessons.core.rag.pipeline
System role: Retrieval-augmented generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from ai_lessons.api.deps import get_rag_pipeline
from ai_lessons.api.error_handling import handle_lesson_errors
from ai_lessons.core.rag.pipeline import RagPipeline
from ai_lessons.models.rag import SearchHit, SearchResponse

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Who is The Word?"

router = APIRouter(prefix="/rag", tags=["rag"])


@router.get("/search", response_model=SearchResponse)
@handle_lesson_errors
async def semantic_search(
    message: str = Query(default=DEFAULT_MESSAGE, description="Search query"),
    top_k: int | None = Query(default=None, description="Maximum number of chunks"),
    pipeline: RagPipeline = Depends(get_rag_pipeline),
) -> SearchResponse:
    """Return the chunks most similar to the message."""
    hits = await run_in_threadpool(pipeline.search_with_scores, message, top_k)
    return SearchResponse(
        query=message,
        results=[
            SearchHit(
                chunk_id=hit.chunk.id,
                content=hit.chunk.content,
                filename=hit.chunk.document_id,
                score=hit.score,
                metadata=hit.chunk.metadata,
            )
            for hit in hits
        ],
    )


@router.get("/ask", response_class=PlainTextResponse)
@handle_lesson_errors
async def ask(
    message: str = Query(default=DEFAULT_MESSAGE, description="Question"),
    top_k: int | None = Query(default=None, description="Number of chunks used as context"),
    pipeline: RagPipeline = Depends(get_rag_pipeline),
) -> str:
    """Answer the message using retrieved chunks as context."""
    return await run_in_threadpool(pipeline.ask, message, top_k)
