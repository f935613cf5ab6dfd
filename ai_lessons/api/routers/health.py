"""
Health check API endpoints.

Routes: GET /health, GET /health/vector-store

Dependencies: ai_lessons.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ai_lessons.api.deps import get_rag_pipeline
from ai_lessons.core.rag.index_builder import IndexState
from ai_lessons.core.rag.pipeline import RagPipeline


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/vector-store", response_model=HealthResponse)
async def health_check_vector_store(
    pipeline: RagPipeline = Depends(get_rag_pipeline),
) -> HealthResponse:
    """Vector index readiness check."""
    if pipeline.state is IndexState.READY:
        return HealthResponse(status="healthy", message=f"Vector index ready ({len(pipeline.index)} entries)")
    return HealthResponse(status="unavailable", message=f"Vector index {pipeline.state.value}")
