"""
FastAPI application with assembled routers.

Initializes FastAPI app with all lesson routers and configures uvicorn server.

Dependencies: fastapi, ai_lessons.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from ai_lessons import __version__
from ai_lessons.api.deps.dependencies import get_rag_pipeline, get_service_cache
from ai_lessons.observability import configure_logging
from ai_lessons.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    chat_router,
    health_router,
    prompts_router,
    rag_router,
    songs_router,
    stuffing_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds or loads the vector index before serving, through the same
    pipeline provider the routes resolve. Failures propagate so the server
    refuses to start.
    """
    cache = get_service_cache()
    configure_logging(cache.settings.log_level)
    logger = logging.getLogger("uvicorn")

    # Startup
    logger.info("Preparing vector index...")
    pipeline = app.dependency_overrides.get(get_rag_pipeline, get_rag_pipeline)()
    index = await run_in_threadpool(pipeline.build_index)
    logger.info(f"Vector index ready with {len(index)} entries")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="AI Lessons API",
        description="Chat, prompt templating, structured output, prompt stuffing and RAG lessons",
        version=__version__,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")
    app.include_router(prompts_router, prefix="/api/v1")
    app.include_router(songs_router, prefix="/api/v1")
    app.include_router(stuffing_router, prefix="/api/v1")
    app.include_router(rag_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "ai_lessons.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
