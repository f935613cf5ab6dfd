"""
Prompt template API endpoints.

Routes:
- GET /prompts/youtube?genre= - Template with one slot
- GET /prompts/dad - System message plus user message

Dependencies: ai_lessons.application.services.chat_service
System role: Prompt templating HTTP API
"""

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from ai_lessons.api.deps import get_chat_service
from ai_lessons.api.error_handling import handle_lesson_errors
from ai_lessons.application.services.chat_service import ChatService

router = APIRouter(prefix="/prompts", tags=["prompts"])


@router.get("/youtube", response_class=PlainTextResponse)
@handle_lesson_errors
async def youtube(
    genre: str = Query(description="Genre of YouTube channels"),
    chat_service: ChatService = Depends(get_chat_service),
) -> str:
    """List popular YouTubers for a genre."""
    return await run_in_threadpool(chat_service.youtubers, genre)


@router.get("/dad", response_class=PlainTextResponse)
@handle_lesson_errors
async def dad(chat_service: ChatService = Depends(get_chat_service)) -> str:
    """Ask the dad persona about the Hundred Years' War."""
    return await run_in_threadpool(chat_service.dad_persona)
