"""
Prompt stuffing API endpoint.

Routes: GET /stuffing - Answer with a whole document as context

Dependencies: ai_lessons.application.services.stuffing_service
System role: Prompt stuffing HTTP API
"""

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from ai_lessons.api.deps import get_stuffing_service
from ai_lessons.api.error_handling import handle_lesson_errors
from ai_lessons.application.services.stuffing_service import StuffingService

router = APIRouter(prefix="/stuffing", tags=["stuffing"])


@router.get("", response_class=PlainTextResponse)
@handle_lesson_errors
async def stuffed_answer(
    stuffing_service: StuffingService = Depends(get_stuffing_service),
) -> str:
    """Ask who The Word is, with John 1 stuffed into the prompt."""
    return await run_in_threadpool(stuffing_service.answer)
