"""
Chat API endpoint.

Routes: GET /chat - Dad joke from a fixed prompt

Dependencies: ai_lessons.application.services.chat_service
System role: Plain chat HTTP API
"""

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from ai_lessons.api.deps import get_chat_service
from ai_lessons.api.error_handling import handle_lesson_errors
from ai_lessons.application.services.chat_service import ChatService

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("", response_class=PlainTextResponse)
@handle_lesson_errors
async def dad_joke(chat_service: ChatService = Depends(get_chat_service)) -> str:
    """Tell a dad joke."""
    return await run_in_threadpool(chat_service.tell_dad_joke)
