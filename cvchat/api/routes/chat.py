"""Chat endpoint for questions about the CV."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from cvchat.agents.assistant import CVAssistant, get_assistant
from cvchat.api.limiter import limiter
from cvchat.api.routes.profile import load_profile
from cvchat.api.schemas import (
    ChatHistoryResponse,
    ChatMessageResponse,
    ChatReply,
    ChatRequest,
)
from cvchat.config import settings
from cvchat.db import get_db
from cvchat.db.store import add_chat_message, list_chat_messages

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ChatReply)
@limiter.limit(settings.chat_rate_limit)
async def chat(
    request: Request,
    data: ChatRequest,
    db: Session = Depends(get_db),
    assistant: CVAssistant = Depends(get_assistant),
):
    """Ask a question about the CV and store the exchange."""
    if not data.message.strip():
        raise HTTPException(status_code=400, detail="Message is required")

    profile = load_profile(db, data.profile_id)

    response = await assistant.respond(data.message, profile.model_dump(), data.section)

    add_chat_message(db, profile.id, data.message, response, data.section)
    logger.info("Answered chat for profile %s (section=%s)", profile.id, data.section)

    return ChatReply(response=response)


@router.get("/history/{profile_id}", response_model=ChatHistoryResponse)
def get_chat_history(
    profile_id: str,
    db: Session = Depends(get_db),
):
    """Get chat history for a profile, oldest first."""
    messages = list_chat_messages(db, profile_id)
    return ChatHistoryResponse(
        profile_id=profile_id,
        messages=[ChatMessageResponse.model_validate(m) for m in messages],
    )
