"""Suggested questions per CV section."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cvchat.agents.assistant import CVAssistant, get_assistant
from cvchat.api.routes.profile import load_profile
from cvchat.api.schemas import SuggestionsResponse
from cvchat.db import get_db

router = APIRouter()


@router.get("/{section}", response_model=SuggestionsResponse)
def get_suggestions(
    section: str,
    profile_id: str | None = None,
    db: Session = Depends(get_db),
    assistant: CVAssistant = Depends(get_assistant),
):
    """Quick prompts for a section; unknown sections get generic ones."""
    profile = load_profile(db, profile_id)
    return SuggestionsResponse(
        section=section,
        suggestions=assistant.suggestions(section, profile.model_dump()),
    )
