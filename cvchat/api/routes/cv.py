"""CV import endpoints (markdown body or uploaded file)."""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from sqlalchemy.orm import Session

from cvchat.api.limiter import limiter
from cvchat.api.schemas import ParseRequest, ProfileResponse
from cvchat.config import settings
from cvchat.db import get_db
from cvchat.db.store import update_profile
from cvchat.tools.pdf_parser import SUPPORTED_SUFFIXES, DocumentReadError, extract_document_text
from cvchat.utils.markdown_parser import parse_markdown

logger = logging.getLogger(__name__)

router = APIRouter()


def import_markdown(db: Session, content: str, profile_id: str | None = None) -> ProfileResponse:
    """Parse a markdown CV and merge it into a stored profile."""
    parsed = parse_markdown(content)
    profile_id = profile_id or settings.default_profile_id

    profile = update_profile(db, profile_id, parsed.to_fields())
    if not profile:
        raise HTTPException(status_code=404, detail="CV profile not found")

    logger.info(
        "Imported CV into profile %s: %d experience entries, %d skills",
        profile.id,
        len(profile.experience or []),
        len(profile.skills or []),
    )
    return ProfileResponse.model_validate(profile)


@router.post("/parse", response_model=ProfileResponse)
@limiter.limit(settings.parse_rate_limit)
async def parse_cv(
    request: Request,
    data: ParseRequest,
    db: Session = Depends(get_db),
):
    """Parse markdown and update the profile with the result."""
    if not data.markdown_content:
        raise HTTPException(status_code=400, detail="Markdown content is required")

    return import_markdown(db, data.markdown_content, data.profile_id)


@router.post("/upload", response_model=ProfileResponse)
@limiter.limit(settings.parse_rate_limit)
async def upload_cv(
    request: Request,
    file: UploadFile = File(...),
    profile_id: str | None = Form(None),
    db: Session = Depends(get_db),
):
    """Upload a CV file (markdown, text or PDF) and update the profile."""
    if not file.filename or Path(file.filename).suffix.lower() not in SUPPORTED_SUFFIXES:
        raise HTTPException(status_code=400, detail="Only markdown, text or PDF files are supported")

    content = await file.read()
    if len(content) > settings.max_upload_size:
        raise HTTPException(status_code=413, detail="File too large. Maximum size is 5 MB.")

    try:
        text = extract_document_text(file.filename, content)
    except DocumentReadError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not text.strip():
        raise HTTPException(status_code=400, detail="File appears to be empty or unreadable")

    return import_markdown(db, text, profile_id)
