"""Profile endpoint."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from cvchat.api.schemas import ProfileResponse
from cvchat.db import get_db
from cvchat.db.store import get_profile

router = APIRouter()


def load_profile(db: Session, profile_id: str | None = None) -> ProfileResponse:
    """Fetch a profile (default when no id) or raise 404."""
    profile = get_profile(db, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="CV profile not found")
    return ProfileResponse.model_validate(profile)


@router.get("", response_model=ProfileResponse)
def get_cv_profile(
    profile_id: str | None = None,
    db: Session = Depends(get_db),
):
    """Get the CV profile."""
    return load_profile(db, profile_id)
