"""Profile store: CV profiles and their chat history."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.orm import Session

from cvchat.config import settings
from cvchat.db.tables import ChatMessage, CVProfile
from cvchat.utils.markdown_parser import DEFAULT_NAME, DEFAULT_TITLE

logger = logging.getLogger(__name__)

PROFILE_FIELDS = (
    "name",
    "title",
    "location",
    "bio",
    "profile_image",
    "experience",
    "skills",
    "certificates",
    "languages",
    "memberships",
)

# Sample CV shown until a real one is imported
DEFAULT_PROFILE: dict[str, Any] = {
    "name": "John Anderson",
    "title": "Senior Software Engineer",
    "location": "San Francisco, CA",
    "bio": (
        "Experienced software engineer with 8+ years in full-stack development, "
        "specializing in React, Node.js, and cloud technologies. Passionate about "
        "building scalable applications and leading development teams."
    ),
    "profile_image": (
        "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d"
        "?auto=format&fit=crop&w=150&h=150"
    ),
    "experience": [
        {
            "title": "Senior Software Engineer",
            "company": "TechCorp",
            "period": "2021-Present",
            "description": (
                "Led development of React-based dashboard serving 50K+ users, implementing "
                "Redux for state management and optimizing performance with React.memo and "
                "lazy loading. Reduced application load time by 40% through code splitting."
            ),
        },
        {
            "title": "Full Stack Developer",
            "company": "StartupXYZ",
            "period": "2019-2021",
            "description": (
                "Built and maintained multiple web applications using Node.js, Express, and "
                "React. Implemented CI/CD pipelines and automated testing strategies."
            ),
        },
    ],
    "skills": [
        "React", "Node.js", "TypeScript", "Python", "AWS",
        "Docker", "PostgreSQL", "Redux", "Next.js", "Tailwind CSS",
    ],
    "certificates": [
        "AWS Certified Developer",
        "React Professional Certificate",
        "Node.js Application Developer",
    ],
    "languages": [
        {"name": "English", "level": "Native", "context": "Native speaker"},
        {
            "name": "Spanish",
            "level": "Conversational",
            "context": "Learned through travel and practice over 5 years",
        },
        {"name": "French", "level": "Basic", "context": "Self-taught using online resources"},
    ],
    "memberships": ["IEEE Computer Society", "React Developer Community", "Node.js Foundation"],
}


def _profile_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Keep only columns a caller may set."""
    return {key: value for key, value in fields.items() if key in PROFILE_FIELDS}


def get_profile(db: Session, profile_id: str | None = None) -> CVProfile | None:
    """Get a profile by id, or the default profile when no id is given."""
    return db.get(CVProfile, profile_id or settings.default_profile_id)


def create_profile(db: Session, fields: dict[str, Any], profile_id: str | None = None) -> CVProfile:
    """Create a profile, filling in defaults for missing fields."""
    values = {
        "name": DEFAULT_NAME,
        "title": DEFAULT_TITLE,
        "location": "",
        "bio": "",
        "experience": [],
        "skills": [],
        "certificates": [],
        "languages": [],
        "memberships": [],
    }
    values.update(_profile_fields(fields))

    profile = CVProfile(**values)
    if profile_id:
        profile.id = profile_id
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def update_profile(db: Session, profile_id: str, fields: dict[str, Any]) -> CVProfile | None:
    """Merge fields into an existing profile. Returns None if the id is unknown."""
    profile = db.get(CVProfile, profile_id)
    if not profile:
        return None

    for key, value in _profile_fields(fields).items():
        setattr(profile, key, value)

    profile.updated_at = datetime.now(UTC)
    db.commit()
    db.refresh(profile)
    return profile


def list_chat_messages(db: Session, profile_id: str) -> list[ChatMessage]:
    """Chat history for a profile, oldest first."""
    return (
        db.query(ChatMessage)
        .filter(ChatMessage.profile_id == profile_id)
        .order_by(ChatMessage.timestamp)
        .all()
    )


def add_chat_message(
    db: Session,
    profile_id: str,
    message: str,
    response: str,
    section: str | None = None,
) -> ChatMessage:
    chat_message = ChatMessage(
        profile_id=profile_id,
        message=message,
        response=response,
        section=section,
    )
    db.add(chat_message)
    db.commit()
    db.refresh(chat_message)
    return chat_message


def seed_default_profile(db: Session) -> CVProfile:
    """Insert the sample profile under the default id if it is missing."""
    profile = get_profile(db)
    if profile is None:
        logger.info("Seeding default profile %s", settings.default_profile_id)
        profile = create_profile(db, DEFAULT_PROFILE, profile_id=settings.default_profile_id)
    return profile
