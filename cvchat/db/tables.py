"""Database table models."""

import uuid
from datetime import UTC, datetime

from sqlalchemy import JSON, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cvchat.db.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(UTC)


class CVProfile(Base):
    """A CV presented through the chat interface."""

    __tablename__ = "cv_profiles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    name: Mapped[str] = mapped_column(String(255))
    title: Mapped[str] = mapped_column(String(255))
    location: Mapped[str | None] = mapped_column(String(255), default="")
    bio: Mapped[str | None] = mapped_column(Text, default="")
    profile_image: Mapped[str | None] = mapped_column(Text, default=None)
    experience: Mapped[list] = mapped_column(JSON, default=list)  # List of ExperienceEntry dicts
    skills: Mapped[list] = mapped_column(JSON, default=list)
    certificates: Mapped[list] = mapped_column(JSON, default=list)
    languages: Mapped[list] = mapped_column(JSON, default=list)  # List of LanguageEntry dicts
    memberships: Mapped[list] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    messages: Mapped[list["ChatMessage"]] = relationship(
        back_populates="profile", order_by="ChatMessage.timestamp"
    )


class ChatMessage(Base):
    """One question/answer exchange about a profile."""

    __tablename__ = "chat_messages"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    profile_id: Mapped[str] = mapped_column(ForeignKey("cv_profiles.id"))
    message: Mapped[str] = mapped_column(Text)
    response: Mapped[str] = mapped_column(Text)
    section: Mapped[str | None] = mapped_column(String(50), default=None)
    timestamp: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    profile: Mapped["CVProfile"] = relationship(back_populates="messages")
