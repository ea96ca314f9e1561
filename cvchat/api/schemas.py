"""API request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from cvchat.models import CVSection, ExperienceEntry, LanguageEntry


# Profile schemas
class ProfileResponse(BaseModel):
    id: str
    name: str
    title: str
    location: str | None
    bio: str | None
    profile_image: str | None
    experience: list[ExperienceEntry]
    skills: list[str]
    certificates: list[str]
    languages: list[LanguageEntry]
    memberships: list[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SectionListResponse(BaseModel):
    sections: list[CVSection]


# Chat schemas
class ChatRequest(BaseModel):
    message: str = ""
    section: str | None = Field(default=None, description="Section id to focus on")
    profile_id: str | None = None


class ChatReply(BaseModel):
    response: str


class ChatMessageResponse(BaseModel):
    id: str
    message: str
    response: str
    section: str | None
    timestamp: datetime

    class Config:
        from_attributes = True


class ChatHistoryResponse(BaseModel):
    profile_id: str
    messages: list[ChatMessageResponse]


# CV import
class ParseRequest(BaseModel):
    markdown_content: str = ""
    profile_id: str | None = None


class SuggestionsResponse(BaseModel):
    section: str
    suggestions: list[str]
