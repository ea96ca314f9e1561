"""Structured profile records produced by the markdown parser."""

from pydantic import BaseModel


class ExperienceEntry(BaseModel):
    title: str
    company: str
    period: str
    description: str = ""


class LanguageEntry(BaseModel):
    name: str
    level: str
    context: str


class ParsedProfile(BaseModel):
    """Partial profile. Fields left as None were not produced and must not
    overwrite stored values when merged."""

    name: str | None = None
    title: str | None = None
    location: str | None = None
    bio: str | None = None
    experience: list[ExperienceEntry] | None = None
    skills: list[str] | None = None
    certificates: list[str] | None = None
    languages: list[LanguageEntry] | None = None
    memberships: list[str] | None = None

    def to_fields(self) -> dict:
        """Fields to merge into a stored profile (unset fields dropped)."""
        return self.model_dump(exclude_none=True)


class CVSection(BaseModel):
    id: str
    name: str
    icon: str
    description: str
    color_class: str
