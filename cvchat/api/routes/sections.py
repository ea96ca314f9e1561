"""CV section metadata endpoint."""

from fastapi import APIRouter

from cvchat.api.schemas import SectionListResponse
from cvchat.models import CVSection

router = APIRouter()

CV_SECTIONS = [
    CVSection(
        id="bio",
        name="Biography",
        icon="fas fa-user",
        description="Personal overview",
        color_class="bg-primary/10 text-primary",
    ),
    CVSection(
        id="experience",
        name="Experience",
        icon="fas fa-briefcase",
        description="Work history",
        color_class="bg-accent/50 text-foreground",
    ),
    CVSection(
        id="skills",
        name="Skills",
        icon="fas fa-code",
        description="Technical abilities",
        color_class="bg-green-100 text-green-600",
    ),
    CVSection(
        id="certificates",
        name="Certificates",
        icon="fas fa-certificate",
        description="Certifications",
        color_class="bg-yellow-100 text-yellow-600",
    ),
    CVSection(
        id="languages",
        name="Languages",
        icon="fas fa-globe",
        description="Language skills",
        color_class="bg-purple-100 text-purple-600",
    ),
    CVSection(
        id="memberships",
        name="Memberships",
        icon="fas fa-users",
        description="Organizations",
        color_class="bg-blue-100 text-blue-600",
    ),
]


@router.get("", response_model=SectionListResponse)
def list_sections():
    """Fixed list of CV sections the chat can focus on."""
    return SectionListResponse(sections=CV_SECTIONS)
