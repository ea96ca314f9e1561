"""
Prompts for the CV assistant.

The assistant speaks about the profile owner in third person. A section hint
narrows both the system prompt focus and the profile context sent with the
question.
"""

from typing import Any

SECTION_FOCUS = {
    "bio": "Focus on personal background, career overview, and professional summary.",
    "experience": "Emphasize work history, responsibilities, achievements, and career progression.",
    "skills": "Highlight technical abilities, proficiency levels, and practical applications.",
    "certificates": "Detail certifications, their relevance, and professional value.",
    "languages": "Explain language skills, proficiency levels, and how they were acquired.",
    "memberships": "Describe professional affiliations and their significance.",
}

BASE_PROMPT = """You are an AI assistant specializing in presenting professional CV information. You represent {name}, a {title} based in {location}.

Your role is to provide accurate, professional, and engaging responses about their background, experience, and qualifications. Always speak in third person when referring to {name}.

Key guidelines:
- Be professional but conversational
- Provide specific details when available
- Format responses with clear structure when appropriate
- Use bullet points or numbered lists for multiple items
- Include relevant context and achievements
- Be enthusiastic about their accomplishments"""


def build_system_prompt(profile: dict[str, Any], section: str | None = None) -> str:
    prompt = BASE_PROMPT.format(
        name=profile.get("name", ""),
        title=profile.get("title", ""),
        location=profile.get("location") or "",
    )
    if section:
        focus = SECTION_FOCUS.get(section, "General CV information")
        return f"{prompt}\n\nCurrent focus: {focus}"
    return prompt


def _experience_lines(profile: dict[str, Any], inline: bool) -> str:
    lines = []
    for exp in profile.get("experience") or []:
        head = f"• {exp['title']} at {exp['company']} ({exp['period']})"
        if inline:
            lines.append(f"{head} - {exp['description']}")
        else:
            lines.append(f"{head}\n  {exp['description']}")
    return "\n".join(lines)


def _language_lines(profile: dict[str, Any]) -> str:
    return "\n".join(
        f"• {lang['name']}: {lang['level']} - {lang['context']}"
        for lang in profile.get("languages") or []
    )


def _joined(profile: dict[str, Any], field: str) -> str:
    return ", ".join(profile.get(field) or [])


def build_section_context(profile: dict[str, Any], section: str | None = None) -> str:
    """Profile excerpt for one section, or the full profile."""
    if section == "bio":
        return f"Biography: {profile.get('bio') or ''}"
    if section == "experience":
        return f"Work Experience:\n{_experience_lines(profile, inline=False)}"
    if section == "skills":
        return f"Technical Skills: {_joined(profile, 'skills')}"
    if section == "certificates":
        return f"Certifications: {_joined(profile, 'certificates')}"
    if section == "languages":
        return f"Languages:\n{_language_lines(profile)}"
    if section == "memberships":
        return f"Professional Memberships: {_joined(profile, 'memberships')}"
    return build_full_context(profile)


def build_full_context(profile: dict[str, Any]) -> str:
    return f"""
Complete Professional Profile for {profile.get('name', '')}:

Title: {profile.get('title', '')}
Location: {profile.get('location') or ''}

Biography: {profile.get('bio') or ''}

Experience:
{_experience_lines(profile, inline=True)}

Skills: {_joined(profile, 'skills')}

Certifications: {_joined(profile, 'certificates')}

Languages:
{_language_lines(profile)}

Memberships: {_joined(profile, 'memberships')}
"""


def build_user_prompt(message: str, profile: dict[str, Any], section: str | None = None) -> str:
    return f"{build_section_context(profile, section)}\n\nUser question: {message}"
