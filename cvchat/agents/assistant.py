"""
CV Assistant.

Answers questions about a profile through the chat-completion API and
degrades to canned, keyword-driven answers when the call is not possible.
"""

from __future__ import annotations

import logging
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_deepseek import ChatDeepSeek

from cvchat.agents.prompts import build_system_prompt, build_user_prompt
from cvchat.config import settings

logger = logging.getLogger(__name__)

NO_RESPONSE = "I apologize, but I couldn't generate a response at this time."

SUGGESTIONS = {
    "bio": [
        "What makes {name} unique as a {title}?",
        "Tell me about their career journey",
        "What are their main professional interests?",
    ],
    "experience": [
        "What are their key achievements?",
        "Tell me about their leadership experience",
        "What projects have they worked on recently?",
    ],
    "skills": [
        "What are their strongest technical skills?",
        "How do they stay current with technology?",
        "What programming languages do they prefer?",
    ],
    "certificates": [
        "What certifications do they have?",
        "How do these certifications benefit their work?",
        "Are they pursuing any new certifications?",
    ],
    "languages": [
        "What languages do they speak?",
        "How did they learn these languages?",
        "How do language skills help in their career?",
    ],
    "memberships": [
        "What professional organizations are they part of?",
        "How active are they in the tech community?",
        "What networking activities do they participate in?",
    ],
}

DEFAULT_SUGGESTIONS = [
    "Tell me about their background",
    "What are their key strengths?",
    "What makes them a great candidate?",
]


class LLMUnavailableError(RuntimeError):
    """Raised when no chat model can be built from the current settings."""


def create_chat_model() -> ChatDeepSeek:
    """Build the chat model from settings."""
    if not settings.deepseek_api_key:
        raise LLMUnavailableError("DEEPSEEK_API_KEY not set")

    kwargs: dict[str, Any] = {
        "model": settings.llm_model,
        "api_key": settings.deepseek_api_key,
        "temperature": settings.llm_temperature,
        "max_tokens": settings.llm_max_tokens,
        "timeout": settings.llm_timeout,
        "max_retries": 1,
    }
    if settings.llm_base_url:
        kwargs["base_url"] = settings.llm_base_url
    return ChatDeepSeek(**kwargs)


class CVAssistant:
    """Chat about a CV profile, with a local fallback."""

    def __init__(self, model: BaseChatModel | None = None):
        self._model = model

    def _get_model(self) -> BaseChatModel:
        if self._model is None:
            self._model = create_chat_model()
        return self._model

    async def respond(self, message: str, profile: dict[str, Any], section: str | None = None) -> str:
        """
        Answer a question about the profile.

        Args:
            message: The visitor's question
            profile: Profile fields as a plain dict
            section: Optional section id narrowing the context

        Returns:
            Model answer, or a deterministic fallback if the call fails
        """
        try:
            model = self._get_model()
            result = await model.ainvoke([
                SystemMessage(content=build_system_prompt(profile, section)),
                HumanMessage(content=build_user_prompt(message, profile, section)),
            ])
        except Exception as e:
            logger.warning("Chat completion failed, using fallback: %s", e)
            return fallback_response(message, profile, section)

        content = getattr(result, "content", "")
        if not isinstance(content, str):
            content = str(content)
        return content or NO_RESPONSE

    def suggestions(self, section: str, profile: dict[str, Any]) -> list[str]:
        return build_suggestions(section, profile)


def _fallback_topic(message: str, section: str | None) -> str | None:
    lowered = message.lower()
    if "experience" in lowered or "work" in lowered:
        return "experience"
    if "skill" in lowered or "technical" in lowered:
        return "skills"
    if "language" in lowered:
        return "languages"
    return section


def fallback_response(message: str, profile: dict[str, Any], section: str | None = None) -> str:
    """Canned answer chosen by message keywords, then by section hint."""
    name = profile.get("name", "")
    title = profile.get("title", "")
    experience = profile.get("experience") or []
    skills = profile.get("skills") or []
    languages = profile.get("languages") or []

    topic = _fallback_topic(message, section)

    if topic == "experience":
        latest = experience[0]["description"] if experience else "leading technical initiatives"
        return (
            f"{name} has extensive experience in software development. Currently working as a "
            f"{title}, they have demonstrated expertise across multiple roles and technologies. "
            f"Their most recent position involves {latest}."
        )

    if topic == "skills":
        more = ", and more" if len(skills) > 5 else ""
        return (
            f"{name} possesses a strong technical skill set including: "
            f"{', '.join(skills[:5])}{more}. These skills have been developed and refined "
            "through hands-on experience in various projects and roles."
        )

    if topic == "languages":
        spoken = ", ".join(f"{lang['name']} ({lang['level']})" for lang in languages)
        context = languages[0]["context"] if languages else (
            "These language skills enhance their ability to work in diverse, "
            "international environments."
        )
        return f"{name} is multilingual with the following language capabilities: {spoken}. {context}"

    return (
        f"Thank you for your question about {name}. As a {title} with {len(experience)}+ years "
        "of experience, they bring a wealth of knowledge in software development and technical "
        "leadership. Feel free to ask about specific aspects of their background, skills, or experience."
    )


def build_suggestions(section: str, profile: dict[str, Any]) -> list[str]:
    """Three prompt suggestions for a section id."""
    templates = SUGGESTIONS.get(section)
    if templates is None:
        return list(DEFAULT_SUGGESTIONS)
    return [
        t.format(name=profile.get("name", ""), title=profile.get("title", ""))
        for t in templates
    ]


_assistant: CVAssistant | None = None


def get_assistant() -> CVAssistant:
    """Shared assistant instance (FastAPI dependency)."""
    global _assistant
    if _assistant is None:
        _assistant = CVAssistant()
    return _assistant
