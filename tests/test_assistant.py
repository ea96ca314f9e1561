import asyncio

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from conftest import FailingChatModel, RecordingChatModel
from cvchat.agents import assistant as assistant_module
from cvchat.agents.assistant import (
    DEFAULT_SUGGESTIONS,
    NO_RESPONSE,
    CVAssistant,
    LLMUnavailableError,
    build_suggestions,
    create_chat_model,
    fallback_response,
)
from cvchat.agents.prompts import build_section_context, build_system_prompt
from cvchat.db.store import DEFAULT_PROFILE


@pytest.fixture
def profile():
    return dict(DEFAULT_PROFILE)


def test_model_answer_returned(profile):
    bot = CVAssistant(model=FakeListChatModel(responses=["John leads dashboard work."]))
    assert asyncio.run(bot.respond("What does John do?", profile)) == "John leads dashboard work."


def test_prompts_carry_section_focus(profile):
    model = RecordingChatModel("ok")
    asyncio.run(CVAssistant(model=model).respond("Which skills?", profile, "skills"))

    system, human = model.calls[0]
    assert "John Anderson, a Senior Software Engineer based in San Francisco, CA" in system.content
    assert "Current focus: Highlight technical abilities" in system.content
    assert human.content.startswith("Technical Skills: React, Node.js")
    assert human.content.endswith("User question: Which skills?")


def test_empty_model_answer_gets_apology(profile):
    bot = CVAssistant(model=RecordingChatModel(""))
    assert asyncio.run(bot.respond("hi", profile)) == NO_RESPONSE


def test_upstream_failure_falls_back(profile):
    bot = CVAssistant(model=FailingChatModel())
    reply = asyncio.run(bot.respond("Tell me about their work history", profile))
    assert reply.startswith("John Anderson has extensive experience")
    assert "Led development of React-based dashboard" in reply


def test_missing_api_key_falls_back(monkeypatch, profile):
    monkeypatch.setattr(assistant_module.settings, "deepseek_api_key", "")
    with pytest.raises(LLMUnavailableError):
        create_chat_model()
    reply = asyncio.run(CVAssistant().respond("Any technical skills?", profile))
    assert "React, Node.js, TypeScript, Python, AWS, and more" in reply


def test_fallback_keywords_beat_section_hint(profile):
    reply = fallback_response("Which languages?", profile, section="skills")
    assert "English (Native), Spanish (Conversational), French (Basic)" in reply
    assert reply.endswith("Native speaker")


def test_fallback_uses_section_hint(profile):
    assert "multilingual" in fallback_response("hello", profile, section="languages")
    assert "skill set" in fallback_response("hello", profile, section="skills")


def test_fallback_default_and_empty_profile(profile):
    assert "Senior Software Engineer with 2+ years" in fallback_response("hello", profile)

    bare = {"name": "Ann", "title": "Dev", "experience": [], "skills": [], "languages": []}
    assert "leading technical initiatives" in fallback_response("experience?", bare)
    assert "international environments" in fallback_response("languages?", bare)


def test_suggestions(profile):
    bio = build_suggestions("bio", profile)
    assert bio[0] == "What makes John Anderson unique as a Senior Software Engineer?"
    assert len(build_suggestions("memberships", profile)) == 3
    assert build_suggestions("hobbies", profile) == DEFAULT_SUGGESTIONS


def test_unknown_section_prompt_and_context(profile):
    assert build_system_prompt(profile, "hobbies").endswith("Current focus: General CV information")
    full = build_section_context(profile, "hobbies")
    assert "Complete Professional Profile for John Anderson" in full
    assert "• Full Stack Developer at StartupXYZ (2019-2021) - Built" in full
