"""
Agents for CV Chat.

- prompts: system prompt and profile context builders
- assistant: chat responses, fallbacks and suggestions
"""

from cvchat.agents.assistant import CVAssistant, get_assistant

__all__ = ["CVAssistant", "get_assistant"]
