"""Advisor chat: student context prompt and the Messages API client."""

from .client import AdvisorChatClient, ChatMessage
from .context import QUICK_PROMPTS, build_system_prompt

__all__ = ["AdvisorChatClient", "ChatMessage", "QUICK_PROMPTS", "build_system_prompt"]
