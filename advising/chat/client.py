"""
Advisor chat client.

Posts a conversation to the Anthropic Messages API. Failures come back as
an assistant message so the chat transcript can show them inline.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    CHAT_API_URL,
    CHAT_API_VERSION,
    CHAT_MAX_TOKENS,
    CHAT_MODEL,
    CHAT_TIMEOUT_SECONDS,
    chat_api_key,
)

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    "I need an Anthropic API key to respond. Set the ANTHROPIC_API_KEY "
    "environment variable and try again. You can get a key at console.anthropic.com."
)
EMPTY_REPLY_MESSAGE = "Sorry, I could not generate a response."


def create_session() -> requests.Session:
    """
    Session for the chat endpoint.

    Nothing is retried: a failed request is reported to the student, who
    can ask again. Error responses are returned, not raised.
    """
    session = requests.Session()
    session.mount("https://", HTTPAdapter(max_retries=Retry(total=0, raise_on_status=False)))
    return session


@dataclass
class ChatMessage:
    role: str       # "user" or "assistant"
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


class AdvisorChatClient:
    """
    Thin blocking client for the advisor chat.

    One send() per question. Anything that fails is shown to the student,
    who can ask again.

    Usage:
        client = AdvisorChatClient()
        reply = client.send(history, "What should I take this summer?",
                            system_prompt=build_system_prompt(profile, progress))
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = CHAT_MODEL,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.session = session or create_session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "anthropic-version": CHAT_API_VERSION,
        })

    def _key(self) -> str:
        return self.api_key or chat_api_key()

    def send(self, history: list, text: str, system_prompt: str = "") -> Optional[ChatMessage]:
        """
        Send one user message with the prior conversation.

        Args:
            history: Earlier ChatMessage objects, oldest first
            text: The new user message
            system_prompt: Student context, see build_system_prompt

        Returns:
            The assistant's reply, or an assistant message describing the
            failure; None if text is blank (nothing is sent)
        """
        if not text or not text.strip():
            return None

        api_key = self._key()
        if not api_key:
            return ChatMessage("assistant", MISSING_KEY_MESSAGE)

        messages = [m.to_dict() for m in history]
        messages.append(ChatMessage("user", text.strip()).to_dict())
        payload = {
            "model": self.model,
            "max_tokens": CHAT_MAX_TOKENS,
            "system": system_prompt,
            "messages": messages,
        }

        try:
            resp = self.session.post(
                CHAT_API_URL,
                json=payload,
                headers={"x-api-key": api_key},
                timeout=CHAT_TIMEOUT_SECONDS,
            )
            if not resp.ok:
                raise requests.HTTPError(f"{resp.status_code}: {resp.text}", response=resp)
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Advisor chat request failed: %s", e)
            return ChatMessage(
                "assistant",
                f"Something went wrong: {e}\n\nMake sure your API key is valid and try again.",
            )

        content = data.get("content") if isinstance(data, dict) else None
        content = content or []
        reply = content[0].get("text") if content and isinstance(content[0], dict) else None
        return ChatMessage("assistant", reply or EMPTY_REPLY_MESSAGE)
