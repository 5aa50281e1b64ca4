"""
Homework Helper Agent

Free-form homework chat, optionally with a photo of the problem:
1. Rejects empty turns before any network call
2. Builds the chat request (images force the PRO tier)
3. Returns the model's text, or a placeholder when it says nothing

``ChatSession`` keeps the append-only transcript for one session.
"""

import logging

from acebuddy.agents.capabilities import ImageSource, SpeechToText
from acebuddy.errors import PreconditionError
from acebuddy.prompts.builder import build_chat_prompt, build_quick_question_prompt
from acebuddy.schemas.base import ModelTier, Sender
from acebuddy.schemas.chat import ChatMessage, ImageInput
from acebuddy.utils.gemini_client import AIClient, get_gemini_client
from acebuddy.utils.validation import CHAT_PLACEHOLDER, normalize_text

logger = logging.getLogger(__name__)

CHAT_LEAD = "Failed to get AI response."
EMPTY_MESSAGE = "Please type a question or attach an image (text or image required)."


class HomeworkHelperAgent:
    """Answers homework questions."""

    def __init__(self, gemini_client: AIClient | None = None) -> None:
        self._client = gemini_client or get_gemini_client()

    async def chat(
        self,
        text: str,
        image: ImageInput | None = None,
        tier: ModelTier = ModelTier.FAST,
    ) -> str:
        """
        Answer one homework message.

        Raises:
            PreconditionError: If there is neither text nor an image
            TransportError: If the AI call fails
        """
        if not (text and text.strip()) and image is None:
            raise PreconditionError(EMPTY_MESSAGE)

        logger.info(f"Homework chat turn (image={image is not None}, tier={tier.value})")
        request = build_chat_prompt(text, image=image, tier=tier)
        reply = await self._client.call(request, lead=CHAT_LEAD)
        return normalize_text(reply, CHAT_PLACEHOLDER)

    async def quick_question(self, question: str) -> str:
        """Answer one of the canned starter questions."""
        if not question.strip():
            raise PreconditionError(EMPTY_MESSAGE)
        reply = await self._client.call(build_quick_question_prompt(question), lead=CHAT_LEAD)
        return normalize_text(reply, CHAT_PLACEHOLDER)


class ChatSession:
    """
    One homework-help conversation.

    The user's message is recorded before the call; the AI reply is recorded
    only when the call succeeds.
    """

    def __init__(self, agent: HomeworkHelperAgent | None = None) -> None:
        self._agent = agent or HomeworkHelperAgent()
        self._messages: list[ChatMessage] = []

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    async def send(
        self,
        text: str,
        image: ImageInput | None = None,
        tier: ModelTier = ModelTier.FAST,
    ) -> ChatMessage:
        if not (text and text.strip()) and image is None:
            raise PreconditionError(EMPTY_MESSAGE)

        self._messages.append(ChatMessage(
            sender=Sender.USER,
            text=text,
            image_url=image.to_data_url() if image is not None else None,
        ))
        reply = await self._agent.chat(text, image=image, tier=tier)
        return self._append_reply(reply)

    async def ask_quick_question(self, question: str) -> ChatMessage:
        self._messages.append(ChatMessage(sender=Sender.USER, text=question))
        reply = await self._agent.quick_question(question)
        return self._append_reply(reply)

    async def send_from(
        self,
        speech: SpeechToText | None = None,
        image_source: ImageSource | None = None,
        text: str = "",
        tier: ModelTier = ModelTier.FAST,
    ) -> ChatMessage:
        """Send a turn assembled from platform capabilities."""
        if speech is not None:
            text = await speech.speech_to_text()
        image = await image_source.image_to_bytes() if image_source is not None else None
        return await self.send(text, image=image, tier=tier)

    def _append_reply(self, reply: str) -> ChatMessage:
        message = ChatMessage(sender=Sender.AI, text=reply)
        self._messages.append(message)
        return message


async def run_chat(
    text: str,
    image: ImageInput | None = None,
    tier: ModelTier = ModelTier.FAST,
) -> str:
    """Convenience function for one homework chat turn."""
    agent = HomeworkHelperAgent()
    return await agent.chat(text, image=image, tier=tier)
