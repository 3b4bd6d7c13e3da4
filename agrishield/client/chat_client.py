import asyncio
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

import httpx

from agrishield.client.models import Attachment, Message
from agrishield.core.config import settings
from agrishield.models.chat import ChatRequest, ChatResponse, Location

logger = logging.getLogger(__name__)

GREETING_TEXT = (
    "Namaste! I'm your AgriShield AI. I can analyze your soil, predict weather "
    "risks, and suggest crops. How can I help your farm today?"
)
FALLBACK_REPLY_TEXT = (
    "I'm having trouble connecting to the satellite. "
    "Please check your internet connection."
)

SUGGESTED_QUESTIONS = (
    "Best flood-resistant rice?",
    "Will it rain tomorrow?",
    "Current Wheat prices?",
)

SUPPORTED_LANGUAGES = {
    "En": "English",
    "Hi": "Hindi",
    "Ta": "Tamil",
}
DEFAULT_LANGUAGE = "English"


def compose_outbound_text(text: str, attachments: Sequence[Attachment]) -> str:
    """Message text sent to the backend. Attachment names are listed, file
    contents are never sent."""
    message_text = text.strip()
    if attachments:
        file_names = ", ".join(attachment.name for attachment in attachments)
        suffix = f"[Attached files: {file_names}]"
        message_text = f"{message_text}\n{suffix}" if message_text else suffix
    return message_text


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ChatClient:
    """Transcript and staging state for one chat session.

    Only one exchange runs at a time: ``send_turn`` is ignored while a reply
    is pending.
    """

    def __init__(
        self,
        base_url: str | None = None,
        language: str = DEFAULT_LANGUAGE,
        location: Location | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = (base_url or settings.BACKEND_URL).rstrip("/")
        self.language = language
        self.location = location
        self.is_typing = False
        self._messages: list[Message] = [Message(text=GREETING_TEXT, is_bot=True)]
        self._attachments: list[Attachment] = []
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient()

    async def __aenter__(self) -> "ChatClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def attachments(self) -> tuple[Attachment, ...]:
        return tuple(self._attachments)

    @property
    def suggested_questions(self) -> tuple[str, ...]:
        if len(self._messages) <= 2 and not self.is_typing:
            return SUGGESTED_QUESTIONS
        return ()

    def set_language(self, language: str) -> None:
        self.language = SUPPORTED_LANGUAGES.get(language, language)

    def set_location(self, location: Location | dict | None) -> None:
        if isinstance(location, dict):
            location = Location.model_validate(location)
        self.location = location

    async def attach_files(self, *paths: str | Path) -> list[Attachment]:
        """Stage files for the next turn. Nothing is staged unless every
        file exists and every image preview could be read."""
        new_attachments = [Attachment.from_path(path) for path in paths]
        for attachment in new_attachments:
            if not attachment.path.is_file():
                raise FileNotFoundError(f"No such file: '{attachment.path}'")
        await asyncio.gather(
            *(attachment.load_preview() for attachment in new_attachments)
        )
        self._attachments.extend(new_attachments)
        return new_attachments

    def remove_attachment(self, index: int) -> None:
        if 0 <= index < len(self._attachments):
            del self._attachments[index]

    def can_send(self, text: str) -> bool:
        return bool(text.strip() or self._attachments) and not self.is_typing

    async def send_turn(self, text: str) -> Optional[Message]:
        """Run one exchange and return the bot turn it produced.

        Returns ``None`` without touching the transcript when there is nothing
        to send or another exchange is still pending.
        """
        if not self.can_send(text):
            return None

        staged = [attachment.model_copy() for attachment in self._attachments]
        self._messages.append(
            Message(
                text=text.strip(),
                is_bot=False,
                attachments=tuple(staged) if staged else None,
            )
        )
        self._attachments.clear()
        self.is_typing = True

        payload = ChatRequest(
            message=compose_outbound_text(text, staged),
            language=self.language,
            location=self.location,
            date=iso_timestamp(),
        )
        try:
            reply_text = await self._post_chat(payload)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Chat request to %s failed: %s", self.base_url, e)
            reply_text = FALLBACK_REPLY_TEXT
        finally:
            self.is_typing = False

        bot_message = Message(text=reply_text, is_bot=True)
        self._messages.append(bot_message)
        return bot_message

    async def _post_chat(self, payload: ChatRequest) -> str:
        response = await self._http_client.post(
            f"{self.base_url}/api/chat",
            json=payload.model_dump(mode="json"),
        )
        response.raise_for_status()
        return ChatResponse.model_validate(response.json()).response
