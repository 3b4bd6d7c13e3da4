import logging
from typing import Any, Callable, Optional, Protocol, Sequence

from langchain_core.messages import BaseMessage

from agrishield.core.config import settings
from agrishield.core.genai_client import get_chat_model
from agrishield.models.chat import CompletionParameters

logger = logging.getLogger(__name__)

ChatModelFactory = Callable[..., Any]

_chat_provider: Optional["ChatCompletionProvider"] = None


class UpstreamError(Exception):
    """The model provider failed to produce a completion."""


class ChatCompletionProvider(Protocol):
    async def complete(
        self, messages: Sequence[BaseMessage], parameters: CompletionParameters
    ) -> str: ...


def default_completion_parameters() -> CompletionParameters:
    return CompletionParameters(
        model=settings.CHAT_MODEL,
        temperature=settings.CHAT_TEMPERATURE,
        max_output_tokens=settings.CHAT_MAX_OUTPUT_TOKENS,
    )


def message_text(message: Any) -> str:
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        text_items: list[str] = []
        for block in content:
            if isinstance(block, str):
                text_items.append(block)
            elif isinstance(block, dict) and block.get("type", "text") == "text":
                text_items.append(block.get("text") or "")
        return "".join(text_items)
    return ""


class GenAIChatProvider:
    def __init__(self, model_factory: ChatModelFactory = get_chat_model):
        self._model_factory = model_factory

    async def complete(
        self, messages: Sequence[BaseMessage], parameters: CompletionParameters
    ) -> str:
        try:
            chat_model = self._model_factory(
                model=parameters.model,
                temperature=parameters.temperature,
                max_output_tokens=parameters.max_output_tokens,
            )
            result = await chat_model.ainvoke(list(messages))
        except Exception as e:
            logger.debug("Chat model %s failed", parameters.model, exc_info=True)
            raise UpstreamError(str(e)) from e
        return message_text(result)


def get_chat_provider() -> ChatCompletionProvider:
    global _chat_provider
    if _chat_provider is None:
        _chat_provider = GenAIChatProvider()
    return _chat_provider
