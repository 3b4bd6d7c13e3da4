from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
)

from .config import settings

CHAT_SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_LOW_AND_ABOVE,
}


def get_chat_model(model: str | None = None, **kwargs) -> ChatGoogleGenerativeAI:
    """Gemini chat model; unspecified options come from the chat settings."""
    if "api_key" not in kwargs:
        kwargs.setdefault("google_api_key", settings.GEMINI_API_KEY)
    kwargs.setdefault("temperature", settings.CHAT_TEMPERATURE)
    kwargs.setdefault("max_output_tokens", settings.CHAT_MAX_OUTPUT_TOKENS)
    kwargs.setdefault("safety_settings", CHAT_SAFETY_SETTINGS)
    return ChatGoogleGenerativeAI(model=model or settings.CHAT_MODEL, **kwargs)
