from agrishield.models.chat import ChatRequest, CompletionParameters
from agrishield.services.llm_provider import (
    ChatCompletionProvider,
    default_completion_parameters,
)
from agrishield.services.prompt_composer import build_model_messages

NO_RESPONSE_TEXT = "No response generated"


async def farming_chat_service(
    request: ChatRequest,
    provider: ChatCompletionProvider,
    parameters: CompletionParameters | None = None,
) -> str:
    messages = build_model_messages(
        message=request.message,
        language=request.language,
        location=request.location,
        date_value=request.date,
    )
    text = await provider.complete(
        messages, parameters or default_completion_parameters()
    )
    return text or NO_RESPONSE_TEXT
