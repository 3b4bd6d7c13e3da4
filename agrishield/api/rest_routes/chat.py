import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from agrishield.models.chat import ChatErrorResponse, ChatRequest, ChatResponse
from agrishield.services.chat import farming_chat_service
from agrishield.services.llm_provider import (
    ChatCompletionProvider,
    UpstreamError,
    get_chat_provider,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Chat"])

UPSTREAM_FAILURE_MESSAGE = "Failed to get response from AI"


def _error_response(details: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ChatErrorResponse(
            error=UPSTREAM_FAILURE_MESSAGE, details=details
        ).model_dump(),
    )


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={500: {"model": ChatErrorResponse}},
)
async def chat(
    request: ChatRequest,
    provider: ChatCompletionProvider = Depends(get_chat_provider),
):
    """
    Answers one farmer message. Each request is independent; earlier turns
    are not sent to the model.
    """
    try:
        text = await farming_chat_service(request, provider)
    except UpstreamError as e:
        logger.error("Error with upstream model: %s", e)
        return _error_response(str(e))
    except Exception as e:
        logger.exception("Unexpected failure while answering chat message")
        return _error_response(str(e))
    return ChatResponse(response=text)
