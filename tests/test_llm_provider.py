import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage, HumanMessage

from agrishield.models.chat import CompletionParameters
from agrishield.services.llm_provider import (
    GenAIChatProvider,
    UpstreamError,
    default_completion_parameters,
    message_text,
)

PARAMETERS = CompletionParameters(
    model="test-model", temperature=0.7, max_output_tokens=1000
)


class ExplodingChatModel:
    async def ainvoke(self, messages):
        raise RuntimeError("quota exceeded")


async def test_complete_returns_model_text():
    requested = {}

    def factory(**kwargs):
        requested.update(kwargs)
        return FakeListChatModel(responses=["Plant Swarna Sub1."])

    provider = GenAIChatProvider(model_factory=factory)
    text = await provider.complete([HumanMessage(content="hi")], PARAMETERS)

    assert text == "Plant Swarna Sub1."
    assert requested == {
        "model": "test-model",
        "temperature": 0.7,
        "max_output_tokens": 1000,
    }


async def test_complete_wraps_provider_errors():
    provider = GenAIChatProvider(model_factory=lambda **kwargs: ExplodingChatModel())

    with pytest.raises(UpstreamError) as exc_info:
        await provider.complete([HumanMessage(content="hi")], PARAMETERS)

    assert str(exc_info.value) == "quota exceeded"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


async def test_complete_wraps_model_construction_errors():
    def factory(**kwargs):
        raise ValueError("invalid api key")

    provider = GenAIChatProvider(model_factory=factory)

    with pytest.raises(UpstreamError, match="invalid api key"):
        await provider.complete([HumanMessage(content="hi")], PARAMETERS)


@pytest.mark.parametrize(
    "message, expected",
    [
        (AIMessage(content="plain"), "plain"),
        (
            AIMessage(
                content=[
                    {"type": "text", "text": "Sow "},
                    {"type": "thinking", "thinking": "..."},
                    {"type": "text", "text": "in June."},
                ]
            ),
            "Sow in June.",
        ),
        (AIMessage(content=""), ""),
    ],
)
def test_message_text(message, expected):
    assert message_text(message) == expected


def test_default_completion_parameters_follow_settings():
    parameters = default_completion_parameters()

    assert parameters.temperature == 0.7
    assert parameters.max_output_tokens == 1000
    assert parameters.model
