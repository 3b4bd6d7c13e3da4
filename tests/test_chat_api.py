from langchain_core.messages import AIMessage, HumanMessage, SystemMessage


def test_root(api_client, provider):
    response = api_client(provider).get("/")

    assert response.status_code == 200
    assert "message" in response.json()


def test_chat_returns_model_reply(api_client, provider):
    response = api_client(provider).post(
        "/api/chat",
        json={
            "message": "Best flood-resistant rice?",
            "language": "English",
            "location": None,
            "date": "2024-06-01T00:00:00Z",
        },
    )

    assert response.status_code == 200
    assert response.json() == {"response": provider.reply}

    messages, parameters = provider.calls[0]
    assert [type(m) for m in messages] == [
        SystemMessage,
        HumanMessage,
        AIMessage,
        HumanMessage,
    ]
    assert "Current Date: Saturday, June 1, 2024" in messages[0].content
    assert "User's location is not available." in messages[0].content
    assert messages[3].content == "Best flood-resistant rice?"
    assert parameters.temperature == 0.7
    assert parameters.max_output_tokens == 1000


def test_chat_keeps_coordinates_out_of_prompt(api_client, provider):
    response = api_client(provider).post(
        "/api/chat",
        json={
            "message": "When should I sow wheat?",
            "language": "Hindi",
            "location": {"lat": 26.8467, "lon": 80.9462},
            "date": "2024-11-02T06:00:00.000Z",
        },
    )

    assert response.status_code == 200
    system_prompt = provider.calls[0][0][0].content
    assert "User's Approximate Location" in system_prompt
    assert "26.8467" not in system_prompt
    assert "80.9462" not in system_prompt
    assert provider.calls[0][0][1].content.endswith("Hindi.")


def test_chat_upstream_failure_returns_structured_error(api_client, failing_provider):
    response = api_client(failing_provider).post(
        "/api/chat",
        json={"message": "hello", "language": "English", "location": None, "date": None},
    )

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to get response from AI",
        "details": "quota exceeded",
    }


def test_chat_unexpected_failure_returns_structured_error(api_client, make_provider):
    provider = make_provider(error=RuntimeError("boom"))

    response = api_client(provider).post("/api/chat", json={"message": "hello"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to get response from AI",
        "details": "boom",
    }


def test_chat_empty_completion_uses_placeholder(api_client, make_provider):
    provider = make_provider(reply="")

    response = api_client(provider).post("/api/chat", json={"message": "hello"})

    assert response.status_code == 200
    assert response.json() == {"response": "No response generated"}


def test_chat_defaults_for_missing_fields(api_client, provider):
    response = api_client(provider).post("/api/chat", json={"message": "hi"})

    assert response.status_code == 200
    messages, _ = provider.calls[0]
    assert "Current Date: Not available" in messages[0].content
    assert messages[1].content.endswith("English.")


def test_chat_allows_any_origin(api_client, provider):
    response = api_client(provider).options(
        "/api/chat",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in {
        "*",
        "http://localhost:5173",
    }


def test_chat_rejects_out_of_range_coordinates(api_client, provider):
    response = api_client(provider).post(
        "/api/chat",
        json={"message": "hello", "location": {"lat": 95.0, "lon": 77.0}},
    )

    assert response.status_code == 422
    assert provider.calls == []
