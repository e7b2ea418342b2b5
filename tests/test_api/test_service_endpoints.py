from datetime import datetime

from genai_learning.llm.errors import ProviderConfigurationError


def test_health_is_ok(client, fake_model_client):
    fake_model_client.generate.side_effect = ProviderConfigurationError("down")

    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["message"] == "GenAI Learning Backend is running"
    assert body["timestamp"].endswith("Z")
    datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))
    fake_model_client.generate.assert_not_awaited()


def test_ai_check_truncates_sample(client, fake_model_client):
    fake_model_client.generate.return_value = "x" * 250

    response = client.get("/test-ai")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Gemini API connection successful",
        "sample_response": "x" * 100 + "...",
    }
    fake_model_client.generate.assert_awaited_once_with(
        "Hello, can you help me learn?")


def test_ai_check_short_sample(client, fake_model_client):
    fake_model_client.generate.return_value = "Yes!"

    response = client.get("/test-ai")

    assert response.json()["sample_response"] == "Yes!..."


def test_ai_check_failure(client, fake_model_client):
    fake_model_client.generate.side_effect = ProviderConfigurationError(
        "API key not valid")

    response = client.get("/test-ai")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Gemini API connection failed",
        "error": "API key not valid",
    }


def test_unknown_route(client):
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {
        "answer": None,
        "error": "Endpoint not found",
        "success": False,
    }


def test_wrong_method_on_known_route(client):
    response = client.get("/chat")

    assert response.status_code == 404
    assert response.json()["error"] == "Endpoint not found"


def test_cors_headers_present(client):
    response = client.get("/health", headers={"Origin": "http://localhost:3000"})

    assert response.headers["access-control-allow-origin"] == "*"
