import pytest
from types import SimpleNamespace
from fastapi.testclient import TestClient

from genai_learning.api.dependencies import get_model_client
from genai_learning.llm.client import GeminiClient
from genai_learning.main import app


@pytest.fixture
def fake_api_key():
    return "fake-gemini-key"


@pytest.fixture
def fake_model_client(mocker):
    """Stand-in for the shared GeminiClient"""
    model_client = mocker.Mock(spec=GeminiClient)
    model_client.generate = mocker.AsyncMock(
        return_value="# Intro\n* learn fast\n1. Do the exercise")
    return model_client


@pytest.fixture
def client(fake_model_client):
    app.dependency_overrides[get_model_client] = lambda: fake_model_client
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


def _response(text="Sure, let's learn!", block_reason=None, finish_reason=None):
    """Build an object shaped like a google-genai GenerateContentResponse"""
    return SimpleNamespace(
        text=text,
        prompt_feedback=SimpleNamespace(block_reason=block_reason),
        candidates=[SimpleNamespace(finish_reason=finish_reason)],
    )


@pytest.fixture
def make_response():
    return _response


@pytest.fixture
def mock_genai_client(mocker):
    """Mock google.genai.Client completely"""
    sdk_client = mocker.Mock()
    sdk_client.aio.models.generate_content = mocker.AsyncMock(
        return_value=_response())

    mocker.patch("genai_learning.llm.client.genai.Client",
                 return_value=sdk_client)
    return sdk_client
