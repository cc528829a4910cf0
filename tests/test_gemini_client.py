"""Tests for the Gemini client (SDK model mocked)."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from google.api_core import exceptions as google_exceptions

from matchai.ai.gemini_client import AIResponseError, AIUnavailableError, GeminiClient
from matchai.config import AppConfig


class BlockedResponse:
    """Mimics the SDK response whose .text accessor raises when nothing was generated."""

    def __init__(self, block_reason=None):
        self.prompt_feedback = SimpleNamespace(block_reason=block_reason)

    @property
    def text(self):
        raise ValueError("The `response.text` quick accessor requires a valid Part")


def make_client(response=None, error=None) -> tuple[GeminiClient, MagicMock]:
    model = MagicMock()
    if error:
        model.generate_content.side_effect = error
    else:
        model.generate_content.return_value = response
    return GeminiClient(api_key="k", model="gemini-1.5-flash", timeout=5, generative_model=model), model


class TestGeminiClient:
    def test_returns_text_and_sends_timeout(self):
        client, model = make_client(SimpleNamespace(text='{"ok": true}'))
        assert client.complete("hello") == '{"ok": true}'

        args, kwargs = model.generate_content.call_args
        assert args[0] == "hello"
        assert kwargs["request_options"]["timeout"] == 5
        assert "retry" in kwargs["request_options"]

    def test_callable(self):
        client, _ = make_client(SimpleNamespace(text="hi"))
        assert client("prompt") == "hi"

    def test_api_error_raises_response_error(self):
        client, _ = make_client(error=google_exceptions.DeadlineExceeded("timed out"))
        with pytest.raises(AIResponseError, match="timed out"):
            client.complete("p")

    def test_permission_denied(self):
        client, _ = make_client(error=google_exceptions.PermissionDenied("API key not valid"))
        with pytest.raises(AIResponseError, match="API key not valid"):
            client.complete("p")

    def test_blocked_prompt(self):
        client, _ = make_client(BlockedResponse(block_reason="SAFETY"))
        with pytest.raises(AIResponseError, match="SAFETY"):
            client.complete("p")

    def test_no_candidates(self):
        client, _ = make_client(BlockedResponse())
        with pytest.raises(AIResponseError, match="no text"):
            client.complete("p")

    def test_empty_completion(self):
        client, _ = make_client(SimpleNamespace(text="  "))
        with pytest.raises(AIResponseError, match="empty"):
            client.complete("p")

    def test_missing_key(self):
        with pytest.raises(AIUnavailableError):
            GeminiClient(api_key="")


class TestFromConfig:
    def test_requires_key(self):
        with pytest.raises(AIUnavailableError, match="GOOGLE_AI_API_KEY"):
            GeminiClient.from_config(AppConfig())

    def test_disabled(self):
        config = AppConfig()
        config.ai.enabled = False
        config.api_keys.google_ai_api_key = "real"
        with pytest.raises(AIUnavailableError, match="disabled"):
            GeminiClient.from_config(config)

    @patch("matchai.ai.gemini_client.genai")
    def test_builds_sdk_model(self, mock_genai):
        config = AppConfig()
        config.api_keys.google_ai_api_key = "real"
        config.ai.model = "gemini-1.5-pro"
        config.ai.temperature = 0.2

        client = GeminiClient.from_config(config)

        assert client.model == "gemini-1.5-pro"
        assert client.timeout == 30.0
        mock_genai.configure.assert_called_once_with(api_key="real")
        mock_genai.GenerativeModel.assert_called_once_with(
            "gemini-1.5-pro", generation_config={"temperature": 0.2}
        )
