"""Google Gemini text completion through the google-generativeai SDK."""

import logging
from typing import Any, Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from google.api_core import retry as google_retry

from matchai.config import AppConfig, is_ai_configured

logger = logging.getLogger("matchai.ai")

# Throttling and transient server errors are retried until the call timeout.
RETRYABLE_ERRORS = (
    google_exceptions.ResourceExhausted,
    google_exceptions.ServiceUnavailable,
    google_exceptions.InternalServerError,
)


class AIUnavailableError(RuntimeError):
    """The external AI capability is not configured."""


class AIResponseError(RuntimeError):
    """The external AI call failed or returned an unusable response."""


class GeminiClient:
    """Sends a prompt to Gemini and returns the generated text.

    Instances are callable so they can be injected wherever a
    ``complete(prompt) -> str`` strategy is expected.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash",
        timeout: float = 30.0,
        temperature: float = 0.4,
        generative_model: Optional[Any] = None,
    ):
        if not api_key:
            raise AIUnavailableError("Google AI API key not configured")
        self.model = model
        self.timeout = timeout
        self.temperature = temperature

        if generative_model is None:
            genai.configure(api_key=api_key)
            generative_model = genai.GenerativeModel(
                model,
                generation_config={"temperature": temperature},
            )
        self._model = generative_model

    @classmethod
    def from_config(cls, config: AppConfig) -> "GeminiClient":
        if not config.ai.enabled:
            raise AIUnavailableError("AI disabled in config (ai.enabled: false).")
        if not is_ai_configured(config):
            raise AIUnavailableError(
                "Google AI not configured. Set GOOGLE_AI_API_KEY to enable AI features."
            )
        return cls(
            api_key=config.api_keys.google_ai_api_key,
            model=config.ai.model,
            timeout=config.ai.timeout_seconds,
            temperature=config.ai.temperature,
        )

    def _request_options(self) -> dict:
        return {
            "timeout": self.timeout,
            "retry": google_retry.Retry(
                predicate=google_retry.if_exception_type(*RETRYABLE_ERRORS),
                initial=1.0,
                maximum=10.0,
                timeout=self.timeout,
            ),
        }

    def complete(self, prompt: str) -> str:
        """Return the model's text for `prompt`. Raises AIResponseError on failure."""
        try:
            response = self._model.generate_content(
                prompt, request_options=self._request_options()
            )
        except google_exceptions.GoogleAPIError as e:
            raise AIResponseError(f"Gemini request failed: {e}") from e

        # .text raises ValueError when the prompt was blocked or no candidate came back
        try:
            text = response.text
        except ValueError as e:
            feedback = getattr(response, "prompt_feedback", None)
            reason = getattr(feedback, "block_reason", None)
            raise AIResponseError(
                f"Gemini response had no text{f' (blocked: {reason})' if reason else ''}"
            ) from e

        if not text or not text.strip():
            raise AIResponseError("Gemini returned an empty completion")

        logger.debug("Gemini %s returned %d characters", self.model, len(text))
        return text

    __call__ = complete
