"""
Gemini client for training plan generation.

The prompt is sent once; errors are translated into PlanGenerationError
subclasses carrying an HTTP status code and are never retried here.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are an expert Hyrox coach and training plan designer with deep "
    "knowledge of functional fitness, endurance training, and race-specific "
    "preparation. You create highly personalized, progressive training plans "
    "that help athletes achieve their Hyrox race goals.\n\n"
    "Generate a complete, week-by-week Hyrox training plan in HTML format. "
    "The plan should be detailed, specific, and actionable. Use the exact "
    "HTML structure provided in the prompt."
)


# =============================================================================
# Exceptions
# =============================================================================

class PlanGenerationError(Exception):
    """Base LLM error."""

    status_code = 500
    error = "Failed to generate training plan"

    def __init__(self, message: str, details: str = ""):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message, "details": self.details}


class LLMAuthError(PlanGenerationError):
    """API key missing or rejected."""
    status_code = 401


class LLMRateLimitError(PlanGenerationError):
    """Quota exceeded."""
    status_code = 429


class LLMModelUnavailableError(PlanGenerationError):
    """Model name unknown or model temporarily unavailable."""
    status_code = 503


class LLMResponseError(PlanGenerationError):
    """Model answered without usable text."""
    status_code = 502


# =============================================================================
# Client
# =============================================================================

@dataclass(frozen=True)
class GeminiConfig:
    """Explicit model settings for one client."""

    api_key: Optional[str]
    model_name: str = "gemini-1.5-flash"
    temperature: float = 0.7
    top_k: int = 40
    top_p: float = 0.95
    max_output_tokens: int = 8192

    def generation_config(self) -> dict:
        return {
            "temperature": self.temperature,
            "top_k": self.top_k,
            "top_p": self.top_p,
            "max_output_tokens": self.max_output_tokens,
        }


def translate_error(error: Exception, model_name: str) -> PlanGenerationError:
    """Map a google-api-core exception to a PlanGenerationError."""
    message = str(error)

    if isinstance(error, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied)):
        return LLMAuthError(
            "Gemini API key is invalid or missing",
            "Check that GEMINI_API_KEY is set correctly",
        )
    if isinstance(error, google_exceptions.ResourceExhausted) or "quota" in message.lower():
        return LLMRateLimitError(
            "API quota exceeded",
            "Gemini API quota has been exceeded. Check your API usage limits.",
        )
    if isinstance(error, google_exceptions.InvalidArgument) and "API_KEY" in message:
        return LLMAuthError(
            "Gemini API key is invalid or missing",
            "Check that GEMINI_API_KEY is set correctly",
        )
    if isinstance(error, (google_exceptions.NotFound, google_exceptions.ServiceUnavailable)):
        return LLMModelUnavailableError(
            f"Model {model_name} is not available",
            message,
        )
    return PlanGenerationError(message or "Unknown error")


class GeminiClient:
    """Generates plan HTML with a Gemini model.

    google-generativeai keeps the API key in module-global state, so the
    key is set once here; build one client per process.
    """

    def __init__(self, config: GeminiConfig):
        self.config = config
        self.model: Optional["genai.GenerativeModel"] = None
        if config.api_key:
            genai.configure(api_key=config.api_key)
            self.model = genai.GenerativeModel(
                model_name=config.model_name,
                generation_config=config.generation_config(),
            )

    async def generate(self, prompt: str) -> str:
        """Send the prompt and return the generated text.

        Raises:
            PlanGenerationError: On any API failure or empty response.
        """
        if self.model is None:
            logger.error("GEMINI_API_KEY is not set")
            raise LLMAuthError("API key not configured", "Server configuration error")

        full_prompt = f"{SYSTEM_INSTRUCTION}\n\n{prompt}"
        logger.info(
            f"Generating plan with {self.config.model_name}, "
            f"prompt length {len(full_prompt)}"
        )

        try:
            response = await self.model.generate_content_async(full_prompt)
        except google_exceptions.GoogleAPIError as e:
            logger.error(f"Gemini API error: {e}")
            raise translate_error(e, self.config.model_name) from e

        try:
            text = response.text
        except ValueError as e:
            # Raised when the candidate was blocked or has no parts
            logger.warning(f"Gemini returned no text: {e}")
            raise LLMResponseError("Model returned no content", str(e)) from e

        if not text or not text.strip():
            raise LLMResponseError("Model returned no content")
        return text
