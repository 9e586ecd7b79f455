from __future__ import annotations

import logging

import vertexai
from vertexai.generative_models import GenerationConfig, GenerativeModel

from ..errors import GenerationNetworkError, GenerationParseError

logger = logging.getLogger(__name__)


class VertexAIBackend:
    """Hosted text generation through Vertex AI Gemini models."""

    name = "vertex"

    def __init__(
        self,
        *,
        project_id: str,
        location: str = "asia-northeast1",
        model_name: str = "gemini-1.5-pro",
        temperature: float = 0.7,
        max_output_tokens: int = 2048,
        model: GenerativeModel | None = None,
    ) -> None:
        """Initialize the Vertex AI backend.

        Args:
            project_id: GCP project ID
            location: Vertex AI location
            model_name: Model name (e.g., "gemini-1.5-pro")
            temperature: Sampling temperature (0.0 - 1.0)
            max_output_tokens: Maximum output tokens
            model: Pre-built model, mainly for tests
        """
        self.project_id = project_id
        self.location = location
        self.model_name = model_name
        self.generation_config = GenerationConfig(
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )

        if model is None:
            vertexai.init(project=project_id, location=location)
            model = GenerativeModel(model_name)
        self.model = model

    async def complete(self, prompt: str) -> str:
        """Generate free-form text for a prompt.

        Args:
            prompt: Input prompt

        Returns:
            Generated text
        """
        try:
            response = await self.model.generate_content_async(
                f"{prompt}\n\nPlease respond with valid JSON only.",
                generation_config=self.generation_config,
            )
        except Exception as exc:
            raise GenerationNetworkError(f"Vertex AI request failed: {exc}") from exc

        try:
            generated_text = response.text
        except ValueError as exc:
            # Raised by the SDK when the candidate was blocked or empty.
            raise GenerationParseError("Vertex AI returned no text candidate") from exc

        logger.info(
            "Generated content with Vertex AI",
            extra={
                "model": self.model_name,
                "input_length": len(prompt),
                "output_length": len(generated_text),
            },
        )
        return generated_text

    async def check_availability(self) -> bool:
        return self.model is not None


__all__ = ["VertexAIBackend"]
