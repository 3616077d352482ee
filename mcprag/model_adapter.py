"""OpenAI completion model adapter."""

from typing import Protocol, runtime_checkable

from openai import APIError, AsyncOpenAI

from .config import config

logger = config.get_logger(__name__)


@runtime_checkable
class CompletionModel(Protocol):
    """Completion capability the orchestrator dispatches prompts to."""

    async def complete(self, prompt: str) -> str:
        """Return the model's text for ``prompt``."""
        ...


class OpenAICompletionAdapter:
    """Sends prompts to an OpenAI-compatible ``/completions`` endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        """Initialize the adapter with a fixed model and temperature.

        Args:
            api_key: OpenAI API key. If None,
                reads from OPENAI_API_KEY environment variable.
            model: Completion model name. If None, uses config.COMPLETION_MODEL.
            temperature: Sampling temperature. If None,
                uses config.COMPLETION_TEMPERATURE.
            client: Pre-built client to share between adapters.
        """
        if client is None:
            default_headers = config.get_api_headers()
            client = AsyncOpenAI(
                api_key=api_key or config.get_openai_api_key(),
                base_url=config.OPENAI_BASE_URL,
                timeout=config.OPENAI_TIMEOUT,
                max_retries=config.OPENAI_MAX_RETRIES,
                default_headers=default_headers or None,
            )
        self.client = client
        self.model = model or config.COMPLETION_MODEL
        self.temperature = (
            temperature if temperature is not None else config.COMPLETION_TEMPERATURE
        )

    async def complete(self, prompt: str) -> str:
        """Request a completion and return the first choice's text.

        Returns:
            str: The stripped text of the first choice, or an empty string
                when the endpoint returned no choices.

        Raises:
            openai.APIError: If the request fails or the response is unusable.
        """
        logger.info(
            "Requesting completion from %s (%d prompt chars)", self.model, len(prompt)
        )
        try:
            response = await self.client.completions.create(
                model=self.model,
                prompt=prompt,
                temperature=self.temperature,
            )
        except APIError:
            logger.exception("Completion request to %s failed", self.model)
            raise

        if not response.choices:
            logger.warning("Completion response from %s had no choices", self.model)
            return ""

        text = response.choices[0].text
        return text.strip() if text else ""
