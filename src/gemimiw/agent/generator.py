"""Response generation through the Anthropic API."""

import anthropic

from gemimiw.agent.prompts import build_system_prompt
from gemimiw.config import ANTHROPIC_API_KEY, ANTHROPIC_MODEL
from gemimiw.errors import GenerationError, Result
from gemimiw.logger import get_logger

logger = get_logger(__name__)

TEMPERATURE = 0.4
MAX_TOKENS = 8192


class ResponseGenerator:
    """
    Generates one reply per chat prompt.

    - Single request per call, no retries
    - Provider failures come back as ``Result(error=GenerationError)``
    """

    def __init__(
        self,
        api_key: str = ANTHROPIC_API_KEY,
        model: str = ANTHROPIC_MODEL,
    ):
        self.model = model
        self._api_key = api_key
        self._client: anthropic.AsyncAnthropic | None = None

    def _get_client(self) -> anthropic.AsyncAnthropic:
        """Get or create the API client."""
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(api_key=self._api_key)
        return self._client

    async def generate(self, rules: str | None, contexts: str, prompt: str) -> Result:
        """
        Generate a reply to ``prompt`` under a session's rules and contexts.

        Args:
            rules: The session's rules text (may be empty)
            contexts: All context snippets of the session, already joined
            prompt: The user's chat text

        Returns:
            Result whose data is the generated plain text.
        """
        system = build_system_prompt(rules, contexts)

        try:
            message = await self._get_client().messages.create(
                model=self.model,
                max_tokens=MAX_TOKENS,
                temperature=TEMPERATURE,
                system=system,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as exc:
            logger.error("Generation failed: %s", exc)
            return Result(
                error=GenerationError(
                    str(exc),
                    {"model": self.model, "provider_error": type(exc).__name__},
                )
            )

        text = "".join(block.text for block in message.content if block.type == "text").strip()
        if not text:
            logger.error("Generation returned no text (stop_reason=%s)", message.stop_reason)
            return Result(
                error=GenerationError(
                    "The model returned an empty response",
                    {"model": self.model, "stop_reason": message.stop_reason},
                )
            )

        return Result(data=text)

    async def close(self) -> None:
        """Close the API client."""
        if self._client:
            await self._client.close()
            self._client = None


# Global instance
response_generator = ResponseGenerator()


def get_generator() -> ResponseGenerator:
    """Dependency returning the process-wide generator."""
    return response_generator
