from __future__ import annotations

import logging

from groq import Groq

from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are the recommendation assistant of a food ordering platform. "
    "Follow the output format requested by the user exactly."
)


class GroqTextModel:
    """Text-completion model backed by the Groq chat-completions API."""

    def __init__(self, config: LLMConfig = DEFAULT_LLM_CONFIG) -> None:
        self.config = config
        self._client: Groq | None = None

    @property
    def available(self) -> bool:
        return self.config.enabled and bool(self.config.api_key)

    def _get_client(self) -> Groq:
        if self._client is None:
            self._client = Groq(api_key=self.config.api_key, timeout=self.config.timeout)
        return self._client

    def complete(self, prompt: str) -> str:
        """
        Send ``prompt`` to the model and return its raw text answer.

        Returns an empty string when the model is disabled or has no API key.
        API errors and timeouts propagate to the caller.
        """
        if not self.available:
            logger.info("Groq LLM disabled, skipping completion")
            return ""

        response = self._get_client().chat.completions.create(
            model=self.config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
        )
        content = response.choices[0].message.content or ""
        logger.debug("Raw Groq response: %s", content)
        return content
