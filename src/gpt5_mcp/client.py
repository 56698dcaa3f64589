"""OpenAI client construction."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from gpt5_mcp.errors import ConfigurationError

if TYPE_CHECKING:
    from gpt5_mcp.config import Config


class LazyOpenAIClient:
    """``AsyncOpenAI`` handle built on first use.

    The SDK refuses to construct without credentials, so building it at
    startup would stop the server when ``OPENAI_API_KEY`` is unset. Deferring
    construction to the first ``responses`` access moves that failure into
    the query call, where it is reported as an error result.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self._client: Any = None

    def _get_client(self) -> Any:
        """Lazily initialize and return the OpenAI client."""
        if self._client is None:
            try:
                from openai import AsyncOpenAI
            except ImportError as e:
                raise ConfigurationError(
                    "openai package not installed",
                    hint="pip install openai",
                ) from e
            self._client = AsyncOpenAI(
                api_key=self.config.api_key,
                max_retries=self.config.max_retries,
                timeout=httpx.Timeout(self.config.timeout_s),
            )
        return self._client

    @property
    def responses(self) -> Any:
        return self._get_client().responses

    async def aclose(self) -> None:
        """Close underlying async client resources."""
        client = self._client
        if client is None:
            return
        self._client = None
        await client.close()


def create_client(config: Config) -> LazyOpenAIClient:
    """Return an OpenAI client handle configured from *config*.

    Retries and timeouts are handled by the client itself.
    """
    return LazyOpenAIClient(config)
