"""Async client for OpenAI-compatible chat completion endpoints."""

import asyncio

import httpx

from ..errors import ProviderCallError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class CompletionClient:
    """Client for a single chat completion provider."""

    def __init__(
        self,
        name: str,
        base_url: str,
        api_key: str,
        request_timeout: float = 60.0,
        connect_timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize completion client.

        Args:
            name: Provider name used in logs and errors
            base_url: Base URL of the API (``/chat/completions`` is appended)
            api_key: Bearer token for the provider
            request_timeout: Deadline in seconds for the whole request, from
                connecting to reading the last byte
            connect_timeout: Connection timeout in seconds
            transport: Optional httpx transport, mainly for tests
        """
        self.name = name
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self.request_timeout = request_timeout
        self.timeout = httpx.Timeout(request_timeout, connect=connect_timeout)
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/chat/completions"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def complete(self, model: str, prompt: str, max_tokens: int = 500) -> str:
        """
        Request a completion for a single user message.

        Args:
            model: Model or agent identifier
            prompt: Content of the user message
            max_tokens: Upper bound on generated tokens

        Returns:
            Text of the first choice's message

        Raises:
            ProviderCallError: On transport failure, error status or unusable payload
        """
        payload = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": max_tokens,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await asyncio.wait_for(
                    client.post(self.endpoint, json=payload, headers=self._headers()),
                    timeout=self.request_timeout,
                )
        except asyncio.TimeoutError as e:
            raise ProviderCallError(
                self.name, f"Timeout: no response within {self.request_timeout}s"
            ) from e
        except httpx.TimeoutException as e:
            raise ProviderCallError(self.name, f"Timeout: {e}") from e
        except httpx.RequestError as e:
            raise ProviderCallError(self.name, f"Request error: {e}") from e

        if not response.is_success:
            raise ProviderCallError(
                self.name, f"HTTP {response.status_code}: {response.text[:200]}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderCallError(self.name, f"Response is not JSON: {e}") from e

        return self._message_text(data)

    def _message_text(self, data) -> str:
        """Pull ``choices[0].message.content`` out of a completion payload."""
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderCallError(
                self.name, f"Completion payload has no message text: {e!r}"
            ) from e

        if not isinstance(content, str):
            raise ProviderCallError(
                self.name, f"Message content is {type(content).__name__}, expected text"
            )

        logger.debug(f"{self.name} returned {len(content)} characters")
        return content
