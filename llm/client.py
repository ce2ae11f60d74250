"""Async chat-completions client for an OpenAI-compatible endpoint.

Uses httpx for HTTP and tenacity for the opt-in retry-on-error. Each call
opens and closes its own ``httpx.AsyncClient``, so the client holds no
connections between calls.
"""

from __future__ import annotations

from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

RETRY_WAIT = wait_exponential(multiplier=0.5, min=0.5, max=2.0)


def _is_retryable(exc: BaseException) -> bool:
    """Return True for transient endpoint errors that may be retried."""
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in (429, 500, 502, 503)
    if isinstance(exc, (httpx.ConnectError, httpx.ReadTimeout)):
        return True
    return False


def extract_content(response: Any) -> str | None:
    """Return the first choice's message content, or None if it has none."""
    if not isinstance(response, dict):
        return None
    choices = response.get("choices") or []
    if not isinstance(choices, list):
        return None
    if not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str) or not content:
        return None
    return content


class LLMClient:
    """Client for ``POST {base_url}/chat/completions``.

    The API key is sent as a bearer credential. With ``max_retries=0`` each
    request is attempted exactly once and every httpx error propagates
    unchanged; a positive value retries 429 / 5xx and connect / read
    timeouts with exponential backoff before re-raising the last error.
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        timeout: float | None = 600.0,
        max_retries: int = 0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self._api_key = api_key
        self._transport = transport

    # ------------------------------------------------------------------
    # Chat completions
    # ------------------------------------------------------------------

    async def chat_completions(
        self,
        *,
        messages: list[dict],
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> dict:
        """Send a chat-completions request.

        Args:
            messages: OpenAI-style message list.
            model: Model name.
            temperature: Sampling temperature.
            max_tokens: Maximum tokens in the completion.

        Returns:
            The parsed JSON response dict.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response.
            httpx.TransportError: On connectivity failures and timeouts.
        """
        body: dict = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=RETRY_WAIT,
            retry=retry_if_exception(_is_retryable),
            reraise=True,
        )
        return await retrying(self._post, body)

    async def _post(self, body: dict) -> dict:
        headers: dict[str, str] = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            resp = await client.post(
                f"{self.base_url}/chat/completions",
                json=body,
                headers=headers,
            )
            resp.raise_for_status()
            return resp.json()
