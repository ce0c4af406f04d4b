"""
Client for the Gemini generateContent endpoint.
"""

import logging
from typing import Optional, Protocol, Sequence

import httpx

from gemini_tui.core.domain import build_request, extract_reply
from gemini_tui.core.errors import ProtocolError, TransportError
from gemini_tui.models import Turn

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.5-flash"
INVALID_RESPONSE = "Invalid response format from API"


class CompletionClient(Protocol):
    async def complete(self, turns: Sequence[Turn]) -> str:
        """Return the reply to ``turns`` or raise a CompletionError."""
        ...


class GeminiClient:
    def __init__(
        self,
        api_key: str,
        *,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip('/')
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def complete(self, turns: Sequence[Turn]) -> str:
        payload = build_request(turns)
        logger.debug("generateContent model=%s turns=%d", self.model, len(payload['contents']))

        try:
            res = await self._http.post(self.endpoint, params={'key': self.api_key}, json=payload)
        except httpx.TimeoutException as exc:
            raise TransportError(str(exc) or "timeout") from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        if not res.is_success:
            raise TransportError(f"API Error: {res.text}")

        try:
            body = res.json()
        except ValueError as exc:
            raise ProtocolError(INVALID_RESPONSE) from exc

        reply = extract_reply(body)
        if reply is None:
            raise ProtocolError(INVALID_RESPONSE)
        return reply

    async def aclose(self) -> None:
        await self._http.aclose()
