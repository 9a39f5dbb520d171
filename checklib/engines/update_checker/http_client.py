"""Async HTTP client shared by all registry lookups."""

from __future__ import annotations

from typing import Any

import httpx

from checklib import __version__
from checklib.core.config import DEFAULT_TIMEOUT


class RegistryHttpClient:
    """Thin async wrapper around ``httpx.AsyncClient``.

    Every request is bounded by *timeout*; there are no retries.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            headers={
                "Accept": "application/json",
                "User-Agent": f"checklib/{__version__}",
            },
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> RegistryHttpClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── public ─────────────────────────────────────────────────────────────

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET *url* and return the decoded JSON body.

        Raises ``httpx.HTTPStatusError`` for non-2xx responses and
        ``ValueError`` when the body is not valid JSON.
        """
        response = await self._client.get(url, params=params)
        response.raise_for_status()
        return response.json()
