"""Client for the random.org plain-text string generator."""

from __future__ import annotations

import logging

import httpx

from credit_ledger.core.config import RandomOrgSettings

logger = logging.getLogger(__name__)


class RandomStringClient:
    """Fetches one random alphanumeric string per call.

    ``transport`` lets tests plug in an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        settings: RandomOrgSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self._transport = transport

    def _params(self) -> dict[str, str | int]:
        return {
            "num": 1,
            "len": self.settings.length,
            "digits": "on",
            "upperalpha": "on",
            "loweralpha": "on",
            "unique": "on",
            "format": "plain",
            "rnd": "new",
        }

    async def generate(self) -> str:
        """Return a fresh random string; raises ``httpx.HTTPError`` on any transport or status failure."""
        async with httpx.AsyncClient(timeout=self.settings.timeout, transport=self._transport) as client:
            response = await client.get(self.settings.url, params=self._params())
            response.raise_for_status()
        value = response.text.strip()
        if not value:
            raise httpx.DecodingError("Empty response from random string provider", request=response.request)
        logger.debug("Generated random string of length %d", len(value))
        return value


__all__ = ["RandomStringClient"]
