"""Airline lookup by flight number.

Resolution order per candidate designator: in-memory cache, reference API
(when configured), static mapping of common carriers. Designators are tried
as the 2-character prefix ("6E", "UA") and then the 3-character one.
"""

from __future__ import annotations

from typing import Any

import httpx

from boarding_pass.core.logging import get_logger
from boarding_pass.domain.pipeline.constants import FALLBACK_AIRLINES
from boarding_pass.domain.ports.airline_port import AirlineLookupPort

logger = get_logger(__name__)


def candidate_codes(flight_number: str) -> list[str]:
    clean = flight_number.upper().strip().replace(" ", "")
    codes: list[str] = []
    if len(clean) >= 2:
        codes.append(clean[:2])
    if len(clean) >= 3:
        codes.append(clean[:3])
    return codes


class AirlineLookupService(AirlineLookupPort):
    def __init__(
        self,
        api_url: str | None = None,
        timeout_seconds: int = 10,
        *,
        api_key: str | None = None,
        fallback_mapping: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_url = api_url
        self._timeout_seconds = timeout_seconds
        self._api_key = api_key
        self._fallback = dict(FALLBACK_AIRLINES if fallback_mapping is None else fallback_mapping)
        self._transport = transport
        self._cache: dict[str, str] = {}

    @property
    def cached(self) -> dict[str, str]:
        return dict(self._cache)

    async def lookup(self, flight_number: str) -> str | None:
        for code in candidate_codes(flight_number):
            name = await self.get_airline(code)
            if name:
                return name
        logger.info("airline_not_found", extra={"flight_number": flight_number})
        return None

    async def get_airline(self, code: str) -> str | None:
        code = code.upper().strip()
        if code in self._cache:
            return self._cache[code]

        name: str | None = None
        if self._api_url:
            try:
                name = await self._fetch_from_api(code)
            except (httpx.HTTPError, ValueError) as exc:
                logger.warning("airline_api_failed", extra={"error_code": "AIRLINE_LOOKUP_FAILED"}, exc_info=exc)
        if not name:
            name = self._fallback.get(code)
        if name:
            self._cache[code] = name
        return name

    async def _fetch_from_api(self, code: str) -> str | None:
        headers = {"Accept": "application/json"}
        if self._api_key:
            headers["X-API-Key"] = self._api_key
        async with httpx.AsyncClient(
            base_url=self._api_url or "",
            timeout=self._timeout_seconds,
            transport=self._transport,
            headers=headers,
        ) as client:
            resp = await client.get(f"/airlines/{code}")
            if resp.status_code == 404:
                return None
            resp.raise_for_status()
            data: Any = resp.json()
        if isinstance(data, dict) and isinstance(data.get("name"), str) and data["name"].strip():
            return data["name"].strip()
        return None
