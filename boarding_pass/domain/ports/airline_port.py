"""AirlineLookupPort protocol: canonical airline name by flight number."""

from __future__ import annotations

from typing import Protocol


class AirlineLookupPort(Protocol):  # pragma: no cover - contract
    async def lookup(self, flight_number: str) -> str | None: ...
