from __future__ import annotations

import httpx
import pytest

from boarding_pass.infrastructure.clients.airline_lookup import AirlineLookupService, candidate_codes


def test_candidate_codes() -> None:
    assert candidate_codes("6E6252") == ["6E", "6E6"]
    assert candidate_codes(" ua 546 ") == ["UA", "UA5"]
    assert candidate_codes("X") == []


@pytest.mark.asyncio
async def test_fallback_mapping_without_api() -> None:
    service = AirlineLookupService()

    assert await service.lookup("6E6252") == "IndiGo"
    assert await service.lookup("UA546") == "United Airlines"
    assert await service.lookup("ZZ999") is None
    assert service.cached == {"6E": "IndiGo", "UA": "United Airlines"}


@pytest.mark.asyncio
async def test_api_result_is_cached() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        assert request.headers["X-API-Key"] == "k"
        return httpx.Response(200, json={"name": " IndiGo Airlines "})

    service = AirlineLookupService(
        "http://airlines.local", 5, api_key="k", transport=httpx.MockTransport(handler)
    )

    assert await service.lookup("6E6252") == "IndiGo Airlines"
    assert await service.lookup("6E 101") == "IndiGo Airlines"
    assert calls == ["/airlines/6E"]


@pytest.mark.asyncio
async def test_api_miss_and_failure_use_mapping() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/AI"):
            return httpx.Response(404)
        return httpx.Response(500)

    service = AirlineLookupService(
        "http://airlines.local",
        5,
        fallback_mapping={"AI": "Air India", "SG": "SpiceJet"},
        transport=httpx.MockTransport(handler),
    )

    assert await service.lookup("AI123") == "Air India"
    assert await service.lookup("SG8") == "SpiceJet"
    assert await service.lookup("QQ1") is None
