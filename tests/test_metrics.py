from __future__ import annotations

import pytest
from prometheus_client import REGISTRY

from boarding_pass.domain.pipeline.airline import resolve_airline
from boarding_pass.observability.metrics import timed


def _sample(name: str, labels: dict[str, str]) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_timed_observes_stage_duration() -> None:
    before = _sample("bp_stage_duration_seconds_count", {"stage": "unit"})

    with timed("unit"):
        pass

    assert _sample("bp_stage_duration_seconds_count", {"stage": "unit"}) == before + 1


def test_timed_observes_on_error() -> None:
    before = _sample("bp_stage_duration_seconds_count", {"stage": "unit_error"})

    with pytest.raises(ValueError):
        with timed("unit_error"):
            raise ValueError("boom")

    assert _sample("bp_stage_duration_seconds_count", {"stage": "unit_error"}) == before + 1


class _Lookup:
    async def lookup(self, flight_number: str) -> str | None:
        return "IndiGo"


@pytest.mark.asyncio
async def test_airline_lookup_counter() -> None:
    before = _sample("bp_airline_lookups_total", {"result": "found"})

    await resolve_airline(None, "6E6252", _Lookup())

    assert _sample("bp_airline_lookups_total", {"result": "found"}) == before + 1
