"""Airline name validity policy and flight-number based enrichment."""

from __future__ import annotations

from boarding_pass.core.logging import get_logger
from boarding_pass.domain.pipeline.constants import AIRLINE_DENYLIST, AIRLINE_MIN_LENGTH
from boarding_pass.domain.ports.airline_port import AirlineLookupPort
from boarding_pass.observability.metrics import inc_airline_lookup

logger = get_logger(__name__)


def is_valid_airline(name: str | None) -> bool:
    if not name:
        return False
    upper = name.strip().upper()
    if any(token in upper for token in AIRLINE_DENYLIST):
        return False
    if len(upper) < AIRLINE_MIN_LENGTH or not any(ch.isalpha() for ch in upper):
        return False
    return True


async def resolve_airline(
    airline: str | None,
    flight_number: str | None,
    lookup: AirlineLookupPort,
) -> str | None:
    """Return a trusted airline name, or the original value when none can be justified.

    A valid extracted name is returned as-is without touching the lookup.
    Lookup failures are logged and swallowed; this never raises.
    """
    if is_valid_airline(airline):
        return airline
    if not flight_number:
        return airline

    logger.info("airline_lookup_start", extra={"airline": airline, "flight_number": flight_number})
    try:
        found = await lookup.lookup(flight_number)
    except Exception as exc:
        inc_airline_lookup("error")
        logger.warning(
            "airline_lookup_failed",
            extra={"flight_number": flight_number, "error_code": "AIRLINE_LOOKUP_FAILED"},
            exc_info=exc,
        )
        return airline

    if found and found.strip():
        inc_airline_lookup("found")
        return found.strip()
    inc_airline_lookup("not_found")
    return airline
