from __future__ import annotations

from boarding_pass.domain.pipeline.airline import resolve_airline
from boarding_pass.domain.pipeline.dates import normalize_date
from boarding_pass.domain.pipeline.models import CandidateRecord, FinalRecord
from boarding_pass.domain.ports.airline_port import AirlineLookupPort


async def run_enrich(candidate: CandidateRecord, *, lookup: AirlineLookupPort) -> FinalRecord:
    """Resolve the airline, parse the departure date and build the FinalRecord.

    Enrichment only ever degrades a single field; it never raises.
    """
    fields = candidate.model_dump()
    fields["airline"] = await resolve_airline(candidate.airline, candidate.flight_number, lookup)
    fields["departure_date"] = normalize_date(candidate.departure_date)
    return FinalRecord(**fields)
