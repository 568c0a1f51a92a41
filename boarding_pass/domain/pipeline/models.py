"""Domain models for the boarding pass pipeline."""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict


class TextCandidate(BaseModel):
    """One recognition hypothesis for a detected text region."""

    text: str
    confidence: float | None = None


class TextRegion(BaseModel):
    """A detected text region with its candidates, best first."""

    candidates: list[TextCandidate] = []

    def top_candidate(self) -> TextCandidate | None:
        if not self.candidates:
            return None
        # max() keeps the first of equal confidences, i.e. the collaborator's order
        return max(self.candidates, key=lambda c: c.confidence if c.confidence is not None else float("-inf"))


class RecognizedText(BaseModel):
    """Ordered text lines produced by optical recognition."""

    lines: list[str] = []

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def is_empty(self) -> bool:
        return not any(line.strip() for line in self.lines)


class CandidateRecord(BaseModel):
    """Fields parsed from one model response; each is a non-empty string or None."""

    model_config = ConfigDict(frozen=True)

    flight_number: str | None = None
    airline: str | None = None
    passenger_name: str | None = None
    departure_airport: str | None = None
    departure_city: str | None = None
    departure_code: str | None = None
    arrival_airport: str | None = None
    arrival_city: str | None = None
    arrival_code: str | None = None
    departure_date: str | None = None
    departure_time: str | None = None
    arrival_time: str | None = None
    seat: str | None = None
    gate: str | None = None
    terminal: str | None = None
    confirmation_code: str | None = None
    boarding_time: str | None = None

    def is_empty(self) -> bool:
        return all(v is None for v in self.model_dump().values())


class FinalRecord(BaseModel):
    """Canonical pipeline output. Same as CandidateRecord with a parsed departure date."""

    model_config = ConfigDict(frozen=True)

    flight_number: str | None = None
    airline: str | None = None
    passenger_name: str | None = None
    departure_airport: str | None = None
    departure_city: str | None = None
    departure_code: str | None = None
    arrival_airport: str | None = None
    arrival_city: str | None = None
    arrival_code: str | None = None
    departure_date: date | None = None
    departure_time: str | None = None
    arrival_time: str | None = None
    seat: str | None = None
    gate: str | None = None
    terminal: str | None = None
    confirmation_code: str | None = None
    boarding_time: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.flight_number is not None and self.departure_code is not None and self.arrival_code is not None

    @property
    def summary(self) -> str:
        flight = self.flight_number or "Unknown"
        return f"{flight}: {self.departure_code or '???'} → {self.arrival_code or '???'}"


class ProcessingStatus(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FALLBACK_SUCCEEDED = "fallback_succeeded"
    FAILED = "failed"


class ProcessingState(BaseModel):
    """Status of one pipeline instance. Callers receive copies only."""

    status: ProcessingStatus = ProcessingStatus.IDLE
    busy: bool = False
    last_error: str | None = None


class ScanOutcome(str, Enum):
    SUCCEEDED = "succeeded"
    FALLBACK_SUCCEEDED = "fallback_succeeded"
    FAILED = "failed"
    BUSY = "busy"


class RecordSource(str, Enum):
    PRIMARY = "primary"
    FALLBACK = "fallback"
    NONE = "none"


class ScanResult(BaseModel):
    """Result of one pipeline invocation; diagnostic is for logging only."""

    model_config = ConfigDict(frozen=True)

    run_id: str
    outcome: ScanOutcome
    source: RecordSource = RecordSource.NONE
    record: FinalRecord | None = None
    diagnostic: str | None = None
