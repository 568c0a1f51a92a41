"""Boarding pass extraction pipeline.

Turns a boarding pass photograph into a typed FinalRecord via OCR, a
generative model pass and deterministic parsing, falling back to a heuristic
scanner when the primary path yields nothing usable.
"""

from boarding_pass.domain.pipeline.models import (
    CandidateRecord,
    FinalRecord,
    ProcessingState,
    ProcessingStatus,
    ScanOutcome,
    ScanResult,
)
from boarding_pass.domain.pipeline.orchestrator import BoardingPassPipeline

__all__ = [
    "BoardingPassPipeline",
    "CandidateRecord",
    "FinalRecord",
    "ProcessingState",
    "ProcessingStatus",
    "ScanOutcome",
    "ScanResult",
]
