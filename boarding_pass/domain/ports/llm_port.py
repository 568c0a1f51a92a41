"""ModelSessionPort protocol for the generative model used in primary extraction."""

from __future__ import annotations

from typing import Protocol


class ModelSessionPort(Protocol):  # pragma: no cover - contract
    """Capability-gated text model session."""

    @property
    def is_available(self) -> bool: ...

    async def respond(self, prompt: str) -> str: ...
