"""FallbackScannerPort protocol.

The heuristic OCR + pattern scanner is an external collaborator; only its
contract lives here. Its output has the same shape as the pipeline's own
success case and is returned to the caller verbatim.

``scan`` receives the caller's image object unchanged when the pipeline was
given a decoded bitmap, or the bitmap decoded from the caller's bytes.
"""

from __future__ import annotations

from typing import Protocol

from PIL import Image

from boarding_pass.domain.pipeline.models import FinalRecord


class FallbackScannerPort(Protocol):  # pragma: no cover - contract
    async def scan(self, image: Image.Image) -> FinalRecord | None: ...
