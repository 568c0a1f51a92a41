"""OCRPort protocol for optical text recognition."""

from __future__ import annotations

from typing import Protocol

from PIL import Image

from boarding_pass.domain.pipeline.models import TextRegion


class OCRPort(Protocol):  # pragma: no cover - contract
    """Abstraction over the text recognizer used by the pipeline.

    Returns one TextRegion per detected region; an empty list is a valid,
    non-exceptional result.
    """

    async def recognize(
        self,
        image: Image.Image,
        *,
        accuracy: str = "high",
        language_correction: bool = True,
    ) -> list[TextRegion]: ...
