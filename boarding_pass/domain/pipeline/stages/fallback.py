from __future__ import annotations

import asyncio

from PIL import Image

from boarding_pass.domain.pipeline.errors import FallbackScanError, message_for
from boarding_pass.domain.pipeline.models import FinalRecord
from boarding_pass.domain.ports.scanner_port import FallbackScannerPort


async def run_fallback(
    image: Image.Image,
    *,
    scanner: FallbackScannerPort,
    timeout: float | None = None,
) -> FinalRecord | None:
    """Delegate to the heuristic scanner; its result is returned verbatim."""
    try:
        return await asyncio.wait_for(scanner.scan(image), timeout=timeout)
    except asyncio.TimeoutError as exc:
        raise FallbackScanError(message_for("STAGE_TIMEOUT"), details={"stage": "fallback"}) from exc
    except Exception as exc:
        raise FallbackScanError(f"Fallback scanner failed: {exc!r}") from exc
