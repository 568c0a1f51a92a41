from __future__ import annotations

import asyncio

from PIL import Image

from boarding_pass.domain.pipeline.errors import TextRecognitionEmptyError, TextRecognitionError, message_for
from boarding_pass.domain.pipeline.models import RecognizedText
from boarding_pass.domain.ports.ocr_port import OCRPort


async def run_ocr(image: Image.Image, *, ocr_client: OCRPort, timeout: float | None = None) -> RecognizedText:
    """Recognize text and keep the top candidate of every region, in region order.

    Raises TextRecognitionError on failures and TextRecognitionEmptyError
    when nothing readable was found.
    """
    try:
        regions = await asyncio.wait_for(
            ocr_client.recognize(image, accuracy="high", language_correction=True),
            timeout=timeout,
        )
    except asyncio.TimeoutError as exc:
        raise TextRecognitionError(message_for("STAGE_TIMEOUT"), details={"stage": "ocr"}) from exc
    except Exception as exc:
        raise TextRecognitionError(f"Text recognition failed: {exc!r}") from exc

    lines: list[str] = []
    for region in regions:
        top = region.top_candidate()
        if top is not None and top.text:
            lines.append(top.text)

    recognized = RecognizedText(lines=lines)
    if recognized.is_empty:
        raise TextRecognitionEmptyError()
    return recognized
