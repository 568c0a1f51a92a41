"""HTTP client adapter for the OCR service.

Assumes endpoint:
- POST /recognize (multipart "file" PNG, form "accuracy", "language_correction")
  -> {"regions": [{"candidates": [{"text": "...", "confidence": 0.98}, ...]}, ...]}
     or the same object nested under "result".
"""

from __future__ import annotations

import io
from typing import Any

import httpx
from PIL import Image

from boarding_pass.domain.pipeline.models import TextCandidate, TextRegion
from boarding_pass.domain.ports.ocr_port import OCRPort


def _encode_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def parse_regions(data: dict[str, Any]) -> list[TextRegion]:
    regions_data = data.get("regions")
    if regions_data is None and isinstance(data.get("result"), dict):
        regions_data = data["result"].get("regions")
    if not isinstance(regions_data, list):
        raise RuntimeError("OCR result missing regions list")

    regions: list[TextRegion] = []
    for entry in regions_data:
        if not isinstance(entry, dict):
            raise RuntimeError("Invalid region entry in OCR result")
        candidates = []
        for c in entry.get("candidates") or []:
            text = str(c.get("text", ""))
            conf_raw = c.get("confidence")
            try:
                conf = float(conf_raw) if conf_raw is not None else None
            except (TypeError, ValueError):
                conf = None
            candidates.append(TextCandidate(text=text, confidence=conf))
        regions.append(TextRegion(candidates=candidates))
    return regions


class OcrHttpClient(OCRPort):
    """OCR HTTP client implementing OCRPort using httpx (async)."""

    def __init__(
        self,
        base_url: str | None,
        timeout_seconds: int,
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout_seconds = timeout_seconds
        self._verify_ssl = verify_ssl
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        if not self._base_url:
            raise RuntimeError("OCR base_url is not configured")
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout_seconds,
            verify=self._verify_ssl,
            transport=self._transport,
        )

    async def recognize(
        self,
        image: Image.Image,
        *,
        accuracy: str = "high",
        language_correction: bool = True,
    ) -> list[TextRegion]:
        files = {"file": ("boarding_pass.png", _encode_png(image), "image/png")}
        data = {"accuracy": accuracy, "language_correction": str(language_correction).lower()}
        async with self._client() as client:
            resp = await client.post("/recognize", files=files, data=data)
            resp.raise_for_status()
            payload = resp.json()
        if not isinstance(payload, dict):
            raise RuntimeError("OCR response is not a JSON object")
        if payload.get("success") is False or str(payload.get("status", "")).lower() in {"failed", "error"}:
            err_msg = payload.get("error_message") or payload.get("error") or "OCR request failed"
            raise RuntimeError(err_msg)
        return parse_regions(payload)
