from __future__ import annotations

import httpx
import pytest
from PIL import Image

from boarding_pass.domain.pipeline.errors import TextRecognitionError
from boarding_pass.domain.pipeline.stages.ocr import run_ocr
from boarding_pass.infrastructure.clients.ocr_http import OcrHttpClient, parse_regions

REGIONS_PAYLOAD = {
    "regions": [
        {"candidates": [{"text": "BOARDING PASS", "confidence": 0.99}]},
        {"candidates": [{"text": "6E 6Z52", "confidence": 0.41}, {"text": "6E 6252", "confidence": 0.87}]},
        {"candidates": []},
    ]
}


def _client(handler) -> OcrHttpClient:
    return OcrHttpClient("http://ocr.local", 5, transport=httpx.MockTransport(handler))


def test_parse_regions_accepts_nested_result() -> None:
    regions = parse_regions({"result": REGIONS_PAYLOAD})
    assert len(regions) == 3
    assert regions[1].top_candidate().text == "6E 6252"
    assert regions[2].top_candidate() is None


def test_parse_regions_tolerates_bad_confidence() -> None:
    regions = parse_regions({"regions": [{"candidates": [{"text": "A", "confidence": "high"}]}]})
    assert regions[0].candidates[0].confidence is None


def test_parse_regions_requires_list() -> None:
    with pytest.raises(RuntimeError):
        parse_regions({"status": "ok"})


@pytest.mark.asyncio
async def test_recognize_posts_png_and_options() -> None:
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = request.content
        return httpx.Response(200, json=REGIONS_PAYLOAD)

    regions = await _client(handler).recognize(Image.new("RGB", (4, 4)))

    assert seen["path"] == "/recognize"
    assert b"image/png" in seen["body"]
    assert b'name="accuracy"' in seen["body"]
    assert b"high" in seen["body"]
    assert len(regions) == 3


@pytest.mark.asyncio
async def test_run_ocr_keeps_top_candidates_in_order() -> None:
    client = _client(lambda request: httpx.Response(200, json=REGIONS_PAYLOAD))

    recognized = await run_ocr(Image.new("RGB", (4, 4)), ocr_client=client)

    assert recognized.lines == ["BOARDING PASS", "6E 6252"]
    assert recognized.text == "BOARDING PASS\n6E 6252"


@pytest.mark.asyncio
async def test_failed_status_raises() -> None:
    client = _client(lambda request: httpx.Response(200, json={"success": False, "error": "engine offline"}))

    with pytest.raises(RuntimeError, match="engine offline"):
        await client.recognize(Image.new("RGB", (4, 4)))


@pytest.mark.asyncio
async def test_http_error_becomes_recognition_error() -> None:
    client = _client(lambda request: httpx.Response(503, text="unavailable"))

    with pytest.raises(TextRecognitionError):
        await run_ocr(Image.new("RGB", (4, 4)), ocr_client=client)


@pytest.mark.asyncio
async def test_missing_base_url_raises() -> None:
    client = OcrHttpClient(None, 5)

    with pytest.raises(RuntimeError, match="not configured"):
        await client.recognize(Image.new("RGB", (4, 4)))
