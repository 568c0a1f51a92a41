from __future__ import annotations

import io

import pytest
from PIL import Image


@pytest.fixture
def png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (16, 8), "white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def bitmap() -> Image.Image:
    return Image.new("RGB", (16, 8), "white")
