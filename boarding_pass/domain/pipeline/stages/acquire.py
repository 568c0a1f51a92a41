from __future__ import annotations

import io
from typing import Union

from PIL import Image, ImageOps, UnidentifiedImageError

from boarding_pass.domain.pipeline.errors import ImageDecodeError

ImageSource = Union[bytes, bytearray, Image.Image]


def _prepare_frame(frame: Image.Image) -> Image.Image:
    frame = ImageOps.exif_transpose(frame)
    if frame.mode not in ("RGB", "L"):
        frame = frame.convert("RGB")
    return frame


def run_acquire(source: ImageSource) -> Image.Image:
    """Decode the input into an in-memory bitmap.

    Raises ImageDecodeError when the bytes are not a decodable image.
    """
    if isinstance(source, Image.Image):
        return _prepare_frame(source)
    if not isinstance(source, (bytes, bytearray)) or not source:
        raise ImageDecodeError(details={"reason": "empty or unsupported image source"})
    try:
        with Image.open(io.BytesIO(source)) as img:
            img.load()
            return _prepare_frame(img.copy())
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise ImageDecodeError(f"Failed to decode image: {exc}") from exc
