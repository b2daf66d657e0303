"""Image normalisation for uploads.

Every image is re-encoded to WEBP, downscaled to a maximum width first when
needed.  A buffer Pillow cannot handle is stored as-is rather than rejected:
``transform_image`` never raises, it returns a result with ``recovered=True``.
"""

import asyncio
import io
import logging
from dataclasses import dataclass
from typing import Optional

from PIL import Image

logger = logging.getLogger(__name__)

MAX_WIDTH = 1280
WEBP_QUALITY = 80


@dataclass(frozen=True)
class ImageTransformResult:
    buffer: bytes
    width: Optional[int] = None
    height: Optional[int] = None
    recovered: bool = False
    error: Optional[str] = None


def _scaled_size(width: int, height: int, max_width: int) -> tuple[int, int]:
    if width <= max_width:
        return width, height
    return max_width, max(1, round(height * max_width / width))


def _encode_webp(img: Image.Image, quality: int) -> bytes:
    if img.mode not in ("RGB", "RGBA"):
        has_alpha = "A" in img.getbands() or "transparency" in img.info
        img = img.convert("RGBA" if has_alpha else "RGB")
    out = io.BytesIO()
    img.save(out, "WEBP", quality=quality)
    return out.getvalue()


def transform_image(
    buffer: bytes,
    max_width: int = MAX_WIDTH,
    quality: int = WEBP_QUALITY,
) -> ImageTransformResult:
    """Downscale *buffer* to *max_width* (never upscaling) and encode as WEBP.

    The returned dimensions are read back from the encoded output.
    """
    try:
        with Image.open(io.BytesIO(buffer)) as img:
            img.load()
            size = _scaled_size(img.width, img.height, max_width)
            frame = img if size == img.size else img.resize(size, Image.Resampling.LANCZOS)
            encoded = _encode_webp(frame, quality)
        with Image.open(io.BytesIO(encoded)) as final:
            width, height = final.size
    except Exception as exc:
        logger.warning("Image transform failed, storing original bytes: %s", exc)
        return ImageTransformResult(buffer=buffer, recovered=True, error=str(exc))
    return ImageTransformResult(buffer=encoded, width=width, height=height)


async def process_image(
    buffer: bytes,
    max_width: int = MAX_WIDTH,
    quality: int = WEBP_QUALITY,
) -> ImageTransformResult:
    """Run ``transform_image`` in a worker thread."""
    return await asyncio.to_thread(transform_image, buffer, max_width, quality)
