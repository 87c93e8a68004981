"""Profile image transforms (Pillow).

All functions here block; run them off the event loop.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Union

from PIL import Image

from ..core.constants import PROFILE_IMAGE_FORMAT
from ..core.exceptions import ImageProcessingError

# Modes the PNG encoder writes as-is; anything else (CMYK, YCbCr, ...) is converted.
_PNG_MODES = {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}


def open_image(path: Union[str, Path]) -> Image.Image:
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise ImageProcessingError(f"cannot open image {path}: {e}") from e


def resize_exact(img: Image.Image, width: int, height: int) -> Image.Image:
    """Resize to exactly ``width`` x ``height``; aspect ratio is not kept."""
    try:
        return img.resize((width, height), Image.Resampling.LANCZOS)
    except (OSError, ValueError, OverflowError, MemoryError) as e:
        raise ImageProcessingError(f"cannot resize image to {width}x{height}: {e}") from e


def encode_image(img: Image.Image, fmt: str = PROFILE_IMAGE_FORMAT) -> bytes:
    if fmt.upper() == "PNG" and img.mode not in _PNG_MODES:
        img = img.convert("RGBA")
    buf = io.BytesIO()
    try:
        img.save(buf, format=fmt)
    except (OSError, ValueError, KeyError) as e:
        raise ImageProcessingError(f"cannot encode image as {fmt}: {e}") from e
    return buf.getvalue()


def render_resized(path: Union[str, Path], width: int, height: int, fmt: str = PROFILE_IMAGE_FORMAT) -> bytes:
    img = open_image(path)
    return encode_image(resize_exact(img, width, height), fmt)
