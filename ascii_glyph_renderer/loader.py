"""
ASCII Glyph Renderer - Image Loading
====================================
Decode an image from a path or URL and resample it into a PixelBuffer
sized for glyph output.
"""

import io
import logging
import math
from pathlib import Path
from typing import Tuple, Union
from urllib.parse import unquote, urlparse

import requests
from PIL import Image, UnidentifiedImageError

from ascii_glyph_renderer.buffer import PixelBuffer
from ascii_glyph_renderer.constants import CHAR_ASPECT_RATIO
from ascii_glyph_renderer.errors import ConfigurationError, ImageLoadError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30                         # Seconds

ImageSource = Union[str, Path, Image.Image]


def target_size(image_width: int, image_height: int, width: int,
                char_aspect_ratio: float = CHAR_ASPECT_RATIO) -> Tuple[int, int]:
    """
    Cell grid size for an image rendered ``width`` glyphs wide.

    The height is scaled by ``char_aspect_ratio`` because glyph cells are
    taller than they are wide. At least one row is produced.
    """
    if width <= 0:
        raise ConfigurationError(f"width must be positive, got {width}")
    if image_width <= 0 or image_height <= 0:
        raise ImageLoadError(f"image has no pixels ({image_width}x{image_height})")
    ratio = image_height / image_width
    height = math.floor(width * ratio * char_aspect_ratio)
    return width, max(1, height)


def open_image(source: ImageSource) -> Image.Image:
    """
    Load an image from a PIL image, a filesystem path, a ``file://`` URL
    or an ``http(s)://`` URL.

    Raises:
        ImageLoadError: If the image cannot be fetched or decoded
    """
    if isinstance(source, Image.Image):
        return source

    src = str(source)
    try:
        if src.lower().startswith(("http://", "https://")):
            logger.debug("fetching %s", src)
            r = requests.get(src, timeout=REQUEST_TIMEOUT)
            r.raise_for_status()
            im = Image.open(io.BytesIO(r.content))
        else:
            if src.lower().startswith("file://"):
                src = unquote(urlparse(src).path)
            im = Image.open(src)
        im.load()
    except requests.RequestException as e:
        raise ImageLoadError(f"Failed to fetch image {src}: {e}") from e
    except (OSError, UnidentifiedImageError) as e:
        raise ImageLoadError(f"Failed to load image {src}: {e}") from e

    logger.debug("loaded %s: size=%s mode=%s", src, im.size, im.mode)
    return im


def resample(image: Image.Image, width: int) -> Image.Image:
    """Convert to RGBA and resize to :func:`target_size` with LANCZOS."""
    size = target_size(image.width, image.height, width)
    rgba = image.convert('RGBA')
    return rgba.resize(size, Image.Resampling.LANCZOS)


def buffer_from_image(image: Image.Image, width: int) -> PixelBuffer:
    """Resample ``image`` and wrap the result as a PixelBuffer."""
    return PixelBuffer.from_image(resample(image, width))


def load_buffer(source: ImageSource, width: int) -> PixelBuffer:
    """Open ``source`` and resample it ``width`` glyphs wide."""
    return buffer_from_image(open_image(source), width)
