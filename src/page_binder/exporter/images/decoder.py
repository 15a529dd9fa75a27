"""
Module: exporter.images.decoder

Purpose:
    Turn a source byte stream into a DecodedImage. Format negotiation is
    left entirely to the decoder implementation; the exporter only sees
    DecodedImage or DecodeError.

Key Classes:
    - ImageDecoder: Abstract decoder interface
    - PillowImageDecoder: Default decoder backed by Pillow

Dependencies:
    - PIL: Image, ImageOps

Used By:
    - exporter.controller: One decode per page
"""

from __future__ import annotations

import logging
import warnings
from abc import ABC, abstractmethod
from typing import BinaryIO

from PIL import Image, ImageOps, UnidentifiedImageError

from page_binder.core.models import DecodedImage
from page_binder.exporter.errors import DecodeError

logger = logging.getLogger(__name__)

# Modes the document writer embeds without conversion
_PASSTHROUGH_MODES = {"RGB", "RGBA", "L"}

# Grayscale modes deeper than 8 bits (I;16 variants are matched by prefix)
_DEEP_GRAY_MODES = {"I", "F"}


class ImageDecoder(ABC):
    """
    Abstract interface for decoding one image.

    Implementations must fully read the stream before returning; the
    caller closes it as soon as ``decode`` returns.
    """

    @abstractmethod
    def decode(self, stream: BinaryIO) -> DecodedImage:
        """
        Decode an image from a byte stream.

        Args:
            stream: Binary stream positioned at the start of the image

        Returns:
            DecodedImage owning the pixel data

        Raises:
            DecodeError: If the data is not a readable image or has a
                zero dimension
        """


class PillowImageDecoder(ImageDecoder):
    """
    Decoder for any raster format Pillow can read.

    Applies the EXIF orientation tag so camera images come out upright,
    and normalizes exotic modes to RGB or RGBA. Grayscale deeper than
    8 bits (16-bit PNG, 32-bit or float TIFF) is rescaled to L.
    """

    def decode(self, stream: BinaryIO) -> DecodedImage:
        # Pillow reports decompression-bomb sized inputs as a warning first
        with warnings.catch_warnings():
            warnings.simplefilter("error", Image.DecompressionBombWarning)
            try:
                image = Image.open(stream)
            except (UnidentifiedImageError, Image.DecompressionBombWarning, Image.DecompressionBombError) as e:
                raise DecodeError(f"Not a readable image: {e}") from e
            except (OSError, ValueError, SyntaxError) as e:
                raise DecodeError(f"Malformed image header: {e}") from e

            try:
                image.load()
            except (OSError, ValueError, SyntaxError, Image.DecompressionBombWarning) as e:
                # Truncated or malformed pixel data surfaces as one of these from the plugins
                image.close()
                raise DecodeError(f"Malformed image data: {e}") from e

        try:
            normalized = _normalize(image)
        except (OSError, ValueError) as e:
            image.close()
            raise DecodeError(f"Unsupported image mode {image.mode}: {e}") from e

        if normalized.width <= 0 or normalized.height <= 0:
            normalized.close()
            raise DecodeError(f"Zero-size image: {normalized.width}x{normalized.height}")

        return DecodedImage(normalized)


def _normalize(image: Image.Image) -> Image.Image:
    """
    Apply EXIF orientation and convert to an embeddable mode.

    Closes ``image`` when a new image is produced in its place.
    """
    oriented = ImageOps.exif_transpose(image)
    if oriented is not image:
        image.close()

    if oriented.mode in _PASSTHROUGH_MODES:
        return oriented

    if oriented.mode in _DEEP_GRAY_MODES or oriented.mode.startswith("I;16"):
        logger.debug(f"Rescaling {oriented.mode} image to L")
        converted = _to_8bit_gray(oriented)
        oriented.close()
        return converted

    has_alpha = oriented.mode in ("LA", "PA", "RGBa", "La") or (
        oriented.mode == "P" and "transparency" in oriented.info
    )
    converted = oriented.convert("RGBA" if has_alpha else "RGB")
    oriented.close()
    logger.debug(f"Converted image to {converted.mode}")
    return converted


def _to_8bit_gray(image: Image.Image) -> Image.Image:
    """
    Rescale a 16-bit, 32-bit integer or float grayscale image to mode L.

    A plain ``convert("L")`` clips instead of scaling, so a mid-gray
    16-bit image would come out white.

    Ranges:
        - I;16*: 0..65535
        - I: 0..255 or 0..65535 when the values fit, else min..max
        - F: 0..1 when the values fit, else min..max
    """
    source = image.convert("I") if image.mode.startswith("I;16") else image
    low, high = source.getextrema()

    if image.mode.startswith("I;16"):
        scale, offset = 1 / 256, 0.0
    elif source.mode == "F" and low >= 0 and high <= 1:
        scale, offset = 255.0, 0.0
    elif source.mode == "I" and low >= 0 and high <= 255:
        scale, offset = 1.0, 0.0
    elif source.mode == "I" and low >= 0 and high <= 65535:
        scale, offset = 1 / 256, 0.0
    elif high > low:
        scale = 255.0 / (high - low)
        offset = -low * scale
    else:
        # Flat image outside the known ranges
        scale, offset = 0.0, 128.0

    rescaled = source.point(lambda v: v * scale + offset)
    if source is not image:
        source.close()
    gray = rescaled.convert("L")
    rescaled.close()
    return gray
