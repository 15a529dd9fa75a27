"""
Module: exporter.images

Purpose:
    Image decoding and resampling collaborators for the export pipeline.
    Both are abstract interfaces with Pillow-backed defaults, so tests and
    embedding applications can substitute their own.

Key Classes:
    - ImageDecoder / PillowImageDecoder
    - ImageScaler / PillowImageScaler
"""

from .decoder import ImageDecoder, PillowImageDecoder
from .scaler import ImageScaler, PillowImageScaler

__all__ = [
    "ImageDecoder",
    "PillowImageDecoder",
    "ImageScaler",
    "PillowImageScaler",
]
