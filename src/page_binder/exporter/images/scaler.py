"""
Module: exporter.images.scaler

Purpose:
    Resample a decoded image to exact page dimensions.

Key Classes:
    - ImageScaler: Abstract scaler interface
    - PillowImageScaler: Pillow ``Image.resize`` with a configurable filter
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from PIL import Image

from page_binder.core.models import PageSize


class ImageScaler(ABC):
    """Abstract interface for resampling an image."""

    @abstractmethod
    def scale(self, image: Image.Image, size: PageSize) -> Image.Image:
        """
        Resample ``image`` to exactly ``size``.

        Returns a new image; the input is left open and unchanged. The
        caller closes both.
        """


class PillowImageScaler(ImageScaler):
    """
    Resize with a Pillow resampling filter.

    Example:
        >>> scaler = PillowImageScaler(Image.Resampling.LANCZOS)
        >>> scaler.scale(Image.new("RGB", (800, 400)), PageSize(595, 298)).size
        (595, 298)
    """

    def __init__(self, resample: Image.Resampling = Image.Resampling.BILINEAR) -> None:
        self._resample = resample

    @property
    def resample(self) -> Image.Resampling:
        return self._resample

    def scale(self, image: Image.Image, size: PageSize) -> Image.Image:
        return image.resize(size.as_tuple(), resample=self._resample)
