"""
Module: pages

Purpose:
    Per-page values produced during an export: the decoded image, the
    computed output size and skip records for pages that failed.

Key Classes:
    - DecodedImage: Transient decoded image (owns a Pillow image)
    - PageSize: Output page dimensions in document units
    - SkippedPage: Record of a source that contributed no page

Dependencies:
    - dataclasses (std)
    - PIL.Image: Pixel buffer

Used By:
    - exporter.images: Decoding and scaling
    - exporter.controller: Export loop and results
"""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True, slots=True)
class PageSize:
    """
    Output page dimensions.

    Attributes:
        width: Page width in document units (PDF points)
        height: Page height in document units

    Invariants:
        - width > 0
        - height > 0
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"width must be positive: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be positive: {self.height}")

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)


@dataclass(frozen=True, slots=True)
class SkippedPage:
    """
    A source that was skipped during export.

    Attributes:
        index: Zero-based position of the source in the export input
        identity: The source's identity string
        reason: Human-readable reason (open or decode failure)
    """

    index: int
    identity: str
    reason: str


class DecodedImage:
    """
    Decoded image for a single page.

    Lives only while its page is being written. Use as a context manager
    (or call ``close()``) so the pixel buffer is released before the next
    page is decoded.

    Attributes:
        image: Pillow image holding the pixels
        width: Pixel width
        height: Pixel height
    """

    __slots__ = ("_image",)

    def __init__(self, image: Image.Image) -> None:
        self._image = image

    @property
    def image(self) -> Image.Image:
        if self._image is None:
            raise ValueError("DecodedImage has been closed")
        return self._image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def closed(self) -> bool:
        return self._image is None

    def close(self) -> None:
        """Release the pixel buffer. Safe to call more than once."""
        if self._image is not None:
            self._image.close()
            self._image = None

    def __enter__(self) -> "DecodedImage":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        if self._image is None:
            return "DecodedImage(closed)"
        return f"DecodedImage({self._image.width}x{self._image.height}, mode={self._image.mode})"
