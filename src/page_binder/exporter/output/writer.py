"""
Module: exporter.output.writer

Purpose:
    Assemble pages into a PDF using ReportLab. Each page gets its own
    size, and its image is drawn at the origin covering the whole page
    with no margin or background.

Key Classes:
    - DocumentWriter: Abstract writer interface
    - ReportLabDocumentWriter: Default PDF writer

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling

Used By:
    - exporter.controller: One writer per export
"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from typing import Optional

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)


class DocumentWriter(ABC):
    """
    Abstract multi-page document writer.

    Pages are appended in call order and numbered from 1. ``finish()``
    may only be called once.
    """

    @abstractmethod
    def add_page(self, width: int, height: int, image: Image.Image) -> None:
        """
        Append one page of exactly ``width`` x ``height`` showing ``image``.

        The writer must not keep a reference to ``image`` after returning;
        the caller closes it straight away.
        """

    @abstractmethod
    def finish(self) -> bytes:
        """Serialize the document and return its bytes."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages added so far."""


class ReportLabDocumentWriter(DocumentWriter):
    """
    PDF writer backed by a ReportLab canvas over an in-memory buffer.

    Page sizes are in PDF points. Images are embedded at the page size,
    so a page 595 wide shows a 595 pixel wide image at 72 dpi.

    Example:
        >>> writer = ReportLabDocumentWriter(title="Chapter 1")
        >>> writer.add_page(595, 842, Image.new("RGB", (595, 842), "white"))
        >>> pdf_bytes = writer.finish()
    """

    def __init__(
        self,
        *,
        title: Optional[str] = None,
        creator: Optional[str] = None,
    ) -> None:
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(self._buffer, pageCompression=1)
        if title:
            self._canvas.setTitle(title)
        if creator:
            self._canvas.setCreator(creator)
        self._page_count = 0
        self._finished = False

    @property
    def page_count(self) -> int:
        return self._page_count

    def add_page(self, width: int, height: int, image: Image.Image) -> None:
        if self._finished:
            raise RuntimeError("Cannot add pages after finish()")

        c = self._canvas
        c.setPageSize((width, height))
        # ReportLab encodes the pixels during drawImage; no reference is kept
        c.drawImage(
            ImageReader(image),
            0,
            0,
            width=width,
            height=height,
            mask="auto" if image.mode == "RGBA" else None,
        )
        c.showPage()
        self._page_count += 1
        logger.debug(f"Wrote page {self._page_count} ({width}x{height})")

    def finish(self) -> bytes:
        if self._finished:
            raise RuntimeError("finish() already called")
        self._finished = True
        self._canvas.save()
        data = self._buffer.getvalue()
        self._buffer.close()
        return data
