"""
Module: sources

Purpose:
    Page sources - re-readable references to one input image. A source
    only knows how to produce a fresh byte stream on demand; decoding is
    the decoder's job.

Key Classes:
    - PageSource: Abstract base for all sources
    - FilePageSource: Image file on disk
    - BytesPageSource: Image bytes held in memory

Dependencies:
    - abc, io, pathlib (std)

Used By:
    - core.models.page_list.PageList
    - exporter.controller.DocumentExporter
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Union


class PageSource(ABC):
    """
    Opaque, re-readable reference to an image.

    Every call to ``open()`` must return a new stream positioned at the
    start of the image data. Callers own the returned stream and close it.
    """

    @property
    @abstractmethod
    def identity(self) -> str:
        """Stable, human-readable identity used in logs and skip reports."""

    @abstractmethod
    def open(self) -> BinaryIO:
        """
        Open a byte stream for the image.

        Returns:
            Binary stream positioned at offset 0

        Raises:
            OSError: If the underlying data cannot be read
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identity!r})"


class FilePageSource(PageSource):
    """
    Image file on disk.

    The file is not touched until ``open()`` is called, so a source may
    be created for a path that later disappears; that page is then
    skipped at export time.

    Example:
        >>> source = FilePageSource("scans/page-001.png")
        >>> source.identity
        'scans/page-001.png'
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def identity(self) -> str:
        return self._path.as_posix()

    def open(self) -> BinaryIO:
        return self._path.open("rb")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilePageSource):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)


class BytesPageSource(PageSource):
    """Image bytes already held in memory."""

    def __init__(self, data: bytes, name: str = "<bytes>") -> None:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"data must be bytes-like: {type(data).__name__}")
        self._data = bytes(data)
        self._name = name

    @property
    def identity(self) -> str:
        return self._name

    def open(self) -> BinaryIO:
        return io.BytesIO(self._data)
