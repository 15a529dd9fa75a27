"""
Module: exporter.output.sink

Purpose:
    Output destinations for a finished document. A sink is opened before
    any page is processed, so an unwritable destination fails the export
    immediately, and it is either committed with the final bytes or
    discarded. A file sink never leaves a truncated file behind.

Key Classes:
    - Sink: Abstract open/commit/discard protocol
    - FileSink: Atomic write via a temporary file in the target directory
    - StreamSink: Caller-supplied binary writer

Key Functions:
    - open_sink(): Pick and open the right sink for a path or stream

Dependencies:
    - tempfile, os, pathlib (std)
"""

from __future__ import annotations

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional, Union

from page_binder.exporter.errors import SinkError

logger = logging.getLogger(__name__)

SinkTarget = Union[str, Path, BinaryIO]


class Sink(ABC):
    """Destination for the serialized document."""

    @abstractmethod
    def open(self) -> None:
        """Prepare the destination. Raises SinkError if it is unusable."""

    @abstractmethod
    def commit(self, data: bytes) -> Optional[Path]:
        """Write the document. Returns the final path for file sinks."""

    @abstractmethod
    def discard(self) -> None:
        """Drop anything written so far. Safe to call more than once."""

    def __enter__(self) -> "Sink":
        # open() is called by open_sink() before the with block
        return self

    def __exit__(self, *args) -> None:
        # No-op after a successful commit
        self.discard()


class FileSink(Sink):
    """
    Write to a file path atomically.

    ``open()`` creates the parent directory and a temporary file next to
    the target. ``commit()`` writes, fsyncs and renames the temporary file
    over the target.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._temp_file: Optional[BinaryIO] = None
        self._temp_path: Optional[Path] = None

    @property
    def path(self) -> Path:
        return self._path

    def open(self) -> None:
        if self._path.is_dir():
            raise SinkError(f"Output path is a directory: {self._path}")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._temp_file = tempfile.NamedTemporaryFile(
                mode="wb",
                prefix=f".{self._path.stem}-",
                suffix=".tmp",
                dir=self._path.parent,
                delete=False,
            )
        except OSError as e:
            raise SinkError(f"Cannot create output file {self._path}: {e}") from e
        self._temp_path = Path(self._temp_file.name)
        logger.debug(f"Opened temporary output {self._temp_path}")

    def commit(self, data: bytes) -> Path:
        if self._temp_file is None or self._temp_path is None:
            raise SinkError(f"Sink for {self._path} is not open")
        try:
            self._temp_file.write(data)
            self._temp_file.flush()
            os.fsync(self._temp_file.fileno())
            self._temp_file.close()
            self._temp_path.replace(self._path)
        except OSError as e:
            self.discard()
            raise SinkError(f"Cannot write output file {self._path}: {e}") from e

        self._temp_file = None
        self._temp_path = None
        return self._path

    def discard(self) -> None:
        if self._temp_file is not None:
            try:
                self._temp_file.close()
            except OSError as e:
                logger.debug(f"Closing temporary output failed: {e}")
            self._temp_file = None
        if self._temp_path is not None:
            self._temp_path.unlink(missing_ok=True)
            logger.debug(f"Removed temporary output {self._temp_path}")
            self._temp_path = None


class StreamSink(Sink):
    """
    Write to a caller-supplied binary writer.

    The stream is left open; the caller owns it. Bytes are only written
    on commit, so a failed export writes nothing to the stream.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def open(self) -> None:
        if getattr(self._stream, "closed", False):
            raise SinkError("Output stream is closed")
        writable = getattr(self._stream, "writable", None)
        if writable is not None and not writable():
            raise SinkError("Output stream is not writable")

    def commit(self, data: bytes) -> None:
        try:
            self._stream.write(data)
            self._stream.flush()
        except (OSError, ValueError) as e:
            raise SinkError(f"Cannot write output stream: {e}") from e
        return None

    def discard(self) -> None:
        pass


def open_sink(target: SinkTarget) -> Sink:
    """
    Create and open the sink for a path or a binary stream.

    Raises:
        SinkError: If the destination cannot be opened
    """
    if hasattr(target, "write"):
        sink: Sink = StreamSink(target)  # type: ignore[arg-type]
    else:
        sink = FileSink(Path(target))  # type: ignore[arg-type]
    sink.open()
    return sink
