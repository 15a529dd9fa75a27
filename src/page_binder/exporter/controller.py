"""
Module: exporter.controller

Purpose:
    Orchestrate the export pipeline for an ordered list of page sources.
    Snapshot → (Open → Decode → Size → Scale → Write) per page → Commit

    Unreadable pages are skipped and the export carries on. Failures that
    leave no usable document (no pages, bad sink, writer errors,
    cancellation) end the export and are reported as a failed
    ExportResult.

Key Functions:
    - export_pages(): One-call export to a path or stream

Key Classes:
    - DocumentExporter: Configurable exporter with sync and async entry points
    - ExportResult: Terminal outcome (immutable)

Dependencies:
    - exporter.images: Decoding and scaling
    - exporter.output: PDF writer and sinks
    - exporter.sizing: Page geometry

Used By:
    - cli: Command line front end
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from page_binder.core.models import DecodedImage, PageSource, SkippedPage

from .config import ExportConfig
from .errors import (
    DecodeError,
    ExportCancelledError,
    ExportError,
    FailureReason,
    InternalWriteError,
    NoPagesProducedError,
)
from .images import ImageDecoder, ImageScaler, PillowImageDecoder, PillowImageScaler
from .output import DocumentWriter, ReportLabDocumentWriter, Sink, SinkTarget, open_sink
from .sizing import compute_page_size

logger = logging.getLogger(__name__)

WriterFactory = Callable[[ExportConfig], DocumentWriter]


@dataclass(frozen=True)
class ExportResult:
    """
    Terminal outcome of one export (immutable).

    Exactly one of success or failure: ``failure`` is None on success.

    Attributes:
        path: Written file, or None on failure or when the sink was a stream
        page_count: Pages in the produced document
        skipped: Sources that contributed no page, in input order
        failure: Failure reason, None on success
        message: Human-readable failure message
        elapsed: Wall time in seconds

    Example:
        >>> result = export_pages(pages, Path("out/book.pdf"))
        >>> if result.ok:
        ...     print(f"{result.page_count} pages, {len(result.skipped)} skipped")
    """
    path: Optional[Path] = None
    page_count: int = 0
    skipped: Tuple[SkippedPage, ...] = ()
    failure: Optional[FailureReason] = None
    message: str = ""
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def succeeded(
        cls,
        path: Optional[Path],
        page_count: int,
        skipped: Tuple[SkippedPage, ...] = (),
        elapsed: float = 0.0,
    ) -> "ExportResult":
        return cls(path=path, page_count=page_count, skipped=skipped, elapsed=elapsed)

    @classmethod
    def failed(
        cls,
        reason: FailureReason,
        message: str,
        skipped: Tuple[SkippedPage, ...] = (),
        elapsed: float = 0.0,
    ) -> "ExportResult":
        return cls(failure=reason, message=message, skipped=skipped, elapsed=elapsed)

    def summary(self) -> str:
        """One-line message for the user."""
        if not self.ok:
            return f"Export failed: {self.failure.description}. {self.message}"
        location = str(self.path) if self.path is not None else "output stream"
        text = f"Exported {self.page_count} pages to {location}"
        if self.skipped:
            text += f" ({len(self.skipped)} skipped)"
        return text


class DocumentExporter:
    """
    Export ordered page sources to a single PDF.

    Collaborators are injectable so tests can use synthetic images and
    embedding applications can swap the PDF backend.

    Usage:
        with DocumentExporter(ExportConfig(target_page_width=595)) as exporter:
            future = exporter.export_async(page_list, Path("book.pdf"))
            result = future.result()

    Attributes:
        config: Export configuration
    """

    def __init__(
        self,
        config: Optional[ExportConfig] = None,
        *,
        decoder: Optional[ImageDecoder] = None,
        scaler: Optional[ImageScaler] = None,
        writer_factory: Optional[WriterFactory] = None,
    ) -> None:
        self.config = config or ExportConfig()
        self._decoder = decoder or PillowImageDecoder()
        self._scaler = scaler or PillowImageScaler(self.config.resample_filter)
        self._writer_factory = writer_factory or _default_writer
        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()

    # ─────────────────────────────────────────────────────────────────────
    # Entry points
    # ─────────────────────────────────────────────────────────────────────

    def export(
        self,
        pages: Iterable[PageSource],
        sink: Optional[SinkTarget] = None,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> ExportResult:
        """
        Export pages to one document.

        Pipeline:
        1. Snapshot the input order
        2. Open the sink (fails fast if unwritable)
        3. Per page: open, decode, size, scale, write, release
        4. Serialize and commit to the sink

        Args:
            pages: Ordered page sources (a PageList or any iterable)
            sink: Output path or binary stream (default: config.default_output_path)
            cancel_event: Checked before each page; when set the export
                stops with a CANCELLED result

        Returns:
            ExportResult; failures are reported in the result, not raised
        """
        snapshot = tuple(pages)
        target = sink if sink is not None else self.config.default_output_path
        skipped: List[SkippedPage] = []
        start_time = time.perf_counter()

        logger.info(
            f"Exporting {len(snapshot)} sources at page width {self.config.target_page_width}"
        )

        try:
            path, page_count = self._run(snapshot, target, skipped, cancel_event)
        except ExportError as e:
            elapsed = time.perf_counter() - start_time
            logger.error(f"Export failed ({e.reason.value}): {e.message}")
            return ExportResult.failed(e.reason, e.message, tuple(skipped), elapsed)
        except Exception as e:
            elapsed = time.perf_counter() - start_time
            logger.exception(f"Export failed unexpectedly: {e}")
            return ExportResult.failed(
                FailureReason.INTERNAL_WRITE,
                f"Unexpected error: {type(e).__name__}: {e}",
                tuple(skipped),
                elapsed,
            )

        elapsed = time.perf_counter() - start_time
        logger.info(
            f"Exported {page_count} pages ({len(skipped)} skipped) in {elapsed:.2f}s"
        )
        return ExportResult.succeeded(path, page_count, tuple(skipped), elapsed)

    def export_async(
        self,
        pages: Iterable[PageSource],
        sink: Optional[SinkTarget] = None,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> "Future[ExportResult]":
        """
        Run ``export`` on the exporter's background worker.

        The input is snapshotted before this method returns, so the caller
        may keep editing its list while the export runs. Exports submitted
        to the same exporter run one after another.

        Returns:
            Future resolving to the ExportResult
        """
        snapshot = tuple(pages)
        return self._get_executor().submit(
            self.export, snapshot, sink, cancel_event=cancel_event
        )

    def shutdown(self, wait: bool = True) -> None:
        """Stop the background worker."""
        with self._executor_lock:
            if self._executor is not None:
                self._executor.shutdown(wait=wait)
                self._executor = None

    def __enter__(self) -> "DocumentExporter":
        return self

    def __exit__(self, *args) -> None:
        self.shutdown()

    # ─────────────────────────────────────────────────────────────────────
    # Pipeline
    # ─────────────────────────────────────────────────────────────────────

    def _run(
        self,
        snapshot: Tuple[PageSource, ...],
        target: SinkTarget,
        skipped: List[SkippedPage],
        cancel_event: Optional[threading.Event],
    ) -> Tuple[Optional[Path], int]:
        with open_sink(target) as sink:
            writer = self._create_writer()

            for index, source in enumerate(snapshot):
                if cancel_event is not None and cancel_event.is_set():
                    raise ExportCancelledError(
                        f"Cancelled before source {index + 1} of {len(snapshot)}"
                    )

                decoded = self._load(index, source, skipped)
                if decoded is None:
                    continue
                with decoded:
                    self._write_page(writer, decoded, source)

            if writer.page_count == 0:
                raise NoPagesProducedError(
                    f"None of the {len(snapshot)} sources could be read"
                )

            path = self._commit(writer, sink)
            return path, writer.page_count

    def _load(
        self,
        index: int,
        source: PageSource,
        skipped: List[SkippedPage],
    ) -> Optional[DecodedImage]:
        """Open and decode one source. Returns None (and records a skip) on failure."""
        # Any failure to open or decode costs this page only
        try:
            stream = source.open()
        except Exception as e:
            self._skip(skipped, index, source, f"Cannot open: {e}")
            return None

        try:
            with stream:
                decoded = self._decoder.decode(stream)
        except DecodeError as e:
            self._skip(skipped, index, source, str(e))
            return None
        except OSError as e:
            self._skip(skipped, index, source, f"Read failed: {e}")
            return None
        except Exception as e:
            self._skip(skipped, index, source, f"Decode failed: {type(e).__name__}: {e}")
            return None

        if decoded.width <= 0 or decoded.height <= 0:
            reason = f"Zero-size image: {decoded.width}x{decoded.height}"
            decoded.close()
            self._skip(skipped, index, source, reason)
            return None

        return decoded

    def _write_page(
        self,
        writer: DocumentWriter,
        decoded: DecodedImage,
        source: PageSource,
    ) -> None:
        size = compute_page_size(decoded.width, decoded.height, self.config.target_page_width)
        logger.debug(
            f"Page {writer.page_count + 1}: {source.identity} "
            f"{decoded.width}x{decoded.height} -> {size.width}x{size.height}"
        )

        try:
            scaled = self._scaler.scale(decoded.image, size)
        except Exception as e:
            raise InternalWriteError(f"Resampling {source.identity} failed: {e}") from e

        try:
            writer.add_page(size.width, size.height, scaled)
        except Exception as e:
            raise InternalWriteError(f"Writing page for {source.identity} failed: {e}") from e
        finally:
            if scaled is not decoded.image:
                scaled.close()

    def _commit(self, writer: DocumentWriter, sink: Sink) -> Optional[Path]:
        try:
            data = writer.finish()
        except Exception as e:
            raise InternalWriteError(f"Serializing document failed: {e}") from e
        # SinkError from commit propagates unchanged
        return sink.commit(data)

    def _create_writer(self) -> DocumentWriter:
        try:
            return self._writer_factory(self.config)
        except Exception as e:
            raise InternalWriteError(f"Cannot create document writer: {e}") from e

    @staticmethod
    def _skip(
        skipped: List[SkippedPage],
        index: int,
        source: PageSource,
        reason: str,
    ) -> None:
        logger.warning(f"Skipping source {index + 1} ({source.identity}): {reason}")
        skipped.append(SkippedPage(index=index, identity=source.identity, reason=reason))

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=1, thread_name_prefix="page-binder-export"
                )
            return self._executor


def _default_writer(config: ExportConfig) -> DocumentWriter:
    return ReportLabDocumentWriter(title=config.title, creator=config.creator)


def export_pages(
    pages: Iterable[PageSource],
    output: SinkTarget,
    *,
    target_page_width: Optional[int] = None,
    cancel_event: Optional[threading.Event] = None,
) -> ExportResult:
    """
    Export pages to a path or stream in one call.

    Args:
        pages: Ordered page sources
        output: Output file path or binary stream
        target_page_width: Page width in points (default: A4 width, 595)
        cancel_event: Optional cooperative cancellation flag

    Returns:
        ExportResult

    Example:
        >>> result = export_pages(
        ...     [FilePageSource("a.png"), FilePageSource("b.jpg")],
        ...     Path("out/book.pdf"),
        ... )
        >>> result.summary()
        'Exported 2 pages to out/book.pdf'
    """
    config = ExportConfig() if target_page_width is None else ExportConfig(
        target_page_width=target_page_width
    )
    return DocumentExporter(config).export(pages, output, cancel_event=cancel_event)
