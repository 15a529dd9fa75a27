"""
Module: exporter.errors

Purpose:
    Exception hierarchy and failure reasons for the export pipeline.

    DecodeError is per page and never escapes the export loop. Every
    ExportError subclass is fatal for the whole export and carries the
    FailureReason reported back to the caller.

Key Classes:
    - FailureReason: Enum of terminal failure kinds
    - DecodeError: One source could not be opened or decoded
    - ExportError: Base for fatal export failures
"""

from __future__ import annotations

from enum import Enum


class FailureReason(str, Enum):
    """Why an export produced no document."""

    SINK = "sink"
    NO_PAGES_PRODUCED = "no_pages_produced"
    INTERNAL_WRITE = "internal_write"
    CANCELLED = "cancelled"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    FailureReason.SINK: "Output location could not be created or written",
    FailureReason.NO_PAGES_PRODUCED: "No pages to export: every image failed to load",
    FailureReason.INTERNAL_WRITE: "Document could not be assembled",
    FailureReason.CANCELLED: "Export was cancelled",
}


class DecodeError(Exception):
    """Source bytes could not be read or interpreted as an image."""
    pass


class ExportError(Exception):
    """Fatal export failure."""

    reason: FailureReason = FailureReason.INTERNAL_WRITE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoPagesProducedError(ExportError):
    """Every source was skipped, nothing to write."""

    reason = FailureReason.NO_PAGES_PRODUCED


class SinkError(ExportError):
    """Output destination cannot be opened or written."""

    reason = FailureReason.SINK


class InternalWriteError(ExportError):
    """Unexpected failure while composing or serializing the document."""

    reason = FailureReason.INTERNAL_WRITE


class ExportCancelledError(ExportError):
    """Cancellation was requested before the export finished."""

    reason = FailureReason.CANCELLED
