"""
Module: exporter

Purpose:
    Export pipeline turning an ordered list of images into one paginated
    PDF. Every page is scaled to a fixed width with its aspect ratio kept;
    unreadable images are skipped without failing the export.

Key Functions:
    - export_pages(): One-call export
    - compute_page_size(): Page geometry for one image

Key Classes:
    - ExportConfig: Configuration
    - DocumentExporter: Sync/async exporter with injectable collaborators
    - ExportResult: Terminal outcome
    - FailureReason: Why an export produced nothing

Dependencies:
    - PIL: Decoding and resampling
    - reportlab: PDF generation
"""

from .config import A4_WIDTH_PT, ExportConfig
from .controller import DocumentExporter, ExportResult, export_pages
from .errors import (
    DecodeError,
    ExportCancelledError,
    ExportError,
    FailureReason,
    InternalWriteError,
    NoPagesProducedError,
    SinkError,
)
from .sizing import compute_page_size, round_half_up

__all__ = [
    # Config
    "A4_WIDTH_PT",
    "ExportConfig",
    # Controller
    "DocumentExporter",
    "ExportResult",
    "export_pages",
    # Errors
    "FailureReason",
    "DecodeError",
    "ExportError",
    "NoPagesProducedError",
    "SinkError",
    "InternalWriteError",
    "ExportCancelledError",
    # Sizing
    "compute_page_size",
    "round_half_up",
]
