"""
Module: exporter.output

Purpose:
    PDF assembly and output destinations.

Key Classes:
    - DocumentWriter / ReportLabDocumentWriter: Page assembly
    - Sink / FileSink / StreamSink: Where the bytes go

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
"""

from .writer import DocumentWriter, ReportLabDocumentWriter
from .sink import FileSink, Sink, SinkTarget, StreamSink, open_sink

__all__ = [
    "DocumentWriter",
    "ReportLabDocumentWriter",
    "Sink",
    "SinkTarget",
    "FileSink",
    "StreamSink",
    "open_sink",
]
