"""
Core Models Package

**DESIGN RATIONALE:**

Value models (PageSize, SkippedPage) are frozen dataclasses so they can be
shared with the caller's thread once an export finishes. DecodedImage is the
one transient, resource-owning model: it wraps an open Pillow image and must
be closed as soon as its page has been written.

PageList is the only mutable model. It is never handed to the exporter
directly; the exporter works on ``PageList.snapshot()``.
"""

from .sources import PageSource, FilePageSource, BytesPageSource
from .page_list import PageList
from .pages import DecodedImage, PageSize, SkippedPage

__all__ = [
    "PageSource",
    "FilePageSource",
    "BytesPageSource",
    "PageList",
    "DecodedImage",
    "PageSize",
    "SkippedPage",
]
