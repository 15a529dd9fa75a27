"""
Page Binder Core Package

Shared data models for the export pipeline. Models describe what is
exported (page sources, decoded images, page geometry); the exporter
package describes how.
"""

from .models import (
    BytesPageSource,
    DecodedImage,
    FilePageSource,
    PageList,
    PageSize,
    PageSource,
    SkippedPage,
)

__all__ = [
    "PageSource",
    "FilePageSource",
    "BytesPageSource",
    "PageList",
    "DecodedImage",
    "PageSize",
    "SkippedPage",
]
