"""
Module: exporter.config

Purpose:
    Configuration dataclass for the export pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - ExportConfig: Page width, resampling and default output location

Dependencies:
    - dataclasses (std)
    - pathlib (std)
    - PIL.Image: Resampling filters

Used By:
    - exporter.controller: DocumentExporter
    - cli: Built from command line arguments
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image

# ISO A4 width in points at 72 dpi
A4_WIDTH_PT = 595

RESAMPLE_FILTERS = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


@dataclass(frozen=True)
class ExportConfig:
    """
    Configuration for exporting a document (immutable).

    Attributes:
        target_page_width: Width every page is scaled to, in PDF points
        resample: Resampling filter name (nearest, bilinear, bicubic, lanczos)
        output_dir: Directory for the default sink (None = current directory)
        filename: File name for the default sink
        title: Optional PDF title metadata
        creator: PDF creator metadata

    Example:
        >>> config = ExportConfig(target_page_width=595, output_dir=Path("out"))
        >>> config.default_output_path
        PosixPath('out/export.pdf')
    """

    target_page_width: int = A4_WIDTH_PT
    resample: str = "bilinear"

    # Default sink
    output_dir: Optional[Path] = None
    filename: str = "export.pdf"

    # Metadata
    title: Optional[str] = None
    creator: str = "page-binder"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        # bool is an int subclass; reject it explicitly
        if isinstance(self.target_page_width, bool) or not isinstance(self.target_page_width, int):
            raise ValueError(f"target_page_width must be an integer: {self.target_page_width!r}")
        if self.target_page_width <= 0:
            raise ValueError(f"target_page_width must be positive: {self.target_page_width}")
        if self.resample not in RESAMPLE_FILTERS:
            raise ValueError(
                f"resample must be one of {sorted(RESAMPLE_FILTERS)}: {self.resample!r}"
            )
        if not self.filename or Path(self.filename).name != self.filename:
            raise ValueError(f"filename must be a bare file name: {self.filename!r}")
        if not self.filename.lower().endswith(".pdf"):
            raise ValueError(f"filename must end with .pdf: {self.filename!r}")

    @property
    def resample_filter(self) -> Image.Resampling:
        return RESAMPLE_FILTERS[self.resample]

    @property
    def default_output_path(self) -> Path:
        """Sink used when ``export`` is called without one."""
        base = Path(self.output_dir) if self.output_dir is not None else Path.cwd()
        return base / self.filename
