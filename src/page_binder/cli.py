"""
Command line front end.

Usage:
    page-binder scans/*.png -o book.pdf
    page-binder cover.jpg p1.jpg p2.jpg -o out/book.pdf --width 842 --resample lanczos

Pages are exported in argument order. The command prints one final line
and exits 0 on success, 1 when the export failed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from page_binder import __version__
from page_binder.core.models import FilePageSource, PageList
from page_binder.exporter import DocumentExporter, ExportConfig
from page_binder.exporter.config import A4_WIDTH_PT, RESAMPLE_FILTERS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="page-binder",
        description="Bind an ordered list of images into a single PDF, one page per image.",
    )
    parser.add_argument("images", nargs="*", type=Path, help="Input images, in page order")
    parser.add_argument("--output", "-o", type=Path, required=True, help="Output PDF path")
    parser.add_argument(
        "--width",
        "-w",
        type=int,
        default=A4_WIDTH_PT,
        help=f"Page width in points (default: {A4_WIDTH_PT}, A4)",
    )
    parser.add_argument(
        "--resample",
        choices=sorted(RESAMPLE_FILTERS),
        default="bilinear",
        help="Resampling filter (default: bilinear)",
    )
    parser.add_argument("--title", type=str, default=None, help="PDF title metadata")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log per-page details")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    if not args.images:
        print("No pages to export")
        return 2

    try:
        config = ExportConfig(
            target_page_width=args.width,
            resample=args.resample,
            title=args.title,
        )
    except ValueError as e:
        parser.error(str(e))

    pages = PageList(FilePageSource(path) for path in args.images)

    with DocumentExporter(config) as exporter:
        result = exporter.export(pages.snapshot(), args.output)

    for skip in result.skipped:
        logger.info(f"Skipped {skip.identity}: {skip.reason}")
    print(result.summary())
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
