"""Top-level package for Page Binder.

Provides subpackages:
- page_binder.core – page sources, page list and per-page models
- page_binder.exporter – the image-to-PDF export pipeline
- page_binder.cli – command line front end
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("page-binder")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 The Page Binder Authors. Licensed under the MIT License"

from page_binder.core.models import (  # noqa: E402
    BytesPageSource,
    FilePageSource,
    PageList,
    PageSource,
)
from page_binder.exporter import (  # noqa: E402
    DocumentExporter,
    ExportConfig,
    ExportResult,
    FailureReason,
    export_pages,
)

__all__: list[str] = [
    "__version__",
    "PageSource",
    "FilePageSource",
    "BytesPageSource",
    "PageList",
    "ExportConfig",
    "DocumentExporter",
    "ExportResult",
    "FailureReason",
    "export_pages",
]
