import io
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import page_binder
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def make_image(tmp_path: Path):
    """Factory writing a solid-color image file and returning its path."""
    def _make(name: str, size, color="white", mode: str = "RGB") -> Path:
        img = Image.new(mode, size, color=color)
        img_path = tmp_path / name
        img.save(img_path)
        img.close()
        return img_path
    return _make


@pytest.fixture
def image_bytes():
    """Factory returning encoded image bytes."""
    def _bytes(size, color="white", mode: str = "RGB", fmt: str = "PNG") -> bytes:
        buf = io.BytesIO()
        Image.new(mode, size, color=color).save(buf, format=fmt)
        return buf.getvalue()
    return _bytes


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path


@pytest.fixture
def pdf_page_sizes():
    """Return (width, height) of every page in a PDF file or byte string."""
    from pypdf import PdfReader

    def _sizes(pdf):
        source = io.BytesIO(pdf) if isinstance(pdf, (bytes, bytearray)) else pdf
        reader = PdfReader(source)
        return [
            (round(float(page.mediabox.width)), round(float(page.mediabox.height)))
            for page in reader.pages
        ]
    return _sizes
