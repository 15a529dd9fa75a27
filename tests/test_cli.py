"""
Tests for the page-binder command line.
"""

import pytest

from page_binder.cli import main


class TestCli:
    """Tests for cli.main()."""

    def test_main_when_images_given_then_exports_and_returns_zero(self, tmp_path, make_image, capsys, pdf_page_sizes):
        a = make_image("a.png", (1000, 2000))
        c = make_image("c.png", (800, 400))
        output = tmp_path / "book.pdf"

        code = main([str(a), str(c), "-o", str(output)])

        assert code == 0
        assert f"Exported 2 pages to {output}" in capsys.readouterr().out
        assert pdf_page_sizes(output) == [(595, 1190), (595, 298)]

    def test_main_when_some_missing_then_reports_skipped(self, tmp_path, make_image, capsys):
        a = make_image("a.png", (100, 100))

        code = main([str(a), str(tmp_path / "missing.png"), "-o", str(tmp_path / "book.pdf")])

        assert code == 0
        assert "(1 skipped)" in capsys.readouterr().out

    def test_main_when_width_given_then_applied(self, tmp_path, make_image, pdf_page_sizes):
        a = make_image("a.png", (100, 50))
        output = tmp_path / "book.pdf"

        main([str(a), "-o", str(output), "--width", "200", "--resample", "nearest"])

        assert pdf_page_sizes(output) == [(200, 100)]

    def test_main_when_no_images_then_returns_two(self, tmp_path, capsys):
        code = main(["-o", str(tmp_path / "book.pdf")])

        assert code == 2
        assert "No pages to export" in capsys.readouterr().out
        assert not (tmp_path / "book.pdf").exists()

    def test_main_when_all_corrupt_then_returns_one(self, tmp_path, capsys):
        corrupt = tmp_path / "x.png"
        corrupt.write_bytes(b"nope")

        code = main([str(corrupt), "-o", str(tmp_path / "book.pdf")])

        assert code == 1
        assert "Export failed" in capsys.readouterr().out

    def test_main_when_width_invalid_then_usage_error(self, tmp_path, make_image):
        a = make_image("a.png", (10, 10))
        with pytest.raises(SystemExit) as exc:
            main([str(a), "-o", str(tmp_path / "book.pdf"), "--width", "0"])
        assert exc.value.code == 2
