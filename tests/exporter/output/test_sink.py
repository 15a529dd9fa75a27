"""
Tests for exporter.output.sink

Test Coverage:
- FileSink: atomic commit, discard, unusable destinations
- StreamSink: caller-owned streams
- open_sink(): dispatch on path vs stream
"""

import io

import pytest

from page_binder.exporter.errors import SinkError
from page_binder.exporter.output import FileSink, StreamSink, open_sink


def _temp_files(directory):
    return [p for p in directory.iterdir() if p.suffix == ".tmp"]


class TestFileSink:
    """Tests for FileSink."""

    def test_commit_when_open_then_writes_file(self, tmp_path):
        target = tmp_path / "out.pdf"
        sink = open_sink(target)

        path = sink.commit(b"%PDF-data")

        assert path == target
        assert target.read_bytes() == b"%PDF-data"
        assert _temp_files(tmp_path) == []

    def test_open_when_parent_missing_then_creates_it(self, tmp_path):
        target = tmp_path / "nested" / "deeper" / "out.pdf"
        with open_sink(target) as sink:
            sink.commit(b"x")
        assert target.exists()

    def test_open_when_parent_is_file_then_raises_sink_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(SinkError, match="Cannot create output file"):
            open_sink(blocker / "out.pdf")

        assert blocker.read_text() == "not a directory"

    def test_open_when_target_is_directory_then_raises_sink_error(self, tmp_path):
        with pytest.raises(SinkError, match="is a directory"):
            open_sink(tmp_path)

    def test_discard_when_not_committed_then_no_file_left(self, tmp_path):
        target = tmp_path / "out.pdf"
        sink = open_sink(target)
        assert len(_temp_files(tmp_path)) == 1

        sink.discard()

        assert not target.exists()
        assert _temp_files(tmp_path) == []

    def test_exit_when_exception_then_discards(self, tmp_path):
        target = tmp_path / "out.pdf"
        with pytest.raises(RuntimeError):
            with open_sink(target):
                raise RuntimeError("boom")
        assert list(tmp_path.iterdir()) == []

    def test_commit_when_target_exists_then_replaced(self, tmp_path):
        target = tmp_path / "out.pdf"
        target.write_bytes(b"old")
        with open_sink(target) as sink:
            sink.commit(b"new")
        assert target.read_bytes() == b"new"

    def test_commit_when_replace_fails_then_raises_and_cleans_up(self, tmp_path, monkeypatch):
        target = tmp_path / "out.pdf"
        sink = open_sink(target)

        def _fail(self, other):
            raise PermissionError("read-only")

        monkeypatch.setattr(type(target), "replace", _fail)

        with pytest.raises(SinkError, match="Cannot write output file"):
            sink.commit(b"data")

        monkeypatch.undo()
        assert not target.exists()
        assert _temp_files(tmp_path) == []

    def test_commit_when_not_opened_then_raises_sink_error(self, tmp_path):
        with pytest.raises(SinkError, match="not open"):
            FileSink(tmp_path / "out.pdf").commit(b"x")


class TestStreamSink:
    """Tests for StreamSink."""

    def test_commit_when_writable_then_writes_bytes(self):
        stream = io.BytesIO()
        sink = open_sink(stream)

        assert isinstance(sink, StreamSink)
        assert sink.commit(b"%PDF") is None
        assert stream.getvalue() == b"%PDF"
        assert not stream.closed

    def test_open_when_stream_closed_then_raises_sink_error(self):
        stream = io.BytesIO()
        stream.close()
        with pytest.raises(SinkError, match="closed"):
            open_sink(stream)

    def test_open_when_stream_read_only_then_raises_sink_error(self, sample_image):
        with sample_image.open("rb") as stream:
            with pytest.raises(SinkError, match="not writable"):
                open_sink(stream)

    def test_commit_when_write_fails_then_raises_sink_error(self):
        class _BrokenStream(io.RawIOBase):
            def writable(self):
                return True

            def write(self, data):
                raise OSError("disk full")

        with pytest.raises(SinkError, match="disk full"):
            open_sink(_BrokenStream()).commit(b"x")
