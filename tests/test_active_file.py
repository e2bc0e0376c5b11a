"""Tests for the active file handle."""

import os

from rotating_transport.active_file import ActiveFile


class TestActiveFile:
    def test_new_file_starts_empty(self, tmp_path):
        active = ActiveFile.open(str(tmp_path / "app.log"))
        assert active.size == 0
        active.close()
        assert os.path.exists(tmp_path / "app.log")

    def test_existing_size_counted(self, tmp_path):
        path = tmp_path / "app.log"
        path.write_bytes(b"x" * 100)
        active = ActiveFile.open(str(path))
        assert active.size_at_open == 100
        active.write("abc\n")
        assert active.size == 104
        active.close()
        assert path.read_bytes() == b"x" * 100 + b"abc\n"

    def test_truncate_mode(self, tmp_path):
        path = tmp_path / "app.log"
        path.write_bytes(b"x" * 100)
        active = ActiveFile.open(str(path), "w")
        assert active.size == 0
        active.write("new\n")
        active.close()
        assert path.read_bytes() == b"new\n"

    def test_counts_encoded_bytes(self, tmp_path):
        active = ActiveFile.open(str(tmp_path / "app.log"))
        written = active.write("héllo\n")
        active.close()
        assert written == 7
        assert active.bytes_written == 7

    def test_size_is_not_restatted(self, tmp_path):
        path = tmp_path / "app.log"
        active = ActiveFile.open(str(path))
        active.write("one\n")
        with open(path, "ab") as other:
            other.write(b"external\n")
        assert active.size == 4
        active.close()

    def test_close_twice(self, tmp_path):
        active = ActiveFile.open(str(tmp_path / "app.log"))
        active.close()
        active.close()
        assert active.closed
