"""
儲存實作測試
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from glide.core.exceptions import FilesystemError
from glide.core.interfaces import FilesystemProtocol
from glide.filesystem import LocalFilesystem, MemoryFilesystem


class TestLocalFilesystem:
    """測試本機檔案系統"""

    @pytest.mark.unit
    def test_satisfies_protocol(self, tmp_path: Path) -> None:
        assert isinstance(LocalFilesystem(tmp_path), FilesystemProtocol)

    @pytest.mark.unit
    def test_construction_does_not_create_root(self, tmp_path: Path) -> None:
        root = tmp_path / "not-yet"
        fs = LocalFilesystem(root)

        assert fs.root == root
        assert not root.exists()

    @pytest.mark.integration
    def test_write_read_exists(self, tmp_path: Path) -> None:
        fs = LocalFilesystem(tmp_path / "store")

        assert fs.exists("a/b/c.bin") is False
        fs.write("a/b/c.bin", b"payload")

        assert fs.exists("a/b/c.bin") is True
        assert fs.read("a/b/c.bin") == b"payload"
        assert (tmp_path / "store" / "a" / "b" / "c.bin").read_bytes() == b"payload"

    @pytest.mark.integration
    def test_write_replaces_atomically(self, tmp_path: Path) -> None:
        fs = LocalFilesystem(tmp_path)
        fs.write("img.png", b"old")
        fs.write("img.png", b"new")

        assert fs.read("img.png") == b"new"
        assert [p.name for p in tmp_path.iterdir()] == ["img.png"]

    @pytest.mark.integration
    def test_failed_write_keeps_previous_file(self, tmp_path: Path) -> None:
        fs = LocalFilesystem(tmp_path)
        fs.write("img.png", b"old")

        with (
            patch("glide.filesystem.local.os.replace", side_effect=OSError("disk full")),
            pytest.raises(OSError, match="disk full"),
        ):
            fs.write("img.png", b"partial")

        assert fs.read("img.png") == b"old"
        assert [p.name for p in tmp_path.iterdir()] == ["img.png"]

    @pytest.mark.integration
    def test_leading_slash_is_relative_to_root(self, tmp_path: Path) -> None:
        fs = LocalFilesystem(tmp_path)
        fs.write("/img.png", b"x")

        assert (tmp_path / "img.png").exists()
        assert fs.read("img.png") == b"x"

    @pytest.mark.integration
    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        (tmp_path / "dir").mkdir()
        assert LocalFilesystem(tmp_path).exists("dir") is False

    @pytest.mark.integration
    def test_read_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            LocalFilesystem(tmp_path).read("missing.jpg")

    @pytest.mark.unit
    @pytest.mark.parametrize("path", ["../outside.jpg", "a/../../outside.jpg", "", "/"])
    def test_rejects_paths_outside_root(self, tmp_path: Path, path: str) -> None:
        fs = LocalFilesystem(tmp_path / "root")
        with pytest.raises(FilesystemError):
            fs.exists(path)


class TestMemoryFilesystem:
    """測試記憶體檔案系統"""

    @pytest.mark.unit
    def test_satisfies_protocol(self) -> None:
        assert isinstance(MemoryFilesystem(), FilesystemProtocol)

    @pytest.mark.unit
    def test_initial_files(self) -> None:
        fs = MemoryFilesystem({"/a.jpg": b"a", "b.jpg": b"b"})

        assert len(fs) == 2
        assert fs.read("a.jpg") == b"a"
        assert fs.exists("/b.jpg") is True

    @pytest.mark.unit
    def test_write_overwrites(self) -> None:
        fs = MemoryFilesystem()
        fs.write("x", b"1")
        fs.write("x", bytearray(b"2"))

        assert fs.read("x") == b"2"
        assert isinstance(fs.read("x"), bytes)

    @pytest.mark.unit
    def test_read_missing(self) -> None:
        with pytest.raises(FileNotFoundError):
            MemoryFilesystem().read("missing")
