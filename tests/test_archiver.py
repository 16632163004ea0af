import zipfile

import pytest

from versionfox.archiver import decompress


def test_decompress_zip(tmp_path):
    archive = tmp_path / "test.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("test.txt", "hello")
    target = tmp_path / "test"
    assert decompress(str(archive), str(target)) is None
    assert (target / "test.txt").read_text() == "hello"


def test_decompress_unknown_format(tmp_path):
    archive = tmp_path / "file.rar"
    archive.write_bytes(b"x")
    with pytest.raises(ValueError, match="unsupported archive format"):
        decompress(archive, tmp_path / "out")


def test_decompress_missing_archive(tmp_path):
    with pytest.raises(FileNotFoundError):
        decompress(tmp_path / "absent.zip", tmp_path / "out")