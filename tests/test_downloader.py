import pytest
import responses

from versionfox.downloader import Downloader


def test_download_writes_body(tmp_path):
    body = b"archive-bytes" * 100
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://example.com/files/sdk-1.0.tar.gz", body=body)
        path = Downloader(tmp_path).download("http://example.com/files/sdk-1.0.tar.gz")
    assert path == str(tmp_path / "sdk-1.0.tar.gz")
    assert (tmp_path / "sdk-1.0.tar.gz").read_bytes() == body


def test_download_ignores_query(tmp_path):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://example.com/dl/tool.zip", body=b"zip")
        path = Downloader(tmp_path).download("http://example.com/dl/tool.zip?x=1")
    assert path == str(tmp_path / "tool.zip")
    assert (tmp_path / "tool.zip").read_bytes() == b"zip"


def test_download_not_found(tmp_path):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://example.com/missing.zip", status=404)
        with pytest.raises(FileNotFoundError, match="source file not found"):
            Downloader(tmp_path).download("http://example.com/missing.zip")
    assert not (tmp_path / "missing.zip").exists()


def test_local_path_kept(tmp_path):
    assert Downloader(tmp_path).local_path == str(tmp_path)