"""Plain HTTP download of a file into a local directory."""

from __future__ import annotations

import os
import posixpath
import sys
from typing import TextIO
from urllib.parse import urlparse

import requests

_CHUNK = 64 * 1024


class _Progress:
    """Minimal byte progress reporter on a text stream."""

    def __init__(self, total: int | None, description: str, stream: TextIO) -> None:
        self.total = total
        self.done = 0
        self.description = description
        self.stream = stream

    def update(self, count: int) -> None:
        self.done += count
        if self.total:
            percent = self.done * 100 // self.total
            line = f"\r{self.description} {percent:3d}% ({self.done}/{self.total} B)"
        else:
            line = f"\r{self.description} {self.done} B"
        self.stream.write(line)
        self.stream.flush()

    def close(self) -> None:
        self.stream.write("\n")
        self.stream.flush()


class Downloader:
    """Downloads files into ``local_path``."""

    def __init__(self, local_path: str | os.PathLike) -> None:
        self.local_path = os.fspath(local_path)

    def download(self, url: str) -> str:
        """Fetch ``url`` and return the path of the written file."""
        with requests.get(url, stream=True) as resp:
            if resp.status_code == 404:
                raise FileNotFoundError("source file not found")
            path = os.path.join(self.local_path, posixpath.basename(urlparse(url).path))
            length = resp.headers.get("Content-Length")
            total = int(length) if length and length.isdigit() else None
            progress = _Progress(total, "Downloading", sys.stderr)
            with open(path, "wb") as out:
                for chunk in resp.iter_content(chunk_size=_CHUNK):
                    if chunk:
                        out.write(chunk)
                        progress.update(len(chunk))
            progress.close()
        return path