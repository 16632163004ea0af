"""HTTP helpers offered to plugins: GET, HEAD and file download."""

from __future__ import annotations

import os
import posixpath
import sys
from dataclasses import dataclass, field
from typing import Mapping, Optional
from urllib.parse import urlparse

import requests

from .downloader import _Progress

_CHUNK = 64 * 1024


class HttpError(Exception):
    """A request could not be made or its result could not be used."""


@dataclass
class HttpResponse:
    """Result of a request; ``content_length`` is -1 when unknown."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    content_length: int = -1
    body: str = ""


def _content_length(resp: requests.Response) -> int:
    value = resp.headers.get("Content-Length")
    if value is not None and value.strip().isdigit():
        return int(value.strip())
    return -1


class HttpModule:
    """Performs HTTP requests, optionally through a proxy."""

    def __init__(self, proxy: Optional[str] = None) -> None:
        self.proxy = proxy
        self.session = requests.Session()
        if proxy:
            self.session.proxies = {"http": proxy, "https": proxy}

    def _request(
        self,
        method: str,
        url: Optional[str],
        headers: Optional[Mapping[str, object]],
        stream: bool = False,
    ) -> requests.Response:
        if not url:
            raise HttpError("url is required")
        sent = {str(k): str(v) for k, v in (headers or {}).items()}
        try:
            return self.session.request(method, url, headers=sent, stream=stream)
        except requests.RequestException as exc:
            raise HttpError(str(exc)) from exc

    def get(
        self, url: Optional[str], headers: Optional[Mapping[str, object]] = None
    ) -> HttpResponse:
        """Perform a GET request and return the response with its body."""
        with self._request("GET", url, headers) as resp:
            try:
                body = resp.text
            except requests.RequestException as exc:
                raise HttpError(str(exc)) from exc
            return HttpResponse(
                status_code=resp.status_code,
                headers=dict(resp.headers),
                content_length=_content_length(resp),
                body=body,
            )

    def head(
        self, url: Optional[str], headers: Optional[Mapping[str, object]] = None
    ) -> HttpResponse:
        """Perform a HEAD request and return the response without a body."""
        with self._request("HEAD", url, headers) as resp:
            return HttpResponse(
                status_code=resp.status_code,
                headers=dict(resp.headers),
                content_length=_content_length(resp),
            )

    def download_file(
        self,
        url: Optional[str],
        filepath: str | os.PathLike,
        headers: Optional[Mapping[str, object]] = None,
    ) -> None:
        """Stream the body of a GET request into ``filepath``."""
        if not os.fspath(filepath):
            raise HttpError("filepath is required")
        with self._request("GET", url, headers, stream=True) as resp:
            if resp.status_code == 404:
                raise HttpError("file not found")
            description = "Downloading..."
            if posixpath.splitext(str(url))[1]:
                description = posixpath.basename(str(url))
            total = _content_length(resp)
            progress = _Progress(total if total >= 0 else None, description, sys.stderr)
            try:
                with open(filepath, "wb") as out:
                    for chunk in resp.iter_content(chunk_size=_CHUNK):
                        if chunk:
                            out.write(chunk)
                            progress.update(len(chunk))
            except (OSError, requests.RequestException) as exc:
                raise HttpError(str(exc)) from exc
            finally:
                progress.close()

    def __repr__(self) -> str:
        host = urlparse(self.proxy).netloc if self.proxy else None
        return f"HttpModule(proxy={host!r})"