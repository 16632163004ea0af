"""Unpacking of downloaded archives into a target directory."""

from __future__ import annotations

import os
import shutil
import stat
import tarfile
import zipfile
from abc import ABC, abstractmethod

_ZIP_UNIX_CREATOR = 3


def _target_path(dest: str | os.PathLike, name: str) -> str:
    """Join a slash-separated archive name onto the destination directory."""
    return os.path.normpath(os.path.join(os.fspath(dest), *name.split("/")))


def _strip_first(name: str) -> str:
    parts = name.split("/")
    if len(parts) > 1:
        parts = parts[1:]
    return "/".join(parts)


def _write_symlink(path: str, target: str) -> None:
    os.makedirs(os.path.dirname(path), mode=0o755, exist_ok=True)
    if os.path.lexists(path):
        os.remove(path)
    os.symlink(target, path)


class Decompressor(ABC):
    """An archive that can be unpacked into a directory."""

    def __init__(self, src: str | os.PathLike) -> None:
        self.src = os.fspath(src)

    @abstractmethod
    def decompress(self, dest: str | os.PathLike) -> None:
        """Unpack the archive into ``dest``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.src!r})"


class _TarDecompressor(Decompressor):
    """Tar archive whose top-level directory is dropped while unpacking."""

    _mode = "r:"

    def decompress(self, dest: str | os.PathLike) -> None:
        symlinks: list[tuple[str, str]] = []
        with tarfile.open(self.src, self._mode) as archive:
            for member in archive:
                name = member.name + "/" if member.isdir() else member.name
                target = _target_path(dest, _strip_first(name))
                if member.isdir():
                    if not os.path.exists(target):
                        os.makedirs(target, mode=0o755, exist_ok=True)
                elif member.isreg():
                    os.makedirs(os.path.dirname(target), mode=0o755, exist_ok=True)
                    source = archive.extractfile(member)
                    if source is None:
                        continue
                    fd = os.open(
                        target,
                        os.O_CREAT | os.O_RDWR | os.O_TRUNC,
                        member.mode & 0o7777,
                    )
                    with source, os.fdopen(fd, "wb") as out:
                        shutil.copyfileobj(source, out)
                elif member.issym():
                    symlinks.append((member.linkname, target))
        for link_target, link_path in symlinks:
            os.makedirs(os.path.dirname(link_path), mode=0o755, exist_ok=True)
            os.symlink(link_target, link_path)


class GzipTarDecompressor(_TarDecompressor):
    """A gzip-compressed tar archive (.tar.gz, .tgz)."""

    _mode = "r:gz"


class XzTarDecompressor(_TarDecompressor):
    """An xz-compressed tar archive (.tar.xz)."""

    _mode = "r:xz"


def find_root_folder_in_zip(path: str | os.PathLike) -> str:
    """Return the single first path element shared by all entries, or ''."""
    try:
        archive = zipfile.ZipFile(path)
    except (OSError, zipfile.BadZipFile):
        return ""
    first = ""
    with archive:
        for name in archive.namelist():
            current = name.replace("\\", "/").split("/")[0]
            if first and first != current:
                return ""
            if not first:
                first = current
    return first


def _zip_mode(info: zipfile.ZipInfo) -> int:
    return info.external_attr >> 16 if info.create_system == _ZIP_UNIX_CREATOR else 0


class ZipDecompressor(Decompressor):
    """A zip archive; a common root folder is dropped while unpacking."""

    def decompress(self, dest: str | os.PathLike) -> None:
        root = find_root_folder_in_zip(self.src)
        with zipfile.ZipFile(self.src) as archive:
            for info in archive.infolist():
                self._extract(archive, info, dest, root)

    @staticmethod
    def _extract(
        archive: zipfile.ZipFile,
        info: zipfile.ZipInfo,
        dest: str | os.PathLike,
        root: str,
    ) -> None:
        parts = info.filename.replace("\\", "/").split("/")
        if len(parts) > 1 and root:
            parts = parts[1:]
        name = "/".join(parts)
        path = _target_path(dest, name)
        mode = _zip_mode(info)
        if info.is_dir() or name.endswith("/"):
            os.makedirs(path, exist_ok=True)
        elif stat.S_ISLNK(mode):
            try:
                target = archive.read(info).decode("utf-8").strip()
            except (OSError, zipfile.BadZipFile) as exc:
                raise OSError(f"{info.filename}: reading symlink target: {exc}") from exc
            _write_symlink(path, target)
        else:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            perms = stat.S_IMODE(mode) or 0o666
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, perms)
            with archive.open(info) as source, os.fdopen(fd, "wb") as out:
                shutil.copyfileobj(source, out)


def new_decompressor(src: str | os.PathLike) -> Decompressor | None:
    """Pick a decompressor by file name, or None if the file is not an archive."""
    filename = os.path.basename(os.fspath(src))
    if filename.endswith((".tar.gz", ".tgz")):
        return GzipTarDecompressor(src)
    if filename.endswith(".tar.xz"):
        return XzTarDecompressor(src)
    if filename.endswith(".zip"):
        return ZipDecompressor(src)
    return None