"""Archive extraction entry point used by plugins."""

from __future__ import annotations

import os

from .decompressor import new_decompressor


def decompress(archive_path: str | os.PathLike, target_path: str | os.PathLike) -> None:
    """Unpack the archive at ``archive_path`` into ``target_path``."""
    decompressor = new_decompressor(archive_path)
    if decompressor is None:
        raise ValueError(f"unsupported archive format: {os.fspath(archive_path)}")
    decompressor.decompress(target_path)