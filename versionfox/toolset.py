"""``.tool-versions`` files recording which version of each tool is in use."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable, Iterable

from .files import file_exists

TOOL_VERSIONS_FILENAME = ".tool-versions"


@dataclass
class FileRecord:
    """A file of ``name value`` lines held as a mapping."""

    path: str
    record: dict[str, str] = field(default_factory=dict)
    _init_empty: bool = field(default=True, repr=False)

    @classmethod
    def load(cls, path: str | os.PathLike) -> "FileRecord":
        """Read the file; a missing file gives an empty record."""
        path = os.fspath(path)
        record: dict[str, str] = {}
        if file_exists(path):
            with open(path, encoding="utf-8", newline="") as f:
                for raw in f.read().split("\n"):
                    line = raw[:-1] if raw.endswith("\r") else raw
                    parts = line.split(" ")
                    if len(parts) == 2:
                        record[parts[0]] = parts[1]
        return cls(path=path, record=record, _init_empty=not record)

    def save(self) -> None:
        """Write the record back; nothing is written if it was and is empty."""
        if self._init_empty and not self.record:
            return
        try:
            f = open(self.path, "w", encoding="utf-8", newline="")
        except OSError as exc:
            raise OSError(f"failed to create file record {self.path}: {exc}") from exc
        with f:
            for key, value in self.record.items():
                f.write(f"{key} {value}\n")


class MultiToolVersions(list):
    """Several tool-version records consulted in priority order."""

    def filter_tools(self, predicate: Callable[[str, str], bool]) -> dict[str, str]:
        """For each tool, the first version accepted by ``predicate``."""
        tools: dict[str, str] = {}
        for tool_version in self:
            for name, version in tool_version.record.items():
                if name not in tools and predicate(name, version):
                    tools[name] = version
        return tools

    def add(self, name: str, version: str) -> None:
        """Set the version of a tool in every record."""
        for tool_version in self:
            tool_version.record[name] = version

    def save(self) -> None:
        """Save every record."""
        for tool_version in self:
            tool_version.save()


def load_tool_version(dir_path: str | os.PathLike) -> FileRecord:
    """Load the ``.tool-versions`` file of a directory."""
    path = os.path.join(os.fspath(dir_path), TOOL_VERSIONS_FILENAME)
    try:
        return FileRecord.load(path)
    except OSError as exc:
        raise OSError(f"failed to read tool versions file {path}: {exc}") from exc


def load_multi_tool_versions(paths: Iterable[str | os.PathLike]) -> MultiToolVersions:
    """Load the ``.tool-versions`` files of several directories, in order."""
    return MultiToolVersions(load_tool_version(p) for p in paths)