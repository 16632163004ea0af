"""SDK packages: a main item and optional additional items."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Optional

from .files import file_exists


@dataclass
class Info:
    """One installable item of an SDK package."""

    name: str = ""
    version: str = ""
    path: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    note: str = ""
    checksum: Optional[Any] = None

    def clone(self) -> "Info":
        """A copy with its own headers mapping; the checksum is shared."""
        return Info(
            name=self.name,
            version=self.version,
            path=self.path,
            headers=dict(self.headers),
            note=self.note,
            checksum=self.checksum,
        )

    def label(self) -> str:
        """``name@version``."""
        return f"{self.name}@{self.version}"

    def storage_path(self, parent_dir: str | os.PathLike) -> str:
        """Directory under ``parent_dir`` where this item is stored."""
        if not self.version:
            return os.path.join(os.fspath(parent_dir), self.name)
        return os.path.join(os.fspath(parent_dir), f"{self.name}-{self.version}")


@dataclass
class Package:
    """A main item plus any additional items installed alongside it."""

    main: Info
    additions: list[Info] = field(default_factory=list)

    def clone(self) -> "Package":
        """A deep copy of the main item and the additions."""
        return Package(main=self.main.clone(), additions=[a.clone() for a in self.additions])


def check_package_valid(package: Package) -> bool:
    """Whether the paths of the main item and all additions exist."""
    if not file_exists(package.main.path):
        return False
    return all(file_exists(a.path) for a in package.additions)