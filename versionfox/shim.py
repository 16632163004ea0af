"""Shims: links in a shared directory pointing at installed binaries."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .files import file_exists

logger = logging.getLogger(__name__)


@dataclass
class Shim:
    """A shim for ``binary_path`` placed inside the ``output_path`` directory."""

    binary_path: str
    output_path: str

    @property
    def target(self) -> str:
        """Path of the shim itself."""
        name = os.path.basename(os.fspath(self.binary_path))
        return os.path.join(os.fspath(self.output_path), name)

    def clear(self) -> None:
        """Remove the generated shim if there is one."""
        target = self.target
        try:
            os.readlink(target)
        except FileNotFoundError:
            return
        except OSError:
            pass
        os.remove(target)

    def generate(self) -> None:
        """Create the shim, replacing any previous one."""
        try:
            self.clear()
        except OSError as exc:
            logger.debug("Clear shim failed: %s", exc)
            raise
        target = self.target
        logger.debug("Create shim from %s to %s", self.binary_path, target)
        if file_exists(target):
            try:
                os.remove(target)
            except OSError:
                pass
        try:
            os.symlink(self.binary_path, target)
        except OSError as exc:
            logger.debug("Create symlink failed: %s", exc)
            raise