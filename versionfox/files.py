"""Filesystem and platform helpers."""

from __future__ import annotations

import os
import platform
import shutil
import stat
import subprocess
import sys

_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv6l": "arm",
    "armv7l": "arm",
    "arm": "arm",
    "ppc64le": "ppc64le",
    "ppc64": "ppc64",
    "s390x": "s390x",
    "riscv64": "riscv64",
}


def file_exists(path: str | os.PathLike) -> bool:
    """Whether the path exists and can be stat'ed."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def copy_file(src: str | os.PathLike, dst: str | os.PathLike) -> None:
    """Copy the contents of one file to another and flush it to disk."""
    with open(src, "rb") as source, open(dst, "wb") as target:
        shutil.copyfileobj(source, target)
        target.flush()
        os.fsync(target.fileno())


def move_files(src: str | os.PathLike, target_dir: str | os.PathLike) -> None:
    """Move a file, or the contents of a directory, into the target directory."""
    info = os.stat(src)
    if stat.S_ISDIR(info.st_mode):
        for name in sorted(os.listdir(src)):
            os.replace(os.path.join(src, name), os.path.join(target_dir, name))
    else:
        os.replace(src, os.path.join(target_dir, os.path.basename(os.fspath(src))))


def change_mode_if_not(path: str | os.PathLike, mode: int) -> None:
    """Change the permission bits of a file unless they already match."""
    info = os.stat(path)
    if stat.S_IMODE(info.st_mode) != mode:
        os.chmod(path, mode)


def is_executable(path: str | os.PathLike) -> bool:
    """Whether the file is executable on the current platform."""
    if os_type() == "windows":
        ext = os.path.splitext(os.fspath(path))[1].lower()
        return ext in (".exe", ".bat", ".cmd", ".ps1")
    try:
        info = os.stat(path)
    except OSError:
        return False
    return info.st_mode & 0o111 != 0


def make_symlink(target: str | os.PathLike, link: str | os.PathLike) -> None:
    """Create a symbolic link at ``link`` pointing to ``target``.

    On Windows a directory junction is tried first.
    """
    if os_type() == "windows":
        try:
            subprocess.run(
                ["cmd", "/c", "mklink", "/j", os.fspath(link), os.fspath(target)],
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, subprocess.CalledProcessError):
            pass
        else:
            return
    os.symlink(target, link, target_is_directory=os.path.isdir(target))


def os_type() -> str:
    """Name of the operating system, e.g. linux, darwin or windows."""
    name = sys.platform
    if name.startswith("linux"):
        return "linux"
    if name in ("win32", "cygwin", "msys"):
        return "windows"
    return name.rstrip("0123456789")


def arch_type() -> str:
    """Name of the processor architecture, e.g. amd64 or arm64."""
    machine = platform.machine().lower()
    return _ARCH_NAMES.get(machine, machine)