"""Starting a fresh copy of the shell that launched the current process."""

from __future__ import annotations

import os
import subprocess
from abc import ABC, abstractmethod

from .files import os_type


def _open_failed(exc: BaseException) -> OSError:
    return OSError(f"open a new shell failed, err:{exc}")


def _run_shell(path: str) -> None:
    """Run the shell interactively with the current standard streams."""
    try:
        subprocess.run([path], check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise _open_failed(exc) from exc


class Process(ABC):
    """Operating-system specific way to reopen a shell by process id."""

    @abstractmethod
    def open(self, pid: int) -> None:
        """Start a new instance of the program running as ``pid`` and wait for it."""


class LinuxProcess(Process):
    """Finds the shell through ``/proc/<pid>/exe``."""

    def open(self, pid: int) -> None:
        try:
            path = os.readlink(f"/proc/{pid}/exe")
        except OSError as exc:
            raise _open_failed(exc) from exc
        _run_shell(path)


class MacosProcess(Process):
    """Finds the shell by asking ``ps`` for the command of the process."""

    def open(self, pid: int) -> None:
        try:
            result = subprocess.run(
                ["ps", "-p", str(pid), "-o", "command="],
                capture_output=True,
                check=True,
                text=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise _open_failed(exc) from exc
        fields = (result.stdout or "").split()
        if not fields:
            raise OSError("not found shell")
        name = fields[0]
        if name.startswith("-"):
            name = name[1:]
        _run_shell(name)


class WindowsProcess(Process):
    """Finds the shell's executable path through ``tasklist`` and ``wmic``."""

    def open(self, pid: int) -> None:
        try:
            subprocess.run(
                ["tasklist", "/FI", f"PID eq {pid}", "/NH", "/FO", "CSV"],
                capture_output=True,
                check=True,
                text=True,
            )
            result = subprocess.run(
                [
                    "wmic",
                    "process",
                    "where",
                    f"ProcessId={pid}",
                    "get",
                    "ExecutablePath",
                    "/format:list",
                ],
                capture_output=True,
                check=True,
                text=True,
            )
        except subprocess.CalledProcessError as exc:
            raise OSError(str(exc)) from exc
        output = (result.stdout or "").strip()
        prefix = "ExecutablePath="
        path = output[len(prefix):] if output.startswith(prefix) else output
        _run_shell(path)


def get_process() -> Process:
    """The process handler for the current operating system."""
    kind = os_type()
    if kind == "windows":
        return WindowsProcess()
    if kind == "darwin":
        return MacosProcess()
    return LinuxProcess()