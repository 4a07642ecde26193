"""Small wrappers over file, directory and process system calls."""

from __future__ import annotations

import os
import signal
import subprocess
from pathlib import Path

_COPY_CHUNK = 100
_START_MARKER = b"START\n"
_STOP_MARKER = b"STOP"

StrPath = str | os.PathLike


def list_directories(path: StrPath = ".") -> list[str]:
    """Names of the subdirectories of ``path``, sorted; symbolic links are left out."""
    with os.scandir(path) as entries:
        return sorted(entry.name for entry in entries if entry.is_dir(follow_symlinks=False))


def list_regular_files(path: StrPath = ".") -> list[str]:
    """Names of the regular files in ``path``, sorted; symbolic links are left out."""
    with os.scandir(path) as entries:
        return sorted(entry.name for entry in entries if entry.is_file(follow_symlinks=False))


def file_mode(path: StrPath) -> int:
    """The ``st_mode`` field of the file's status."""
    return os.stat(path).st_mode


def directory_exists(path: StrPath) -> bool:
    """Whether ``path`` can be opened as a directory."""
    try:
        with os.scandir(path):
            return True
    except OSError:
        return False


def copy_with_markers(source: StrPath, destination: StrPath) -> bytes:
    """Write START, the first 100 bytes of ``source`` (up to any NUL) and STOP
    over the start of ``destination``, creating it if needed.

    The destination is not truncated. Returns the bytes written.
    """
    with open(source, "rb") as reader:
        chunk = reader.read(_COPY_CHUNK).split(b"\0", 1)[0]
    payload = _START_MARKER + chunk + _STOP_MARKER
    descriptor = os.open(destination, os.O_CREAT | os.O_WRONLY, 0o700)
    with os.fdopen(descriptor, "wb") as writer:
        writer.write(payload)
    return payload


def cat(path: StrPath) -> int:
    """Print a file with the ``cat`` program in a child process; return its exit status."""
    return subprocess.run(["cat", str(Path(path))], check=False).returncode


def kill_process(pid: int) -> None:
    """Send SIGKILL to ``pid``; raises OSError if that fails."""
    os.kill(pid, signal.SIGKILL)