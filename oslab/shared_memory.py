"""Passing values between processes through named shared memory."""

from __future__ import annotations

import math
import os
import struct
import sys
from multiprocessing import resource_tracker, shared_memory

DEFAULT_NAME = "os_lab"
TEXT_SEGMENT_SIZE = 1024

_INT = struct.Struct("=i")


def factorial(n: int) -> int:
    """Product of 1..n; 1 when n is zero or negative."""
    return math.prod(range(1, n + 1))


def _persistent_segment(name: str) -> shared_memory.SharedMemory:
    # The segment must outlive this process so another one can read it.
    if sys.version_info >= (3, 13):
        try:
            return shared_memory.SharedMemory(
                name=name, create=True, size=_INT.size, track=False
            )
        except FileExistsError:
            return shared_memory.SharedMemory(name=name, track=False)
    try:
        segment = shared_memory.SharedMemory(name=name, create=True, size=_INT.size)
    except FileExistsError:
        segment = shared_memory.SharedMemory(name=name)
    if os.name == "posix":
        resource_tracker.unregister(f"/{segment.name}", "shared_memory")
    return segment


def publish_number(name: str = DEFAULT_NAME, value: int = 0) -> None:
    """Store an integer in the shared memory segment ``name``, creating it if needed."""
    if not -(2**31) <= value < 2**31:
        raise ValueError("value does not fit in a 32-bit integer")
    segment = _persistent_segment(name)
    try:
        _INT.pack_into(segment.buf, 0, value)
    finally:
        segment.close()


def consume_factorial(name: str = DEFAULT_NAME) -> tuple[int, int]:
    """Read the number stored under ``name``, remove the segment and return
    the number with its factorial."""
    segment = shared_memory.SharedMemory(name=name)
    try:
        (value,) = _INT.unpack_from(segment.buf, 0)
    finally:
        segment.close()
        segment.unlink()
    return value, factorial(value)


def roundtrip_text(text: str) -> str:
    """Write the first line of ``text`` into a fresh segment and read it back."""
    line = text.split("\n", 1)[0]
    data = line.encode("utf-8")
    if len(data) >= TEXT_SEGMENT_SIZE:
        raise ValueError(f"text must be shorter than {TEXT_SEGMENT_SIZE} bytes")
    segment = shared_memory.SharedMemory(create=True, size=TEXT_SEGMENT_SIZE)
    try:
        segment.buf[: len(data) + 1] = data + b"\0"
        stored = bytes(segment.buf[:TEXT_SEGMENT_SIZE]).split(b"\0", 1)[0]
    finally:
        segment.close()
        segment.unlink()
    return stored.decode("utf-8")