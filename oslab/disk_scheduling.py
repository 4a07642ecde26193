"""Disk head scheduling: FCFS, SCAN and C-SCAN."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise

MAX_TRACKS = 25
"""Most requests the FCFS, SCAN and C-SCAN schedulers accept."""

SWEEP_LAST_TRACK = 199
"""Outermost track used by the fixed-size sweep schedulers."""

_SWEEP_CAPACITY = 97


class Direction(Enum):
    """Initial direction of the head."""

    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class SeekResult:
    """Tracks visited after the starting head position, and the total movement."""

    head: int
    sequence: tuple[int, ...]
    seek_count: int

    @property
    def path(self) -> tuple[int, ...]:
        """The starting position followed by every track visited."""
        return (self.head, *self.sequence)


def _travel(head: int, sequence: Iterable[int]) -> SeekResult:
    visited = tuple(sequence)
    distance = sum(abs(b - a) for a, b in pairwise((head, *visited)))
    return SeekResult(head, visited, distance)


def _requests(tracks: Iterable[int], limit: int) -> list[int]:
    requests = list(tracks)
    if len(requests) > limit:
        raise ValueError(f"number of tracks to be seeked cannot exceed {limit}")
    return requests


def _check_head(head: int, disk_size: int) -> None:
    if head > disk_size:
        raise ValueError("starting position of head cannot exceed the size of disk")


def fcfs(head: int, tracks: Iterable[int]) -> SeekResult:
    """Serve requests in the order they were made."""
    return _travel(head, _requests(tracks, MAX_TRACKS))


def scan(
    head: int, tracks: Iterable[int], disk_size: int, direction: Direction | str
) -> SeekResult:
    """Sweep to the disk edge in ``direction``, then reverse.

    Requests at the head's own position are not revisited.
    """
    requests = _requests(tracks, MAX_TRACKS)
    _check_head(head, disk_size)
    direction = Direction(direction)
    left = sorted(
        [t for t in requests if t < head] + ([0] if direction is Direction.LEFT else [])
    )
    right = sorted(
        [t for t in requests if t > head]
        + ([disk_size - 1] if direction is Direction.RIGHT else [])
    )
    descending = left[::-1]
    if direction is Direction.LEFT:
        return _travel(head, descending + right)
    return _travel(head, right + descending)


def c_scan(head: int, tracks: Iterable[int], disk_size: int) -> SeekResult:
    """Sweep up to the last track, jump to track 0, and sweep up again."""
    requests = _requests(tracks, MAX_TRACKS)
    _check_head(head, disk_size)
    left = sorted([0] + [t for t in requests if t < head])
    right = sorted([t for t in requests if t > head] + [disk_size - 1])
    return _travel(head, right + left)


def _sweep_points(head: int, tracks: Iterable[int]) -> tuple[list[int], int]:
    requests = _requests(tracks, _SWEEP_CAPACITY)
    points = sorted([*requests, head, 0, SWEEP_LAST_TRACK])
    return points, points.index(head)


def sweep_scan(head: int, tracks: Iterable[int]) -> SeekResult:
    """SCAN on a 0-199 disk, heading first towards the nearer edge.

    Moving down, the head turns at track 0 and stops at the highest request;
    moving up, it visits track 199 and then sweeps all the way to track 0.
    """
    points, position = _sweep_points(head, tracks)
    if head < SWEEP_LAST_TRACK - head:
        order = points[position::-1] + points[position + 1 : -1]
    else:
        order = points[position:] + points[:position][::-1]
    return _travel(head, order[1:])


def sweep_c_scan(head: int, tracks: Iterable[int]) -> SeekResult:
    """C-SCAN on a 0-199 disk, heading first towards the nearer edge."""
    points, position = _sweep_points(head, tracks)
    if head < SWEEP_LAST_TRACK - head:
        order = points[position::-1] + points[:position:-1]
    else:
        order = points[position:] + points[:position]
    return _travel(head, order[1:])