"""Page replacement: FIFO, LRU and two flavours of LFU."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import count, takewhile


@dataclass(frozen=True)
class PageStep:
    """One reference and the frame contents after it; None marks an empty frame."""

    reference: int
    hit: bool
    frames: tuple[int | None, ...]


@dataclass(frozen=True)
class ReplacementTrace:
    """Every step of a replacement run."""

    frame_count: int
    steps: tuple[PageStep, ...]

    def faults(self) -> int:
        return sum(not step.hit for step in self.steps)

    def hits(self) -> int:
        return sum(step.hit for step in self.steps)


@dataclass
class _Slot:
    page: int
    frequency: int
    loaded: int


def _check_frames(frame_count: int) -> None:
    if frame_count <= 0:
        raise ValueError("the number of frames must be positive")


def _fifo(
    references: Iterable[int], frame_count: int, empty: int | None
) -> ReplacementTrace:
    _check_frames(frame_count)
    frames: list[int | None] = [empty] * frame_count
    oldest = 0
    steps = []
    for page in references:
        hit = page in frames
        if not hit:
            frames[oldest] = page
            oldest = (oldest + 1) % frame_count
        steps.append(PageStep(page, hit, tuple(frames)))
    return ReplacementTrace(frame_count, tuple(steps))


def fifo(references: Iterable[int], frame_count: int) -> ReplacementTrace:
    """Replace the page that was loaded earliest."""
    return _fifo(references, frame_count, None)


def fifo_zero_filled(references: Iterable[int], frame_count: int) -> ReplacementTrace:
    """FIFO with frames that start holding 0; a reference of 0 ends the string."""
    return _fifo(takewhile(lambda page: page != 0, references), frame_count, 0)


def lru(references: Iterable[int], frame_count: int) -> ReplacementTrace:
    """Replace the page that was used least recently."""
    _check_frames(frame_count)
    frames: list[int | None] = [None] * frame_count
    last_used = [0] * frame_count
    clock = count(1)
    steps = []
    for page in references:
        hit = page in frames
        if hit:
            slot = frames.index(page)
        elif None in frames:
            slot = frames.index(None)
        else:
            slot = min(range(frame_count), key=last_used.__getitem__)
        frames[slot] = page
        last_used[slot] = next(clock)
        steps.append(PageStep(page, hit, tuple(frames)))
    return ReplacementTrace(frame_count, tuple(steps))


def lfu(references: Iterable[int], frame_count: int) -> ReplacementTrace:
    """Replace the page used least since it was loaded; ties go to the oldest load."""
    _check_frames(frame_count)
    slots: list[_Slot] = []
    clock = count(1)
    steps = []
    for page in references:
        resident = next((slot for slot in slots if slot.page == page), None)
        if resident is not None:
            resident.frequency += 1
        elif len(slots) < frame_count:
            slots.append(_Slot(page, 1, next(clock)))
        else:
            victim = min(slots, key=lambda slot: (slot.frequency, slot.loaded))
            victim.page, victim.frequency, victim.loaded = page, 1, next(clock)
        frames = tuple(slot.page for slot in slots)
        frames += (None,) * (frame_count - len(slots))
        steps.append(PageStep(page, resident is not None, frames))
    return ReplacementTrace(frame_count, tuple(steps))


def lfu_recent(references: Iterable[int], frame_count: int) -> ReplacementTrace:
    """LFU counting every reference to a page; ties go to the least recently used.

    An evicted page's count starts again from zero.
    """
    _check_frames(frame_count)
    counts: defaultdict[int, int] = defaultdict(int)
    last_seen: dict[int, int] = {}
    frames: list[int | None] = [None] * frame_count
    steps = []
    for position, page in enumerate(references):
        counts[page] += 1
        last_seen[page] = position
        hit = page in frames
        if not hit:
            if None in frames:
                slot = frames.index(None)
            else:
                slot = min(
                    range(frame_count),
                    key=lambda j: (counts[frames[j]], last_seen[frames[j]]),
                )
                counts[frames[slot]] = 0
            frames[slot] = page
        steps.append(PageStep(page, hit, tuple(frames)))
    return ReplacementTrace(frame_count, tuple(steps))