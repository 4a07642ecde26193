"""Placing files into memory blocks by first, best and worst fit."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

_Candidate = tuple[int, int]


@dataclass(frozen=True)
class Placement:
    """Where a file went; block fields are None when no free block fits.

    Files and blocks are numbered from 1 in the order they were given.
    """

    file_number: int
    file_size: int
    block_number: int | None
    block_size: int | None
    fragment: int | None

    @property
    def allocated(self) -> bool:
        return self.block_number is not None


def _place(
    blocks: Iterable[int],
    files: Iterable[int],
    choose: Callable[[Sequence[_Candidate]], _Candidate],
) -> list[Placement]:
    sizes = list(blocks)
    taken: set[int] = set()
    placements = []
    for number, size in enumerate(files, start=1):
        candidates = [
            (block_number, block_size - size)
            for block_number, block_size in enumerate(sizes, start=1)
            if block_number not in taken and block_size >= size
        ]
        if not candidates:
            placements.append(Placement(number, size, None, None, None))
            continue
        block_number, leftover = choose(candidates)
        taken.add(block_number)
        placements.append(
            Placement(number, size, block_number, sizes[block_number - 1], leftover)
        )
    return placements


def first_fit(blocks: Iterable[int], files: Iterable[int]) -> list[Placement]:
    """Give each file the first free block large enough to hold it."""
    return _place(blocks, files, lambda candidates: candidates[0])


def best_fit(blocks: Iterable[int], files: Iterable[int]) -> list[Placement]:
    """Give each file the free block that leaves the least space over."""
    return _place(
        blocks, files, lambda candidates: min(candidates, key=lambda c: c[1])
    )


def worst_fit(blocks: Iterable[int], files: Iterable[int]) -> list[Placement]:
    """Give each file the free block that leaves the most space over."""
    return _place(
        blocks, files, lambda candidates: max(candidates, key=lambda c: c[1])
    )