"""Disk block allocation for files: contiguous, linked and indexed."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import chain

DEFAULT_DISK_SIZE = 100


@dataclass(frozen=True)
class FileRecord:
    """One file's allocation attempt.

    ``blocks`` holds the data blocks in allocation order and is empty when the
    file could not be stored. ``index_block`` is set only for indexed files
    whose index block could be reserved.
    """

    number: int
    start: int
    length: int
    blocks: tuple[int, ...]
    allocated: bool
    index_block: int | None = None


class BlockAllocator:
    """A disk of numbered blocks, some of them already occupied."""

    def __init__(self, size: int = DEFAULT_DISK_SIZE, occupied: Iterable[int] = ()) -> None:
        if size <= 0:
            raise ValueError("the disk must have at least one block")
        self.size = size
        self._used = [False] * size
        for block in occupied:
            self._check_block(block)
            self._used[block] = True
        self.files: list[FileRecord] = []

    @property
    def occupied(self) -> frozenset[int]:
        """Numbers of all blocks currently in use."""
        return frozenset(block for block, used in enumerate(self._used) if used)

    def is_free(self, block: int) -> bool:
        self._check_block(block)
        return not self._used[block]

    def _check_block(self, block: int) -> None:
        if not 0 <= block < self.size:
            raise ValueError(f"block {block} is outside the disk")

    @staticmethod
    def _check_length(length: int) -> None:
        if length <= 0:
            raise ValueError("a file must occupy at least one block")

    def _record(
        self,
        start: int,
        length: int,
        blocks: Iterable[int] | None,
        index_block: int | None = None,
    ) -> FileRecord:
        record = FileRecord(
            number=len(self.files) + 1,
            start=start,
            length=length,
            blocks=tuple(blocks) if blocks is not None else (),
            allocated=blocks is not None,
            index_block=index_block,
        )
        self.files.append(record)
        return record

    def _claim_scattered(self, start: int, length: int) -> list[int] | None:
        # Walk once round the disk from ``start`` taking free blocks. Blocks
        # claimed by an attempt that comes up short stay occupied.
        if self._used[start]:
            return None
        taken: list[int] = []
        for block in chain(range(start, self.size), range(start)):
            if len(taken) == length:
                break
            if not self._used[block]:
                self._used[block] = True
                taken.append(block)
        return taken if len(taken) == length else None

    def allocate_contiguous(self, start: int, length: int) -> FileRecord:
        """Store a file in ``length`` consecutive blocks from ``start``, if all are free."""
        self._check_block(start)
        self._check_length(length)
        span = range(start, start + length)
        if span.stop <= self.size and not any(self._used[block] for block in span):
            for block in span:
                self._used[block] = True
            return self._record(start, length, span)
        return self._record(start, length, None)

    def allocate_linked(self, start: int, length: int) -> FileRecord:
        """Store a file as a chain of free blocks beginning at ``start``."""
        self._check_block(start)
        self._check_length(length)
        return self._record(start, length, self._claim_scattered(start, length))

    def allocate_indexed(self, index_block: int, start: int, length: int) -> FileRecord:
        """Reserve ``index_block`` and list the file's free blocks from ``start`` in it."""
        self._check_block(index_block)
        self._check_block(start)
        self._check_length(length)
        if self._used[index_block]:
            return self._record(start, length, None)
        self._used[index_block] = True
        blocks = self._claim_scattered(start, length)
        return self._record(start, length, blocks, index_block)