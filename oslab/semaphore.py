"""A bounded producer-consumer buffer guarded by counting semaphores."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

DEFAULT_CAPACITY = 3


class BufferFull(Exception):
    """Raised when producing into a full buffer."""


class BufferEmpty(Exception):
    """Raised when consuming from an empty buffer."""


class ProducerConsumer:
    """Tracks the full and empty slots of a bounded buffer."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("buffer capacity must be positive")
        self.capacity = capacity
        self._full = 0

    @property
    def full(self) -> int:
        return self._full

    @property
    def empty(self) -> int:
        return self.capacity - self._full

    def produce(self) -> int:
        """Add an item and return its number."""
        if self.empty == 0:
            raise BufferFull("BUFFER IS FULL")
        self._full += 1
        return self._full

    def consume(self) -> int:
        """Remove the most recent item and return its number."""
        if self._full == 0:
            raise BufferEmpty("BUFFER IS EMPTY")
        item = self._full
        self._full -= 1
        return item


def _choices(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                continue


def main(argv: list[str] | None = None) -> int:
    """Run the interactive producer-consumer menu on standard input."""
    parser = argparse.ArgumentParser(description="Producer-consumer with semaphores.")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    args = parser.parse_args(argv)
    try:
        buffer = ProducerConsumer(args.capacity)
    except ValueError as error:
        parser.error(str(error))

    print("\n1.PRODUCER\n2.CONSUMER\n3.EXIT\n")
    choices = _choices(sys.stdin)
    while True:
        print("\nENTER YOUR CHOICE : ", end="", flush=True)
        choice = next(choices, None)
        if choice is None or choice == 3:
            print()
            return 0
        if choice == 1:
            try:
                print(f"\nProducer produces the item{buffer.produce()}", end="")
            except BufferFull as error:
                print(f"\n{error}", end="")
        elif choice == 2:
            try:
                print(f"\nConsumer consumes item{buffer.consume()}", end="")
            except BufferEmpty as error:
                print(f"\n{error}", end="")