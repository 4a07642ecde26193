"""Deadlock avoidance and detection with the banker's algorithm."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SafetyResult:
    """Outcome of a safety check.

    ``sequence`` lists process indices in the order they could finish;
    ``blocked`` lists the indices that could never finish.
    """

    safe: bool
    sequence: tuple[int, ...]
    blocked: tuple[int, ...]


class ResourceRequestDenied(Exception):
    """Raised when a process asks for more than it still needs."""


@dataclass(frozen=True)
class BankerProcess:
    """A named process with its maximum claim and current allocation."""

    name: str
    maximum: tuple[int, ...]
    allocation: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "maximum", tuple(self.maximum))
        object.__setattr__(self, "allocation", tuple(self.allocation))
        if len(self.maximum) != len(self.allocation):
            raise ValueError(
                f"process {self.name!r}: maximum and allocation differ in length"
            )

    @property
    def need(self) -> tuple[int, ...]:
        """Resources the process may still request."""
        return tuple(m - a for m, a in zip(self.maximum, self.allocation))


@dataclass(frozen=True)
class RequestOutcome:
    """State after a granted request, and whether it leaves the system safe."""

    processes: tuple[BankerProcess, ...]
    available: tuple[int, ...]
    safe: bool
    sequence: tuple[str, ...]


def _fits(need: Iterable[int], available: Iterable[int]) -> bool:
    return all(n <= a for n, a in zip(need, available))


def _release(available: Sequence[int], allocation: Iterable[int]) -> list[int]:
    return [a + b for a, b in zip(available, allocation)]


def _state(
    maximum: Iterable[Iterable[int]],
    allocation: Iterable[Iterable[int]],
    available: Iterable[int],
) -> tuple[list[tuple[int, ...]], list[tuple[int, ...]], list[int]]:
    max_rows = [tuple(row) for row in maximum]
    alloc_rows = [tuple(row) for row in allocation]
    avail = list(available)
    if len(max_rows) != len(alloc_rows):
        raise ValueError("maximum and allocation must list the same processes")
    width = len(avail)
    if any(len(row) != width for row in max_rows + alloc_rows):
        raise ValueError("every row must have one entry per resource type")
    needs = [
        tuple(m - a for m, a in zip(max_row, alloc_row))
        for max_row, alloc_row in zip(max_rows, alloc_rows)
    ]
    return needs, alloc_rows, avail


def safety_sequence(
    maximum: Iterable[Iterable[int]],
    allocation: Iterable[Iterable[int]],
    available: Iterable[int],
) -> SafetyResult:
    """Repeatedly finish the lowest-numbered process whose need can be met."""
    needs, alloc_rows, avail = _state(maximum, allocation, available)
    pending = list(range(len(needs)))
    sequence: list[int] = []
    while True:
        runnable = next((i for i in pending if _fits(needs[i], avail)), None)
        if runnable is None:
            break
        pending.remove(runnable)
        sequence.append(runnable)
        avail = _release(avail, alloc_rows[runnable])
    return SafetyResult(not pending, tuple(sequence), tuple(pending))


def cyclic_safety_order(
    maximum: Iterable[Iterable[int]],
    allocation: Iterable[Iterable[int]],
    available: Iterable[int],
) -> SafetyResult:
    """Walk round the processes in a circle, finishing each one whose need fits.

    The walk stops as unsafe once it comes back to the last process that ran
    (or to the first process, if none has run) without finishing everyone.
    """
    needs, alloc_rows, avail = _state(maximum, allocation, available)
    count = len(needs)
    if count == 0:
        return SafetyResult(True, (), ())
    done = [False] * count
    order: list[int] = []
    current = 0
    recent = 0
    safe = True
    while True:
        if not done[current] and _fits(needs[current], avail):
            done[current] = True
            order.append(current)
            avail = _release(avail, alloc_rows[current])
            recent = current
        current = (current + 1) % count
        if len(order) == count:
            break
        if current == recent:
            safe = False
            break
    blocked = tuple(index for index, finished in enumerate(done) if not finished)
    return SafetyResult(safe, tuple(order), blocked)


def detect_deadlock(
    maximum: Iterable[Iterable[int]],
    allocation: Iterable[Iterable[int]],
    available: Iterable[int],
) -> tuple[int, ...]:
    """Return the indices of deadlocked processes; empty when there are none."""
    return safety_sequence(maximum, allocation, available).blocked


def request_resources(
    processes: Iterable[BankerProcess],
    totals: Iterable[int],
    name: str,
    request: Iterable[int],
) -> RequestOutcome:
    """Grant ``request`` to the process called ``name`` and check safety.

    Raises KeyError for an unknown process and ResourceRequestDenied when the
    request exceeds what the process still needs.
    """
    procs = list(processes)
    totals = tuple(totals)
    request = tuple(request)
    width = len(totals)
    if len(request) != width:
        raise ValueError("request must have one entry per resource type")
    if any(len(proc.maximum) != width for proc in procs):
        raise ValueError("every process must have one entry per resource type")

    position = next(
        (index for index, proc in enumerate(procs) if proc.name == name), None
    )
    if position is None:
        raise KeyError(name)
    target = procs[position]
    if any(r > n for r, n in zip(request, target.need)):
        raise ResourceRequestDenied(
            f"request of {name!r} is greater than its remaining need"
        )

    allocated = [sum(column) for column in zip(*(p.allocation for p in procs))]
    available = [total - used for total, used in zip(totals, allocated)]
    procs[position] = replace(
        target, allocation=tuple(a + r for a, r in zip(target.allocation, request))
    )
    available = [a - r for a, r in zip(available, request)]

    avail = list(available)
    pending = list(procs)
    sequence: list[str] = []
    while pending:
        waiting = []
        for proc in pending:
            if _fits(proc.need, avail):
                avail = _release(avail, proc.allocation)
                sequence.append(proc.name)
            else:
                waiting.append(proc)
        if len(waiting) == len(pending):
            break
        pending = waiting
    safe = len(sequence) == len(procs)
    return RequestOutcome(tuple(procs), tuple(available), safe, tuple(sequence))