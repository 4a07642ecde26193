"""Compact schedulers that report numbered jobs: SJF, priority and round robin totals."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from itertools import combinations
from statistics import fmean


@dataclass(frozen=True)
class Job:
    """A job; its number is its 1-based position in the submitted list."""

    arrival: int
    burst: int
    priority: int = 0


@dataclass(frozen=True)
class JobOutcome:
    """Timing figures of one finished job."""

    number: int
    arrival: int
    burst: int
    completion: int
    waiting: int
    turnaround: int


@dataclass(frozen=True)
class QuickSchedule:
    """Outcomes in the scheduler's sorted order, plus the execution order."""

    outcomes: tuple[JobOutcome, ...]
    order: tuple[int, ...]
    average_waiting: float
    average_turnaround: float


@dataclass(frozen=True)
class RoundRobinSummary:
    """Outcomes in the order the jobs finished, with the averages."""

    outcomes: tuple[JobOutcome, ...]
    average_waiting: float
    average_turnaround: float


def _numbered(jobs: Iterable[Job]) -> list[tuple[int, Job]]:
    numbered = list(enumerate(jobs, start=1))
    if not numbered:
        raise ValueError("at least one job is required")
    return numbered


def _exchange_sorted(
    numbered: list[tuple[int, Job]], key: Callable[[Job], int]
) -> list[tuple[int, Job]]:
    # Pairwise exchange sort: equal keys may change their relative order.
    items = list(numbered)
    for first, second in combinations(range(len(items)), 2):
        if key(items[first][1]) > key(items[second][1]):
            items[first], items[second] = items[second], items[first]
    return items


def _run_in_order(ordered: list[tuple[int, Job]]) -> QuickSchedule:
    time = min(job.arrival for _, job in ordered)
    done: dict[int, JobOutcome] = {}
    order: list[int] = []
    while len(order) < len(ordered):
        ready = next(
            (
                (number, job)
                for number, job in ordered
                if number not in done and job.arrival <= time
            ),
            None,
        )
        if ready is None:
            time = min(job.arrival for number, job in ordered if number not in done)
            continue
        number, job = ready
        waiting = time - job.arrival
        time += job.burst
        done[number] = JobOutcome(
            number=number,
            arrival=job.arrival,
            burst=job.burst,
            completion=time,
            waiting=waiting,
            turnaround=waiting + job.burst,
        )
        order.append(number)
    outcomes = tuple(done[number] for number, _ in ordered)
    return QuickSchedule(
        outcomes=outcomes,
        order=tuple(order),
        average_waiting=fmean(o.waiting for o in outcomes),
        average_turnaround=fmean(o.turnaround for o in outcomes),
    )


def shortest_job_first(jobs: Iterable[Job]) -> QuickSchedule:
    """Run jobs shortest burst first among those that have arrived."""
    return _run_in_order(_exchange_sorted(_numbered(jobs), lambda job: job.burst))


def priority_first(jobs: Iterable[Job]) -> QuickSchedule:
    """Run jobs lowest priority value first among those that have arrived."""
    return _run_in_order(_exchange_sorted(_numbered(jobs), lambda job: job.priority))


def round_robin_totals(jobs: Iterable[Job], quantum: int) -> RoundRobinSummary:
    """Cycle through the jobs a quantum at a time, restarting from the first
    job whenever the next one has not yet arrived."""
    queue = list(jobs)
    if not queue:
        raise ValueError("at least one job is required")
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    if any(job.burst <= 0 for job in queue):
        raise ValueError("every burst time must be positive")

    remaining = [job.burst for job in queue]
    unfinished = len(queue)
    last = len(queue) - 1
    elapsed = 0
    current = 0
    progressed = False
    outcomes: list[JobOutcome] = []

    while unfinished:
        if remaining[current] > 0:
            progressed = True
            if remaining[current] <= quantum:
                elapsed += remaining[current]
                remaining[current] = 0
                job = queue[current]
                turnaround = elapsed - job.arrival
                outcomes.append(
                    JobOutcome(
                        number=current + 1,
                        arrival=job.arrival,
                        burst=job.burst,
                        completion=elapsed,
                        waiting=turnaround - job.burst,
                        turnaround=turnaround,
                    )
                )
                unfinished -= 1
            else:
                remaining[current] -= quantum
                elapsed += quantum
        if current != last and queue[current + 1].arrival <= elapsed:
            current += 1
            continue
        current = 0
        if unfinished and not progressed:
            raise ValueError("remaining jobs arrive after the work runs out")
        progressed = False

    return RoundRobinSummary(
        outcomes=tuple(outcomes),
        average_waiting=fmean(o.waiting for o in outcomes),
        average_turnaround=fmean(o.turnaround for o in outcomes),
    )