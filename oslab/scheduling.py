"""CPU scheduling with Gantt charts: FCFS, SJF, priority and round robin."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from statistics import fmean

IDLE = "Idle"


@dataclass(frozen=True)
class Process:
    """A process as submitted to a scheduler."""

    name: str
    arrival: int
    burst: int
    priority: int = 0


@dataclass(frozen=True)
class ProcessResult:
    """Timing figures of one process once it has finished."""

    name: str
    arrival: int
    burst: int
    completion: int
    waiting: int
    turnaround: int


@dataclass(frozen=True)
class GanttSlot:
    """A stretch of CPU time given to one process, or left idle."""

    name: str
    start: int
    end: int


@dataclass(frozen=True)
class ScheduleResult:
    """Per-process figures together with the Gantt chart."""

    processes: tuple[ProcessResult, ...]
    gantt: tuple[GanttSlot, ...]

    def average_waiting(self) -> float:
        return fmean(result.waiting for result in self.processes)

    def average_turnaround(self) -> float:
        return fmean(result.turnaround for result in self.processes)


class _Timeline:
    """The clock and the Gantt chart being built by a scheduler."""

    def __init__(self) -> None:
        self.time = 0
        self.slots: list[GanttSlot] = []

    def idle_until(self, moment: int) -> None:
        if moment > self.time:
            self.slots.append(GanttSlot(IDLE, self.time, moment))
            self.time = moment

    def run(self, name: str, duration: int) -> None:
        start = self.time
        self.time += duration
        self.slots.append(GanttSlot(name, start, self.time))


def _finished(process: Process, completion: int) -> ProcessResult:
    turnaround = completion - process.arrival
    return ProcessResult(
        name=process.name,
        arrival=process.arrival,
        burst=process.burst,
        completion=completion,
        waiting=turnaround - process.burst,
        turnaround=turnaround,
    )


def _checked(processes: Iterable[Process]) -> list[Process]:
    queue = list(processes)
    if not queue:
        raise ValueError("at least one process is required")
    return queue


def fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """First come, first served; results are listed in arrival order."""
    ordered = sorted(_checked(processes), key=lambda process: process.arrival)
    timeline = _Timeline()
    results = []
    for process in ordered:
        timeline.idle_until(process.arrival)
        timeline.run(process.name, process.burst)
        results.append(_finished(process, timeline.time))
    return ScheduleResult(tuple(results), tuple(timeline.slots))


def _non_preemptive(
    processes: Sequence[Process], key: Callable[[Process], object]
) -> ScheduleResult:
    pending = list(enumerate(processes))
    finished: dict[int, ProcessResult] = {}
    timeline = _Timeline()
    while pending:
        ready = [entry for entry in pending if entry[1].arrival <= timeline.time]
        if not ready:
            timeline.idle_until(min(process.arrival for _, process in pending))
            continue
        chosen = min(ready, key=lambda entry: key(entry[1]))
        pending.remove(chosen)
        position, process = chosen
        timeline.run(process.name, process.burst)
        finished[position] = _finished(process, timeline.time)
    results = tuple(finished[position] for position in range(len(processes)))
    return ScheduleResult(results, tuple(timeline.slots))


def sjf(processes: Iterable[Process]) -> ScheduleResult:
    """Non-preemptive shortest job first; ties go to the earlier listed process."""
    return _non_preemptive(_checked(processes), key=lambda process: process.burst)


def priority_schedule(processes: Iterable[Process]) -> ScheduleResult:
    """Non-preemptive priority; a lower value runs first, ties go to earlier arrival."""
    return _non_preemptive(
        _checked(processes), key=lambda process: (process.priority, process.arrival)
    )


def round_robin(processes: Iterable[Process], quantum: int) -> ScheduleResult:
    """Preemptive round robin with the given time quantum."""
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    queue = _checked(processes)
    remaining = [process.burst for process in queue]
    unadmitted = list(range(len(queue)))
    ready: deque[int] = deque()
    finished: dict[int, ProcessResult] = {}
    timeline = _Timeline()

    def admit() -> None:
        nonlocal unadmitted
        ready.extend(i for i in unadmitted if queue[i].arrival <= timeline.time)
        unadmitted = [i for i in unadmitted if queue[i].arrival > timeline.time]

    while len(finished) < len(queue):
        admit()
        if not ready:
            timeline.idle_until(min(queue[i].arrival for i in unadmitted))
            continue
        current = ready.popleft()
        process = queue[current]
        if remaining[current] <= quantum:
            timeline.run(process.name, remaining[current])
            finished[current] = _finished(process, timeline.time)
        else:
            timeline.run(process.name, quantum)
            remaining[current] -= quantum
            admit()
            ready.append(current)

    results = tuple(finished[position] for position in range(len(queue)))
    return ScheduleResult(results, tuple(timeline.slots))


def format_report(result: ScheduleResult) -> str:
    """Render the process table, the Gantt chart and the averages as text."""
    rule = "\t" + "-" * 68
    lines = [
        "PROCESS NAME\tCOMPLETION TIME (ms)\tWAITING TIME (ms)\tTURNAROUND TIME (ms)",
        "",
    ]
    lines.extend(
        f"    {r.name}\t\t\t{r.completion}\t\t\t{r.waiting}\t\t\t{r.turnaround}"
        for r in result.processes
    )
    lines.extend(["", "", "GANTT CHART ", rule])
    lines.append("\t" + "".join(f"|{slot.name}\t" for slot in result.gantt) + " |")
    lines.append(rule)
    marks = [slot.start for slot in result.gantt] + [result.gantt[-1].end]
    lines.append("\t" + "".join(f"{mark}\t" for mark in marks))
    lines.append("")
    lines.append(f"AVERAGE WAITING TIME : {result.average_waiting():f}")
    lines.append(f"AVERAGE TURNAROUND TIME : {result.average_turnaround():f}")
    return "\n".join(lines) + "\n"