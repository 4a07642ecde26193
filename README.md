# oslab

The algorithms of an operating-systems course written as small Python
functions that return results (dataclasses, tuples, lists) rather than
printing them. No third-party libraries are needed.

## Modules

| Module | What it provides |
| --- | --- |
| `oslab.scheduling` | CPU scheduling with a Gantt chart: `fcfs`, `sjf`, `priority_schedule`, `round_robin`, all taking `Process` objects and returning a `ScheduleResult`; `format_report` renders it as a text table |
| `oslab.quick_scheduling` | Compact variants that number jobs from 1: `shortest_job_first`, `priority_first` (returning `QuickSchedule`) and `round_robin_totals` (returning `RoundRobinSummary`) |
| `oslab.bankers` | Banker's algorithm: `safety_sequence`, `cyclic_safety_order`, `detect_deadlock` and `request_resources` for named `BankerProcess` objects |
| `oslab.memory_fit` | `first_fit`, `best_fit` and `worst_fit` placement of files into memory blocks, returning `Placement` records |
| `oslab.disk_scheduling` | Disk head scheduling: `fcfs`, `scan`, `c_scan` (at most 25 requests) and `sweep_scan`, `sweep_c_scan` on a fixed 0–199 disk, returning `SeekResult` |
| `oslab.page_replacement` | `fifo`, `fifo_zero_filled`, `lru`, `lfu` and `lfu_recent`, each returning a `ReplacementTrace` of `PageStep`s |
| `oslab.file_allocation` | `BlockAllocator` with `allocate_contiguous`, `allocate_linked` and `allocate_indexed` on a disk of 100 blocks by default |
| `oslab.semaphore` | `ProducerConsumer`, a bounded buffer that raises `BufferFull` / `BufferEmpty`, and the `oslab-semaphore` command |
| `oslab.shared_memory` | `publish_number` and `consume_factorial` pass an integer between processes through a named shared memory segment; `roundtrip_text` writes a line into a segment and reads it back; `factorial` |
| `oslab.syscalls` | `list_directories`, `list_regular_files`, `file_mode`, `directory_exists`, `copy_with_markers`, `cat` and `kill_process` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

CPU scheduling:

```python
from oslab.scheduling import Process, round_robin, format_report

result = round_robin(
    [Process("P1", 0, 5), Process("P2", 1, 3), Process("P3", 2, 1)],
    quantum=2,
)
print(result.average_waiting(), result.average_turnaround())
print(format_report(result))
```

Page replacement returns a trace of every reference:

```python
from oslab.page_replacement import fifo

trace = fifo([1, 2, 3, 2, 5], 3)
print(trace.faults())   # 4
print(trace.hits())     # 1
```

Disk scheduling reports the tracks visited and the total head movement:

```python
from oslab import disk_scheduling

result = disk_scheduling.scan(50, [82, 170, 43, 140, 24, 16, 190], 200, "R")
print(result.sequence, result.seek_count)
```

Memory placement:

```python
from oslab.memory_fit import best_fit

for placement in best_fit([100, 500, 200, 300, 600], [212, 417, 112, 426]):
    print(placement)
```

A placement whose file fits no free block has `block_number`, `block_size`
and `fragment` set to `None`.

Deadlock avoidance:

```python
from oslab.bankers import safety_sequence

result = safety_sequence(
    maximum=[[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]],
    allocation=[[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]],
    available=[3, 3, 2],
)
print(result.safe, result.sequence)
```

## Errors

Errors are raised, not printed. `request_resources` raises `KeyError` for an
unknown process name and `oslab.bankers.ResourceRequestDenied` when a request
exceeds the process's remaining need. The disk schedulers raise `ValueError`
for too many requests or a head beyond the disk size. Producing into a full
buffer raises `oslab.semaphore.BufferFull` and consuming from an empty one
raises `oslab.semaphore.BufferEmpty`. `kill_process` lets the `OSError` from
the system through.

## Command line

The producer/consumer simulation can be driven from standard input:

```
oslab-semaphore
```

Enter `1` to produce an item, `2` to consume one and `3` (or end of input) to
exit. The buffer holds three items unless `--capacity` gives another size.

## What it does not do

`oslab-semaphore` is the only command; everything else is used as a library
from Python. There is no threaded producer/consumer simulation: `ProducerConsumer`
only counts full and empty slots. `shared_memory`, `cat` and `kill_process`
rely on POSIX facilities and the `cat` program.