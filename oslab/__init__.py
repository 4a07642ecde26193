"""Operating-system algorithms: CPU and disk scheduling, banker's algorithm,
memory placement, page replacement, file allocation, shared memory and
system-call helpers."""

__version__ = "0.1.0"