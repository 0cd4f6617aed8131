"""CPU scheduling algorithms: FCFS, SJF, priority and round robin.

Each algorithm takes a description of the processes and returns one
:class:`ScheduledProcess` per input process, carrying its completion,
turnaround and waiting times.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

__all__ = [
    "Process",
    "ScheduledProcess",
    "fcfs",
    "fcfs_without_arrival",
    "sjf",
    "sjf_without_arrival",
    "priority_schedule",
    "priority_without_arrival",
    "round_robin",
    "round_robin_without_arrival",
    "format_table",
    "COLUMNS_WITH_ARRIVAL",
    "COLUMNS_WITHOUT_ARRIVAL",
    "COLUMNS_PRIORITY_WITH_ARRIVAL",
    "COLUMNS_PRIORITY_WITHOUT_ARRIVAL",
]


@dataclass(frozen=True)
class Process:
    """A process to be scheduled. A lower priority number means higher priority."""

    pid: int
    burst: int
    arrival: int = 0
    priority: int = 0


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with the time at which it completed."""

    pid: int
    arrival: int
    burst: int
    priority: int
    completion: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst


_COLUMN_FIELDS = {
    "PID": "pid",
    "AT": "arrival",
    "BT": "burst",
    "Priority": "priority",
    "CT": "completion",
    "TAT": "turnaround",
    "WT": "waiting",
}

COLUMNS_WITH_ARRIVAL = ("PID", "AT", "BT", "CT", "TAT", "WT")
COLUMNS_WITHOUT_ARRIVAL = ("PID", "BT", "CT", "TAT", "WT")
COLUMNS_PRIORITY_WITH_ARRIVAL = ("PID", "AT", "BT", "Priority", "CT", "TAT", "WT")
COLUMNS_PRIORITY_WITHOUT_ARRIVAL = ("PID", "BT", "Priority", "CT", "TAT", "WT")


def _complete(process: Process, completion: int) -> ScheduledProcess:
    return ScheduledProcess(
        pid=process.pid,
        arrival=process.arrival,
        burst=process.burst,
        priority=process.priority,
        completion=completion,
    )


def _exchange_sort(items: Iterable[Process], key: Callable[[Process], int]) -> list[Process]:
    """Sort by pairwise exchange; equal keys are not kept in input order."""
    ordered = list(items)
    for i in range(len(ordered) - 1):
        for j in range(i + 1, len(ordered)):
            if key(ordered[j]) < key(ordered[i]):
                ordered[i], ordered[j] = ordered[j], ordered[i]
    return ordered


def _run_back_to_back(ordered: Iterable[Process]) -> list[ScheduledProcess]:
    """Run processes in the given order, all arriving at time zero."""
    results = []
    time = 0
    for process in ordered:
        time += process.burst
        results.append(
            ScheduledProcess(
                pid=process.pid,
                arrival=0,
                burst=process.burst,
                priority=process.priority,
                completion=time,
            )
        )
    return results


def _bursts_to_processes(bursts: Iterable[int]) -> list[Process]:
    return [Process(pid=pid, burst=burst) for pid, burst in enumerate(bursts, start=1)]


def fcfs(processes: Iterable[Process]) -> list[ScheduledProcess]:
    """First come, first served; results are in order of execution."""
    results = []
    clock: int | None = None
    for process in _exchange_sort(processes, key=lambda p: p.arrival):
        start = process.arrival if clock is None else max(process.arrival, clock)
        clock = start + process.burst
        results.append(_complete(process, clock))
    return results


def fcfs_without_arrival(bursts: Iterable[int]) -> list[ScheduledProcess]:
    """First come, first served with every process arriving at time zero."""
    return _run_back_to_back(_bursts_to_processes(bursts))


def _non_preemptive(
    processes: Iterable[Process], key: Callable[[Process], int]
) -> list[ScheduledProcess]:
    """Repeatedly run the arrived process with the smallest key to completion."""
    pending = list(processes)
    remaining = dict(enumerate(pending))
    completion: dict[int, int] = {}
    time = 0
    while remaining:
        ready = [(index, p) for index, p in remaining.items() if p.arrival <= time]
        if not ready:
            time = min(p.arrival for p in remaining.values())
            continue
        index, chosen = min(ready, key=lambda item: key(item[1]))
        time += chosen.burst
        completion[index] = time
        del remaining[index]
    return [_complete(p, completion[index]) for index, p in enumerate(pending)]


def sjf(processes: Iterable[Process]) -> list[ScheduledProcess]:
    """Non-preemptive shortest job first; results are in input order."""
    return _non_preemptive(processes, key=lambda p: p.burst)


def sjf_without_arrival(bursts: Iterable[int]) -> list[ScheduledProcess]:
    """Shortest job first with every process arriving at time zero."""
    ordered = _exchange_sort(_bursts_to_processes(bursts), key=lambda p: p.burst)
    return _run_back_to_back(ordered)


def priority_schedule(processes: Iterable[Process]) -> list[ScheduledProcess]:
    """Non-preemptive priority scheduling; results are in input order."""
    return _non_preemptive(processes, key=lambda p: p.priority)


def priority_without_arrival(processes: Iterable[Process]) -> list[ScheduledProcess]:
    """Priority scheduling with every process arriving at time zero.

    Arrival times of the given processes are ignored. Results are in order
    of execution.

    Raises ValueError if a burst time or priority is negative.
    """
    processes = list(processes)
    for process in processes:
        if process.burst < 0 or process.priority < 0:
            raise ValueError("burst time and priority must be non-negative")
    return _run_back_to_back(_exchange_sort(processes, key=lambda p: p.priority))


def _check_quantum(quantum: int) -> None:
    if quantum < 1:
        raise ValueError("time quantum must be positive")


def round_robin(processes: Iterable[Process], quantum: int) -> list[ScheduledProcess]:
    """Round robin with arrival times; results are in input order.

    The first process in the input is queued at time zero whatever its
    arrival time; the others join the queue once they have arrived.
    """
    _check_quantum(quantum)
    procs = list(processes)
    if not procs:
        return []

    remaining = [p.burst for p in procs]
    completion = [0] * len(procs)
    visited = [False] * len(procs)
    visited[0] = True
    queue = deque([0])
    time = 0
    finished = 0

    def admit() -> None:
        for index, process in enumerate(procs):
            if not visited[index] and process.arrival <= time:
                queue.append(index)
                visited[index] = True

    while finished < len(procs):
        if not queue:
            next_arrival = min(p.arrival for i, p in enumerate(procs) if not visited[i])
            time = max(time + 1, next_arrival)
            admit()
            continue

        index = queue.popleft()
        if remaining[index] > quantum:
            time += quantum
            remaining[index] -= quantum
        else:
            time += remaining[index]
            remaining[index] = 0
            completion[index] = time
            finished += 1

        admit()
        if remaining[index] > 0:
            queue.append(index)

    return [_complete(p, completion[index]) for index, p in enumerate(procs)]


def round_robin_without_arrival(bursts: Iterable[int], quantum: int) -> list[ScheduledProcess]:
    """Round robin with every process arriving at time zero; input order kept."""
    _check_quantum(quantum)
    procs = _bursts_to_processes(bursts)
    remaining = [p.burst for p in procs]
    completion = [0] * len(procs)
    time = 0
    while any(left > 0 for left in remaining):
        for index, left in enumerate(remaining):
            if left <= 0:
                continue
            if left > quantum:
                time += quantum
                remaining[index] = left - quantum
            else:
                time += left
                remaining[index] = 0
                completion[index] = time
    return [_complete(p, completion[index]) for index, p in enumerate(procs)]


def format_table(results: Iterable[ScheduledProcess], columns: Sequence[str]) -> str:
    """Render results as a tab-separated table with a header line.

    Column names are PID, AT, BT, Priority, CT, TAT and WT. A Priority
    value is followed by two tabs. Every line ends with a newline.
    """
    columns = tuple(columns)
    if not columns:
        raise ValueError("at least one column is required")
    unknown = [name for name in columns if name not in _COLUMN_FIELDS]
    if unknown:
        raise ValueError(f"unknown column(s): {', '.join(unknown)}")

    separators = ["\t\t" if name == "Priority" else "\t" for name in columns[:-1]]
    lines = ["\t".join(columns)]
    for result in results:
        cells = [str(getattr(result, _COLUMN_FIELDS[name])) for name in columns]
        lines.append("".join(c + s for c, s in zip(cells, separators)) + cells[-1])
    return "".join(line + "\n" for line in lines)