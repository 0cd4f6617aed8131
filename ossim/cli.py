"""Interactive command line for the scheduling and paging simulators.

The chosen algorithm prompts for its input and reads whitespace-separated
integers from standard input, then prints its results.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterator, TextIO

from ossim.paging import PagingResult, fifo, format_report, lru, optimal
from ossim.scheduling import (
    COLUMNS_PRIORITY_WITH_ARRIVAL,
    COLUMNS_PRIORITY_WITHOUT_ARRIVAL,
    COLUMNS_WITH_ARRIVAL,
    COLUMNS_WITHOUT_ARRIVAL,
    Process,
    fcfs,
    fcfs_without_arrival,
    format_table,
    priority_schedule,
    priority_without_arrival,
    round_robin,
    round_robin_without_arrival,
    sjf,
    sjf_without_arrival,
)

__all__ = ["main"]


class _InputError(Exception):
    """Raised when standard input does not hold the expected integers."""


class _Reader:
    """Reads integers one token at a time, prompting on standard output."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens: Iterator[str] = (tok for line in stream for tok in line.split())

    def integer(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise _InputError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise _InputError(f"not an integer: {token!r}") from None

    def ask(self, prompt: str, count: int = 1) -> list[int]:
        print(prompt, end="", flush=True)
        return [self.integer() for _ in range(count)]

    def ask_count(self, prompt: str) -> int:
        (value,) = self.ask(prompt)
        if value < 0:
            raise _InputError("count must not be negative")
        return value


_PROCESS_COUNT = "Enter number of processes: "
_QUANTUM = "Enter Time Quantum: "


def _show_table(results, columns) -> None:
    print()
    print(format_table(results, columns), end="")


def _fcfs(reader: _Reader) -> int:
    n = reader.ask_count(_PROCESS_COUNT)
    procs = []
    for pid in range(1, n + 1):
        arrival, burst = reader.ask(f"Enter arrival time and burst time for process {pid}: ", 2)
        procs.append(Process(pid=pid, burst=burst, arrival=arrival))
    _show_table(fcfs(procs), COLUMNS_WITH_ARRIVAL)
    return 0


def _read_bursts(reader: _Reader, n: int, prompt: str) -> list[int]:
    return [reader.ask(prompt.format(pid=pid))[0] for pid in range(1, n + 1)]


def _fcfs_no_arrival(reader: _Reader) -> int:
    n = reader.ask_count(_PROCESS_COUNT)
    bursts = _read_bursts(reader, n, "Enter burst time for process {pid}: ")
    _show_table(fcfs_without_arrival(bursts), COLUMNS_WITHOUT_ARRIVAL)
    return 0


def _read_arrival_burst(reader: _Reader, n: int) -> list[Process]:
    procs = []
    for pid in range(1, n + 1):
        arrival, burst = reader.ask(
            f"Enter Arrival Time and Burst Time for Process {pid}: ", 2
        )
        procs.append(Process(pid=pid, burst=burst, arrival=arrival))
    return procs


def _sjf(reader: _Reader) -> int:
    n = reader.ask_count(_PROCESS_COUNT)
    _show_table(sjf(_read_arrival_burst(reader, n)), COLUMNS_WITH_ARRIVAL)
    return 0


def _sjf_no_arrival(reader: _Reader) -> int:
    n = reader.ask_count(_PROCESS_COUNT)
    bursts = _read_bursts(reader, n, "Enter Burst Time for Process {pid}: ")
    _show_table(sjf_without_arrival(bursts), COLUMNS_WITHOUT_ARRIVAL)
    return 0


def _priority(reader: _Reader) -> int:
    n = reader.ask_count(_PROCESS_COUNT)
    procs = []
    for pid in range(1, n + 1):
        arrival, burst, priority = reader.ask(
            f"Enter Arrival Time, Burst Time, and Priority for Process {pid}: ", 3
        )
        procs.append(Process(pid=pid, burst=burst, arrival=arrival, priority=priority))
    _show_table(priority_schedule(procs), COLUMNS_PRIORITY_WITH_ARRIVAL)
    return 0


def _priority_no_arrival(reader: _Reader) -> int:
    n = reader.ask_count(_PROCESS_COUNT)
    procs = []
    for pid in range(1, n + 1):
        burst, priority = reader.ask(
            f"Enter Burst Time and Priority for Process {pid}: ", 2
        )
        if burst < 0 or priority < 0:
            print("Invalid input! Burst Time and Priority must be non-negative.")
            return 1
        procs.append(Process(pid=pid, burst=burst, priority=priority))
    _show_table(priority_without_arrival(procs), COLUMNS_PRIORITY_WITHOUT_ARRIVAL)
    return 0


def _rr(reader: _Reader) -> int:
    n = reader.ask_count(_PROCESS_COUNT)
    (quantum,) = reader.ask(_QUANTUM)
    procs = _read_arrival_burst(reader, n)
    _show_table(round_robin(procs, quantum), COLUMNS_WITH_ARRIVAL)
    return 0


def _rr_no_arrival(reader: _Reader) -> int:
    n = reader.ask_count(_PROCESS_COUNT)
    (quantum,) = reader.ask(_QUANTUM)
    bursts = _read_bursts(reader, n, "Enter Burst Time for Process {pid}: ")
    _show_table(round_robin_without_arrival(bursts, quantum), COLUMNS_WITHOUT_ARRIVAL)
    return 0


def _paging_command(
    algorithm: Callable[[list[int], int], PagingResult],
    count_prompt: str,
    frames_prompt: str,
    label: str | None,
) -> Callable[[_Reader], int]:
    def run(reader: _Reader) -> int:
        n = reader.ask_count(count_prompt)
        print("Enter the page reference string:")
        pages = [reader.integer() for _ in range(n)]
        (frame_count,) = reader.ask(frames_prompt)
        print(format_report(algorithm(pages, frame_count), label), end="")
        return 0

    return run


_COMMANDS: dict[str, Callable[[_Reader], int]] = {
    "fcfs": _fcfs,
    "fcfs-no-arrival": _fcfs_no_arrival,
    "sjf": _sjf,
    "sjf-no-arrival": _sjf_no_arrival,
    "priority": _priority,
    "priority-no-arrival": _priority_no_arrival,
    "rr": _rr,
    "rr-no-arrival": _rr_no_arrival,
    "fifo": _paging_command(
        fifo,
        "Enter the number of pages in the reference string: ",
        "Enter the number of frames: ",
        None,
    ),
    "lru": _paging_command(
        lru, "Enter number of pages: ", "Enter number of frames: ", "LRU"
    ),
    "optimal": _paging_command(
        optimal, "Enter number of pages: ", "Enter number of frames: ", "Optimal"
    ),
}


def main(argv: list[str] | None = None) -> int:
    """Run one simulator interactively; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="ossim", description="CPU scheduling and page replacement simulators."
    )
    parser.add_argument("algorithm", choices=sorted(_COMMANDS), help="simulator to run")
    args = parser.parse_args(argv)

    reader = _Reader(sys.stdin)
    try:
        return _COMMANDS[args.algorithm](reader)
    except (_InputError, ValueError) as exc:
        print()
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())