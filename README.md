# ossim

`ossim` simulates the textbook algorithms of an operating-systems course:

* **CPU scheduling**: first come first served, shortest job first,
  non-preemptive priority and round robin, each with or without arrival
  times. For every process it works out the completion, turnaround and
  waiting times.
* **Page replacement**: FIFO, LRU and optimal. It follows a page reference
  string through a fixed number of frames, notes each hit or fault, and
  counts the faults.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

`ossim` takes the name of one simulator, prompts for its data and reads
whitespace-separated integers from standard input:

```
ossim --help
ossim fcfs
```

| Name                  | What it runs                                        |
|-----------------------|-----------------------------------------------------|
| `fcfs`                | first come first served, with arrival times         |
| `fcfs-no-arrival`     | first come first served, all arriving at time zero  |
| `sjf`                 | shortest job first, with arrival times              |
| `sjf-no-arrival`      | shortest job first, all arriving at time zero       |
| `priority`            | priority scheduling, with arrival times             |
| `priority-no-arrival` | priority scheduling, all arriving at time zero      |
| `rr`                  | round robin, with arrival times                     |
| `rr-no-arrival`       | round robin, all arriving at time zero              |
| `fifo`                | FIFO page replacement                               |
| `lru`                 | LRU page replacement                                |
| `optimal`             | optimal page replacement                            |

The scheduling commands first ask for the number of processes (and, for
round robin, the time quantum), then the values for each process. The
paging commands ask for the length of the reference string, the pages
themselves and the number of frames. Because the input is read token by
token, it can be piped in:

```
printf '3\n0 5\n1 3\n2 8\n' | ossim fcfs
```

Scheduling results are printed as a tab-separated table; paging results
as one line per reference followed by the total number of page faults.
The command exits with status 1 when the input runs out, holds something
that is not an integer, gives a negative count, a quantum or frame count
below one, or (for `priority-no-arrival`) a negative burst time or
priority.

## Library

### Scheduling: `ossim.scheduling`

A `Process` has a `pid`, a `burst`, and optionally an `arrival` and a
`priority` (both default to 0; a lower priority number runs first).
Every algorithm returns a list of `ScheduledProcess` records, each with
`pid`, `arrival`, `burst`, `priority`, `completion` and the derived
properties `turnaround` and `waiting`.

```python
from ossim.scheduling import Process, fcfs, fcfs_without_arrival, round_robin_without_arrival

served_in_order = fcfs_without_arrival([5, 3, 8])
time_sliced = round_robin_without_arrival([5, 3, 8], 2)
with_arrivals = fcfs([Process(pid=1, burst=5, arrival=0), Process(pid=2, burst=3, arrival=1)])
```

| Function                                  | Input                  | Order of results   |
|-------------------------------------------|------------------------|--------------------|
| `fcfs(processes)`                         | `Process` objects      | order of execution |
| `fcfs_without_arrival(bursts)`            | burst times            | input order        |
| `sjf(processes)`                          | `Process` objects      | input order        |
| `sjf_without_arrival(bursts)`             | burst times            | order of execution |
| `priority_schedule(processes)`            | `Process` objects      | input order        |
| `priority_without_arrival(processes)`     | `Process` objects      | order of execution |
| `round_robin(processes, quantum)`         | `Process` objects      | input order        |
| `round_robin_without_arrival(bursts, quantum)` | burst times       | input order        |

Functions that take plain burst times number the processes from 1.
Some behaviour worth knowing:

* SJF and priority scheduling are non-preemptive; when the CPU would
  be idle, time advances to the next arrival.
* `fcfs`, `sjf_without_arrival` and `priority_without_arrival` order
  processes with a pairwise exchange sort, so processes with equal keys
  do not necessarily keep their input order.
* `priority_without_arrival` ignores arrival times and raises
  `ValueError` if a burst time or priority is negative.
* `round_robin` queues the first process of the input at time zero
  whatever its arrival time; the others join the queue once they have
  arrived.
* Both round robin functions raise `ValueError` for a quantum below one.

`format_table(results, columns)` renders results as a tab-separated table
with a header line. Column names are `PID`, `AT`, `BT`, `Priority`, `CT`,
`TAT` and `WT`; unknown names or an empty column list raise `ValueError`.
The tuples `COLUMNS_WITH_ARRIVAL`, `COLUMNS_WITHOUT_ARRIVAL`,
`COLUMNS_PRIORITY_WITH_ARRIVAL` and `COLUMNS_PRIORITY_WITHOUT_ARRIVAL` hold
the usual column sets.

### Page replacement: `ossim.paging`

```python
from ossim.paging import fifo, lru, optimal, format_report

reference = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]
print(format_report(fifo(reference, 3), "FIFO"))
print(format_report(lru(reference, 3), "LRU"))
print(format_report(optimal(reference, 3), "Optimal"))
```

`fifo`, `lru` and `optimal` each take the reference string and a frame
count, and raise `ValueError` if the frame count is below one. They
return a `PagingResult` with `frame_count`, a tuple of `PageAccess`
records (`page`, `fault`) for every reference, and the properties
`faults` and `hits`. When several resident pages are never used again,
`optimal` evicts the first of them it finds.

`format_report(result, label=None)` writes one line per reference and a
final `Total Page Faults` line, with the label in parentheses when given.

## What it does not do

The simulators work on integers given on the command line or in code;
they do not read process or page data from files, draw Gantt charts, or
offer preemptive variants of SJF and priority scheduling.