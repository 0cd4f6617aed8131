import io

import pytest

from ossim.cli import main
from ossim.paging import format_report, fifo, lru, optimal
from ossim.scheduling import (
    COLUMNS_PRIORITY_WITHOUT_ARRIVAL,
    COLUMNS_WITH_ARRIVAL,
    COLUMNS_WITHOUT_ARRIVAL,
    Process,
    fcfs,
    format_table,
    priority_without_arrival,
    round_robin,
    sjf_without_arrival,
)


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_fcfs_full_output(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["fcfs"], "3\n0 5\n1 3\n2 8\n")
    procs = [
        Process(pid=1, burst=5, arrival=0),
        Process(pid=2, burst=3, arrival=1),
        Process(pid=3, burst=8, arrival=2),
    ]
    expected = (
        "Enter number of processes: "
        "Enter arrival time and burst time for process 1: "
        "Enter arrival time and burst time for process 2: "
        "Enter arrival time and burst time for process 3: "
        "\n" + format_table(fcfs(procs), COLUMNS_WITH_ARRIVAL)
    )
    assert status == 0
    assert out == expected


def test_round_robin_output(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["rr"], "2 2\n0 5\n1 3\n")
    procs = [Process(pid=1, burst=5, arrival=0), Process(pid=2, burst=3, arrival=1)]
    assert status == 0
    assert out.startswith("Enter number of processes: Enter Time Quantum: ")
    assert out.endswith("\n" + format_table(round_robin(procs, 2), COLUMNS_WITH_ARRIVAL))


def test_sjf_without_arrival_output(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["sjf-no-arrival"], "3 6 2 4")
    assert status == 0
    assert out.endswith(format_table(sjf_without_arrival([6, 2, 4]), COLUMNS_WITHOUT_ARRIVAL))


def test_priority_without_arrival_output(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["priority-no-arrival"], "2\n4 2\n3 1\n")
    procs = [Process(pid=1, burst=4, priority=2), Process(pid=2, burst=3, priority=1)]
    assert status == 0
    assert out.endswith(
        format_table(priority_without_arrival(procs), COLUMNS_PRIORITY_WITHOUT_ARRIVAL)
    )


def test_priority_without_arrival_rejects_negative(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["priority-no-arrival"], "2\n4 -1\n3 1\n")
    assert status == 1
    assert out.endswith("Invalid input! Burst Time and Priority must be non-negative.\n")


@pytest.mark.parametrize(
    "command, algorithm, label",
    [("fifo", fifo, None), ("lru", lru, "LRU"), ("optimal", optimal, "Optimal")],
)
def test_paging_commands(monkeypatch, capsys, command, algorithm, label):
    pages = [7, 0, 1, 2, 0, 3, 0, 4]
    text = f"{len(pages)}\n{' '.join(map(str, pages))}\n3\n"
    status, out, _ = _run(monkeypatch, capsys, [command], text)
    assert status == 0
    assert "Enter the page reference string:\n" in out
    assert out.endswith(format_report(algorithm(pages, 3), label))


def test_lru_prompts(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["lru"], "2\n1 2\n1\n")
    assert status == 0
    assert out.startswith(
        "Enter number of pages: Enter the page reference string:\nEnter number of frames: "
    )


def test_truncated_input_fails(monkeypatch, capsys):
    status, _, err = _run(monkeypatch, capsys, ["fcfs"], "3\n0 5\n")
    assert status == 1
    assert "unexpected end of input" in err


def test_non_integer_input_fails(monkeypatch, capsys):
    status, _, err = _run(monkeypatch, capsys, ["fcfs"], "two\n")
    assert status == 1
    assert "not an integer" in err


def test_zero_quantum_fails(monkeypatch, capsys):
    status, _, err = _run(monkeypatch, capsys, ["rr-no-arrival"], "1 0 5")
    assert status == 1
    assert "quantum" in err


def test_zero_frames_fails(monkeypatch, capsys):
    status, _, err = _run(monkeypatch, capsys, ["fifo"], "2\n1 2\n0\n")
    assert status == 1
    assert "frames" in err


def test_unknown_algorithm_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as excinfo:
        main(["bogus"])
    assert excinfo.value.code == 2