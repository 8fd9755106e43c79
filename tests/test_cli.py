from pathlib import Path

from rich.console import Console

from schedsim.cli import _interactive, main


def test_run_plain(capsys):
    assert main(["run", "-a", "fcfs", "-b", "5,3,8", "--plain"]) == 0
    out = capsys.readouterr().out
    assert "Average Waiting Time = 4.33" in out
    assert "|=====|===|========|" in out


def test_run_table(capsys):
    assert main(["run", "-a", "rr", "-b", "5,3,8", "-q", "2"]) == 0
    out = capsys.readouterr().out
    assert "Round Robin" in out
    assert "Quantum: 2" in out
    assert "Per-process metrics" in out


def test_run_count_mismatch(capsys):
    assert main(["run", "-a", "fcfs", "-n", "3", "-b", "5,3"]) == 2
    assert "must match" in capsys.readouterr().out


def test_run_rr_needs_quantum(capsys):
    assert main(["run", "-a", "rr", "-b", "5,3,8"]) == 2
    assert "quantum" in capsys.readouterr().out


def test_run_unknown_algorithm(capsys):
    assert main(["run", "-a", "lottery", "-b", "5,3,8"]) == 2
    assert "Unknown algorithm" in capsys.readouterr().out


def test_run_workload_quantum(tmp_path: Path, capsys):
    p = tmp_path / "w.json"
    p.write_text('{"bursts": [5, 3, 8], "quantum": 3}')
    assert main(["run", "-a", "rr", "-w", str(p)]) == 0
    assert "Quantum: 3" in capsys.readouterr().out


def test_compare(capsys):
    assert main(["compare", "-b", "5,3,8"]) == 0
    out = capsys.readouterr().out
    for name in ("FCFS", "SJF", "Round Robin"):
        assert name in out


def test_interactive_recovers_from_errors():
    answers = iter(
        [
            "abc",  # bad count
            "3", "5,3", "1",  # count mismatch
            "3", "5,3,8", "3", "0",  # bad quantum
            "3", "5,3,8", "rr", "2",
            "q",
        ]
    )
    console = Console(record=True, width=100)

    _interactive(console, prompt=lambda _: next(answers))

    text = console.export_text()
    assert "positive integer" in text
    assert "must match" in text
    assert "Time quantum must be positive" in text
    assert "Per-process metrics" in text


def test_compare_rejects_zero_file_quantum(tmp_path: Path, capsys):
    p = tmp_path / "w.json"
    p.write_text('{"bursts": [5, 3, 8], "quantum": 0}')
    assert main(["compare", "-w", str(p)]) == 2
    assert "Time quantum must be positive" in capsys.readouterr().out


def test_compare_rejects_zero_flag_quantum(capsys):
    assert main(["compare", "-b", "5,3,8", "-q", "0"]) == 2


def test_compare_default_quantum(capsys):
    assert main(["compare", "-b", "5,3,8"]) == 0
    assert "Round Robin" in capsys.readouterr().out


def test_run_fcfs_ignores_quantum(capsys):
    assert main(["run", "-a", "fcfs", "-b", "5,3,8", "-q", "abc", "--plain"]) == 0
    out = capsys.readouterr().out
    assert "Average Waiting Time = 4.33" in out


def test_run_rr_bad_quantum(capsys):
    assert main(["run", "-a", "rr", "-b", "5,3,8", "-q", "abc"]) == 2


def test_interactive_end_of_input():
    answers = iter(["3", "5,3,8"])

    def prompt(_):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    console = Console(record=True, width=100)
    _interactive(console, prompt=prompt)
    assert "Scheduling Simulator" in console.export_text()
