from schedsim.algorithms import schedule_fcfs, schedule_rr
from schedsim.gantt import build_rich_gantt, render_gantt
from schedsim.models import ProcessSet
from schedsim.report import format_report


def _procs():
    return ProcessSet.from_bursts([5, 3, 8])


def test_report_rows_in_process_order():
    report = format_report(schedule_rr(_procs(), quantum=2))
    lines = report.splitlines()

    assert lines[0].split() == ["Process", "Burst", "Time", "Waiting", "Time", "Turnaround", "Time"]
    assert lines[1].split() == ["P1", "5", "7", "12"]
    assert lines[2].split() == ["P2", "3", "6", "9"]
    assert lines[3].split() == ["P3", "8", "8", "16"]
    assert lines[4] == ""


def test_report_averages_are_fractional():
    report = format_report(schedule_fcfs(_procs()))
    assert "Average Waiting Time = 4.33" in report
    assert "Average Turnaround Time = 9.67" in report

    report = format_report(schedule_fcfs(_procs()), precision=4)
    assert "Average Waiting Time = 4.3333" in report


def test_render_gantt_uses_durations():
    chart = render_gantt(schedule_fcfs(_procs()).timeline)
    title, bar, labels, marks = chart.splitlines()

    assert title == "Gantt Chart:"
    assert bar == "|=====|===|========|"
    assert labels.split() == ["P1", "P2", "P3"]
    assert marks.split() == ["0", "5", "8", "16"]
    # every time mark ends under the bar that closes its slice
    for mark in ("5", "8", "16"):
        end = marks.index(mark) + len(mark) - 1
        assert bar[end] == "|"


def test_render_gantt_rr_partial_slice():
    chart = render_gantt(schedule_rr(_procs(), quantum=2).timeline)
    marks = chart.splitlines()[3]
    assert marks.split() == ["0", "2", "4", "6", "8", "9", "11", "12", "14", "16"]


def test_render_gantt_empty():
    assert render_gantt([]) == "(no execution)"


def test_build_rich_gantt():
    panel, marks = build_rich_gantt(schedule_fcfs(_procs()).timeline)
    assert panel.title == "Gantt Chart"
    assert marks.split() == ["0", "5", "8", "16"]

    panel, marks = build_rich_gantt([])
    assert marks == ""


def test_gantt_widths_follow_duration_with_label_minimum():
    res = schedule_fcfs(ProcessSet.from_bursts([6, 1, 0]))
    bar = render_gantt(res.timeline).splitlines()[1]
    # 6 units drawn at full width; 1- and 0-unit slices widened to the label
    assert bar == "|======|==|==|"
    assert render_gantt(res.timeline).splitlines()[3].split() == ["0", "6", "7", "7"]
