from unittest import mock

import pytest

from docsearch.profile import AddDuration, LogDuration, TotalDuration, format_duration

BANNER = "=" * 80


def test_format_duration_zero():
    assert format_duration(0) == "0 sec, 0 mils 0 mics 0 nans "


def test_format_duration_splits_units():
    assert format_duration(1_002_003_004) == "1 sec, 2 mils 3 mics 4 nans "


def test_format_duration_negative_raises():
    with pytest.raises(ValueError):
        format_duration(-1)


def test_log_duration_writes_banner_and_message(capsys):
    with mock.patch("time.perf_counter_ns", side_effect=[100, 100]):
        with LogDuration("step") as timer:
            pass
    err = capsys.readouterr().err
    assert timer.elapsed_ns == 0
    assert err == f"{BANNER}\nstep | {format_duration(0)}\n{BANNER}\n"


def test_log_duration_measures_elapsed(capsys):
    with mock.patch("time.perf_counter_ns", side_effect=[10, 2_000_000_010]):
        with LogDuration("work") as timer:
            pass
    assert timer.elapsed_ns == 2_000_000_000
    assert format_duration(2_000_000_000) in capsys.readouterr().err


def test_log_duration_reports_even_on_error(capsys):
    with pytest.raises(RuntimeError):
        with LogDuration("fail"):
            raise RuntimeError("boom")
    assert "fail | " in capsys.readouterr().err


def test_total_duration_add_and_report(capsys):
    total = TotalDuration("sum")
    total.add(1_500_000)
    total.add(2_600_000)
    assert total.value == 4_100_000
    line = total.report()
    assert line == "sum: 4 ms\n"
    assert capsys.readouterr().err == line


def test_total_duration_context_reports_on_exit(capsys):
    with TotalDuration("ctx") as total:
        total.add(0)
    assert capsys.readouterr().err == "ctx: 0 ms\n"


def test_add_duration_accumulates_into_total(capsys):
    total = TotalDuration("acc")
    with mock.patch("time.perf_counter_ns", side_effect=[0, 3_000_000, 10, 1_000_010]):
        with AddDuration(total):
            pass
        with AddDuration(total):
            pass
    assert total.value == 4_000_000
    assert total.report() == "acc: 4 ms\n"
    capsys.readouterr()


def test_add_duration_is_non_negative():
    total = TotalDuration()
    with AddDuration(total):
        sum(range(100))
    assert total.value >= 0