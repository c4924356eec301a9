from __future__ import annotations

import pytest

from services.oracle.launcher.timer import silent_tick, wait_with_timer


def test_zero_seconds_returns_without_ticks(capsys: pytest.CaptureFixture[str]) -> None:
    ticks: list[int] = []
    sleeps: list[float] = []

    wait_with_timer(0, ticks.append, sleep=sleeps.append)

    assert ticks == []
    assert sleeps == []
    assert capsys.readouterr().out == ""


def test_callback_receives_elapsed_seconds() -> None:
    ticks: list[int] = []
    sleeps: list[float] = []

    wait_with_timer(3, ticks.append, sleep=sleeps.append)

    assert ticks == [1, 2, 3]
    assert sleeps == [1, 1, 1]


def test_default_progress_written_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    wait_with_timer(2, sleep=lambda _: None)

    out = capsys.readouterr().out
    assert "Waiting for 1/2 seconds...\r" in out
    assert "Waiting for 2/2 seconds...\r" in out
    assert out.endswith("\n")


def test_silent_tick_writes_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    wait_with_timer(2, silent_tick, sleep=lambda _: None)

    assert capsys.readouterr().out == ""


def test_negative_seconds_rejected() -> None:
    with pytest.raises(ValueError):
        wait_with_timer(-1, sleep=lambda _: None)
