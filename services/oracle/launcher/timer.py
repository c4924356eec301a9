from __future__ import annotations

import sys
import time
from typing import Callable

TickCallback = Callable[[int], None]
Sleep = Callable[[float], None]
Waiter = Callable[..., None]


def silent_tick(elapsed: int) -> None:
    """Tick callback that displays nothing."""


def wait_with_timer(
    seconds: int,
    on_tick: TickCallback | None = None,
    *,
    sleep: Sleep = time.sleep,
) -> None:
    """
    Block for ``seconds`` seconds, one tick per second.

    Args:
        seconds: Non-negative number of seconds to wait.
        on_tick: Called after each second with the elapsed count. When omitted
            a ``Waiting for i/N seconds...`` line is rewritten on stdout.
        sleep: Suspension primitive; injectable so tests can fast-forward.

    Raises:
        ValueError: If ``seconds`` is negative.
    """
    if seconds < 0:
        raise ValueError(f"wait duration must be non-negative, got {seconds}")
    if seconds == 0:
        return

    for elapsed in range(1, seconds + 1):
        sleep(1)
        if on_tick is not None:
            on_tick(elapsed)
        else:
            sys.stdout.write(f"Waiting for {elapsed}/{seconds} seconds...\r")
            sys.stdout.flush()

    if on_tick is None:
        # Move past the countdown line
        sys.stdout.write("\n")
        sys.stdout.flush()
