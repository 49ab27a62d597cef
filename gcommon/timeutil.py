"""Time helpers: current time as text and a blocking delay."""

import time


def time_now() -> str:
    """Return the current local time in ``ctime`` form, ending with a newline."""
    return time.ctime() + "\n"


def delay(sec: float) -> None:
    """Block for ``sec`` seconds; zero or negative values return at once."""
    if sec > 0:
        time.sleep(sec)