"""Minimal console logging helpers."""

import sys

DEFAULT_KIND = "default"


def _emit(msg: str, kind: str) -> None:
    sys.stdout.write(f"type={kind},msg={msg}\n")
    sys.stdout.flush()


def log(msg: str, kind: str = DEFAULT_KIND) -> None:
    """Write a log line of the form ``type=<kind>,msg=<msg>`` to standard output."""
    _emit(msg, kind)


def echo(msg: str, kind: str = DEFAULT_KIND) -> None:
    """Print a message in the same ``type=<kind>,msg=<msg>`` form as :func:`log`."""
    _emit(msg, kind)