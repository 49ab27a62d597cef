"""Common building blocks: console logging, time helpers, object pooling and JSON output."""

__version__ = "0.1.0"

__all__ = [
    "jsonformat",
    "log",
    "pool",
    "styled",
    "timeutil",
]