"""Bit-by-bit text messaging between processes over SIGUSR1 and SIGUSR2, with string, memory, list and line-reading helpers."""

__version__ = "1.0.0"

__all__ = [
    "client",
    "formatspec",
    "linereader",
    "linkedlist",
    "memory",
    "output",
    "protocol",
    "server",
    "strsearch",
    "strutil",
]