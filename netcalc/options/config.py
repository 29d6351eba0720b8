"""Parsed command-line configuration handed to the server bootstrap."""

from __future__ import annotations

from dataclasses import dataclass

MIN_THREAD_COUNT = 2
MIN_PORT_VALUE = 1025
MAX_PORT_VALUE = 65535
MAX_PORT_LENGTH = 5

# Applied downstream when an option is not given.
DEFAULT_THREAD_COUNT = 4
DEFAULT_PORT = "31337"


@dataclass(frozen=True)
class Configuration:
    """Options explicitly supplied on the command line.

    ``thread_count`` and ``port`` are meaningful only when the matching
    ``*_set`` flag is true. The port keeps its original text.
    """

    thread_count_set: bool = False
    thread_count: int = 0
    port_set: bool = False
    port: str = ""
