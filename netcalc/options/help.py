"""Static usage text for the netcalc command."""

from __future__ import annotations

from netcalc.options.config import (
    DEFAULT_PORT,
    DEFAULT_THREAD_COUNT,
    MAX_PORT_VALUE,
    MIN_PORT_VALUE,
    MIN_THREAD_COUNT,
)

HELP_TEXT = f"""\
Net Calc - Cyber Solutions Development - Tactical
-------------------------------------------------
Usage: ./netcalc [options]
Options:
  -p PORT   Port to listen on; (MIN: {MIN_PORT_VALUE}, MAX: {MAX_PORT_VALUE}) defaults to {DEFAULT_PORT}.
  -n NUM    Number of threads in the pool; (MIN: {MIN_THREAD_COUNT}) defaults to {DEFAULT_THREAD_COUNT}.
  -h        Print this help menu and exit.

Description:
  Net Calc is a server application that performs a variety of operations.
  It listens for incoming connections over network sockets, enqueues the data,
  and processes the work in a queue with a threadpool.

Examples:
  netcalc -p 8080 -n 8
  netcalc -h

For more information, see the documentation."""


def print_help_menu() -> None:
    print(HELP_TEXT)
