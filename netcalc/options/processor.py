"""Single-pass command-line option processing for the netcalc server.

Recognized flags follow ``getopt`` conventions for the option string
``n:p:h``: values may be attached (``-n8``) or given as the next token
(``-n 8``), flags may be clustered (``-hn8``), ``--`` ends flag scanning and
positional tokens may appear anywhere. The first failure stops the scan.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import NoReturn

from netcalc.options.config import (
    MAX_PORT_LENGTH,
    MAX_PORT_VALUE,
    MIN_PORT_VALUE,
    MIN_THREAD_COUNT,
    Configuration,
)
from netcalc.options.errors import (
    DuplicateOptionError,
    HelpRequested,
    InvalidInputError,
    InvalidNumberError,
    MissingValueError,
    OptionError,
    OutOfRangeError,
    UnexpectedArgumentError,
    UnknownOptionError,
    ValueTooLongError,
)
from netcalc.options.help import print_help_menu
from netcalc.options.numbers import NumberConversionError, parse_int32

LOGGER = logging.getLogger(__name__)

HELP_FLAG = "h"
END_OF_OPTIONS = "--"


@dataclass
class _ScanState:
    thread_count: int | None = None
    port: str | None = None

    def freeze(self) -> Configuration:
        return Configuration(
            thread_count_set=self.thread_count is not None,
            thread_count=self.thread_count if self.thread_count is not None else 0,
            port_set=self.port is not None,
            port=self.port if self.port is not None else "",
        )


def _reject(error: OptionError, cause: Exception | None = None) -> NoReturn:
    print(error, file=sys.stderr)
    raise error from cause


def _to_int32(flag: str, value: str) -> int:
    try:
        return parse_int32(value)
    except NumberConversionError as exc:
        _reject(InvalidNumberError(flag, value), cause=exc)


def _process_thread_count(value: str, state: _ScanState) -> None:
    if state.thread_count is not None:
        _reject(DuplicateOptionError("n"))

    thread_count = _to_int32("n", value)
    if thread_count < MIN_THREAD_COUNT:
        detail = f"number of threads must be {MIN_THREAD_COUNT} or more"
        _reject(OutOfRangeError("n", thread_count, detail))

    state.thread_count = thread_count


def _process_port(value: str, state: _ScanState) -> None:
    if state.port is not None:
        _reject(DuplicateOptionError("p"))

    port_number = _to_int32("p", value)
    if port_number < MIN_PORT_VALUE or port_number > MAX_PORT_VALUE:
        detail = f"port must be between {MIN_PORT_VALUE} and {MAX_PORT_VALUE}"
        _reject(OutOfRangeError("p", port_number, detail))
    if len(value) > MAX_PORT_LENGTH:
        _reject(ValueTooLongError("p", value, MAX_PORT_LENGTH))

    # Stored as given; the listener binds from the text form.
    state.port = value


_VALUE_HANDLERS: dict[str, Callable[[str, _ScanState], None]] = {
    "n": _process_thread_count,
    "p": _process_port,
}


def report_invalid_option(flag: str) -> None:
    """Write the diagnostic for a flag missing its value or not recognized."""
    if flag in _VALUE_HANDLERS:
        print(MissingValueError(flag), file=sys.stderr)
    else:
        print(UnknownOptionError(flag), file=sys.stderr)


def report_extra_arguments(arguments: Sequence[str]) -> None:
    """Write the diagnostic listing every unconsumed positional token."""
    print(UnexpectedArgumentError(arguments), file=sys.stderr)


def _scan(args: Sequence[str]) -> Configuration:
    state = _ScanState()
    positional: list[str] = []
    index = 1

    while index < len(args):
        token = args[index]
        index += 1

        if token == END_OF_OPTIONS:
            positional.extend(args[index:])
            break
        if not token.startswith("-") or token == "-":
            positional.append(token)
            continue

        position = 1
        while position < len(token):
            flag = token[position]
            position += 1

            if flag == HELP_FLAG:
                raise HelpRequested()

            handler = _VALUE_HANDLERS.get(flag)
            if handler is None:
                report_invalid_option(flag)
                raise UnknownOptionError(flag)

            if position < len(token):
                value = token[position:]
                position = len(token)
            elif index < len(args):
                value = args[index]
                index += 1
            else:
                report_invalid_option(flag)
                raise MissingValueError(flag)

            handler(value, state)

    if positional:
        report_extra_arguments(positional)
        raise UnexpectedArgumentError(positional)

    return state.freeze()


def process_options(argv: Sequence[str] | None) -> Configuration:
    """Parse ``argv`` (program name first) into a fresh ``Configuration``.

    Raises an ``OptionError`` subclass on the first problem, including
    ``HelpRequested`` for ``-h``. The help menu is printed to stdout before
    any error propagates; a successful parse prints nothing.
    """
    try:
        if not argv or any(arg is None for arg in argv):
            _reject(InvalidInputError("process_options(): missing argument vector or argument."))
        config = _scan(argv)
    except OptionError as exc:
        LOGGER.debug("Option processing stopped: %s (%s)", exc.kind, exc)
        print_help_menu()
        raise

    LOGGER.debug("Parsed options: %s", config)
    return config
