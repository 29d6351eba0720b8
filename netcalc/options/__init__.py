"""Command-line option processing package."""

from netcalc.options.config import Configuration
from netcalc.options.errors import HelpRequested, OptionError
from netcalc.options.processor import process_options

__all__ = [
    "Configuration",
    "HelpRequested",
    "OptionError",
    "process_options",
]
