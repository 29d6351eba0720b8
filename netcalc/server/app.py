"""NetCalc server startup entrypoint."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from netcalc.options import OptionError, process_options
from netcalc.server.settings import ServerSettings

LOGGER = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse startup options and resolve server settings; non-zero on failure."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = process_options(sys.argv if argv is None else argv)
    except OptionError:
        return 1

    settings = ServerSettings.from_configuration(config)
    LOGGER.info(
        "NetCalc configured to listen on port %s with %d worker threads",
        settings.port,
        settings.thread_count,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
