"""Runtime settings resolved from parsed options and built-in defaults."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from netcalc.options.config import (
    DEFAULT_PORT,
    DEFAULT_THREAD_COUNT,
    MAX_PORT_LENGTH,
    MIN_THREAD_COUNT,
    Configuration,
)


class ServerSettings(BaseModel):
    """Values the server uses to size its worker pool and bind its listener."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    thread_count: int = Field(default=DEFAULT_THREAD_COUNT, ge=MIN_THREAD_COUNT)
    port: str = Field(default=DEFAULT_PORT, min_length=1, max_length=MAX_PORT_LENGTH)

    @property
    def port_number(self) -> int:
        return int(self.port)

    @classmethod
    def from_configuration(cls, config: Configuration) -> ServerSettings:
        """Fill in defaults for every option not given on the command line."""
        values: dict[str, object] = {}
        if config.thread_count_set:
            values["thread_count"] = config.thread_count
        if config.port_set:
            values["port"] = config.port
        return cls(**values)
