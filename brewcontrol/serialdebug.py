"""Console logging set-up and a small rotating error log."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Optional, TextIO, Union

from brewcontrol.applog import LogLevel, Logger, log
from brewcontrol.looptimer import millis

DEFAULT_LOG_LEVEL = LogLevel.INFO
ERR_FILENAME = "error.log"
ERR_FILENAME2 = "error2.log"
ERR_FILEMAXSIZE = 2048
_ERR_LINE_MAX = 79


def print_timestamp(output: TextIO, level: int) -> None:
    """Write the current millisecond time, right aligned, before a log line."""
    output.write(f"{millis():10d} ")


class SerialDebug:
    """Attaches a logger to a console stream with timestamped lines."""

    def __init__(
        self,
        serial_speed: int = 115200,
        auto_begin: bool = True,
        output: Optional[TextIO] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self.serial_speed = serial_speed
        self.logger = logger if logger is not None else log
        self.output = output if output is not None else sys.stdout
        self.output.write("Serial console activated.\n")
        if auto_begin:
            self.begin(self.output)

    def begin(self, output: TextIO) -> None:
        """Start logging to ``output``."""
        self.output = output
        self.logger.begin(DEFAULT_LOG_LEVEL, output, True)
        self.logger.prefix = print_timestamp
        self.logger.notice(
            "SDBG: Serial logging started at %d.\n", self.serial_speed
        )


class ErrorLog:
    """An append-only error log that rotates into a second file when full."""

    def __init__(
        self, root: Union[str, os.PathLike], console: Optional[TextIO] = None
    ) -> None:
        self.root = Path(root)
        self.console = console
        self.primary = self.root / ERR_FILENAME
        self.secondary = self.root / ERR_FILENAME2

    def write(self, fmt: str, *args: Any) -> None:
        """Append one printf-formatted line, truncated to the line limit."""
        if self.primary.exists() and self.primary.stat().st_size > ERR_FILEMAXSIZE:
            self.secondary.unlink(missing_ok=True)
            self.primary.rename(self.secondary)
        message = (fmt % args if args else fmt)[:_ERR_LINE_MAX]
        with self.primary.open("a", encoding="utf-8", newline="") as handle:
            handle.write(message)
            handle.write("\n")

    def dump(self, path: Union[str, os.PathLike]) -> None:
        """Copy a log file to the console and delete it."""
        target = Path(path)
        if not target.is_absolute():
            target = self.root / target
        console = self.console if self.console is not None else sys.stdout
        if target.exists():
            console.write(target.read_text(encoding="utf-8"))
        target.unlink(missing_ok=True)

    def dump_primary(self) -> None:
        self.dump(self.primary)

    def dump_secondary(self) -> None:
        self.dump(self.secondary)