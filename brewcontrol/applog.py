"""Levelled logger that writes printf-like messages to a text stream."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Iterator, Optional, TextIO

PrefixFunction = Callable[[TextIO, int], None]

_LEVEL_LETTERS = "FEWITV"


class LogLevel(IntEnum):
    """Log levels; a message is written when its level is <= the logger's."""

    SILENT = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    NOTICE = 4
    TRACE = 5
    VERBOSE = 6


def _unsigned32(value: int) -> int:
    return value & 0xFFFFFFFF if value < 0 else value


def _format_char(code: int) -> str:
    code &= 0xFF
    if 0x20 <= code < 0x7F:
        return chr(code)
    pad = "0" if code < 0xF else ""
    return f"0x{pad}{code:X}"


def _as_code(value: Any) -> int:
    if isinstance(value, str):
        if not value:
            raise ValueError("empty string given for a character")
        return ord(value[0])
    return int(value)


def _render(spec: str, value: Any) -> str:
    if spec in "sSp":
        return str(value)
    if spec in "dilu":
        return str(int(value))
    if spec in "DF":
        return f"{float(value):.2f}"
    if spec == "x":
        return f"{_unsigned32(int(value)):X}"
    if spec == "X":
        h = int(value) & 0xFFFF
        pad = "".join("0" for limit in (0xFFF, 0xFF, 0xF) if h < limit)
        return f"0x{pad}{h:X}"
    if spec == "b":
        return f"{_unsigned32(int(value)):b}"
    if spec == "B":
        return f"0b{_unsigned32(int(value)):b}"
    if spec == "c":
        return chr(_as_code(value) & 0xFF) if not isinstance(value, str) else value[:1]
    if spec == "C":
        return _format_char(_as_code(value))
    if spec == "t":
        return "T" if int(value) == 1 else "F"
    if spec == "T":
        return "true" if int(value) == 1 else "false"
    raise AssertionError(spec)


_CONSUMING_SPECS = frozenset("sSpdilDFxXbBcCtT" + "u")


def format_message(fmt: str, *args: Any) -> str:
    """Expand the %-wildcards of ``fmt`` with ``args``.

    Supported: %s %S %p %d %i %l %u %D %F %x %X %b %B %c %C %t %T and %%.
    Unknown wildcards print nothing and consume no argument.
    """
    values: Iterator[Any] = iter(args)
    parts: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            parts.append("%")
        elif spec in _CONSUMING_SPECS:
            try:
                value = next(values)
            except StopIteration:
                raise ValueError(
                    f"not enough arguments for format {fmt!r}"
                ) from None
            parts.append(_render(spec, value))
    return "".join(parts)


class Logger:
    """Writes levelled messages to an output stream."""

    def __init__(self) -> None:
        self._level = LogLevel.SILENT
        self.show_level = True
        self.output: Optional[TextIO] = None
        self.prefix: Optional[PrefixFunction] = None
        self.suffix: Optional[PrefixFunction] = None

    @property
    def level(self) -> LogLevel:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        clamped = min(max(int(value), LogLevel.SILENT), LogLevel.VERBOSE)
        self._level = LogLevel(clamped)

    def begin(self, level: int, output: TextIO, show_level: bool = True) -> None:
        """Set the level, the output stream and whether to show level letters."""
        self.level = level
        self.show_level = show_level
        self.output = output

    def _emit(self, level: int, newline: bool, msg: Any, args: tuple) -> None:
        output = self.output
        if output is None or level > self._level:
            return
        level = max(level, LogLevel.SILENT)
        if self.prefix is not None:
            self.prefix(output, level)
        if self.show_level and level > LogLevel.SILENT:
            output.write(f"{_LEVEL_LETTERS[level - 1]}: ")
        if isinstance(msg, str):
            output.write(format_message(msg, *args))
        else:
            output.write(str(msg))
        if self.suffix is not None:
            self.suffix(output, level)
        if newline:
            output.write("\n")

    def fatal(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.FATAL, False, msg, args)

    def fatalln(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.FATAL, True, msg, args)

    def error(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.ERROR, False, msg, args)

    def errorln(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.ERROR, True, msg, args)

    def warning(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.WARNING, False, msg, args)

    def warningln(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.WARNING, True, msg, args)

    def notice(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.NOTICE, False, msg, args)

    def noticeln(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.NOTICE, True, msg, args)

    def info(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.INFO, False, msg, args)

    def infoln(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.INFO, True, msg, args)

    def trace(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.TRACE, False, msg, args)

    def traceln(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.TRACE, True, msg, args)

    def verbose(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.VERBOSE, False, msg, args)

    def verboseln(self, msg: Any, *args: Any) -> None:
        self._emit(LogLevel.VERBOSE, True, msg, args)


log = Logger()