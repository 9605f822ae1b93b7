"""Output stream routing for phase containers.

A phase container produces two streams (info and error). Both are routed into
writers derived from one logger; an optional prefix marks every line with the
phase it came from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from .logging import get_writer_for_level


class Writer(Protocol):
    """Minimal file-like sink."""

    def write(self, data: str) -> int: ...

    def flush(self) -> None: ...


class PrefixWriter:
    """Writer that prefixes every line written through it.

    Text is forwarded as soon as it is written, in write order. The prefix
    ("[prefix] ") is inserted only at the start of a line, so a line that
    arrives in several writes is prefixed once and an unterminated last line
    still reaches the sink.
    """

    def __init__(self, out: Writer, prefix: str) -> None:
        self.out = out
        self.prefix = prefix
        self._at_line_start = True

    def write(self, data: str) -> int:
        *lines, tail = data.split("\n")
        for line in lines:
            self._forward(line, "\n")
        if tail:
            self._forward(tail, "")
        return len(data)

    def _forward(self, text: str, end: str) -> None:
        if self._at_line_start:
            text = f"[{self.prefix}] {text}"
        self.out.write(text + end)
        self._at_line_start = bool(end)

    def flush(self) -> None:
        self.out.flush()

    def __repr__(self) -> str:
        return f"PrefixWriter({self.out!r}, {self.prefix!r})"


@dataclass(frozen=True)
class OutputRouter:
    """Pair of info/error sinks for one phase container."""

    info: Writer
    error: Writer

    @classmethod
    def for_logger(cls, logger: logging.Logger) -> OutputRouter:
        """Derive both sinks from one logger at INFO and ERROR level."""
        return cls(
            info=get_writer_for_level(logger, logging.INFO),
            error=get_writer_for_level(logger, logging.ERROR),
        )

    def with_prefix(self, prefix: str) -> OutputRouter:
        """Return a router whose sinks prefix each line.

        An empty prefix returns this router unchanged. Prefixing an already
        prefixed router wraps again, so lines carry both prefixes.
        """
        if not prefix:
            return self
        return OutputRouter(
            info=PrefixWriter(self.info, prefix),
            error=PrefixWriter(self.error, prefix),
        )
