from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

DEBUG = os.environ.get("EXPRTREE_DEBUG", "") not in ("", "0")


def set_debug(enabled: bool) -> None:
    global DEBUG
    DEBUG = enabled


class IndentingWriter:
    """Writes results to `out` and, when DEBUG is on, traces to `trace`.

    Streams default to the current sys.stdout/sys.stderr at write time so
    that redirections (and pytest's capture) are honored.
    """

    def __init__(
        self,
        indent_size: int = 3,
        out: TextIO | None = None,
        trace: TextIO | None = None,
    ) -> None:
        self._indent_size = indent_size
        self._indents = 0
        self._out = out
        self._trace = trace

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def trace(self) -> TextIO:
        return self._trace if self._trace is not None else sys.stderr

    def debug(self, message: str) -> None:
        if DEBUG:
            self._print_indentation()
            print(message, end="", file=self.trace)

    def debugln(self, message: str) -> None:
        if DEBUG:
            self.debug(message)
            print(file=self.trace)

    def print(self, message: str) -> None:
        print(message, end="", file=self.out)

    def indent(self) -> None:
        if DEBUG:
            self._indents += 1

    def dedent(self) -> None:
        if DEBUG:
            self._indents -= 1

    def _print_indentation(self) -> None:
        if DEBUG:
            print(" " * self._indent_size * self._indents, end="", file=self.trace)


@contextmanager
def indented_output(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.indent()
    try:
        yield
    finally:
        output_writer.dedent()
