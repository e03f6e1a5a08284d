# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains the sinks that receive diagnostics produced while parsing and
querying a tree of DataNodes.

Every sink implements a single operation, ``log(message, trace)``. The trace
is a list of already formatted lines, ordered from the outermost ancestor to
the node that reported the problem.
"""

import logging
import sys
import typing
from collections.abc import Iterable


class DiagnosticSink:
    """
    Base class for all diagnostic sinks.
    """

    def log(
        self,
        message: str | None = None,
        trace: Iterable[str] | None = None,
    ) -> None:
        """
        Record a diagnostic.

        Parameters
        ----------
        message: str, optional
            A description of the problem.

        trace: Iterable[str], optional
            The formatted trace lines, root first.
        """
        raise NotImplementedError


def _diagnostic_lines(message, trace):
    """
    Yield the output lines for a single diagnostic. Each trace line is
    indented two spaces more than the one before it.
    """
    if message is not None:
        yield message
    if trace is not None:
        for depth, line in enumerate(trace):
            yield "  " * depth + line


class ConsoleSink(DiagnosticSink):
    """
    A DiagnosticSink that writes each diagnostic immediately.
    """

    def __init__(self, stream: typing.TextIO | None = None):
        """
        Parameters
        ----------
        stream: typing.TextIO, optional
            The stream to write to. Defaults to ``sys.stdout`` at the time
            each diagnostic is written.
        """
        self.stream = stream

    def log(self, message=None, trace=None):
        stream = self.stream if self.stream is not None else sys.stdout
        for line in _diagnostic_lines(message, trace):
            print(line, file=stream)


class StringSink(DiagnosticSink):
    """
    A DiagnosticSink that accumulates diagnostics in memory.

    The accumulated text can be frozen with ``stop_logging``, after which
    further diagnostics are ignored, and released with ``free_resources``.
    """

    def __init__(self):
        self._buffer = []
        self._result = ""

    def log(self, message=None, trace=None):
        buffer = self._buffer
        if buffer is None:
            return
        for line in _diagnostic_lines(message, trace):
            buffer.append(line + "\n")

    @property
    def frozen(self) -> bool:
        """True once ``stop_logging`` or ``free_resources`` has been called."""
        return self._buffer is None

    def getvalue(self) -> str:
        """
        Returns
        -------
        str
            The text accumulated so far, or the snapshot taken by
            ``stop_logging``.
        """
        if self._buffer is None:
            return self._result
        return "".join(self._buffer)

    def __str__(self):
        return self.getvalue()

    def stop_logging(self):
        """
        Snapshot the accumulated text and ignore all later diagnostics.
        """
        if self._buffer is not None:
            self._result = "".join(self._buffer)
        self._buffer = None

    def free_resources(self):
        """
        Discard the accumulated text.
        """
        self._buffer = None
        self._result = ""


class LoggingSink(DiagnosticSink):
    """
    A DiagnosticSink that forwards each diagnostic to a logging.Logger as a
    single record.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.WARNING,
    ):
        self.logger = logger if logger is not None else logging.getLogger(
            "esparser",
        )
        self.level = level

    def log(self, message=None, trace=None):
        lines = list(_diagnostic_lines(message, trace))
        if not lines:
            return
        self.logger.log(self.level, "\n".join(lines))
