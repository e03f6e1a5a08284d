# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains the DataFile class, which represents a parsed data file.
"""

import io
import logging
import os
from collections.abc import Iterable

from esparser import parser, util
from esparser.node import DataNode
from esparser.sink import DiagnosticSink, LoggingSink
from esparser.source import SourceBuffer

log = logging.getLogger("esparser")


class DataFile:
    """
    A data file, parsed into a tree of DataNodes.

    The DataFile owns the SourceBuffer holding the text it was parsed from.
    Nodes only keep a weak reference to that buffer, so the raw text of a
    node is only available for as long as its DataFile is alive.

    Attributes
    ----------
    root: DataNode
        The implicit root of the tree. It has no tokens and no line
        numbers; its children are the top-level nodes of the file.

    source: SourceBuffer
        The normalized lines of the file.

    sink: DiagnosticSink
        Where diagnostics about this file's nodes are reported.
    """

    def __init__(
        self,
        lines: Iterable[str],
        sink: DiagnosticSink | None = None,
        origin: str | os.PathLike | None = None,
    ):
        """
        Parameters
        ----------
        lines: Iterable[str]
            The lines of the file, with or without trailing newlines.

        sink: DiagnosticSink, optional
            Where to report diagnostics. Defaults to a LoggingSink.

        origin: str | os.PathLike, optional
            Where the lines came from.
        """
        self.sink = sink if sink is not None else LoggingSink()
        self.source = SourceBuffer(lines, origin)
        self.root = DataNode(sink=self.sink)
        parser.build_tree(self.root, self.source, self.sink)

    @classmethod
    def from_string(
        cls,
        text: str,
        sink: DiagnosticSink | None = None,
        origin: str | os.PathLike | None = None,
    ):
        """
        Parse a data file held in a string, accepting both Unix and Windows
        line endings.
        """
        return cls(io.StringIO(text, newline=None), sink=sink, origin=origin)

    @classmethod
    def from_path(
        cls,
        path: str | os.PathLike,
        sink: DiagnosticSink | None = None,
    ):
        """
        Parameters
        ----------
        path: str | os.PathLike
            The data file to read.

        sink: DiagnosticSink, optional
            Where to report diagnostics.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.

        OSError
            If the file cannot be read, or is a symbolic link.

        Returns
        -------
        DataFile
            The parsed file, with `origin` set to `path`.
        """
        log.info(f"Parsing {path}")
        with util.safe_open_read_nofollow(
            path,
            mode="r",
            encoding="utf-8",
            errors="replace",
        ) as f:
            lines = list(f)
        return cls(lines, sink=sink, origin=path)

    def __repr__(self):
        return f"DataFile(origin={self.origin!r}, nodes={len(self)})"

    def __iter__(self):
        yield from self.root.children

    def __len__(self):
        return len(self.root.children)

    @property
    def origin(self):
        """Where the file was read from, or None if unknown."""
        return self.source.origin

    @origin.setter
    def origin(self, value):
        self.source.origin = value

    @property
    def lines(self):
        return self.source.lines

    def get_lines(self, first: int, end: int) -> list[str]:
        """
        Return the lines from `first` up to but excluding `end`, both
        one-based. See SourceBuffer.get_lines.
        """
        return self.source.get_lines(first, end)

    def nodes(self) -> list[DataNode]:
        """
        Returns
        -------
        list[DataNode]
            The top-level nodes of the file.
        """
        return self.root.children

    def nodes_reversed(self) -> list[DataNode]:
        return self.root.children_reversed()

    def append(self, node: DataNode):
        self.root.append(node)

    def remove(self, node: DataNode):
        self.root.remove(node)


def parse(
    lines: Iterable[str],
    sink: DiagnosticSink | None = None,
    origin: str | os.PathLike | None = None,
) -> DataFile:
    """
    Parse `lines` into a DataFile.

    Malformed input never raises; problems are reported to `sink` and the
    resulting tree is always usable.
    """
    return DataFile(lines, sink=sink, origin=origin)
