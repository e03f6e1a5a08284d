# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
A parser for the indented, token-per-line data files used by Endless Sky.

>>> import esparser
>>> data = esparser.DataFile.from_string('ship "Bob"\\n\\tguns 2\\n')
>>> ship = data.nodes()[0]
>>> ship.token(1)
'Bob'
>>> ship.children[0].value_at(1)
2.0
"""
import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

import pathspec

import esparser.source
from esparser.data_file import DataFile, parse
from esparser.node import UNKNOWN_LINE, DataNode
from esparser.sink import ConsoleSink, DiagnosticSink, LoggingSink, StringSink
from esparser.source import SourceBuffer

__all__ = [
    "ConsoleSink",
    "DataDirectory",
    "DataFile",
    "DataNode",
    "DiagnosticSink",
    "LoggingSink",
    "SourceBuffer",
    "StringSink",
    "UNKNOWN_LINE",
    "parse",
]

__version__ = "1.0.0"

log = logging.getLogger("esparser")


class DataDirectory:
    """
    A representation of all data files in a set of directories.

    Attributes
    ----------
    directories: list[str | os.PathLike[str]]
        The set of directories that hold data files.

    exclude_patterns: list[str]
        A set of patterns describing data files to ignore.
    """

    def __init__(
        self,
        *directories: str | os.PathLike[str],
        exclude_patterns: Iterable[str] = [],
    ):
        """
        Raises
        ------
        TypeError
            If any directory in `directories` is not a path.
            If `exclude_patterns` is not a list of strings.
        """
        if not isinstance(exclude_patterns, list):
            raise TypeError("'exclude_patterns' must be a list.")
        if not all([isinstance(d, (str, os.PathLike)) for d in directories]):
            raise TypeError(
                "Each directory in 'directories' must be PathLike.",
            )
        if not all([isinstance(p, str) for p in exclude_patterns]):
            raise TypeError(
                "Each pattern in 'exclude_patterns' must be a string.",
            )
        self._directories = [Path(d).resolve() for d in directories]
        self._excludes = exclude_patterns

    def __repr__(self):
        return (
            f"DataDirectory(directories={self.directories}, "
            + f"exclude_patterns={self.exclude_patterns})"
        )

    @property
    def directories(self):
        return [str(d) for d in self._directories]

    @property
    def exclude_patterns(self):
        return self._excludes

    def __contains__(self, path: os.PathLike) -> bool:
        """
        Returns
        -------
        bool
            True if `path` is a data file in one of the listed directories
            and does not match any exclude pattern(s).
        """
        path = Path(path).resolve()

        if not path.exists():
            return False

        if path.is_dir():
            return False

        if not esparser.source.is_data_file(path):
            return False

        # Store the root for evaluation of relative exclude paths later.
        root = None
        for directory in self._directories:
            if path.is_relative_to(directory):
                root = directory
                break
        if root is None:
            return False

        # Use GitIgnoreSpec to match git behavior in weird corner cases.
        spec = pathspec.GitIgnoreSpec.from_lines(self.exclude_patterns)
        relative_path = path.relative_to(root)
        if spec.match_file(relative_path):
            return False

        return True

    def __iter__(self) -> Iterator[str]:
        """
        Iterate over all data files, in sorted order within each directory.
        """
        for directory in self._directories:
            for path in sorted(directory.rglob("*")):
                if self.__contains__(path):
                    yield str(path)

    def parse(self, sink: DiagnosticSink | None = None) -> Iterator[DataFile]:
        """
        Parse each data file in turn.

        Parameters
        ----------
        sink: DiagnosticSink, optional
            Where to report diagnostics for every file.
        """
        for path in self:
            yield DataFile.from_path(path, sink=sink)
