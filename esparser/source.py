# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

import os
from collections.abc import Iterable
from pathlib import Path


def is_data_file(filename: str | os.PathLike) -> bool:
    """
    Parameters
    ----------
    filename: Union[str, os.Pathlike]
        The filename of a potential data file.

    Returns
    -------
    bool
        True if the file ends in a recognized extension and False otherwise.

    Raises
    ------
    TypeError
        If filename is not a string or Path.
    """
    if not (isinstance(filename, str) or isinstance(filename, Path)):
        raise TypeError("filename must be a string or Path")

    extension = Path(filename).suffix
    supported_extensions = [
        ".txt",
    ]
    return extension in supported_extensions


# Characters str.isspace accepts that never separate tokens.
_NOT_WHITESPACE = "\x85\u00a0\u2007\u202f"


def is_whitespace(c: str) -> bool:
    """
    Whether `c` separates tokens or indents a line.

    Non-breaking spaces and NEL are part of a token, as they are in the
    game's own parser.
    """
    return c.isspace() and c not in _NOT_WHITESPACE


def ensure_eoln(line: str) -> str:
    """
    Return `line` with exactly one trailing newline added if it has none.
    """
    return line if line.endswith("\n") else line + "\n"


class SourceBuffer:
    """
    The normalized text that a DataFile was parsed from.

    Attributes
    ----------
    lines: tuple[str]
        Every line of the input, each ending with a newline.

    origin: str | os.PathLike, optional
        Where the text came from, or None if unknown.
    """

    def __init__(
        self,
        lines: Iterable[str],
        origin: str | os.PathLike | None = None,
    ):
        self._lines = tuple(ensure_eoln(line) for line in lines)
        self.origin = origin

    @property
    def lines(self):
        return self._lines

    def __len__(self):
        return len(self._lines)

    def __repr__(self):
        return f"SourceBuffer(origin={self.origin!r}, lines={len(self)})"

    def get_lines(self, first: int, end: int) -> list[str]:
        """
        Parameters
        ----------
        first: int
            The one-based number of the first line to return.

        end: int
            The one-based number of the line after the last one to return.
            Values beyond the end of the buffer are clamped.

        Returns
        -------
        list[str]
            The lines in the range, or an empty list if the range is empty.
        """
        stop = min(end, len(self._lines) + 1)
        if first < 1 or stop <= first:
            return []
        return list(self._lines[first - 1 : stop - 1])
