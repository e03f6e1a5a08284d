# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains functions for building a tree of DataNodes from the lines of a
data file.

Each line that is not blank and not a comment becomes a node. A node is a
child of the closest preceding node with less indentation, where
indentation is the number of leading whitespace characters (a tab counts
as one character, the same as a space).
"""

import logging

from esparser.node import DataNode
from esparser.source import SourceBuffer, is_whitespace

log = logging.getLogger("esparser")

QUOTES = ('"', "`")
COMMENT = "#"


def _is_space(c: str) -> bool:
    """Whitespace within a line, excluding the line terminator."""
    return is_whitespace(c) and c != "\n"


def tokenize_line(node: DataNode, line: str, start: int):
    """
    Split `line` into tokens, starting at index `start`, and append them to
    the tokens of `node`.

    Tokens are separated by whitespace. A token starting with a double
    quote or backtick extends to the matching character, and may contain
    whitespace. A comment begins with '#' where a token would begin.

    Parameters
    ----------
    node: DataNode
        The node to append tokens to, and to report problems against.

    line: str
        The line to tokenize. It must end with a newline.

    start: int
        The index of the first character after the indentation.
    """
    i = start
    end = len(line)
    while i < end and line[i] != "\n":
        end_quote = line[i]
        is_quoted = end_quote in QUOTES
        if is_quoted:
            i += 1

        first = i
        if is_quoted:
            while i < end and line[i] != "\n" and line[i] != end_quote:
                i += 1
            token = line[first:i]
            if i == end or line[i] != end_quote:
                # Keep what was read, then give up on the rest of the line.
                node.print_trace("Closing quote is missing")
                node.tokens.append(token)
                break
            i += 1
        else:
            while i < end and not is_whitespace(line[i]):
                i += 1
            token = line[first:i]
        node.tokens.append(token)

        while i < end and _is_space(line[i]):
            i += 1
        if i < end and line[i] == COMMENT:
            break


def build_tree(root: DataNode, source: SourceBuffer, sink=None):
    """
    Build the tree of nodes for every line in `source` beneath `root`.

    Parameters
    ----------
    root: DataNode
        The node to attach top-level nodes to. It is given no tokens and no
        line numbers.

    source: SourceBuffer
        The normalized lines to parse. Each new node keeps a weak
        reference to it.

    sink: DiagnosticSink, optional
        Where new nodes report diagnostics.
    """
    stack = [root]
    white_stack = [-1]

    lines = source.lines
    for number, line in enumerate(lines, start=1):
        i = 0
        white = 0
        while _is_space(line[i]):
            white += 1
            i += 1

        # Skip blank lines and comments.
        if line[i] == COMMENT or line[i] == "\n":
            continue

        while white_stack[-1] >= white:
            white_stack.pop()
            stack.pop().last_line = number - 1

        node = DataNode(sink=sink)
        node.source = source
        node.first_line = number
        stack[-1].append(node)

        stack.append(node)
        white_stack.append(white)

        tokenize_line(node, line, i)

    # The root is not part of the input, so it keeps unknown line numbers.
    while len(white_stack) > 1:
        white_stack.pop()
        stack.pop().last_line = len(lines)

    log.debug(
        f"{source.origin or '<string>'}: parsed {len(lines)} lines into "
        + f"{len(root.children)} top-level nodes",
    )
