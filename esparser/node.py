# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains the DataNode class, a single node of a parsed data file.
"""

import weakref

from esparser.sink import LoggingSink
from esparser.source import is_whitespace

# Line numbers are one-based; this marks a line that is not known.
UNKNOWN_LINE = -1


def quote_token(token: str) -> str:
    """
    Quote a token for display if it contains whitespace.

    Backticks are used instead of double quotes if the token itself
    contains a double quote.
    """
    has_space = any(is_whitespace(c) for c in token)
    if not has_space:
        return token
    mark = "`" if '"' in token else '"'
    return f"{mark}{token}{mark}"


class DataNode:
    """
    A node in the tree built from a data file.

    Each node holds the tokens from its first line, and the nodes of any
    more deeply indented lines that follow it as children.

    Attributes
    ----------
    tokens: list[str]
        The tokens on the first line of this node. Empty for the root.

    children: list[DataNode]
        The child nodes, in source order.

    parent: DataNode, optional
        The node this node is a child of, or None for the root.

    first_line: int
        The one-based line number of the first line of this node, or -1.

    last_line: int
        The one-based line number of the last line of this node, or -1.

    sink: DiagnosticSink
        Where diagnostics about this node are reported.
    """

    def __init__(self, parent=None, children=None, tokens=None, sink=None):
        """
        Parameters
        ----------
        parent: DataNode, optional
            The parent, or None if this is the root of the tree.

        children: list[DataNode], optional
            All children of this node, or None if it is a leaf.

        tokens: list[str], optional
            All tokens on the first line of the node.

        sink: DiagnosticSink, optional
            Where to report diagnostics. Defaults to a LoggingSink.
        """
        self.parent = parent
        self.children = children if children is not None else []
        self.tokens = tokens if tokens is not None else []
        self.sink = sink if sink is not None else LoggingSink()
        self.first_line = UNKNOWN_LINE
        self.last_line = UNKNOWN_LINE
        self._source = None

    def __repr__(self):
        return "DataNode(tokens={0!r},first={1!r},last={2!r})".format(
            self.tokens,
            self.first_line,
            self.last_line,
        )

    def __len__(self):
        return len(self.tokens)

    def size(self) -> int:
        """
        Returns
        -------
        int
            The number of tokens on the first line of this node.
        """
        return len(self.tokens)

    @property
    def source(self):
        """
        The SourceBuffer this node was read from, or None if it is unknown
        or no longer alive. Only a weak reference is kept.
        """
        if self._source is None:
            return None
        return self._source()

    @source.setter
    def source(self, buffer):
        self._source = weakref.ref(buffer) if buffer is not None else None

    def lines(self) -> list[str]:
        """
        Returns
        -------
        list[str]
            The source lines spanned by this node, each ending with a
            newline, or an empty list if they are unavailable.
        """
        buffer = self.source
        if buffer is None:
            return []
        if self.first_line <= 0 or self.last_line <= 0:
            return []
        return buffer.get_lines(self.first_line, self.last_line + 1)

    def token(self, index: int) -> str:
        """
        Returns
        -------
        str
            The token at `index`, or an empty string if there is none.
        """
        if index < 0 or index >= len(self.tokens):
            return ""
        return self.tokens[index]

    def is_number_at(self, index: int) -> bool:
        """
        Determine whether the token at `index` is a number, using the same
        rules as the game: an optional sign, digits with at most one
        decimal point, and at most one exponent, which may carry its own
        sign.

        Returns
        -------
        bool
            True if the token is a number and False otherwise.
            An empty token counts as a number.
        """
        if index < 0 or index >= len(self.tokens):
            return False

        has_decimal_point = False
        has_exponent = False
        is_leading = True
        for c in self.tokens[index]:
            if is_leading:
                is_leading = False
                if c in "+-":
                    continue

            if c == ".":
                if has_decimal_point or has_exponent:
                    return False
                has_decimal_point = True
            elif c in "eE":
                if has_exponent:
                    return False
                has_exponent = True
                is_leading = True
            elif not ("0" <= c <= "9"):
                return False
        return True

    def optional_value_at(self, index: int) -> float | None:
        """
        Returns
        -------
        float, optional
            The token at `index` as a float, or None if it is missing or is
            not a number.
        """
        if not self.is_number_at(index):
            return None
        try:
            return float(self.tokens[index])
        except ValueError:
            # Signs, points or exponents without any digits.
            return None

    def value_at(self, index: int) -> float:
        """
        Returns
        -------
        float
            The token at `index` as a float, or 0.0 if it is missing or is
            not a number. The latter also reports a diagnostic.
        """
        value = self.optional_value_at(index)
        if value is None:
            self.print_trace(
                f"Cannot convert token at index {index} to a number.",
            )
            return 0.0
        return value

    def has_children(self) -> bool:
        return len(self.children) > 0

    def children_flattened(self) -> list["DataNode"]:
        """
        Returns
        -------
        list[DataNode]
            Every descendant of this node, in depth-first pre-order.
        """
        flattened = []
        for child in self.children:
            flattened.append(child)
            flattened.extend(child.children_flattened())
        return flattened

    def children_reversed(self) -> list["DataNode"]:
        """
        Returns
        -------
        list[DataNode]
            A new list containing the children in reverse order.
        """
        return list(reversed(self.children))

    def append(self, node: "DataNode"):
        """
        Add `node` as the last child of this node, detaching it from any
        previous parent.
        """
        if node.parent is not None and node.parent is not self:
            node.parent.remove(node)
        node.parent = self
        self.children.append(node)

    def remove(self, node: "DataNode"):
        """
        Detach `node` from the children of this node.
        """
        node.parent = None
        # Compare by identity; DataNode does not define equality.
        for i, child in enumerate(self.children):
            if child is node:
                del self.children[i]
                break

    def delete(self):
        """
        Remove this node from its tree, and empty it and all of its
        descendants.
        """
        if self.parent is not None:
            self.parent.remove(self)

        self.tokens = []

        for child in self.children:
            child.parent = None
            child.delete()

        self.children = []

    def copy(self) -> "DataNode":
        """
        Returns
        -------
        DataNode
            A deep copy of the tokens and children of this node. Line
            numbers and the source buffer are not copied; the sink is
            shared.
        """
        duplicate = DataNode(tokens=list(self.tokens), sink=self.sink)
        for child in self.children:
            duplicate.append(child.copy())
        return duplicate

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def print_trace(self, message: str | None = None):
        """
        Report a "stack trace" of this node within its tree to the sink,
        with an optional message.
        """
        trace = []
        self.make_trace(trace)
        self.sink.log(message, trace)

    def make_trace(self, trace: list[str]) -> int:
        """
        Append one line to `trace` for each ancestor of this node that has
        tokens, followed by this node itself.

        Returns
        -------
        int
            The number of spaces used to indent this node's line.
        """
        indent = 0
        if self.parent is not None:
            indent = self.parent.make_trace(trace) + 2
        if not self.tokens:
            return indent

        prefix = ""
        if self.parent is not None and self.first_line > 0:
            prefix = f"L{self.first_line}: "
        spacing = " " * indent
        text = " ".join(quote_token(token) for token in self.tokens)
        trace.append(f"{prefix}{spacing}{text}")
        return indent
