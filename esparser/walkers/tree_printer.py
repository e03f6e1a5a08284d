# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

from esparser.node import quote_token
from esparser.walkers.tree_walker import TreeWalker


class TreePrinter(TreeWalker):
    """
    Specific TreeWalker that prints the nodes for the tree
    (with appropriate indentation).
    """

    def walk(self):
        """
        Walk the tree, printing each node.
        """
        for node in self.tree.nodes():
            self.__print_nodes(node, 0)

    def __print_nodes(self, node, level):
        """
        Print this specific node, then descend into its children nodes.
        """
        spacing = "  " * level
        text = " ".join(quote_token(token) for token in node.tokens)
        span = f"Lines {node.first_line}-{node.last_line}"
        self._write(f"{spacing}{text} -- {span}")

        for child in node.children:
            self.__print_nodes(child, level + 1)
