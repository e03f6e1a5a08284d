# Copyright (C) 2021 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

from esparser.walkers.tree_walker import TreeWalker


class SourcePrinter(TreeWalker):
    """
    TreeWalker that prints the source lines of each top-level node.
    """

    def walk(self):
        """
        Walk the top-level nodes, printing their source text.
        """
        for node in self.tree.nodes():
            self.__print_node(node)

    def __print_node(self, node):
        lines = node.lines()
        if not lines:
            return
        self._write("".join(lines).rstrip("\n"))
