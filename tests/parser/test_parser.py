# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

import unittest

import esparser
from esparser import DataFile, StringSink
from esparser.node import UNKNOWN_LINE


def _tokens(nodes):
    return [node.tokens for node in nodes]


class TestParser(unittest.TestCase):
    """
    Test construction of the node tree from indentation.
    """

    def setUp(self):
        self.sink = StringSink()

    def test_nesting(self):
        """Check each deeper indentation level nests one level"""
        lines = [
            'ship "Bob"',
            "\tguns 2",
            '\t\toutfit "Laser"',
        ]
        data = DataFile(lines, sink=self.sink)

        self.assertEqual(len(data.nodes()), 1)
        ship = data.nodes()[0]
        self.assertEqual(ship.tokens, ["ship", "Bob"])
        self.assertEqual(len(ship.children), 1)

        # The outfit line has two tabs, so it is a child of the guns line.
        guns = ship.children[0]
        self.assertEqual(guns.tokens, ["guns", "2"])
        self.assertIs(guns.parent, ship)
        self.assertEqual(_tokens(guns.children), [["outfit", "Laser"]])
        self.assertFalse(guns.children[0].has_children())

        self.assertEqual((ship.first_line, ship.last_line), (1, 3))
        self.assertEqual((guns.first_line, guns.last_line), (2, 3))
        outfit = guns.children[0]
        self.assertEqual((outfit.first_line, outfit.last_line), (3, 3))
        self.assertEqual(self.sink.getvalue(), "")

    def test_siblings(self):
        """Check lines with equal indentation are siblings"""
        lines = [
            "ship A",
            "\tguns 2",
            "\tturrets 1",
            "ship B",
        ]
        data = DataFile(lines, sink=self.sink)
        self.assertEqual(_tokens(data.nodes()), [["ship", "A"], ["ship", "B"]])
        ship = data.nodes()[0]
        self.assertEqual(
            _tokens(ship.children),
            [["guns", "2"], ["turrets", "1"]],
        )
        self.assertEqual(ship.children[0].last_line, 2)
        self.assertEqual(ship.last_line, 3)
        self.assertEqual(data.nodes()[1].first_line, 4)

    def test_dedent(self):
        """Check a smaller indentation closes every deeper node"""
        lines = [
            "a",
            "    b",
            "  c",
            "d",
        ]
        data = DataFile(lines, sink=self.sink)
        a, d = data.nodes()
        self.assertEqual(_tokens(a.children), [["b"], ["c"]])
        b, c = a.children
        self.assertEqual((b.first_line, b.last_line), (2, 2))
        self.assertEqual((c.first_line, c.last_line), (3, 3))
        self.assertEqual((a.first_line, a.last_line), (1, 3))
        self.assertEqual((d.first_line, d.last_line), (4, 4))

    def test_mixed_whitespace(self):
        """Check tabs and spaces both count as one character"""
        lines = [
            "a",
            "\tb",
            "  c",
            " d",
        ]
        data = DataFile(lines, sink=self.sink)
        (a,) = data.nodes()

        # "  c" is wider than "\tb", so it is a child of b.
        (b,) = a.children
        self.assertEqual(b.tokens, ["b"])
        self.assertEqual(_tokens(b.children), [["c"]])

        # " d" is as wide as "\tb", so it closes b and becomes its sibling.
        self.assertEqual(_tokens(a.children), [["b"], ["d"]])

    def test_blank_and_comment_lines(self):
        """Check blank and comment lines do not create nodes"""
        lines = [
            "# A comment before anything else",
            "ship A",
            "\t# an indented comment",
            "",
            "        ",
            "\tguns 2",
            "ship B",
        ]
        data = DataFile(lines, sink=self.sink)
        self.assertEqual(_tokens(data.nodes()), [["ship", "A"], ["ship", "B"]])
        ship = data.nodes()[0]
        self.assertEqual(_tokens(ship.children), [["guns", "2"]])
        self.assertEqual((ship.first_line, ship.last_line), (2, 6))
        self.assertEqual(ship.children[0].first_line, 6)

    def test_comment_keeps_indentation(self):
        """Check a comment line does not reset the indentation stack"""
        lines = [
            "a",
            "\tb",
            "# back at the left margin",
            "\t\tc",
        ]
        data = DataFile(lines, sink=self.sink)
        (a,) = data.nodes()
        (b,) = a.children
        self.assertEqual(_tokens(b.children), [["c"]])

    def test_empty_input(self):
        """Check an empty input produces an empty tree"""
        data = DataFile([], sink=self.sink)
        self.assertEqual(data.nodes(), [])
        self.assertEqual(len(data), 0)
        self.assertEqual(data.lines, ())

    def test_root(self):
        """Check the root has no tokens, parent or line numbers"""
        data = DataFile(["a", "b"], sink=self.sink)
        self.assertIsNone(data.root.parent)
        self.assertEqual(data.root.tokens, [])
        self.assertEqual(data.root.first_line, UNKNOWN_LINE)
        self.assertEqual(data.root.last_line, UNKNOWN_LINE)
        for node in data.root.children_flattened():
            self.assertIsNotNone(node.parent)
            self.assertNotIn(node, node.children)

    def test_spans_partition_lines(self):
        """Check top-level spans cover every line after the first node"""
        lines = [
            "# header",
            "system Sol",
            "\tpos 0 0",
            "",
            "\tobject",
            "\t\tsprite star/g0",
            "# between",
            "planet Earth",
            '\tdescription "A blue planet."',
            "",
            "system Alpha",
        ]
        data = DataFile(lines, sink=self.sink)
        nodes = data.nodes()
        self.assertEqual(len(nodes), 3)
        self.assertEqual(nodes[0].first_line, 2)
        for previous, node in zip(nodes, nodes[1:]):
            self.assertEqual(node.first_line, previous.last_line + 1)
        self.assertEqual(nodes[-1].last_line, len(lines))

        for node in data.root.children_flattened():
            self.assertLessEqual(node.first_line, node.last_line)
            for child in node.children:
                self.assertGreater(child.first_line, node.first_line)
                self.assertLessEqual(child.last_line, node.last_line)

    def test_source_buffer(self):
        """Check nodes refer to the buffer of normalized lines"""
        lines = ["a", "\tb\n", "c"]
        data = DataFile(lines, sink=self.sink, origin="test.txt")
        self.assertEqual(data.lines, ("a\n", "\tb\n", "c\n"))
        self.assertEqual(data.origin, "test.txt")
        for node in data.root.children_flattened():
            self.assertIs(node.source, data.source)
            self.assertIs(node.sink, self.sink)

    def test_parse(self):
        """Check the module-level parse function"""
        data = esparser.parse(["a 1", "\tb 2"], sink=self.sink, origin="x")
        self.assertIsInstance(data, DataFile)
        self.assertEqual(data.origin, "x")
        self.assertEqual(data.nodes()[0].children[0].value_at(1), 2.0)

    def test_independent_parses(self):
        """Check separate parses do not share state"""
        first = DataFile(["a", "\tb"], sink=self.sink)
        second = DataFile(["\tc"], sink=self.sink)
        self.assertEqual(_tokens(first.nodes()), [["a"]])
        self.assertEqual(_tokens(second.nodes()), [["c"]])
        self.assertEqual(second.nodes()[0].first_line, 1)


if __name__ == "__main__":
    unittest.main()
