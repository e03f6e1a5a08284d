# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

import logging
import tempfile
import unittest
from pathlib import Path

from esparser import DataDirectory, StringSink


class TestDataDirectory(unittest.TestCase):
    """
    Test DataDirectory class.
    """

    def setUp(self):
        logging.disable()

        # Create temporary data spread across two directories
        self.tmp1 = tempfile.TemporaryDirectory()
        self.tmp2 = tempfile.TemporaryDirectory()
        p1 = Path(self.tmp1.name)
        p2 = Path(self.tmp2.name)
        (p1 / "drafts").mkdir()
        with open(p1 / "ships.txt", mode="w") as f:
            f.write("ship A\n")
        with open(p1 / "outfits.txt", mode="w") as f:
            f.write("outfit B\n")
        with open(p1 / "drafts" / "old.txt", mode="w") as f:
            f.write("ship Old\n")
        open(p1 / "ship.png", mode="w").close()
        with open(p2 / "systems.txt", mode="w") as f:
            f.write("system Sol\n\tpos 0 0\n")
        open(p2 / "README.md", mode="w").close()

    def tearDown(self):
        self.tmp1.cleanup()
        self.tmp2.cleanup()

    def test_constructor(self):
        """Check directories and exclude_patterns are handled correctly"""
        path = Path(self.tmp1.name).resolve()
        data_dir = DataDirectory(path, exclude_patterns=["drafts/"])
        self.assertEqual(data_dir.directories, [str(path)])
        self.assertEqual(data_dir.exclude_patterns, ["drafts/"])

    def test_constructor_validation(self):
        """Check directories and exclude_patterns are valid"""

        with self.assertRaises(TypeError):
            DataDirectory(exclude_patterns="*")

        with self.assertRaises(TypeError):
            DataDirectory(1, "2", 3)

        with self.assertRaises(TypeError):
            DataDirectory(exclude_patterns=[1, "2", 3])

    def test_repr(self):
        """Check implementation of __repr__"""
        path = Path(self.tmp1.name).resolve()
        data_dir = DataDirectory(path, exclude_patterns=["drafts/"])
        self.assertEqual(
            repr(data_dir),
            f"DataDirectory(directories=['{path}'], "
            + "exclude_patterns=['drafts/'])",
        )

    def test_contains(self):
        """Check implementation of __contains__"""
        p1 = Path(self.tmp1.name)
        p2 = Path(self.tmp2.name)
        data_dir = DataDirectory(p1, p2, exclude_patterns=["drafts/"])

        self.assertTrue(p1 / "ships.txt" in data_dir)
        self.assertTrue(p1 / "outfits.txt" in data_dir)
        self.assertTrue(p2 / "systems.txt" in data_dir)

        # Files that match exclude pattern(s) are not data files.
        self.assertFalse(p1 / "drafts" / "old.txt" in data_dir)

        # Files that don't exist are not data files.
        self.assertFalse(p1 / "asdf.txt" in data_dir)

        # Directories are not data files.
        self.assertFalse(p1 in data_dir)
        self.assertFalse(p1 / "drafts" in data_dir)

        # Files with other extensions are not data files.
        self.assertFalse(p1 / "ship.png" in data_dir)
        self.assertFalse(p2 / "README.md" in data_dir)

        # Files outside of the directories are not data files.
        self.assertFalse(p2 / "systems.txt" in DataDirectory(p1))

    def test_iterator(self):
        """Check implementation of __iter__"""
        p1 = Path(self.tmp1.name).resolve()
        p2 = Path(self.tmp2.name).resolve()
        data_dir = DataDirectory(p1, p2, exclude_patterns=["drafts/"])

        files = [f for f in data_dir]
        expected = [
            str(p1 / "outfits.txt"),
            str(p1 / "ships.txt"),
            str(p2 / "systems.txt"),
        ]
        self.assertEqual(files, expected)

        data_dir = DataDirectory(p1)
        self.assertIn(str(p1 / "drafts" / "old.txt"), list(data_dir))

    def test_parse(self):
        """Check every data file is parsed"""
        p2 = Path(self.tmp2.name)
        sink = StringSink()
        (data,) = list(DataDirectory(p2).parse(sink=sink))
        (system,) = data.nodes()
        self.assertEqual(system.tokens, ["system", "Sol"])
        self.assertEqual(system.children[0].value_at(2), 0.0)
        self.assertIs(system.sink, sink)
        self.assertEqual(sink.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
