# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

import sys


class TreeWalker:
    """
    Generic tree walker class.
    """

    def __init__(self, _tree, stream=None):
        self.tree = _tree
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, text):
        print(text, file=self.stream)
