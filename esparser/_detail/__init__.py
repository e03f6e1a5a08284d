# Copyright (C) 2019-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
This package contains implementation details that are not part of the public
interface of esparser. These implementation details are not intended to be
used by other scripts, and should not be relied upon.
"""
import esparser._detail.logging
