# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains functions to load the configuration of the esparser tool from
TOML files.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Self

from esparser import util
from esparser.sink import ConsoleSink, DiagnosticSink, LoggingSink, StringSink

log = logging.getLogger(__name__)

# The configuration file found in the working directory, if any.
DEFAULT_CONFIG_PATH = ".esparser.toml"

_sinks = {
    "log": LoggingSink,
    "console": ConsoleSink,
    "buffer": StringSink,
}


@dataclass
class Configuration:
    directories: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    sink: str = "log"

    @classmethod
    def from_toml(cls, toml: object) -> Self:
        data = toml.get("data", {})
        diagnostics = toml.get("diagnostics", {})
        return Configuration(
            directories=list(data.get("directories", [])),
            exclude=list(data.get("exclude", [])),
            sink=diagnostics.get("sink", "log"),
        )

    def make_sink(self) -> DiagnosticSink:
        return make_sink(self.sink)


def make_sink(name: str) -> DiagnosticSink:
    """
    Parameters
    ----------
    name: {'log', 'console', 'buffer'}
        The kind of sink to create.

    Returns
    -------
    DiagnosticSink
        A new sink of the requested kind.

    Raises
    ------
    ValueError
        If the name is not recognized.
    """
    if name not in _sinks:
        raise ValueError(f"Unrecognized diagnostic sink: '{name}'")
    return _sinks[name]()


def load_config(path: str | os.PathLike[str]) -> Configuration:
    """
    Load and validate a configuration file.

    Parameters
    ----------
    path: str | os.PathLike[str]
        The TOML file to load.

    Raises
    ------
    ValueError
        If the file does not end in .toml, is not valid TOML, or fails
        validation.

    FileNotFoundError
        If the file does not exist.

    Returns
    -------
    Configuration
        The validated configuration.
    """
    if not os.path.splitext(path)[1] == ".toml":
        raise ValueError(f"Configuration file {path} must end in .toml.")
    with util.safe_open_read_nofollow(path, "rb") as f:
        toml = util._load_toml(f, "config")
    log.info(f"Loaded configuration file at {path}.")
    return Configuration.from_toml(toml)


def find_config(directory: str | os.PathLike[str] = ".") -> Configuration:
    """
    Load the configuration file from `directory` if there is one.

    Returns
    -------
    Configuration
        The loaded configuration, or the default configuration if no
        configuration file was found.
    """
    path = os.path.join(directory, DEFAULT_CONFIG_PATH)
    if not os.path.exists(path):
        return Configuration()
    log.info(f"Found configuration file at {path}.")
    return load_config(path)
