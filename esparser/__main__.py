#!/usr/bin/env python3
# Copyright (C) 2019-2024 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
This script is the main executable of esparser.
"""

import argparse
import logging
import os
import sys

import esparser
from esparser import DataDirectory, DataFile, config, util
from esparser._detail.logging import DiagnosticAggregator, Formatter
from esparser.sink import StringSink
from esparser.walkers.source_printer import SourcePrinter
from esparser.walkers.tree_printer import TreePrinter

log = logging.getLogger("esparser")
version = esparser.__version__


def _help_string(*lines: str, is_long=False, is_last=False):
    """
    Parameters
    ----------
    *lines: str
        Each line in the help string.

    is_long: bool
        A flag indicating whether the option is long enough to generate an
        initial newline by default.

    is_last: bool
        A flag indicating whether the option is the last in the list.

    Returns
    -------
        An argparse help string formatted as a paragraph.
    """
    result = ""

    # A long option like --exclude will force a newline.
    if not is_long:
        result = "\n"

    # argparse.HelpFormatter indents by 24 characters.
    # We cannot override this directly, but can delete them with backspaces.
    lines = ["\b" * 20 + x for x in lines]

    # The additional space is required for argparse to respect newlines.
    result += "\n".join(lines)

    if not is_last:
        result += "\n "

    return result


def _build_parser() -> argparse.ArgumentParser:
    """
    Build argument parser.
    """
    parser = argparse.ArgumentParser(
        description="Endless Sky data file parser " + version,
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        help=_help_string("Display help message and exit."),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"esparser {version}",
        help=_help_string("Display version information and exit."),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        dest="verbose",
        action="count",
        default=0,
        help=_help_string("Increase verbosity level."),
    )
    parser.add_argument(
        "-q",
        "--quiet",
        dest="quiet",
        action="count",
        default=0,
        help=_help_string("Decrease verbosity level."),
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config_file",
        metavar="<config-file>",
        default=None,
        help=_help_string(
            "TOML file describing the data directories to parse",
            "and how to report diagnostics.",
            f"Defaults to {config.DEFAULT_CONFIG_PATH} if it exists.",
            is_long=True,
        ),
    )
    parser.add_argument(
        "-x",
        "--exclude",
        dest="excludes",
        metavar="<pattern>",
        action="append",
        default=[],
        help=_help_string(
            "Exclude files matching this pattern from directories.",
            "May be specified multiple times.",
            is_long=True,
        ),
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "-t",
        "--tree",
        dest="tree",
        action="store_true",
        help=_help_string("Print the tree of nodes in each file."),
    )
    output.add_argument(
        "-s",
        "--source",
        dest="source",
        action="store_true",
        help=_help_string(
            "Print the source text of each top-level node.",
            is_last=True,
        ),
    )
    parser.add_argument(
        "paths",
        metavar="<path>",
        nargs="*",
        help=_help_string(
            "Data files, or directories containing data files.",
            is_last=True,
        ),
    )
    return parser


def _data_files(paths: list[str], excludes: list[str]):
    """
    Yield the data files named by `paths`, expanding directories.
    """
    for path in paths:
        if not util.valid_path(path):
            raise ValueError(f"Invalid path: {path!r}")
        if os.path.isdir(path):
            yield from DataDirectory(path, exclude_patterns=excludes)
        elif os.path.exists(path):
            yield path
        else:
            raise FileNotFoundError(f"{path} does not exist.")


def _parse(args: argparse.Namespace, stream) -> int:
    if args.config_file is not None:
        configuration = config.load_config(args.config_file)
    else:
        configuration = config.find_config(os.getcwd())

    paths = args.paths + configuration.directories
    if not paths:
        raise ValueError("No data files or directories specified.")
    excludes = args.excludes + configuration.exclude

    sink = configuration.make_sink()
    for path in _data_files(paths, excludes):
        data = DataFile.from_path(path, sink=sink)
        if args.tree:
            TreePrinter(data, stream=stream).walk()
        elif args.source:
            SourcePrinter(data, stream=stream).walk()

    if isinstance(sink, StringSink):
        sink.stop_logging()
        print(sink, file=stream, end="")
        sink.free_resources()
    return 0


def cli(argv: list[str], stream=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    stream = stream if stream is not None else sys.stdout

    # Configure logging such that:
    # - Diagnostics and errors are written to the terminal by default
    # - Messages written to terminal are based on -q and -v flags
    # - Meta-warnings are generated by a DiagnosticAggregator
    aggregator = DiagnosticAggregator()
    log.setLevel(logging.DEBUG)

    log_level = max(1, logging.WARNING - 10 * (args.verbose - args.quiet))
    stream_handler = logging.StreamHandler(stream)
    stream_handler.setLevel(log_level)
    stream_handler.setFormatter(Formatter(colors=stream.isatty()))
    stream_handler.addFilter(aggregator)
    log.addHandler(stream_handler)

    try:
        status = _parse(args, stream)

        # Temporarily override log_level to ensure meta-warnings are visible.
        stream_handler.setLevel(logging.WARNING)
        stream_handler.removeFilter(aggregator)
        aggregator.warn(log)
    except Exception as e:
        # Report through the handler above before it is removed.
        log.error(str(e))
        raise
    finally:
        log.removeHandler(stream_handler)
    return status


def main():
    try:
        sys.exit(cli(sys.argv[1:]))
    except Exception:
        sys.exit(1)


if __name__ == "__main__":
    sys.argv[0] = "esparser"
    main()
