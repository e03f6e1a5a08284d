# Copyright (C) 2019-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
"""
Contains utility functions for common operations, including:
- Opening files for reading
- Validating configuration files
"""

import json
import logging
import os
import pkgutil
import tomllib
import typing

import jsonschema

log = logging.getLogger(__name__)


def safe_open_read_nofollow(
    fname: str | os.PathLike[str],
    mode: str = "r",
    **kwargs,
) -> typing.IO:
    """
    Open fname for reading, but don't follow links.

    Parameters
    ----------
    fname: str | os.PathLike[str]
        The file to open.

    mode: {'r', 'rb'}
        Whether to open the file as text or binary.

    **kwargs
        Passed to ``os.fdopen``, e.g. `encoding` and `errors`.

    Raises
    ------
    FileNotFoundError
        If `fname` does not exist.

    OSError
        If `fname` is a symbolic link.
    """
    fpid = os.open(fname, os.O_RDONLY | os.O_NOFOLLOW)
    return os.fdopen(fpid, mode, **kwargs)


def valid_path(path: str) -> bool:
    """
    Check if a given file path is valid.

    This function ensures that the file path does not contain
    potentially dangerous characters such as null bytes (`\\x00`)
    or carriage returns/line feeds (`\\n`, `\\r`).

    Parameters
    ----------
    path : str
        The file path to be validated.

    Returns
    -------
    bool
        A boolean value indicating whether the path is valid
        (`True`) or invalid (`False`).

    Examples
    --------
    >>> valid_path("/home/user/ships.txt")
    True
    >>> valid_path("/home/user/\\x00ships.txt")
    False
    """
    valid = True

    # Check for null byte character(s)
    if "\x00" in path:
        log.critical("Null byte character in file request.")
        valid = False

    # Check for carriage returns or line feed character(s)
    if ("\n" in path) or ("\r" in path):
        log.critical("Carriage return or line feed character in file request.")
        valid = False

    return valid


def _validate_json(json_object: object, schema_name: str) -> bool:
    """
    Validate JSON against a schema.

    Parameters
    ----------
    json_object : Object
        The JSON to validate.

    schema_name : {'config'}
        The schema to validate against.

    Returns
    -------
    bool
        True if the JSON is valid.

    Raises
    ------
    ValueError
        If the JSON fails to validate, or the schema name is unrecognized.

    RuntimeError
        If the schema file cannot be located, or the schema is invalid.
    """
    schema_paths = {
        "config": "schema/config.schema",
    }
    if schema_name not in schema_paths.keys():
        raise ValueError("Unrecognized schema name.")

    schema_path = schema_paths[schema_name]
    schema_string = pkgutil.get_data("esparser", schema_path)
    if not schema_string:
        msg = f"Could not locate schema file {schema_path}"
        raise RuntimeError(msg)

    schema = json.loads(schema_string)

    try:
        jsonschema.validate(instance=json_object, schema=schema)
    except jsonschema.exceptions.ValidationError as e:
        msg = f"Failed schema validation against {schema_path}: {e.message}"
        raise ValueError(msg)
    except jsonschema.exceptions.SchemaError:
        msg = f"{schema_path} is not a valid schema"
        raise RuntimeError(msg)

    return True


def _load_toml(file_object: typing.BinaryIO, schema_name: str) -> object:
    """
    Load TOML from file and validate it against a schema.

    Parameters
    ----------
    file_object : typing.BinaryIO
        The file object to load from.

    schema_name : {'config'}
        The schema to validate against.

    Returns
    -------
    Object
        The loaded TOML.

    Raises
    ------
    ValueError
        If the TOML fails to validate, or the schema name is unrecognized.

    RuntimeError
        If the schema file cannot be located.
    """
    toml_object = tomllib.load(file_object)
    _validate_json(toml_object, schema_name)
    return toml_object
