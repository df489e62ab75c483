"""Code and utilities common to all command-line tools using this library."""
from __future__ import annotations

import argparse
import os
import sys
from typing import IO, Iterator, NamedTuple, Optional, TextIO, Union

from .._package import __version__
from ..errors import KeyActionParserError
from ..util import ActionLine, read_actions


def get_command_name(path: str) -> str:
    """Get command name from __file__."""
    cmd, _ = os.path.splitext(os.path.basename(path))
    return cmd


STDIN_NAME = "<stdin>"

BASE_PARSER = argparse.ArgumentParser(add_help=False)
BASE_PARSER.add_argument(
    "--version",
    "-V",
    action="version",
    version=f"%(prog)s (keyaction-parser) {__version__}",
)
BASE_PARSER.add_argument(
    "--file",
    "-i",
    default="-",
    help="the file of actions, one per line, or '-' for stdin (default: %(default)s)",
)


def get_input(namespace: argparse.Namespace) -> Union[str, TextIO]:
    """Return the input file given on the command line, or stdin for '-'."""
    if namespace.file == "-":
        return sys.stdin
    return namespace.file


def get_input_name(namespace: argparse.Namespace) -> str:
    """Return the name of the input file for use in messages."""
    if namespace.file == "-":
        return STDIN_NAME
    return namespace.file


class Message(NamedTuple):
    """Data object for CLI error messages."""

    line: Optional[int]
    column: Optional[int]
    message: str


def format_error_msg(
    msg: Union[Message, KeyActionParserError], filename: str
) -> str:
    """Return formatted error message for an error in the file `filename`."""
    parts = []
    parts.append(filename)
    if msg.line is None and msg.column is not None:
        raise ValueError(f"missing line but column exists with {msg}")
    if msg.line is not None:
        parts.append(str(msg.line))
    if msg.column is not None:
        parts.append(str(msg.column))
    return f"{':'.join(parts)}: {msg.message}"


def read_reporting_errors(
    namespace: argparse.Namespace, file: Optional[IO[str]] = None
) -> Iterator[ActionLine]:
    """Yield the lexed lines of the input file, printing any errors to `file`.

    `file` defaults to stderr.
    """
    if file is None:
        file = sys.stderr
    filename = get_input_name(namespace)
    for line_or_err in read_actions(get_input(namespace)):
        if isinstance(line_or_err, KeyActionParserError):
            print(format_error_msg(line_or_err, filename), file=file)
            continue
        yield line_or_err
