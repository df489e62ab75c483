"""Convenience functions for using the library."""
from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterator, TextIO, Union

from .errors import ActionParseError
from .lexer import OperationSequence, parse_operation_sequence

__all__ = ["ActionLine", "read_actions"]


@dataclass
class ActionLine:
    """A line of action text along with the operations lexed from it.

    Instance variables:
        line: the line number, starting from 1.
        raw: the text of the line without its line terminator.
        operations: the sequence of operations from `raw`.
    """

    line: int
    raw: str
    operations: OperationSequence


def read_actions(
    file: Union[str, PathLike[str], TextIO],
) -> Iterator[Union[ActionParseError, ActionLine]]:
    """Lex each line of a given file or path into operations, yielding a stream.

    `file` may be a filename, `os.PathLike`, or an opened file.  In the case of
    an opened file, it is not closed at the end of the function.

    Every line is lexed exactly as it is, minus its line terminator: the
    caller is responsible for stripping comments beforehand.  Blank lines
    yield an `ActionLine` with no operations.

    Lines that fail to lex yield their `ActionParseError` (with its `line`
    set) instead of stopping the stream.
    """
    if isinstance(file, (str, PathLike)):
        f = open(file)
        close_io = True
    else:
        f = file
        # Passed in a file object.
        close_io = False

    try:
        for line_no, line in enumerate(f, start=1):
            line = line.rstrip("\n")
            try:
                operations = parse_operation_sequence(line)
            except ActionParseError as e:
                e.line = line_no
                yield e
            else:
                yield ActionLine(line_no, line, operations)
    finally:
        if close_io:
            f.close()
