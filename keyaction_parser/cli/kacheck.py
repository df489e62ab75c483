"""Tool for linting files of keybinding actions."""
from __future__ import annotations

import argparse
from typing import Iterable, List, Optional, Union, cast

from ..errors import KeyActionParserError
from ..lexer import tokenize_operation_sequence
from ..util import ActionLine, read_actions
from .common import (
    BASE_PARSER,
    Message,
    format_error_msg,
    get_command_name,
    get_input,
    get_input_name,
)

__all__ = ["find_open_quotes", "main"]


def find_open_quotes(action: ActionLine) -> Iterable[Message]:
    """Yield a `Message` object if `action` ends inside double quotes.

    Such quotes are closed implicitly, so closing them must not change the
    result.
    """
    closed = tokenize_operation_sequence(action.raw + '"')
    if action.operations and closed == action.operations:
        yield Message(
            action.line,
            None,
            "Double quote left open at end of line: did you forget to close it?",
        )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command-line tool with the given arguments, without the command name.

    Returns 1 if any line failed to parse, and 0 otherwise.  Warnings don't
    affect the return value.
    """
    parser = argparse.ArgumentParser(
        get_command_name(__file__),
        description="Check keybinding actions for lines that fail to parse and for unclosed quotes",
        parents=[BASE_PARSER],
    )
    parser.add_argument(
        "--errors-only",
        "-E",
        action="store_true",
        help="only report lines that fail to parse",
    )

    namespace = parser.parse_args(argv)
    filename = get_input_name(namespace)

    messages: List[Union[Message, KeyActionParserError]] = []
    failed = False
    for line_or_err in read_actions(get_input(namespace)):
        if isinstance(line_or_err, KeyActionParserError):
            messages.append(line_or_err)
            failed = True
            continue
        if not namespace.errors_only:
            messages.extend(find_open_quotes(line_or_err))

    messages.sort(key=lambda x: cast(int, x.line))
    for msg in messages:
        print(format_error_msg(msg, filename))

    return 1 if failed else 0
