"""Tool for debugging files of keybinding actions."""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..quoting import format_operation_sequence
from ..util import ActionLine
from .common import BASE_PARSER, get_command_name, read_reporting_errors

__all__ = ["main"]


def print_action(action: ActionLine, show_tokens: bool = False) -> None:
    print(f"Line {action.line}:")
    print(f"\traw: {action.raw!r}")
    print(f"\tnormalized: {format_operation_sequence(action.operations)!r}")
    print("Operations:")
    for i, (name, *args) in enumerate(action.operations):
        print(f"\t{i}: {name} {args!r}")
        if show_tokens:
            for j, token in enumerate([name] + args):
                print(f"\t\ttoken {j}: {token!r} (length {len(token)})")


PROGNAME = get_command_name(__file__)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command-line tool with the given arguments, without the command name.

    Currently only returns 0 (success).  Lines which fail to parse are
    reported on stderr and otherwise skipped.
    """
    parser = argparse.ArgumentParser(
        PROGNAME,
        description="Print the operations parsed from each line of keybinding actions",
        parents=[BASE_PARSER],
    )
    parser.add_argument(
        "--tokens",
        "-T",
        action="store_true",
        help="also print every token of each operation on its own line",
    )
    parser.add_argument(
        "--skip-empty",
        "-S",
        action="store_true",
        help="skip lines with no operations",
    )

    namespace = parser.parse_args(argv)

    actions = list(read_reporting_errors(namespace))

    # Copied straight from `apt`.
    print(
        f"WARNING: {PROGNAME} does not have a stable CLI interface. Use with caution in scripts.",
        file=sys.stderr,
    )
    for action in actions:
        if namespace.skip_empty and not action.operations:
            continue
        print_action(action, show_tokens=namespace.tokens)
        print()
    return 0
