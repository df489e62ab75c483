"""Tool for exporting parsed keybinding actions to various formats, including JSON and plaintext."""
from __future__ import annotations

import argparse
import json
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Type

from ..quoting import format_operation_sequence, quote_token
from ..util import ActionLine
from .common import BASE_PARSER, get_command_name, read_reporting_errors

__all__ = ["main"]


class ActionEmitter(ABC):
    def __init__(self, include_empty: bool = False):
        self.include_empty = include_empty

    @abstractmethod
    def emit_actions(self, actions: List[ActionLine]) -> Iterable[str]:
        raise NotImplementedError

    def emit(self, actions: Iterable[ActionLine]) -> Iterable[str]:
        if not self.include_empty:
            actions = [action for action in actions if action.operations]
        yield from self.emit_actions(list(actions))


class JSONEmitter(ActionEmitter):
    def emit_actions(self, actions: List[ActionLine]) -> Iterable[str]:
        records = [
            {
                "line": action.line,
                "raw": action.raw,
                "operations": action.operations,
            }
            for action in actions
        ]
        yield json.dumps(records, indent=2)


class NormalizedEmitter(ActionEmitter):
    """Emit each line as it would be written by `format_operation_sequence`."""

    def emit_actions(self, actions: List[ActionLine]) -> Iterable[str]:
        for action in actions:
            yield format_operation_sequence(action.operations)


class PlaintextEmitter(ActionEmitter):
    """Emit one tab-separated record per operation: line number, then tokens.

    Tokens are quoted as needed, so none of them contain a literal tab.
    """

    def emit_actions(self, actions: List[ActionLine]) -> Iterable[str]:
        for action in actions:
            if not action.operations:
                yield str(action.line)
                continue
            for op in action.operations:
                fields = [str(action.line)]
                fields.extend(quote_token(token) for token in op)
                yield "\t".join(fields)


EMITTERS: Dict[str, Type[ActionEmitter]] = {
    "json": JSONEmitter,
    "normalized": NormalizedEmitter,
    "txt": PlaintextEmitter,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command-line tool with the given arguments, without the command name.

    Currently only returns 0 (success).  Lines which fail to parse are
    simply printed to stderr and left out of the export.
    """
    parser = argparse.ArgumentParser(
        get_command_name(__file__),
        description="Export parsed keybinding actions in various formats",
        parents=[BASE_PARSER],
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=list(EMITTERS),
        default="json",
        help="the format to export to (default: %(default)s)",
    )
    parser.add_argument(
        "--include-empty",
        "-e",
        action="store_true",
        help="include lines with no operations",
    )

    namespace = parser.parse_args(argv)

    actions = list(read_reporting_errors(namespace))

    emittercls: Type[ActionEmitter] = EMITTERS[namespace.format]
    emitter = emittercls(include_empty=namespace.include_empty)
    for line in emitter.emit(actions):
        print(line)
    return 0
