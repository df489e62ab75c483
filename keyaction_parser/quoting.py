"""Functions for turning operations back into action text.

These are the inverse of the lexer: for any sequence of operations `ops`,
`tokenize_operation_sequence(format_operation_sequence(ops)) == ops`.  The
text produced is not necessarily the text that was originally lexed.
"""
from __future__ import annotations

import re
from typing import Dict, Iterable

from .lexer import ESCAPES, Operation

__all__ = [
    "format_operation",
    "format_operation_sequence",
    "quote_token",
]


QUOTED_ESCAPES: Dict[int, str] = str.maketrans(
    {expansion: f"\\{c}" for c, expansion in ESCAPES.items()}
)

# Tokens matching this lex back unchanged without quotes.
_BARE_TOKEN_RE = re.compile(r'[^"; \\\r\n\t]+')


def quote_token(token: str) -> str:
    """Return `token` as it should be written in action text.

    Bare words are returned unchanged.  Anything else (including the empty
    string) is put in double quotes with special characters escaped.
    """
    if _BARE_TOKEN_RE.fullmatch(token):
        return token
    return f'"{token.translate(QUOTED_ESCAPES)}"'


def format_operation(operation: Operation) -> str:
    """Return the action text for a single operation.

    Raises ValueError if `operation` has no name.
    """
    if not operation:
        raise ValueError("operation must have at least a name")
    return " ".join(quote_token(token) for token in operation)


def format_operation_sequence(operations: Iterable[Operation]) -> str:
    """Return the action text for a sequence of operations."""
    return "; ".join(format_operation(op) for op in operations)
