"""Functions for lexing keybinding actions into sequences of operations.

Terminology:
    Token: a bare word, or a string in double quotes.
    Operation: one or more space-separated tokens.  The first is its name, and
        the rest are its arguments.
    Operation sequence: zero or more operations separated by semicolons.

You should start with `tokenize_operation_sequence`, which returns `None` for
malformed input.  `parse_operation_sequence` does the same job but raises an
`ActionParseError` describing where lexing stopped.

The layers of the grammar are available on their own as `lex_token`,
`lex_operation` and `lex_operation_sequence`.  Each takes the text and the
offset to start at, and returns the lexed value together with the offset just
past it.  They consume as much as their rule allows and leave the rest.
"""
from __future__ import annotations

import re
from typing import Dict, List, NoReturn, Optional, Tuple

from .errors import (
    ActionParseError,
    UnexpectedCharacterError,
    UnterminatedEscapeError,
)

__all__ = [
    "ESCAPES",
    "Operation",
    "OperationSequence",
    "at_eof",
    "lex_operation",
    "lex_operation_sequence",
    "lex_token",
    "parse_operation_sequence",
    "tokenize_operation_sequence",
]


Operation = List[str]
OperationSequence = List[Operation]

# Expansions for the character after a backslash inside double quotes.
# Any other character is kept and the backslash is dropped.
ESCAPES: Dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "r": "\r",
    "n": "\n",
    "t": "\t",
}

_QUOTED_RUN_RE = re.compile(r'[^"\\]+')
_UNQUOTED_TOKEN_RE = re.compile(r'[^"; ][^ ;]*')
# Tabs only start a token when something other than whitespace or ';' follows.
_TOKEN_START_RE = re.compile(r"\t*[^; \t]")
_TOKEN_SEPARATOR_RE = re.compile(r" +")
_OPERATION_SEPARATORS_RE = re.compile(r"(?:[ \t]*;[ \t]*)+")
# Also matches plain whitespace, so blank input has nothing left over.
_LEADING_SEPARATORS_RE = re.compile(r"[ \t]*(?:;[ \t]*)*")
_TRAILING_WHITESPACE_RE = re.compile(r"[ \t]*")


def _unexpected(expected: str, text: str, pos: int) -> NoReturn:
    if at_eof(text, pos):
        raise ActionParseError(
            f"Expected {expected} but the input ended",
            text=text,
            column=pos + 1,
        )
    value = text[pos]
    raise UnexpectedCharacterError(
        f"Expected {expected} but got {value!r}",
        text=text,
        value=value,
        column=pos + 1,
    )


def at_eof(text: str, pos: int) -> bool:
    """Return whether no input remains in `text` from offset `pos`."""
    return pos >= len(text)


def _lex_quoted_token(text: str, pos: int) -> Tuple[str, int]:
    assert text.startswith('"', pos), (text, pos)
    pos += 1
    chunks: List[str] = []
    while True:
        m = _QUOTED_RUN_RE.match(text, pos)
        if m:
            chunks.append(m.group())
            pos = m.end()
        if at_eof(text, pos):
            # Unterminated: close it here.
            return "".join(chunks), pos
        c = text[pos]
        if c == '"':
            return "".join(chunks), pos + 1
        assert c == "\\"
        if at_eof(text, pos + 1):
            raise UnterminatedEscapeError(
                "Input ended after a backslash inside double quotes",
                text=text,
                column=pos + 1,
            )
        escaped = text[pos + 1]
        chunks.append(ESCAPES.get(escaped, escaped))
        pos += 2


def _lex_unquoted_token(text: str, pos: int) -> Tuple[str, int]:
    m = _UNQUOTED_TOKEN_RE.match(text, pos)
    if not m:
        _unexpected("a token", text, pos)
    return m.group(), m.end()


def lex_token(text: str, pos: int = 0) -> Tuple[str, int]:
    """Lex one token starting at offset `pos` of `text`.

    A token starting with a double quote is a quoted token.  Escape sequences
    in its body are expanded using `ESCAPES`, and it ends at the next
    unescaped double quote or, if there is none, at the end of input.

    Otherwise it is a bare word: it must not start with a semicolon or space,
    and it ends before the next space or semicolon.  Backslashes and tabs in
    bare words are kept as-is.
    """
    if text.startswith('"', pos):
        return _lex_quoted_token(text, pos)
    return _lex_unquoted_token(text, pos)


def lex_operation(text: str, pos: int = 0) -> Tuple[Operation, int]:
    """Lex one operation, i.e., one or more tokens separated by spaces.

    Spaces after the last token are not consumed, nor are spaces followed by
    tabs that run into a semicolon or the end of input.
    """
    token, pos = lex_token(text, pos)
    operation = [token]
    while True:
        m = _TOKEN_SEPARATOR_RE.match(text, pos)
        if not m:
            break
        next_pos = m.end()
        if not _TOKEN_START_RE.match(text, next_pos):
            break
        token, pos = lex_token(text, next_pos)
        operation.append(token)
    return operation, pos


def lex_operation_sequence(
    text: str, pos: int = 0
) -> Tuple[OperationSequence, int]:
    """Lex operations separated by semicolons, starting at offset `pos`.

    Runs of semicolons (with any spaces or tabs around them) count as a
    single separator.  Such runs are also skipped before the first operation
    and after the last one, along with any leading and trailing whitespace.
    If nothing but those remain, the sequence is empty.

    Lexing stops at the first text that fits none of the above, which is left
    unconsumed.
    """
    m = _LEADING_SEPARATORS_RE.match(text, pos)
    assert m is not None
    pos = m.end()
    operations: OperationSequence = []
    if not at_eof(text, pos):
        operation, pos = lex_operation(text, pos)
        operations.append(operation)
        while True:
            m = _OPERATION_SEPARATORS_RE.match(text, pos)
            if not m:
                break
            pos = m.end()
            if at_eof(text, pos):
                break
            operation, pos = lex_operation(text, pos)
            operations.append(operation)
    m = _TRAILING_WHITESPACE_RE.match(text, pos)
    assert m is not None
    return operations, m.end()


def parse_operation_sequence(text: str) -> OperationSequence:
    """Lex all of `text` into a sequence of operations.

    Each operation is a non-empty list of strings whose first element is the
    name of the operation.

    Raises an `ActionParseError` if `text` could not be lexed in its
    entirety, with `column` set to the 1-based column where lexing stopped.
    """
    operations, pos = lex_operation_sequence(text)
    if not at_eof(text, pos):
        _unexpected("';' or the end of input", text, pos)
    return operations


def tokenize_operation_sequence(text: str) -> Optional[OperationSequence]:
    """Split a semicolon-separated list of operations into lists of tokens.

    Each operation is a non-empty list: its first element is the name of the
    operation and the rest are its arguments.

    Tokens may be double-quoted, in which case they may contain spaces and
    semicolons as well as the escape sequences `\\n`, `\\r`, `\\t`, `\\"` and
    `\\\\`.  Unsupported escape sequences lose their backslash, so `\\e`
    becomes `e`.  A double-quoted token still open at the end of input is
    closed there.

    `text` must not contain comments nor backticks needing expansion.

    Returns `None` if `text` could not be parsed.
    """
    try:
        return parse_operation_sequence(text)
    except ActionParseError:
        return None
