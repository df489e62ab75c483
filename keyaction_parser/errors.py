"""Exceptions for the library.

KeyActionParserError is the ancestor for all of the exceptions in the
library.  Some functions raise ValueError, but they are few and small in
scope.

Note that `tokenize_operation_sequence` never raises these: it reports failure
by returning `None`.  Use `parse_operation_sequence` to get the exception.
"""
from __future__ import annotations

from typing import Optional

__all__ = [
    "KeyActionParserError",
    # ---
    "ActionParseError",
    "UnterminatedEscapeError",
    "UnexpectedCharacterError",
]


class KeyActionParserError(Exception):
    """Ancestor for all of the exceptions in the library."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is not None:
            if self.column is None:
                return f"{self.line}: {self.message}"
            else:
                return f"{self.line}:{self.column}: {self.message}"
        elif self.column is not None:
            return f"{self.message} at column {self.column}"
        else:
            return self.message


class ActionParseError(KeyActionParserError):
    """Base class for action text that failed to lex into operations."""

    def __init__(
        self,
        message: str,
        text: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(message=message, line=line, column=column)
        self.text = text


class UnterminatedEscapeError(ActionParseError):
    """A quoted token ended with a backslash that escapes nothing."""

    pass


class UnexpectedCharacterError(ActionParseError):
    """No part of the grammar could consume the character at `column`."""

    def __init__(
        self,
        message: str,
        text: str,
        value: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(message=message, text=text, line=line, column=column)
        self.value = value
