"""
Error types raised while tokenizing or parsing filter expressions.

Every failure rejects the whole input: there is no recovery and no partial
tree. Callers that prefer a value over an exception use
``parser.try_parse``.
"""

from abc import ABCMeta, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional

from .symbols import EOF, Symbol, describe


class ErrorKind(str, Enum):
    EXPECTED_LITERAL = "expected_literal"
    EXPECTED_SYMBOL = "expected_symbol"
    LEXICAL = "lexical"


class FilterExprError(Exception, metaclass=ABCMeta):
    """Base class for every rejected filter expression."""

    kind: ErrorKind

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready description of the failure."""


class ParseError(FilterExprError):
    """
    The symbol at ``position`` is not allowed by the grammar.

    ``expected`` is a human readable description of what the grammar
    required there, ``found`` is the symbol actually present (the
    ``EOF`` marker when the input ran out, reported as None by
    ``to_dict``).
    """

    kind: ErrorKind

    def __init__(self, expected: str, found: Symbol, position: int):
        self.expected = expected
        self.found = found
        self.position = position
        super().__init__(
            f"{expected} expected but found {describe(found)} at position {position}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": str(self),
            "expected": self.expected,
            "found": None if self.found is EOF else self.found,
            "position": self.position,
        }


class ExpectedLiteralError(ParseError):
    kind = ErrorKind.EXPECTED_LITERAL

    def __init__(self, found: Symbol, position: int):
        super().__init__("digit", found, position)


class ExpectedSymbolError(ParseError):
    kind = ErrorKind.EXPECTED_SYMBOL

    def __init__(self, expected: Symbol, found: Symbol, position: int):
        super().__init__(describe(expected), found, position)
        self.expected_symbol = expected


class LexError(FilterExprError):
    kind = ErrorKind.LEXICAL

    def __init__(self, char: str, position: int, message: Optional[str] = None):
        self.char = char
        self.position = position
        super().__init__(message or f"unexpected character {char!r} at offset {position}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": str(self),
            "char": self.char,
            "position": self.position,
        }
