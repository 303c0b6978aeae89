"""
Recursive-descent parser for filter expressions.

Grammar::

    expression := term ( ('+' | '-') term )*
    term       := DIGIT

Symbols are consumed left to right with one symbol of lookahead. Binary
operators fold to the left: the tree built so far is saved, the next term
is parsed, and the registered production for the operator combines the
two into a new node. ``1+2-3`` therefore parses as ``(1+2)-3``.

A bracketed sub-expression, once supported, is represented by a dedicated
single-child node labelled ``()`` rather than by its inner tree.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from . import operators
from .errors import ExpectedLiteralError, ExpectedSymbolError, ParseError
from .lexer import tokenize
from .registry import get_op
from .symbols import EOF, Symbol, is_digit
from .tree import Node

logger = logging.getLogger(__name__)


class Parser:
    """
    State of a single parse: the input, a forward-only cursor, the working
    tree and the saved left operand. Instances are single use.
    """

    def __init__(self, symbols: Iterable[Symbol]):
        self.input = tuple(symbols)
        self.pos = 0
        self.tree: Optional[Node] = None
        self.saved_tree: Optional[Node] = None
        self._used = False

    def at_end(self) -> bool:
        return self.pos >= len(self.input)

    def peek(self):
        if self.at_end():
            return EOF
        return self.input[self.pos]

    def next_symbol(self):
        symbol = self.peek()
        if not self.at_end():
            self.pos += 1
        return symbol

    def match(self, expected) -> None:
        found = self.peek()
        if expected is EOF:
            matched = self.at_end()
        else:
            matched = not self.at_end() and found == expected
        if not matched:
            raise ExpectedSymbolError(expected, found, self.pos)
        self.next_symbol()

    def get_num(self) -> Node:
        found = self.peek()
        if not is_digit(found):
            raise ExpectedLiteralError(found, self.pos)
        self.next_symbol()
        return Node(found)

    def term(self) -> None:
        self.tree = self.get_num()

    def binary(self, op: Symbol) -> None:
        spec = get_op(op)
        self.match(op)
        self.term()
        self.tree = spec.build(self.saved_tree, self.tree)

    def expression(self) -> None:
        self.term()
        additive = operators.additive_symbols()
        while self.peek() in additive:
            self.saved_tree = self.tree
            self.binary(self.peek())

    def parse(self) -> Optional[Node]:
        if self._used:
            raise RuntimeError("Parser instances are single use; create a new one")
        self._used = True
        if self.at_end():
            return None
        self.expression()
        self.match(EOF)
        return self.tree


def parse(symbols: Iterable[Symbol]) -> Optional[Node]:
    """
    Parse a symbol sequence into a tree.

    Returns None for an empty sequence. Raises ExpectedLiteralError or
    ExpectedSymbolError for malformed input; no partial tree is returned.
    """
    parser = Parser(symbols)
    tree = parser.parse()
    logger.debug("Parsed %d symbols", len(parser.input))
    return tree


@dataclass(frozen=True)
class ParseOutcome:
    tree: Optional[Node] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def try_parse(symbols: Iterable[Symbol]) -> ParseOutcome:
    """Like parse, but reports a rejected input as a value."""
    try:
        return ParseOutcome(tree=parse(symbols))
    except ParseError as e:
        logger.debug("Rejected input: %s", e)
        return ParseOutcome(error=e)


def parse_text(src: str) -> Optional[Node]:
    return parse(tokenize(src))
