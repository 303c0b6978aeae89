from typing import List

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from .errors import LexError

GRAMMAR = r"""
start: symbol*
symbol: DIGIT | ADD | SUBTRACT | MULTIPLY | OPEN_GROUP | CLOSE_GROUP
DIGIT: /[0-9]/
ADD: "+"
SUBTRACT: "-"
MULTIPLY: "*"
OPEN_GROUP: "("
CLOSE_GROUP: ")"
%ignore /[ \t\r\n]+/
"""

# Only .lex() is used; the start rule exists because lark needs one to build
# the basic lexer.
lexer = Lark(GRAMMAR, start="start", parser="lalr", lexer="basic")

def tokenize(src: str) -> List[str]:
    """Split filter expression text into grammar symbols, one per digit or marker."""
    try:
        return [str(tok) for tok in lexer.lex(src)]
    except UnexpectedCharacters as e:
        raise LexError(src[e.pos_in_stream], e.pos_in_stream) from e
