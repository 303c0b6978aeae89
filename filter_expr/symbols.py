from typing import Dict

Symbol = str

DIGITS = tuple("0123456789")
ADD = "+"
SUBTRACT = "-"
MULTIPLY = "*"
OPEN_GROUP = "("
CLOSE_GROUP = ")"
GROUP = "()"     # label of a bracketed sub-expression node


class _EndOfInput:
    def __repr__(self) -> str:
        return "EOF"


# returned by the parser once the cursor is past the last symbol; no input
# string ever compares equal to it
EOF = _EndOfInput()

_OPERATOR_ARITY: Dict[str, int] = {
    ADD: 2,
    SUBTRACT: 2,
    MULTIPLY: 2,
    GROUP: 1,
}

def is_digit(symbol: Symbol) -> bool:
    return symbol in DIGITS

def arity(label: Symbol) -> int:
    """Number of children a node with this label must have."""
    if is_digit(label):
        return 0
    if label not in _OPERATOR_ARITY:
        raise KeyError(f"Unknown node label '{label}'")
    return _OPERATOR_ARITY[label]

def describe(symbol) -> str:
    if symbol is EOF:
        return "end of input"
    return repr(symbol)
