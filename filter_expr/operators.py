from .registry import register, symbols_of_kind
from .symbols import ADD, SUBTRACT
from .tree import Node

@register(ADD, arity=2, kind="additive", doc="a+b: sum of left and right operand")
def add(left: Node, right: Node) -> Node:
    return Node(ADD, (left, right))

@register(SUBTRACT, arity=2, kind="additive", doc="a-b: left operand minus right operand")
def subtract(left: Node, right: Node) -> Node:
    return Node(SUBTRACT, (left, right))

def additive_symbols():
    return symbols_of_kind("additive")
