from dataclasses import dataclass, field
from typing import Tuple

from .ast_utils import node_to_pretty
from .symbols import Symbol, arity


@dataclass(frozen=True)
class Node:
    """
    One production instance of the filter expression grammar.

    Leaves carry a digit label and no children. Operator nodes carry the
    operator label and exactly as many children as its arity, left operand
    first. Nodes are never mutated; combining subtrees builds a new node.
    """
    label: Symbol
    children: Tuple["Node", ...] = field(default=())

    def __post_init__(self):
        children = tuple(self.children)
        for child in children:
            if not isinstance(child, Node):
                raise ValueError(f"child of '{self.label}' must be a Node, got {child!r}")
        try:
            expected = arity(self.label)
        except KeyError:
            raise ValueError(f"'{self.label}' is not a digit or operator label") from None
        if len(children) != expected:
            raise ValueError(
                f"'{self.label}' takes {expected} children, got {len(children)}"
            )
        object.__setattr__(self, "children", children)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def __str__(self) -> str:
        return "---\n" + node_to_pretty(self) + "\n---\n"
