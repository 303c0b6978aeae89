from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from .symbols import is_digit
from .tree import Node

@dataclass
class Analysis:
    node_count: int = 0
    depth: int = 0
    operators: Counter = field(default_factory=Counter)
    literals: List[str] = field(default_factory=list)

    def to_dict(self):
        return {
            "node_count": self.node_count,
            "depth": self.depth,
            "operators": dict(sorted(self.operators.items())),
            "literals": list(self.literals),
        }

def analyze(node: Optional[Node]) -> Analysis:
    an = Analysis()
    if node is None:
        return an

    stack = [(node, 1)]
    while stack:
        n, depth = stack.pop()
        an.node_count += 1
        an.depth = max(an.depth, depth)
        if is_digit(n.label):
            # left to right, the order the literals appear in the input
            an.literals.append(n.label)
        else:
            an.operators[n.label] += 1
        for child in reversed(n.children):
            stack.append((child, depth + 1))

    return an
