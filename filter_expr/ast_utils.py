# filter_expr/ast_utils.py
from typing import Any, Dict

# Left-folded chains are as deep as they are long, so both walks keep an
# explicit stack instead of recursing per level.

def node_to_dict(node) -> Dict[str, Any]:
    root = {"label": node.label, "children": []}
    stack = [(node, root)]
    while stack:
        n, out = stack.pop()
        for child in n.children:
            d = {"label": child.label, "children": []}
            out["children"].append(d)
            stack.append((child, d))
    return root

def node_to_pretty(node, indent: str = "    ") -> str:
    """Indented dump of a tree, one node per line, children beneath their parent."""
    lines = []
    stack = [(node, 0)]
    while stack:
        n, depth = stack.pop()
        lines.append(f"{indent * depth}{n.label}")
        for child in reversed(n.children):
            stack.append((child, depth + 1))
    return "\n".join(lines)
