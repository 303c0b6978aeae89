import pytest
from filter_expr.parser import parse
from filter_expr.tree import Node

def test_children_become_tuple():
    n = Node("+", [Node("1"), Node("2")])
    assert isinstance(n.children, tuple)
    assert not n.is_leaf
    assert Node("7").is_leaf

def test_node_is_immutable():
    n = Node("1")
    with pytest.raises(AttributeError):
        n.label = "2"

@pytest.mark.parametrize("label,children", [
    ("1", (Node("2"),)),
    ("+", (Node("1"),)),
    ("-", ()),
    ("()", (Node("1"), Node("2"))),
])
def test_arity_enforced(label, children):
    with pytest.raises(ValueError):
        Node(label, children)

def test_none_child_rejected():
    with pytest.raises(ValueError):
        Node("+", (Node("1"), None))

def test_unknown_label_rejected():
    with pytest.raises(ValueError, match="not a digit or operator"):
        Node("x")

def test_anticipated_labels_construct():
    inner = Node("+", (Node("1"), Node("2")))
    group = Node("()", (inner,))
    product = Node("*", (group, Node("3")))
    assert product.children[0].children[0] is inner

def test_str_is_framed_dump():
    tree = parse(["1", "+", "2"])
    assert str(tree) == "---\n+\n    1\n    2\n---\n"
