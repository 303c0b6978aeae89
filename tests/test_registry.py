import pytest
from filter_expr import operators
from filter_expr.registry import get_op, list_operators, register
from filter_expr.tree import Node

def test_additive_symbols():
    assert operators.additive_symbols() == ["+", "-"]

def test_get_op_builds_node():
    spec = get_op("+")
    assert spec.arity == 2
    assert spec.build(Node("1"), Node("2")) == Node("+", (Node("1"), Node("2")))

def test_unknown_operator():
    with pytest.raises(KeyError, match="Unknown operator"):
        get_op("*")

def test_duplicate_registration_rejected():
    with pytest.raises(ValueError, match="already registered"):
        register("+", arity=2, kind="additive")(lambda a, b: None)

def test_list_operators():
    listed = list_operators()
    assert [o["symbol"] for o in listed] == ["+", "-"]
    assert all(o["kind"] == "additive" and o["arity"] == 2 for o in listed)
