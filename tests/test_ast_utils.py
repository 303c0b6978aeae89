from filter_expr.ast_utils import node_to_dict, node_to_pretty
from filter_expr.parser import parse

def test_pretty_indents_by_depth():
    tree = parse(list("1+2-3"))
    assert node_to_pretty(tree) == "\n".join([
        "-",
        "    +",
        "        1",
        "        2",
        "    3",
    ])

def test_pretty_custom_indent():
    tree = parse(list("1-2"))
    assert node_to_pretty(tree, indent="  ") == "-\n  1\n  2"

def test_pretty_leaf():
    assert node_to_pretty(parse(["5"])) == "5"

def test_render_is_idempotent():
    tree = parse(list("1+2-3+4"))
    assert node_to_pretty(tree) == node_to_pretty(tree)
    assert str(tree) == str(tree)

def test_to_dict():
    tree = parse(list("1+2"))
    assert node_to_dict(tree) == {
        "label": "+",
        "children": [
            {"label": "1", "children": []},
            {"label": "2", "children": []},
        ],
    }

def test_deep_chain_renders():
    n_ops = 1500
    tree = parse(["1"] + ["+", "2"] * n_ops)
    pretty = node_to_pretty(tree)
    lines = pretty.splitlines()
    assert len(lines) == 2 * n_ops + 1
    assert lines[0] == "+"
    assert lines[n_ops] == "    " * n_ops + "1"
    assert lines[-1] == "    2"
    assert str(tree) == "---\n" + pretty + "\n---\n"

    d = node_to_dict(tree)
    depth = 0
    while d["children"]:
        d = d["children"][0]
        depth += 1
    assert depth == n_ops
    assert d == {"label": "1", "children": []}
