import io
import math
from unittest import mock

import pytest

from prefixcalc.errors import TreeError, TreeErrorCode
from prefixcalc.tree import (
    Node,
    NodeType,
    Operation,
    ParseError,
    dump_tree,
    evaluate,
    generate_dot,
    is_number,
    parse,
    tokenize,
    write_dot,
)


@pytest.mark.parametrize(
    "token, expected",
    [("12", True), ("1.5", True), (".5", True), ("1.2.3", True), (".", False),
     ("", False), ("+", False), ("1a", False), ("-1", False)],
)
def test_is_number(token, expected):
    assert is_number(token) is expected


def test_tokenize_skips_parentheses_and_spaces():
    assert list(tokenize("(+ 1 (* 2 3))")) == ["+", "1", "*", "2", "3"]


def test_tokenize_closing_paren_ends_token():
    assert list(tokenize("(/ 10)(4)")) == ["/", "10", "4"]


def test_parse_structure():
    root = parse("(+ 1 7)")
    assert root.type == NodeType.OP
    assert root.value is Operation.ADD
    assert root.parent is None
    assert root.left.type == NodeType.NUM and root.left.value == 1.0
    assert root.right.value == 7.0
    assert root.left.parent is root and root.right.parent is root


def test_number_uses_leading_prefix():
    assert parse("1.2.3").value == 1.2


@pytest.mark.parametrize(
    "text, expected",
    [("(+ 1 2)", 3.0), ("(/ 9 2)", 4.5), ("(* (+ 1 2) 4)", 12.0)],
)
def test_evaluate_examples(text, expected):
    assert evaluate(parse(text)) == expected


def test_evaluate_single_number():
    assert evaluate(parse("2.5")) == 2.5


def test_division_by_zero_follows_ieee():
    assert math.isinf(evaluate(parse("(/ 1 0)")))
    assert evaluate(parse("(/ 1 0)")) > 0
    assert math.isnan(evaluate(parse("(/ 0 0)")))


def test_unknown_operator_fails_on_evaluate():
    root = parse("(- 1 2)")
    assert root.value is None
    with pytest.raises(ValueError):
        evaluate(root)


@pytest.mark.parametrize("text", ["", "   ", "(+ 1", "(* (+ 1 2)"])
def test_incomplete_expression(text):
    with pytest.raises(ParseError):
        parse(text)


def test_dump_tree_edges_and_labels():
    root = parse("(+ 1 (* 2 3))")
    out = io.StringIO()
    dump_tree(root, out)
    text = out.getvalue()
    assert text.count("->") == 4
    assert "data: +" in text
    assert "data: *" in text
    assert "data: 1.00" in text
    assert f'"{id(root):#x}" -> "{id(root.left):#x}"' in text


def test_dump_tree_unknown_operator_label():
    out = io.StringIO()
    dump_tree(parse("(- 1 2)"), out)
    assert "data: ???" in out.getvalue()


def test_dump_tree_leaf_has_nil_children():
    out = io.StringIO()
    dump_tree(Node(NodeType.NUM, 4.0), out)
    assert "Left: (nil) | Right: (nil)" in out.getvalue()


def test_write_dot_wraps_digraph():
    out = io.StringIO()
    write_dot(parse("(* 2 3)"), out)
    text = out.getvalue()
    assert text.startswith("digraph BinaryTree {\n")
    assert text.endswith("}\n")


def test_generate_dot_without_render(tmp_path):
    root = parse("(+ 1 2)")
    first = generate_dot(root, tmp_path, False)
    second = generate_dot(root, tmp_path, False)
    assert second == first + 1
    content = (tmp_path / f"graph_{first}.dot").read_text(encoding="utf-8")
    assert content.startswith("digraph BinaryTree {")
    assert (tmp_path / f"graph_{second}.dot").exists()


def test_generate_dot_runs_dot(tmp_path):
    with mock.patch("prefixcalc.tree.subprocess.run") as run:
        number = generate_dot(parse("(+ 1 2)"), tmp_path, True)
    run.assert_called_once_with(
        ["dot", "-Tpng", str(tmp_path / f"graph_{number}.dot"), "-o",
         str(tmp_path / f"graph_{number}.png")],
        check=False,
    )


def test_generate_dot_missing_directory(tmp_path):
    with pytest.raises(TreeError) as info:
        generate_dot(parse("1"), tmp_path / "absent", False)
    assert info.value.code is TreeErrorCode.FILE_OPEN_ERR