"""Parsing, evaluating and drawing prefix arithmetic expressions."""

from __future__ import annotations

import itertools
import math
import re
import string
import subprocess
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

from .errors import TreeError, TreeErrorCode
from .logger import get_logger

DEFAULT_GRAPH_DIR = "../resources/graph_dump"

_LEXEME = re.compile(r"[^\s()][^\s)]*", re.ASCII)
_LEADING_NUMBER = re.compile(r"\d*(?:\.\d*)?", re.ASCII)
_dump_numbers = itertools.count()


class NodeType(IntEnum):
    OP = 1
    NUM = 2


class Operation(IntEnum):
    ADD = 1
    SUB = 2
    DIV = 3
    MUL = 4


_OPERATORS = {"+": Operation.ADD, "*": Operation.MUL, "/": Operation.DIV}
_SYMBOLS = {Operation.ADD: "+", Operation.MUL: "*", Operation.DIV: "/"}


class ParseError(ValueError):
    """Raised when an expression ends before it is complete."""


@dataclass(eq=False)
class Node:
    """An expression tree node: a number or an operator with two operands.

    ``value`` is a float for numbers and an ``Operation`` (None when the
    operator is not recognised) for operators.
    """

    type: NodeType
    value: float | Operation | None
    left: Node | None = None
    right: Node | None = None
    parent: Node | None = field(default=None, repr=False)


def _log_debug(message):
    logger = get_logger()
    if logger is not None and not logger.closed:
        logger.debug(message)


def is_number(token):
    """True if ``token`` is made of digits and dots and holds at least one digit."""
    if any(ch not in string.digits and ch != "." for ch in token):
        return False
    return any(ch in string.digits for ch in token)


def _leading_float(text):
    prefix = _LEADING_NUMBER.match(text).group()
    return float(prefix) if any(ch in string.digits for ch in prefix) else 0.0


def tokenize(text):
    """Yield the tokens of ``text``, ignoring whitespace and parentheses."""
    for match in _LEXEME.finditer(text):
        yield match.group()


def _parse_node(words, parent):
    word = next(words, None)
    if word is None:
        raise ParseError("unexpected end of expression")
    _log_debug(f"token: {word}")

    if is_number(word):
        return Node(NodeType.NUM, _leading_float(word), parent=parent)

    node = Node(NodeType.OP, _OPERATORS.get(word), parent=parent)
    node.left = _parse_node(words, node)
    node.right = _parse_node(words, node)
    return node


def parse(text):
    """Build an expression tree from prefix notation such as ``(+ 1 (* 2 3))``."""
    return _parse_node(tokenize(text), None)


def _divide(left, right):
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def evaluate(node):
    """Compute the value of the expression rooted at ``node``."""
    if node.type == NodeType.NUM:
        return float(node.value)

    left = evaluate(node.left)
    right = evaluate(node.right)

    if node.value == Operation.ADD:
        return left + right
    if node.value == Operation.MUL:
        return left * right
    if node.value == Operation.DIV:
        return _divide(left, right)
    raise ValueError(f"unsupported operation: {node.value!r}")


def _address(node):
    return "(nil)" if node is None else f"{id(node):#x}"


def _label(node):
    if node.type == NodeType.NUM:
        return f"{node.value:.2f}"
    return _SYMBOLS.get(node.value, "???")


def dump_tree(root, stream):
    """Write the Graphviz node and edge statements for the tree to ``stream``."""
    here = _address(root)
    left = _address(root.left)
    right = _address(root.right)
    stream.write(
        f'    "{here}" [shape=Mrecord, style=filled, fillcolor="#F0C0F0", label="'
        f"{{data: {_label(root)} | current: {here} | "
        f"{{ Left: {left} | Right: {right} }}}}"
        f'"];\n'
    )
    for child in (root.left, root.right):
        if child is not None:
            stream.write(f'    "{here}" -> "{_address(child)}";\n')
            dump_tree(child, stream)


def write_dot(root, stream):
    """Write a complete Graphviz digraph of the tree to ``stream``."""
    stream.write("digraph BinaryTree {\n")
    stream.write('    bgcolor="#C0C0C0";\n\n')
    stream.write("    node [shape=record];\n")
    dump_tree(root, stream)
    stream.write("}\n")


def generate_dot(root, directory=DEFAULT_GRAPH_DIR, render=True):
    """Write ``graph_<n>.dot`` in ``directory``, optionally render it to PNG, return ``n``."""
    number = next(_dump_numbers)
    folder = Path(directory)
    dot_path = folder / f"graph_{number}.dot"
    png_path = folder / f"graph_{number}.png"

    try:
        with open(dot_path, "w", encoding="utf-8") as stream:
            write_dot(root, stream)
    except OSError as exc:
        raise TreeError(TreeErrorCode.FILE_OPEN_ERR, str(dot_path)) from exc

    if render:
        try:
            subprocess.run(
                ["dot", "-Tpng", str(dot_path), "-o", str(png_path)], check=False
            )
        except OSError as exc:
            logger = get_logger()
            if logger is not None and not logger.closed:
                logger.error(f"cannot run dot: {exc}")

    return number