"""Helpers over tree-sitter syntax trees of configuration source."""

from typing import Callable, Iterator, Optional, TypeVar

from tree_sitter import Node

T = TypeVar("T")


def node_line(node: Node) -> int:
    """1-based line the node starts on."""
    return node.start_point[0] + 1


def node_last_line(node: Node) -> int:
    """1-based line of the last character of the node."""
    row, column = node.end_point
    if column == 0 and row > node.start_point[0]:
        row -= 1
    return row + 1


def node_text(node: Optional[Node]) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8")


def iter_nodes(tree: Node) -> Iterator[Node]:
    """Yield every node of ``tree`` in pre-order."""
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def walk(tree: Node, visit: Callable[[Node, T], T], acc: T) -> T:
    """
    Pre-order traversal threading an accumulator.

    ``visit(node, acc)`` is called for every node, parents before children
    and siblings left to right; its return value becomes the accumulator
    for the next node.
    """
    for node in iter_nodes(tree):
        acc = visit(node, acc)
    return acc


def call_name(node: Node) -> Optional[str]:
    """Name of a local call such as ``config ...``, None for anything else."""
    if node.type != "call":
        return None
    target = node.child_by_field_name("target")
    if target is None or target.type != "identifier":
        return None
    return node_text(target)


def is_call(node: Node, name: str) -> bool:
    return call_name(node) == name


def is_attribute(node: Node, name: str) -> bool:
    """True for a module attribute reference ``@name`` without arguments."""
    if node.type != "unary_operator" or not node.named_children:
        return False
    operator = node.child_by_field_name("operator") or node.children[0]
    operand = node.child_by_field_name("operand") or node.named_children[-1]
    return (
        node_text(operator) == "@"
        and operand.type == "identifier"
        and node_text(operand) == name
    )
