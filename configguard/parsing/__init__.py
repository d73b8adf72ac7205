"""Elixir configuration parsing and config entry extraction."""

from configguard.parsing.nodes import Node, iter_nodes, walk
from configguard.parsing.parser import ElixirParser, parse

__all__ = [
    "ElixirParser",
    "Node",
    "iter_nodes",
    "parse",
    "walk",
]
