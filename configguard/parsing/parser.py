"""
Elixir parsing through tree-sitter.

Configuration files are parsed with the Elixir grammar shipped in
``tree-sitter-language-pack``. Trees containing error or missing nodes are
rejected with a :class:`~configguard.core.exceptions.ParseError` pointing
at the first offending line.
"""

from typing import Optional

from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_language

from configguard.core.exceptions import ParseError
from configguard.parsing.nodes import iter_nodes, node_line, node_text
from configguard.utils.logger import get_logger

logger = get_logger(__name__)

LANGUAGE = "elixir"


class ElixirParser:
    """Parser for Elixir source using tree-sitter."""

    def __init__(self):
        self._language = get_language(LANGUAGE)
        self._parser = Parser(self._language)
        logger.debug("Initialized tree-sitter %s parser", LANGUAGE)

    def parse(self, text: str) -> Node:
        """
        Parse source text into the root node of its syntax tree.

        Raises:
            ParseError: if the tree contains error or missing nodes
        """
        tree = self._parser.parse(text.encode("utf-8"))
        root = tree.root_node
        if root.has_error:
            raise _syntax_error(root)
        return root


def _syntax_error(root: Node) -> ParseError:
    for node in iter_nodes(root):
        if node.is_missing:
            return ParseError(f"missing {node.type!r}", node_line(node))
        if node.type == "ERROR":
            snippet = node_text(node).strip().split("\n")[0][:40]
            return ParseError(f"invalid syntax near {snippet!r}", node_line(node))
    return ParseError("invalid syntax", node_line(root))


_default_parser: Optional[ElixirParser] = None


def parse(text: str) -> Node:
    """Parse configuration source with a shared :class:`ElixirParser`."""
    global _default_parser
    if _default_parser is None:
        _default_parser = ElixirParser()
    return _default_parser.parse(text)
