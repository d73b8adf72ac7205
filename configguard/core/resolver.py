"""Recovery of the exact source line of a hardcoded secret literal."""

from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from configguard.parsing.nodes import Node, is_attribute, node_line, walk
from configguard.parsing.parser import parse
from configguard.utils.files import read_source
from configguard.utils.logger import get_logger

logger = get_logger(__name__)

MARKER_NAME = "configguard_secret"
MARKER = f"@{MARKER_NAME}"


def _collect_marker_line(node: Node, lines: List[int]) -> List[int]:
    if is_attribute(node, MARKER_NAME):
        return [node_line(node)] + lines
    return lines


class LineResolver:
    """
    Finds the line of a secret literal inside a configuration file.

    The statement that declares a secret and the literal itself may sit on
    different lines (multi-line keyword lists, wrapped calls). Every
    ``"<secret>"`` in the file is replaced by a module attribute marker, the
    rewritten text is parsed again and the marker lines are collected in a
    pre-order walk, most recently seen first. The first of those lines after
    the statement line wins; without one the statement line is kept.

    Parse and read errors propagate to the caller.
    """

    def __init__(self, parser: Callable[[str], Node] = parse, cache_trees: bool = False):
        """
        Args:
            parser: Turns source text into a line-annotated tree
            cache_trees: Reuse trees of identical rewritten sources
        """
        self.parser = parser
        self.cache_trees = cache_trees
        self._trees: Dict[str, Node] = {}

    def resolve_line(self, file_path: Union[str, Path], nominal_line: int, secret_value: str) -> int:
        text = read_source(file_path)
        rewritten = text.replace(f'"{secret_value}"', MARKER)
        tree = self._parse(rewritten)
        marker_lines = walk(tree, _collect_marker_line, [])
        line = self.select_line(marker_lines, nominal_line)
        logger.debug(
            "Resolved %s from line %d to %d (markers at %s)",
            file_path, nominal_line, line, marker_lines,
        )
        return line

    @staticmethod
    def select_line(marker_lines: List[int], nominal_line: int) -> int:
        """First marker line after ``nominal_line``, else ``nominal_line``."""
        return next((line for line in marker_lines if line > nominal_line), nominal_line)

    def _parse(self, text: str) -> Node:
        if not self.cache_trees:
            return self.parser(text)
        tree: Optional[Node] = self._trees.get(text)
        if tree is None:
            tree = self.parser(text)
            self._trees[text] = tree
        return tree

    def clear_cache(self) -> None:
        self._trees.clear()
