"""
Extraction of key/value entries from ``config`` statements.

A ``config`` statement such as::

    config :my_app, MyAppWeb.Endpoint,
      secret_key_base: "...",
      live_view: [signing_salt: "..."]

ends with a keyword list; its top level pairs are the entries. Values are
plain Python strings only for double-quoted literals without interpolation;
every other value is handed over as its syntax tree node.
"""

from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple, Union

from configguard.core.models import ConfigEntry, FuzzyConfigEntry
from configguard.parsing.nodes import Node, is_call, iter_nodes, node_line, node_text
from configguard.parsing.parser import parse
from configguard.utils.files import read_source

PathLike = Union[str, Path]
Parser = Callable[[str], Node]

ESCAPES = {
    "n": "\n", "t": "\t", "r": "\r", "s": " ", "e": "\x1b", "0": "\0",
    "a": "\a", "b": "\b", "f": "\f", "v": "\v", "d": "\x7f", "\n": "",
}


def _unescape(sequence: str) -> str:
    body = sequence[1:]
    if body[:1] in ("x", "u") and len(body) > 1:
        try:
            return chr(int(body[1:].strip("{}"), 16))
        except ValueError:
            return sequence
    return ESCAPES.get(body, body)


def literal_value(node: Node) -> Any:
    """The Python value of a plain string literal, otherwise the node itself."""
    if node.type != "string":
        return node
    parts = []
    for child in node.named_children:
        if child.type == "quoted_content":
            parts.append(node_text(child))
        elif child.type == "escape_sequence":
            parts.append(_unescape(node_text(child)))
        else:
            return node
    return "".join(parts)


def keyword_name(key: Node) -> str:
    """Key of a keyword pair without its trailing colon, e.g. ``secret_key_base``."""
    text = node_text(key).rstrip()
    if text.endswith(":"):
        text = text[:-1]
    if key.type == "quoted_keyword" and len(text) >= 2 and text[0] in "\"'":
        text = text[1:-1]
    return text


def _trailing_keywords(call: Node) -> Optional[Node]:
    arguments = next((child for child in call.named_children if child.type == "arguments"), None)
    if arguments is None or not arguments.named_children:
        return None
    last = arguments.named_children[-1]
    # config :app, [key: value]
    if last.type == "list":
        items = [child for child in last.named_children if child.type != "comment"]
        if len(items) != 1:
            return None
        last = items[0]
    return last if last.type == "keywords" else None


def config_pairs(call: Node) -> List[Tuple[str, Node]]:
    """Top level keyword pairs of a ``config`` call, in source order."""
    keywords = _trailing_keywords(call)
    if keywords is None:
        return []
    pairs = []
    for pair in keywords.named_children:
        if pair.type != "pair":
            continue
        key = pair.child_by_field_name("key")
        value = pair.child_by_field_name("value")
        if key is not None and value is not None:
            pairs.append((keyword_name(key), value))
    return pairs


def config_calls(tree: Node) -> List[Node]:
    """Every ``config`` call of the tree in pre-order."""
    return [node for node in iter_nodes(tree) if is_call(node, "config")]


def _load_tree(file_path: PathLike, parser: Parser) -> Node:
    return parser(read_source(file_path))


def get_exact_config_entries(
    key: str, file_path: PathLike, parser: Parser = parse
) -> List[ConfigEntry]:
    """
    Entries whose key is exactly ``key`` (an atom name such as ``secret_key_base``).

    A missing file yields no entries; unreadable or invalid files raise.
    """
    if not Path(file_path).exists():
        return []
    entries = []
    for call in config_calls(_load_tree(file_path, parser)):
        for name, value in config_pairs(call):
            if name == key:
                entries.append(ConfigEntry(call, name, literal_value(value), node_line(call)))
    return entries


def get_fuzzy_config_entries(
    substring: str, file_path: PathLike, parser: Parser = parse
) -> List[FuzzyConfigEntry]:
    """
    One entry per ``config`` call having keys that contain ``substring``.

    Matching is case-sensitive. Calls without a matching key yield nothing.
    """
    if not Path(file_path).exists():
        return []
    entries = []
    for call in config_calls(_load_tree(file_path, parser)):
        pairs = [
            (name, literal_value(value))
            for name, value in config_pairs(call)
            if substring in name
        ]
        if pairs:
            entries.append(FuzzyConfigEntry(call, pairs, node_line(call)))
    return entries
