"""Core domain models for ConfigGuard."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from tree_sitter import Node

HARDCODED_SECRET = "Config.Secrets: Hardcoded Secret"


class Severity(str, Enum):
    """Finding severity (confidence) levels."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def label(self) -> str:
        """Human readable label, e.g. ``High``."""
        return self.value.capitalize()


class OutputFormat(str, Enum):
    """Supported finding encodings."""

    JSON = "json"
    TXT = "txt"
    COMPACT = "compact"
    DEFAULT = "default"

    @classmethod
    def from_value(cls, value: Any) -> "OutputFormat":
        """Map a configured format name to a member; unknown names fall back to DEFAULT."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.DEFAULT


@dataclass
class ConfigEntry:
    """A single key/value taken from one ``config`` statement."""

    site: Node
    key: str
    value: Any
    statement_line: int


@dataclass
class FuzzyConfigEntry:
    """All keyword pairs of one ``config`` statement whose key matched a substring."""

    site: Node
    pairs: List[Tuple[str, Any]] = field(default_factory=list)
    statement_line: int = 0


@dataclass
class SecretCandidate:
    """A configuration value confirmed to be a literal, non-empty, non-placeholder string."""

    site: Node
    key: str
    value: str
    statement_line: int


@dataclass(frozen=True)
class Finding:
    """Represents a detected hardcoded secret."""

    file: str
    line: int
    key: str
    type: str = HARDCODED_SECRET
    severity: Severity = Severity.HIGH

    def to_dict(self) -> Dict[str, Any]:
        """Structured record used by the json encoding."""
        return {
            "type": self.type,
            "file": self.file,
            "line": self.line,
            "key": self.key,
        }
