"""Selection of configuration values that are hardcoded secrets."""

from typing import Any, Iterable, Iterator

from configguard.core.models import ConfigEntry, FuzzyConfigEntry, SecretCandidate

PLACEHOLDER_PREFIX = "${"
PLACEHOLDER_SUFFIX = "}"


def is_placeholder(value: Any) -> bool:
    """
    Whether ``value`` references an externally supplied variable, e.g. ``${SECRET}``.

    Only the prefix and suffix are looked at; ``"${FOO}bar}"`` still counts.
    """
    if not isinstance(value, str) or not value.startswith(PLACEHOLDER_PREFIX):
        return False
    return value[len(PLACEHOLDER_PREFIX):].endswith(PLACEHOLDER_SUFFIX)


def is_secret_value(value: Any) -> bool:
    """A non-empty literal string that is not a placeholder."""
    return isinstance(value, str) and len(value) > 0 and not is_placeholder(value)


def filter_exact(entries: Iterable[ConfigEntry]) -> Iterator[SecretCandidate]:
    """Candidates from exact-key entries, in input order."""
    for entry in entries:
        if is_secret_value(entry.value):
            yield SecretCandidate(entry.site, entry.key, entry.value, entry.statement_line)


def filter_fuzzy(entries: Iterable[FuzzyConfigEntry]) -> Iterator[SecretCandidate]:
    """Candidates from fuzzy-key entries; each pair is judged on its own."""
    for entry in entries:
        for key, value in entry.pairs:
            if is_secret_value(value):
                yield SecretCandidate(entry.site, key, value, entry.statement_line)
