"""Unit tests for secret candidate selection."""

import pytest

from configguard.core.candidates import (
    filter_exact,
    filter_fuzzy,
    is_placeholder,
    is_secret_value,
)
from configguard.core.models import ConfigEntry, FuzzyConfigEntry
from configguard.parsing.parser import parse


@pytest.fixture
def site(config_call):
    return config_call()


@pytest.fixture
def expression():
    return parse('System.get_env("ADMIN_PASSWORD")\n')


@pytest.mark.unit
class TestPlaceholders:
    """Test placeholder recognition."""

    @pytest.mark.parametrize("value", [
        "${SECRET_KEY_BASE}",
        "${}",
        "${FOO}bar}",
        "${ with spaces }",
    ])
    def test_placeholders(self, value):
        """Test values recognized as placeholders."""
        assert is_placeholder(value) is True

    @pytest.mark.parametrize("value", [
        "${",
        "$FOO",
        "{FOO}",
        "${FOO",
        "prefix${FOO}",
        "",
        "abc}",
        42,
        None,
    ])
    def test_non_placeholders(self, value):
        """Test values that are not placeholders."""
        assert is_placeholder(value) is False

    def test_string_node_is_not_placeholder(self):
        """Test syntax tree nodes are never placeholders."""
        assert is_placeholder(parse('"${FOO}"\n')) is False


@pytest.mark.unit
class TestSecretValues:
    """Test the secret value predicate."""

    def test_literal_is_secret(self):
        """Test a plain literal."""
        assert is_secret_value("hunter2") is True

    def test_empty_string_is_not_secret(self):
        """Test empty strings are ignored."""
        assert is_secret_value("") is False

    def test_placeholder_is_not_secret(self):
        """Test placeholders are ignored."""
        assert is_secret_value("${DB_PASSWORD}") is False

    def test_non_literal_is_not_secret(self, expression):
        """Test expressions are ignored."""

        assert is_secret_value(expression) is False
        assert is_secret_value(None) is False


@pytest.mark.unit
class TestFilters:
    """Test exact and fuzzy filters."""

    def test_filter_exact(self, site):
        """Test exact entries are kept in order."""
        entries = [
            ConfigEntry(site, "secret_key_base", "abc", 3),
            ConfigEntry(site, "secret_key_base", "${SECRET_KEY_BASE}", 3),
            ConfigEntry(site, "secret_key_base", "", 3),
            ConfigEntry(site, "secret_key_base", "xyz", 9),
        ]

        candidates = list(filter_exact(entries))

        assert [c.value for c in candidates] == ["abc", "xyz"]
        assert [c.statement_line for c in candidates] == [3, 9]
        assert candidates[0].site is site

    def test_filter_fuzzy_judges_pairs_individually(self, site, expression):
        """Test each pair of a fuzzy entry is judged on its own."""
        entry = FuzzyConfigEntry(site, [
            ("password", "hunter2"),
            ("db_password", "${DB_PASSWORD}"),
            ("admin_password", expression),
            ("replica_password", "replica"),
        ], 3)

        candidates = list(filter_fuzzy([entry]))

        assert [(c.key, c.value) for c in candidates] == [
            ("password", "hunter2"),
            ("replica_password", "replica"),
        ]
        assert all(c.statement_line == 3 for c in candidates)

    def test_filters_on_empty_input(self, site):
        """Test empty input."""
        assert list(filter_exact([])) == []
        assert list(filter_fuzzy([FuzzyConfigEntry(site)])) == []
