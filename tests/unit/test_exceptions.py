"""Unit tests for exceptions."""

import pytest

from configguard.core.exceptions import (
    ConfigGuardError,
    ConfigurationError,
    ParseError,
    ScanError,
    SourceReadError,
)


@pytest.mark.unit
class TestExceptions:
    """Test custom exceptions."""

    def test_base_exception(self):
        """Test base ConfigGuardError."""
        error = ConfigGuardError("Test error", details={"key": "value"})

        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.details == {"key": "value"}

    def test_base_exception_without_details(self):
        """Test details default to an empty dict."""
        error = ConfigGuardError("Test error")

        assert error.details == {}

    def test_parse_error_line(self):
        """Test ParseError carries the offending line."""
        error = ParseError("unexpected 'end'", line=12)

        assert isinstance(error, ConfigGuardError)
        assert error.line == 12
        assert error.details == {"line": 12}
        assert str(error) == "line 12: unexpected 'end'"

    def test_parse_error_without_line(self):
        """Test ParseError without a line prints the bare message."""
        error = ParseError("empty input")

        assert str(error) == "empty input"

    def test_source_read_error_is_scan_error(self):
        """Test SourceReadError."""
        error = SourceReadError("Failed to read config/prod.exs")

        assert isinstance(error, ScanError)
        assert isinstance(error, ConfigGuardError)

    def test_configuration_error(self):
        """Test ConfigurationError."""
        error = ConfigurationError("Invalid config key: colour")

        assert isinstance(error, ConfigGuardError)
        assert str(error) == "Invalid config key: colour"

    def test_exception_raising(self):
        """Test raising and catching exceptions."""
        with pytest.raises(ScanError) as exc_info:
            raise SourceReadError("Test error")

        assert "Test error" in str(exc_info.value)
