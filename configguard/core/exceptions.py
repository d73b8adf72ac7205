"""Core exceptions for ConfigGuard."""


class ConfigGuardError(Exception):
    """Base exception for all ConfigGuard errors."""

    def __init__(self, message: str, details: dict = None):
        """Initialize the exception."""
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ParseError(ConfigGuardError):
    """Raised when configuration source cannot be parsed."""

    def __init__(self, message: str, line: int = 0, details: dict = None):
        """Initialize the exception with the offending line."""
        self.line = line
        details = dict(details or {})
        details.setdefault("line", line)
        super().__init__(message, details)

    def __str__(self) -> str:
        if self.line:
            return f"line {self.line}: {self.message}"
        return self.message


class ScanError(ConfigGuardError):
    """Raised when scanning fails."""

    pass


class SourceReadError(ScanError):
    """Raised when a configuration file cannot be read."""

    pass


class ConfigurationError(ConfigGuardError):
    """Raised when configuration is invalid."""

    pass
