"""ConfigGuard - hardcoded secret detection for Elixir configuration."""

__version__ = "0.1.0"
__author__ = "ConfigGuard Team"

from configguard.core.models import (
    ConfigEntry,
    Finding,
    FuzzyConfigEntry,
    OutputFormat,
    SecretCandidate,
    Severity,
)

__all__ = [
    "ConfigEntry",
    "Finding",
    "FuzzyConfigEntry",
    "OutputFormat",
    "SecretCandidate",
    "Severity",
    "__version__",
]
