"""Core package for ConfigGuard."""

from configguard.core.exceptions import ConfigGuardError, ParseError, ScanError
from configguard.core.models import Finding, OutputFormat, Severity

__all__ = [
    "ConfigGuardError",
    "Finding",
    "OutputFormat",
    "ParseError",
    "ScanError",
    "Severity",
]
