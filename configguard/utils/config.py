"""
Configuration management for ConfigGuard
Handles scan settings from a project settings file and the command line
"""
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from configguard.core.exceptions import ConfigurationError
from configguard.core.models import OutputFormat

SETTINGS_FILE = ".configguard.yml"


@dataclass
class ScanConfig:
    """Scan settings"""
    format: str = "txt"
    out: Optional[str] = None
    skip_errors: bool = False
    cache_trees: bool = False
    exit_on_findings: bool = False
    log_level: str = "WARNING"

    @property
    def output_format(self) -> OutputFormat:
        """Format as passed to the finding emitter"""
        return OutputFormat.from_value(self.format)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScanConfig':
        """Create from dictionary, rejecting unknown settings"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown setting(s): {', '.join(unknown)}", details={"unknown": unknown}
            )
        return cls(**data)


class ConfigManager:
    """Loads ConfigGuard settings"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None, root: Union[str, Path] = "."):
        """
        Initialize config manager

        Args:
            config_path: Path to settings file (defaults to <root>/.configguard.yml)
            root: Scanned project root
        """
        if config_path is None:
            config_path = Path(root) / SETTINGS_FILE
        self.config_path = Path(config_path)
        self._config: Optional[ScanConfig] = None

    def load(self) -> ScanConfig:
        """Load configuration from file; a missing file gives the defaults"""
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            self._config = ScanConfig()
            return self._config

        try:
            with open(self.config_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid settings file {self.config_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Settings file {self.config_path} must contain a mapping")

        self._config = ScanConfig.from_dict(data)
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value"""
        config = self.load()
        return getattr(config, key, default)

    def update(self, **kwargs) -> ScanConfig:
        """Override settings; None values leave the loaded setting untouched"""
        config = self.load()
        for key, value in kwargs.items():
            if value is None:
                continue
            if hasattr(config, key):
                setattr(config, key, value)
            else:
                raise ConfigurationError(f"Invalid config key: {key}")
        return config
