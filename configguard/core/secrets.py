"""
Hardcoded secrets check for Elixir configuration files.

In the event of a source code disclosure (file read vulnerability,
accidental commit, ...) hard-coded secrets are exposed to an attacker,
which may lead to database access, cookie forgery and other issues.

Each configuration file is checked for a literal ``secret_key_base`` and
for literal values under any key containing ``password`` or ``secret``.
Values written as ``${VAR}`` placeholders are not reported.
"""

import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from configguard.core.candidates import filter_exact, filter_fuzzy
from configguard.core.emitter import FindingEmitter
from configguard.core.exceptions import ParseError, ScanError
from configguard.core.models import HARDCODED_SECRET, Finding, OutputFormat, SecretCandidate
from configguard.core.resolver import LineResolver
from configguard.parsing.extraction import get_exact_config_entries, get_fuzzy_config_entries
from configguard.parsing.nodes import Node
from configguard.parsing.parser import parse
from configguard.utils.logger import get_logger

logger = get_logger(__name__)

SECRET_KEY = "secret_key_base"
FUZZY_KEYS = ("password", "secret")
# Base config usually holds development defaults for secret_key_base
EXACT_CHECK_SKIPPED_FILE = "config.exs"


class HardcodedSecretsCheck:
    """Runs the hardcoded secret check over a set of configuration files."""

    finding_type = HARDCODED_SECRET

    def __init__(
        self,
        emitter: FindingEmitter,
        output_format: Union[OutputFormat, str, None] = OutputFormat.TXT,
        resolver: Optional[LineResolver] = None,
        parser: Callable[[str], Node] = parse,
    ):
        """
        Initialize the check.

        Args:
            emitter: Receives every finding
            output_format: Encoding passed on to the emitter
            resolver: Line resolver (defaults to one using ``parser``)
            parser: Parser used for entry extraction
        """
        self.emitter = emitter
        self.output_format = OutputFormat.from_value(output_format)
        self.parser = parser
        self.resolver = resolver or LineResolver(parser=parser)
        self.skipped: List[str] = []

    def run(self, dir_path: Union[str, Path], configs: Iterable[str], skip_errors: bool = False) -> List[Finding]:
        """
        Check every file of ``configs`` (names relative to ``dir_path``).

        Args:
            dir_path: Directory holding the configuration files
            configs: File names to check, in order
            skip_errors: Log and skip files that cannot be read or parsed
                instead of raising

        Returns:
            Findings in emission order
        """
        self.skipped = []
        findings: List[Finding] = []
        for conf in configs:
            path = os.path.join(str(dir_path), conf)
            try:
                findings.extend(self.check_file(path, conf))
            except (ParseError, ScanError) as e:
                if not skip_errors:
                    raise
                logger.warning("Skipping %s: %s", path, e)
                self.skipped.append(path)
        return findings

    def check_file(self, path: Union[str, Path], name: Optional[str] = None) -> List[Finding]:
        """Check one file; ``name`` is compared against ``config.exs``."""
        name = Path(path).name if name is None else name
        logger.debug("Checking %s for hardcoded secrets", path)
        findings: List[Finding] = []

        if name != EXACT_CHECK_SKIPPED_FILE:
            entries = get_exact_config_entries(SECRET_KEY, path, self.parser)
            findings.extend(self._report(filter_exact(entries), path))

        for substring in FUZZY_KEYS:
            entries = get_fuzzy_config_entries(substring, path, self.parser)
            findings.extend(self._report(filter_fuzzy(entries), path))

        return findings

    def _report(self, candidates: Iterable[SecretCandidate], path: Union[str, Path]) -> List[Finding]:
        findings = []
        for candidate in candidates:
            line = self.resolver.resolve_line(path, candidate.statement_line, candidate.value)
            findings.append(
                self.emitter.emit(path, line, candidate.key, candidate.site, self.output_format)
            )
        return findings
