"""Destinations for emitted findings."""

import json
from abc import ABC, abstractmethod
from collections import Counter
from typing import Any, Callable, Dict, List, Optional, Tuple

import click

from configguard.core.exceptions import ConfigGuardError
from configguard.core.models import OutputFormat, Severity
from configguard.parsing.nodes import Node, node_last_line, node_line
from configguard.utils.files import read_source

SEVERITY_COLORS = {
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "green",
}

SEPARATOR = "-" * 47


class FindingSink(ABC):
    """Receives findings in the shape of the selected output format."""

    @abstractmethod
    def log_record(self, record: Dict[str, Any], severity: Severity) -> None:
        """Structured finding (json)."""

    @abstractmethod
    def log_finding(self, finding_type: str, severity: Severity) -> None:
        """Bare notification that a finding of ``finding_type`` occurred."""

    @abstractmethod
    def log_metadata(
        self,
        site: Node,
        file_path: str,
        finding_type: str,
        severity: Severity,
        headers: List[str],
    ) -> None:
        """Human readable details (txt); ``site`` is the statement to highlight."""

    @abstractmethod
    def log_compact(self, line: int, finding_type: str, file_path: str, severity: Severity) -> None:
        """One line summary (compact)."""


class MemorySink(FindingSink):
    """Keeps every call in ``events`` as ``(method, *args)`` tuples."""

    def __init__(self):
        self.events: List[Tuple] = []

    def log_record(self, record, severity):
        self.events.append(("record", record, severity))

    def log_finding(self, finding_type, severity):
        self.events.append(("finding", finding_type, severity))

    def log_metadata(self, site, file_path, finding_type, severity, headers):
        self.events.append(("metadata", site, file_path, finding_type, severity, list(headers)))

    def log_compact(self, line, finding_type, file_path, severity):
        self.events.append(("compact", line, finding_type, file_path, severity))

    def of_kind(self, kind: str) -> List[Tuple]:
        return [event for event in self.events if event[0] == kind]

    @property
    def records(self) -> List[Dict[str, Any]]:
        return [event[1] for event in self.of_kind("record")]


class ConsoleSink(FindingSink):
    """
    Writes findings to the terminal through click.

    Structured records are collected and written as one JSON report by
    :meth:`finish`, which also prints the summary for the other formats.
    """

    def __init__(
        self,
        echo: Callable[..., None] = click.echo,
        source_reader: Callable[[str], str] = read_source,
        version: str = "",
    ):
        self.echo = echo
        self.source_reader = source_reader
        self.version = version
        self.records: Dict[Severity, List[Dict[str, Any]]] = {severity: [] for severity in Severity}
        self.counts: Counter = Counter()

    def log_record(self, record, severity):
        self.records[severity].append(dict(record))
        self.counts[severity] += 1

    def log_finding(self, finding_type, severity):
        self.counts[severity] += 1

    def log_metadata(self, site, file_path, finding_type, severity, headers):
        color = SEVERITY_COLORS[severity]
        self.echo(click.style(f"{finding_type} - {severity.label} Confidence", fg=color, bold=True))
        for header in headers:
            self.echo(header)
        self.echo("")
        for line in self._excerpt(site, file_path):
            self.echo(click.style(line, fg=color))
        self.echo("")
        self.echo(SEPARATOR)
        self.echo("")

    def log_compact(self, line, finding_type, file_path, severity):
        self.counts[severity] += 1
        label = click.style(severity.label, fg=SEVERITY_COLORS[severity])
        self.echo(f"[+][{label}] {finding_type} - {file_path}:{line}")

    def _excerpt(self, site: Node, file_path: str) -> List[str]:
        """Source lines spanned by ``site`` with a line number gutter."""
        try:
            lines = self.source_reader(file_path).split("\n")
        except ConfigGuardError:
            return []
        start = max(node_line(site), 1)
        end = min(node_last_line(site), len(lines))
        return [f"{number:4d} | {lines[number - 1]}" for number in range(start, end + 1)]

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def report(self) -> Dict[str, Any]:
        """JSON report of the collected structured records."""
        return {
            "configguard_version": self.version,
            "total_findings": sum(len(records) for records in self.records.values()),
            "findings": {
                f"{severity.value}_confidence": records
                for severity, records in self.records.items()
            },
        }

    def finish(self, output_format: OutputFormat, out: Optional[str] = None) -> None:
        """Flush the JSON report, or print the summary line."""
        if output_format is OutputFormat.JSON:
            data = json.dumps(self.report(), indent=2, ensure_ascii=False)
            if out:
                with open(out, "w", encoding="utf-8") as fp:
                    fp.write(data + "\n")
            else:
                self.echo(data)
            return

        if self.total == 0:
            self.echo("\nNo hardcoded secrets found!")
            return
        parts = ", ".join(
            f"{self.counts[severity]} {severity.label}" for severity in Severity if self.counts[severity]
        )
        self.echo(f"\nFound {self.total} hardcoded secret(s): {parts}")
