"""Assembly and dispatch of findings."""

from pathlib import Path
from typing import Union

from configguard.core.models import Finding, OutputFormat
from configguard.core.sinks import FindingSink
from configguard.parsing.nodes import Node
from configguard.utils.files import normalize_path


class FindingEmitter:
    """
    Builds a :class:`Finding` and hands it to a sink in the requested encoding.

    ``json`` sends the structured record; ``txt`` sends a notification plus
    File/Line/Key headers and the statement node to highlight; ``compact``
    sends a single line; any other format only notifies the type and severity.
    """

    def __init__(self, sink: FindingSink):
        self.sink = sink

    def emit(
        self,
        file_path: Union[str, Path],
        line: int,
        key: str,
        site: Node,
        output_format: Union[OutputFormat, str, None],
    ) -> Finding:
        finding = Finding(file=normalize_path(file_path), line=line, key=str(key))
        output_format = OutputFormat.from_value(output_format)

        if output_format is OutputFormat.JSON:
            self.sink.log_record(finding.to_dict(), finding.severity)
        elif output_format is OutputFormat.TXT:
            self.sink.log_finding(finding.type, finding.severity)
            headers = [
                f"File: {finding.file}",
                f"Line: {finding.line}",
                f"Key: {finding.key}",
            ]
            self.sink.log_metadata(site, str(file_path), finding.type, finding.severity, headers)
        elif output_format is OutputFormat.COMPACT:
            self.sink.log_compact(finding.line, finding.type, finding.file, finding.severity)
        else:
            self.sink.log_finding(finding.type, finding.severity)

        return finding
