"""
ConfigGuard CLI - Scan Command

Checks the ``config/*.exs`` files of an Elixir project for hardcoded
secrets and reports them as text, compact lines or a JSON report.
"""
import os
from typing import Optional

import click

from configguard import __version__
from configguard.core.emitter import FindingEmitter
from configguard.core.exceptions import ConfigGuardError, ConfigurationError
from configguard.core.models import OutputFormat
from configguard.core.resolver import LineResolver
from configguard.core.secrets import HardcodedSecretsCheck
from configguard.core.sinks import ConsoleSink
from configguard.utils.config import ConfigManager
from configguard.utils.files import CONFIG_DIR, list_config_files
from configguard.utils.logger import get_logger, set_level

logger = get_logger(__name__)


@click.command("scan")
@click.argument(
    "root",
    default=".",
    type=click.Path(exists=True, file_okay=False),
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["txt", "json", "compact", "quiet"]),
    default=None,
    help="Output format (default: txt)"
)
@click.option(
    "--out", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the JSON report to this file instead of stdout"
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Settings file (default: <ROOT>/.configguard.yml)"
)
@click.option(
    "--skip-errors/--fail-on-errors",
    default=None,
    help="Skip configuration files that cannot be read or parsed"
)
@click.option(
    "--cache-trees/--no-cache-trees",
    default=None,
    help="Reuse parsed trees when resolving lines of repeated secrets"
)
@click.option(
    "--exit-on-findings/--no-exit-on-findings",
    default=None,
    help="Exit with status 1 when secrets are found"
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for diagnostics written to stderr"
)
def scan(root: str, output_format: Optional[str], out: Optional[str], config_path: Optional[str],
         skip_errors: Optional[bool], cache_trees: Optional[bool], exit_on_findings: Optional[bool],
         log_level: Optional[str]):
    """
    Scan the configuration of an Elixir project for hardcoded secrets.

    Checks every ROOT/config/*.exs file for a literal secret_key_base and
    for literal values under keys containing "password" or "secret".
    Values written as ${VAR} placeholders are ignored.

    Examples:
        configguard scan
        configguard scan path/to/app --format json --out findings.json
        configguard scan . -f compact --exit-on-findings
    """
    try:
        manager = ConfigManager(config_path, root=root)
        config = manager.update(
            format=output_format,
            out=out,
            skip_errors=skip_errors,
            cache_trees=cache_trees,
            exit_on_findings=exit_on_findings,
            log_level=log_level,
        )
        set_level(config.log_level)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(3)

    fmt = config.output_format

    sink = ConsoleSink(version=__version__)
    check = HardcodedSecretsCheck(
        FindingEmitter(sink),
        output_format=fmt,
        resolver=LineResolver(cache_trees=config.cache_trees),
    )

    try:
        configs = list_config_files(root)
        if fmt is not OutputFormat.JSON:
            click.echo(f"Scanning {len(configs)} configuration file(s) in {os.path.join(root, CONFIG_DIR)}\n")
        findings = check.run(os.path.join(root, CONFIG_DIR), configs, skip_errors=config.skip_errors)
    except ConfigGuardError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(3)

    sink.finish(fmt, out=config.out)
    if fmt is OutputFormat.JSON and config.out:
        click.echo(f"JSON report written to: {config.out}", err=True)
    for path in check.skipped:
        click.echo(f"Skipped (unparsable or unreadable): {path}", err=True)

    logger.info("Scan complete with %d finding(s)", len(findings))
    if findings and config.exit_on_findings:
        raise SystemExit(1)
