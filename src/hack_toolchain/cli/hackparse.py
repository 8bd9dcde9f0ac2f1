"""
hackparse - Hack VM Command Stream Dump
=======================================

Parses a .vm file and prints every instruction with its command type and
operands. Useful for checking what a VM translator will see.

Usage Examples
--------------
Text listing:
    $ hackparse SimpleAdd.vm

JSON output to a file:
    $ hackparse SimpleAdd.vm --format json -o SimpleAdd.json

Debug logging:
    $ hackparse -v SimpleAdd.vm
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from hack_toolchain import __version__
from hack_toolchain.cli.errors import handle_cli_exception
from hack_toolchain.config import ToolchainConfig
from hack_toolchain.vm import Command, CommandType, Parser

logger = logging.getLogger(__name__)


def setup_logging(config: ToolchainConfig, verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else config.log_level_value
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def describe(command: Command) -> dict:
    """Classify a command and collect the operands its type carries."""
    command_type = command.type
    entry = {
        "line": command.line,
        "type": command_type.name,
        "text": command.text,
    }
    if command_type is not CommandType.RETURN:
        entry["arg1"] = command.arg1
    if command.has_arg2():
        entry["arg2"] = command.arg2
    return entry


def format_text(entries: list[dict]) -> str:
    """One aligned row per command: line, type, arg1, arg2."""
    lines = []
    for entry in entries:
        row = f"{entry['line']:5d}  {entry['type']:<10}"
        if "arg1" in entry:
            row += f"  {entry['arg1']}"
        if "arg2" in entry:
            row += f" {entry['arg2']}"
        lines.append(row.rstrip())
    return "\n".join(lines)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-f", "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format. Default: text",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackparse")
def main(
    input_file: Path,
    output: Optional[Path],
    output_format: str,
    verbose: bool,
) -> None:
    """
    Parse a Hack VM file and list its commands.

    INPUT_FILE is the VM source file (.vm) to parse.

    \b
    Examples:
        hackparse Main.vm                  # Text listing on stdout
        hackparse Main.vm -f json -o x.json
    """
    config = ToolchainConfig.from_env()
    setup_logging(config, verbose)

    try:
        parser = Parser.from_file(input_file, config=config)
        entries = [describe(command) for command in parser]
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    logger.debug(f"Parsed {len(entries)} commands from {input_file}")

    if output_format.lower() == "json":
        rendered = json.dumps(entries, indent=2)
    else:
        rendered = format_text(entries)

    if output:
        output.write_text(rendered + "\n", encoding="utf-8")
        if verbose:
            click.echo(f"Wrote {len(entries)} commands to {output}")
    else:
        click.echo(rendered)


if __name__ == "__main__":
    main()
