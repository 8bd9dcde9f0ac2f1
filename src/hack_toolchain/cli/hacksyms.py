"""
hacksyms - Reserved Hack Symbols
================================

Prints the symbols every Hack symbol table starts with.

Usage Examples
--------------
    $ hacksyms
    $ hacksyms --format json
"""

import json

import click

from hack_toolchain import __version__
from hack_toolchain.assembler import SymbolTable


@click.command()
@click.option(
    "-f", "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format. Default: text",
)
@click.version_option(version=__version__, prog_name="hacksyms")
def main(output_format: str) -> None:
    """
    Print the reserved Hack symbol table, ordered by address.
    """
    table = SymbolTable.create()

    if output_format.lower() == "json":
        click.echo(json.dumps(dict(table.items()), indent=2))
        return

    for name, address in table.items():
        click.echo(f"{name:<8} {address:5d}  (0x{address:04X})")


if __name__ == "__main__":
    main()
