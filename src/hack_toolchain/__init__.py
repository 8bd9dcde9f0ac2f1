"""
Hack Toolchain - Front-End for the Hack Assembler and VM Translator
===================================================================

This package provides the shared front-end pieces of a toolchain for the
Hack platform: a parser for the stack-based VM language and the symbol table
used to resolve names to addresses.

Main Components
---------------
- **vm**: VM command stream parser (hackparse)
    Cleans .vm source, classifies each instruction and extracts operands

- **assembler**: Symbol table
    Reserved Hack symbols plus labels and variables added by a driver

Code generation and the driver loop live outside this package.

Quick Start
-----------
Walk a VM file:
    >>> from hack_toolchain import Parser
    >>> parser = Parser.from_file("SimpleAdd.vm")
    >>> while parser.has_more_commands():
    ...     parser.advance()
    ...     print(parser.command_type(), parser.arg1())

Resolve symbols:
    >>> from hack_toolchain import SymbolTable
    >>> table = SymbolTable()
    >>> table.get_address("SCREEN")
    16384

Or use the command-line tools:
    $ hackparse SimpleAdd.vm
    $ hacksyms --format json
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from hack_toolchain.assembler import RESERVED_SYMBOLS, SymbolTable, create_symbol_table
from hack_toolchain.config import ToolchainConfig
from hack_toolchain.errors import (
    HackError,
    SourceLocation,
    SymbolTableError,
    UnknownSymbolError,
    VMParseError,
    MalformedCommandError,
    InvalidOperandAccessError,
    ParserStateError,
    NoCurrentCommandError,
)
from hack_toolchain.vm import Command, CommandType, Parser, clean_source, parse_vm

__all__ = [
    # Version info
    "__version__",
    # Symbol table
    "RESERVED_SYMBOLS",
    "SymbolTable",
    "create_symbol_table",
    # VM parser
    "Command",
    "CommandType",
    "Parser",
    "clean_source",
    "parse_vm",
    # Configuration
    "ToolchainConfig",
    # Exception hierarchy
    "HackError",
    "SourceLocation",
    "SymbolTableError",
    "UnknownSymbolError",
    "VMParseError",
    "MalformedCommandError",
    "InvalidOperandAccessError",
    "ParserStateError",
    "NoCurrentCommandError",
]
