"""
Hack VM Front-End
=================

Parsing for the line-oriented Hack VM language.

Main Components
---------------
- **Parser**: Cursor over the cleaned instruction stream of one .vm file
- **Command**: Immutable snapshot of one instruction with typed operands
- **CommandType**: The nine command kinds of the VM language

Example Usage
-------------
>>> from hack_toolchain.vm import Parser, CommandType
>>> for command in Parser("push constant 7\\npush constant 8\\nadd"):
...     print(command.type.name, command.arg1)
PUSH constant
PUSH constant
ARITHMETIC add
"""

from hack_toolchain.vm.commands import (
    ARG2_COMMANDS,
    ARITHMETIC_OPERATORS,
    KEYWORDS,
    Command,
    CommandType,
    classify,
)
from hack_toolchain.vm.parser import Parser, clean_source, parse_vm

__all__ = [
    # Commands
    "ARG2_COMMANDS",
    "ARITHMETIC_OPERATORS",
    "KEYWORDS",
    "Command",
    "CommandType",
    "classify",
    # Parser
    "Parser",
    "clean_source",
    "parse_vm",
]
