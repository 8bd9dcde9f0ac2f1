"""
Hack Toolchain Error Hierarchy
==============================

This module defines the exception hierarchy for the Hack toolchain front-end.
All exceptions inherit from HackError, allowing callers to catch every
toolchain-related error with a single except clause if desired.

Exception Hierarchy
-------------------
HackError (base)
├── SymbolTableError (symbol table related)
│   └── UnknownSymbolError - lookup of a name that was never defined
└── VMParseError (VM command stream related)
    ├── MalformedCommandError - keyword or operand outside the grammar
    ├── InvalidOperandAccessError - operand requested from a command
    │                               type that does not carry it
    └── ParserStateError - cursor used in an invalid state
        └── NoCurrentCommandError - accessor used with no current
                                    instruction (also a MalformedCommandError)

Design Philosophy
-----------------
The components only signal. Whether an error aborts the compilation is
decided by the driver, so nothing in this package calls sys.exit() or
logs an error before raising.

Error messages follow this format:
    filename:line: error: description
        source_line_text
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all Hack toolchain errors.

    Callers can catch everything raised by this package with:

        try:
            parser.command_type()
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A physical line in a source file.

    The VM language puts exactly one instruction on each line, so a line
    number is enough to point at the offending instruction.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"


class _LocatedError(HackError):
    """
    Shared message formatting for errors that can point at source text.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The instruction text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            Main.vm:12: error: unknown command keyword 'psh'
                psh constant 7
            hint: did you mean 'push'?
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None:
            parts.append(f"    {self.source_line}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Symbol Table Exceptions
# =============================================================================

class SymbolTableError(HackError):
    """Base exception for symbol table errors."""
    pass


class UnknownSymbolError(SymbolTableError, KeyError):
    """
    Lookup of a symbol that is not in the table.

    This is a recoverable condition: a two-pass driver normally checks
    contains() first, or treats the failure as "needs allocation".

    KeyError is a base so that code written against a plain mapping keeps
    working, but __str__ is overridden to avoid KeyError's repr quoting.
    """

    def __init__(self, symbol: str, similar_symbols: Optional[list[str]] = None):
        self.symbol = symbol
        self.similar_symbols = similar_symbols or []
        message = f"undefined symbol '{symbol}'"
        if self.similar_symbols:
            suggestions = ", ".join(f"'{s}'" for s in self.similar_symbols[:3])
            message += f" (did you mean {suggestions}?)"
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


# =============================================================================
# VM Parser Exceptions
# =============================================================================

class VMParseError(_LocatedError):
    """Base exception for VM command stream errors."""
    pass


class MalformedCommandError(VMParseError):
    """
    Instruction does not match the fixed VM grammar.

    Raised when the first token is not a known command keyword, or when a
    required operand is missing or not a non-negative integer. The language
    has no error recovery, so the driver normally aborts on this.

    Examples:
        - psh constant 7      (unknown keyword)
        - push constant x     (index is not a number)
        - push constant       (index missing)
    """
    pass


class InvalidOperandAccessError(VMParseError):
    """
    Operand accessor used on a command type that has no such operand.

    This is driver misuse rather than a defect in the source text, e.g.
    arg2() on an arithmetic command or arg1() on return.
    """

    def __init__(
        self,
        operand: str,
        command_type: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.operand = operand
        self.command_type = command_type
        super().__init__(
            f"{operand}() is not defined for {command_type} commands",
            location=location,
            source_line=source_line,
        )


class ParserStateError(VMParseError):
    """
    Cursor operation called in a state where it has no meaning.

    Raised by advance() when no instructions remain and by command_type(),
    arg1() and arg2() when there is no current instruction. Drivers avoid
    it by checking has_more_commands() before every advance().
    """
    pass


class NoCurrentCommandError(ParserStateError, MalformedCommandError):
    """
    command_type(), arg1() or arg2() called before the first advance(), or
    after advance() ran off the end of the stream.

    There is no instruction to classify, so this is also a
    MalformedCommandError for drivers that only handle that.
    """
    pass
