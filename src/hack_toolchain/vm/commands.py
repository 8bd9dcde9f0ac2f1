"""
VM Command Taxonomy
===================

Every VM instruction is one line whose first token selects the command type:

| Keyword                               | CommandType | arg1          | arg2   |
|---------------------------------------|-------------|---------------|--------|
| add sub neg eq gt lt and or not       | ARITHMETIC  | the keyword   | -      |
| push                                  | PUSH        | segment       | index  |
| pop                                   | POP         | segment       | index  |
| label                                 | LABEL       | label name    | -      |
| goto                                  | GOTO        | label name    | -      |
| if-goto                               | IF          | label name    | -      |
| function                              | FUNCTION    | function name | nLocals|
| call                                  | CALL        | function name | nArgs  |
| return                                | RETURN      | -             | -      |

KEYWORDS is the only place that knows this mapping. Classification and
operand extraction both go through it, so they cannot disagree.
"""

import difflib
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from hack_toolchain.errors import (
    InvalidOperandAccessError,
    MalformedCommandError,
    SourceLocation,
)


# =============================================================================
# Command Types
# =============================================================================

class CommandType(Enum):
    """Classified type of a VM instruction."""
    ARITHMETIC = auto()
    PUSH = auto()
    POP = auto()
    LABEL = auto()
    GOTO = auto()
    IF = auto()          # if-goto
    FUNCTION = auto()
    RETURN = auto()
    CALL = auto()


ARITHMETIC_OPERATORS = frozenset({
    "add", "sub", "neg", "eq", "gt", "lt", "and", "or", "not",
})

KEYWORDS: dict[str, CommandType] = {
    **{op: CommandType.ARITHMETIC for op in sorted(ARITHMETIC_OPERATORS)},
    "push": CommandType.PUSH,
    "pop": CommandType.POP,
    "label": CommandType.LABEL,
    "goto": CommandType.GOTO,
    "if-goto": CommandType.IF,
    "function": CommandType.FUNCTION,
    "call": CommandType.CALL,
    "return": CommandType.RETURN,
}

# Command types that carry a numeric second operand
ARG2_COMMANDS = frozenset({
    CommandType.PUSH,
    CommandType.POP,
    CommandType.FUNCTION,
    CommandType.CALL,
})


def classify(keyword: str) -> Optional[CommandType]:
    """Look up a first token in KEYWORDS. Returns None if it is not a keyword."""
    return KEYWORDS.get(keyword)


# =============================================================================
# Command Snapshot
# =============================================================================

@dataclass(frozen=True)
class Command:
    """
    One cleaned VM instruction.

    Instances are immutable, so type, arg1 and arg2 are pure functions of
    the instruction text and can be read in any order, any number of times.

    Attributes:
        text: The instruction with surrounding whitespace removed
        line: Physical line number in the source (1-indexed)
        filename: Source name used in error messages
    """
    text: str
    line: int = 0
    filename: str = "<input>"

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line)

    @property
    def tokens(self) -> list[str]:
        """Instruction split on runs of whitespace."""
        return self.text.split()

    @property
    def keyword(self) -> str:
        """First token, or an empty string for an empty instruction."""
        tokens = self.tokens
        return tokens[0] if tokens else ""

    @property
    def type(self) -> CommandType:
        """
        Classify the instruction by its first token.

        Raises:
            MalformedCommandError: The instruction is empty or the first token
                is not a VM keyword.
        """
        keyword = self.keyword
        if not keyword:
            raise self._malformed("empty instruction")

        command_type = classify(keyword)
        if command_type is None:
            close = difflib.get_close_matches(keyword, KEYWORDS.keys(), n=3)
            hint = None
            if close:
                hint = "did you mean " + ", ".join(f"'{k}'" for k in close) + "?"
            raise self._malformed(f"unknown command keyword '{keyword}'", hint)
        return command_type

    @property
    def arg1(self) -> str:
        """
        First operand.

        For arithmetic commands this is the operator itself ("add", "neg", ...).
        For everything else it is the second token: a segment, label or
        function name.

        Raises:
            InvalidOperandAccessError: The command is a return.
            MalformedCommandError: The second token is missing.
        """
        command_type = self.type
        if command_type is CommandType.ARITHMETIC:
            return self.keyword
        if command_type is CommandType.RETURN:
            raise self._invalid_access("arg1", command_type)

        tokens = self.tokens
        if len(tokens) < 2:
            raise self._malformed(f"'{self.keyword}' requires an argument")
        return tokens[1]

    @property
    def arg2(self) -> int:
        """
        Second operand, a non-negative integer.

        Only push, pop, function and call carry it.

        Raises:
            InvalidOperandAccessError: The command type has no second operand.
            MalformedCommandError: The third token is missing or is not a
                non-negative decimal integer. A single leading "+" is allowed.
        """
        command_type = self.type
        if command_type not in ARG2_COMMANDS:
            raise self._invalid_access("arg2", command_type)

        tokens = self.tokens
        if len(tokens) < 3:
            raise self._malformed(f"'{self.keyword}' requires a numeric second argument")

        raw = tokens[2]
        digits = raw[1:] if raw.startswith("+") else raw
        # str.isdigit() accepts superscripts and other non-ASCII digits
        if not (digits.isascii() and digits.isdigit()):
            raise self._malformed(
                f"'{raw}' is not a non-negative integer",
                hint=f"usage: {self.keyword} {tokens[1]} <n>",
            )
        return int(digits)

    def has_arg2(self) -> bool:
        """True if the command type carries a numeric second operand."""
        return self.type in ARG2_COMMANDS

    def __str__(self) -> str:
        return self.text

    # =========================================================================
    # Error Helpers
    # =========================================================================

    def _malformed(self, message: str, hint: Optional[str] = None) -> MalformedCommandError:
        return MalformedCommandError(
            message,
            location=self.location,
            hint=hint,
            source_line=self.text,
        )

    def _invalid_access(self, operand: str, command_type: CommandType) -> InvalidOperandAccessError:
        return InvalidOperandAccessError(
            operand,
            command_type.name,
            location=self.location,
            source_line=self.text,
        )
