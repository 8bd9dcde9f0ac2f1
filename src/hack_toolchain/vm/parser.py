"""
VM Command Stream Parser
========================

Turns VM source text into a stream of Command snapshots.

Source Cleaning
---------------
Each physical line is stripped of leading and trailing whitespace. Lines
that are then empty, or that start with the comment marker ("/" by
default, which also covers "//" comments), are dropped. Only line feeds
end a line. Comments after an instruction on the same line are
left in place; the VM language does not use them and the operand accessors
only look at the first three tokens.

Cursor API
----------
The classic driver loop:

    parser = Parser(source)
    while parser.has_more_commands():
        parser.advance()
        if parser.command_type() is CommandType.PUSH:
            emit_push(parser.arg1(), parser.arg2())

The same stream is also iterable. Each step yields an immutable Command,
which is usually easier to work with:

    for command in Parser(source):
        if command.type is CommandType.PUSH:
            emit_push(command.arg1, command.arg2)

Instructions are consumed once, in file order. There is no rewind; create a
new Parser to read the source again.
"""

import logging
from collections import deque
from pathlib import Path
from typing import Iterator, Optional, Union

from hack_toolchain.config import ToolchainConfig
from hack_toolchain.errors import NoCurrentCommandError, ParserStateError
from hack_toolchain.vm.commands import Command, CommandType

logger = logging.getLogger(__name__)


def clean_source(source: str, comment_marker: str = "/") -> list[tuple[int, str]]:
    """
    Strip blank and comment lines from VM source.

    Args:
        source: Raw source text
        comment_marker: Prefix that marks a whole-line comment

    Returns:
        (line_number, instruction) pairs in source order. Line numbers are
        1-indexed physical lines of the original text. Only line feeds end
        a line; form feeds and Unicode line separators stay inside it.
    """
    cleaned = []
    for line_no, raw_line in enumerate(source.split("\n"), start=1):
        text = raw_line.strip()
        if not text or text.startswith(comment_marker):
            continue
        cleaned.append((line_no, text))
    return cleaned


class Parser:
    """
    Pull-based cursor over a cleaned VM instruction stream.

    Attributes:
        filename: Source name used in error messages
        current: The Command most recently advanced to, or None
    """

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        config: Optional[ToolchainConfig] = None,
    ):
        self.config = config or ToolchainConfig()
        self.filename = filename
        self._pending: deque[Command] = deque(
            Command(text, line_no, filename)
            for line_no, text in clean_source(source, self.config.comment_marker)
        )
        self.current: Optional[Command] = None
        logger.debug(f"{filename}: {len(self._pending)} instructions after cleaning")

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        config: Optional[ToolchainConfig] = None,
    ) -> "Parser":
        """Read a .vm file and return a parser over its contents."""
        path = Path(path)
        config = config or ToolchainConfig()
        source = path.read_text(encoding=config.source_encoding)
        return cls(source, filename=str(path), config=config)

    # =========================================================================
    # Cursor Operations
    # =========================================================================

    def has_more_commands(self) -> bool:
        """True if at least one instruction has not been consumed yet."""
        return bool(self._pending)

    def advance(self) -> Command:
        """
        Make the next instruction current and return it.

        Raises:
            ParserStateError: No instructions remain. The current instruction
                is cleared first so a stale value is never reported.
        """
        if not self._pending:
            self.current = None
            raise ParserStateError(
                "advance() called with no remaining commands",
                hint="check has_more_commands() before advancing",
            )
        self.current = self._pending.popleft()
        return self.current

    def command_type(self) -> CommandType:
        """Classify the current instruction. See Command.type."""
        return self._require_current("command_type").type

    def arg1(self) -> str:
        """First operand of the current instruction. See Command.arg1."""
        return self._require_current("arg1").arg1

    def arg2(self) -> int:
        """Second operand of the current instruction. See Command.arg2."""
        return self._require_current("arg2").arg2

    @property
    def remaining(self) -> int:
        """Number of instructions not yet consumed."""
        return len(self._pending)

    def __iter__(self) -> Iterator[Command]:
        while self.has_more_commands():
            yield self.advance()

    def _require_current(self, operation: str) -> Command:
        if self.current is None:
            raise NoCurrentCommandError(
                f"{operation}() called with no current command",
                hint="call advance() first",
            )
        return self.current


def parse_vm(source: str, filename: str = "<input>") -> list[Command]:
    """Clean the source and return every instruction as a Command."""
    return list(Parser(source, filename=filename))
