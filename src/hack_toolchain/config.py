"""
Hack Toolchain - Configuration
==============================

Runtime settings for the parser and command-line tools. Configuration can
come from:
- Default values (defined here)
- Environment variables

The reserved symbol set is fixed by the Hack memory map and is deliberately
absent from this module; see hack_toolchain.assembler.symbol_table.
"""

import codecs
import logging
import os
from dataclasses import dataclass


# Level names accepted by HACK_LOG_LEVEL
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ToolchainConfig:
    """
    Configuration for parsing VM sources.

    Attributes:
        comment_marker: Prefix that marks a whole line as a comment
            (default: "/", which also matches "//" lines)
        log_level: Logging level name used by the CLI tools (default: "WARNING")
        source_encoding: Encoding used by Parser.from_file() (default: "utf-8")
    """

    comment_marker: str = "/"
    log_level: str = "WARNING"
    source_encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "ToolchainConfig":
        """
        Create a ToolchainConfig from environment variables.

        Environment variables (all optional):
            HACK_COMMENT_MARKER: Comment prefix (must not be blank)
            HACK_LOG_LEVEL: One of DEBUG, INFO, WARNING, ERROR, CRITICAL
            HACK_SOURCE_ENCODING: Any codec name known to Python

        Invalid values are ignored and the default is kept.
        """
        config = cls()

        if marker := os.environ.get("HACK_COMMENT_MARKER"):
            if marker.strip():
                config.comment_marker = marker.strip()

        if level := os.environ.get("HACK_LOG_LEVEL"):
            if level.upper() in LOG_LEVELS:
                config.log_level = level.upper()

        if encoding := os.environ.get("HACK_SOURCE_ENCODING"):
            try:
                codecs.lookup(encoding)
            except LookupError:
                pass  # Ignore unknown codecs
            else:
                config.source_encoding = encoding

        return config

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for logging.basicConfig()."""
        return getattr(logging, self.log_level, logging.WARNING)
