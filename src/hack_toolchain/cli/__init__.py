"""
Hack Toolchain Command-Line Interface
=====================================

This package provides command-line tools for the Hack toolchain:

- **hackparse**: Dump the classified command stream of a .vm file
- **hacksyms**: Print the reserved Hack symbol table

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["hackparse", "hacksyms"]
