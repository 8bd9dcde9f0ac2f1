"""
Hack Assembler Support
======================

Symbol resolution shared by the Hack assembler and the VM translator.

- **SymbolTable**: Name to address mapping pre-loaded with the reserved
  Hack symbols (SP, LCL, ARG, THIS, THAT, R0-R15, SCREEN, KBD)
"""

from hack_toolchain.assembler.symbol_table import (
    RESERVED_SYMBOLS,
    SymbolTable,
    create_symbol_table,
)

__all__ = [
    "RESERVED_SYMBOLS",
    "SymbolTable",
    "create_symbol_table",
]
