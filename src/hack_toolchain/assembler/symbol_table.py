"""
Hack Symbol Table
=================

Maps symbolic names to RAM/ROM addresses for the Hack assembler and the
VM translator.

Every table starts out holding the reserved symbols of the Hack memory map:

| Symbol          | Address  | Meaning                          |
|-----------------|----------|----------------------------------|
| SP              | 0        | Stack pointer                    |
| LCL             | 1        | Base of the local segment        |
| ARG             | 2        | Base of the argument segment     |
| THIS            | 3        | Base of the this segment         |
| THAT            | 4        | Base of the that segment         |
| R0 .. R15       | 0 .. 15  | Virtual registers                |
| SCREEN          | 16384    | Memory-mapped screen             |
| KBD             | 24576    | Memory-mapped keyboard           |

The table only provides primitives. Deciding whether an unknown name is a
label or a variable, and which address it gets, is up to the driver:

    >>> table = SymbolTable()
    >>> if not table.contains("counter"):
    ...     table.add_entry("counter", 16)
    >>> table.get_address("counter")
    16

Reserved names are not protected; add_entry("SP", 7) silently redefines SP.
"""

import difflib
import logging
from types import MappingProxyType
from typing import Iterator, Mapping

from hack_toolchain.errors import UnknownSymbolError

logger = logging.getLogger(__name__)


# =============================================================================
# Reserved Symbols
# =============================================================================

RESERVED_SYMBOLS: Mapping[str, int] = MappingProxyType({
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
    **{f"R{n}": n for n in range(16)},
    "SCREEN": 16384,
    "KBD": 24576,
})


# =============================================================================
# Symbol Table
# =============================================================================

class SymbolTable:
    """
    Name to address mapping, pre-loaded with RESERVED_SYMBOLS.

    Names are case-sensitive. Each name maps to exactly one address and a
    later add_entry() replaces an earlier one. No range checking is done on
    addresses.
    """

    def __init__(self) -> None:
        self._symbols: dict[str, int] = dict(RESERVED_SYMBOLS)

    @classmethod
    def create(cls) -> "SymbolTable":
        """Return a fresh table holding only the reserved symbols."""
        return cls()

    # =========================================================================
    # Core Operations
    # =========================================================================

    def add_entry(self, name: str, address: int) -> None:
        """
        Insert or overwrite the address for a symbol.

        Args:
            name: Symbol name (case-sensitive)
            address: Address to associate with the name
        """
        previous = self._symbols.get(name)
        if previous is not None and previous != address:
            logger.debug(f"Redefining symbol '{name}': {previous} -> {address}")
        else:
            logger.debug(f"Adding symbol '{name}' = {address}")
        self._symbols[name] = address

    def contains(self, name: str) -> bool:
        """Return True if the name currently has an address."""
        return name in self._symbols

    def get_address(self, name: str) -> int:
        """
        Return the address mapped to a symbol.

        Raises:
            UnknownSymbolError: If the name is not in the table. The error
                lists close matches to help spot typos.
        """
        try:
            return self._symbols[name]
        except KeyError:
            similar = difflib.get_close_matches(name, self._symbols.keys(), n=3)
            raise UnknownSymbolError(name, similar_symbols=similar) from None

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def is_reserved(name: str) -> bool:
        """Return True if the name is one of the predefined Hack symbols."""
        return name in RESERVED_SYMBOLS

    def items(self) -> list[tuple[str, int]]:
        """All (name, address) pairs, ordered by address and then name."""
        return sorted(self._symbols.items(), key=lambda item: (item[1], item[0]))

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolTable({len(self._symbols)} symbols)"


def create_symbol_table() -> SymbolTable:
    """Return a new SymbolTable pre-loaded with the reserved symbols."""
    return SymbolTable()
