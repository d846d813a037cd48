"""Lexer package that streams recognized symbols out of raw BF source bytes."""

from .lexer import scan_symbols
from .symbols import Symbol, SymbolLocation, SymbolType

__all__ = [
    "Symbol",
    "SymbolLocation",
    "SymbolType",
    "scan_symbols",
]
