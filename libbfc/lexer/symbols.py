from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Final, Literal

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


@dataclass(frozen=True)
class SymbolLocation:
    """Location of any symbol within source code file.

    Line and column numbers are zero-based and shifted only when displayed.
    """

    line_number: int
    col_number: int

    filepath: Path | None = None
    source: Literal["file", "stream"] = "file"

    def __post_init__(self) -> None:
        if self.source == "file":
            assert self.filepath is not None

    def __repr__(self) -> str:
        if self.source == "stream":
            return f"'(stream):{self.line_number + 1}:{self.col_number + 1}'"
        assert self.filepath is not None
        return f"'{self.filepath.name}:{self.line_number + 1}:{self.col_number + 1}'"


class SymbolType(IntEnum):
    """Type of recognized source symbol, each maps onto fixed instruction template."""

    POINTER_ADVANCE = auto()  # >
    POINTER_RETREAT = auto()  # <
    CELL_INCREMENT = auto()  # +
    CELL_DECREMENT = auto()  # -
    CELL_INPUT = auto()  # ,
    CELL_OUTPUT = auto()  # .
    LOOP_BEGIN = auto()  # [
    LOOP_END = auto()  # ]


# Every other byte is inert and treated as comment
BYTE_TO_SYMBOL_TYPE: Final[Mapping[int, SymbolType]] = {
    ord(">"): SymbolType.POINTER_ADVANCE,
    ord("<"): SymbolType.POINTER_RETREAT,
    ord("+"): SymbolType.CELL_INCREMENT,
    ord("-"): SymbolType.CELL_DECREMENT,
    ord(","): SymbolType.CELL_INPUT,
    ord("."): SymbolType.CELL_OUTPUT,
    ord("["): SymbolType.LOOP_BEGIN,
    ord("]"): SymbolType.LOOP_END,
}


SYMBOL_TYPE_TO_CHARACTER: Final[Mapping[SymbolType, str]] = {
    symbol_type: chr(byte) for byte, symbol_type in BYTE_TO_SYMBOL_TYPE.items()
}


@dataclass(frozen=True)
class Symbol:
    """Recognized symbol obtained by lexer."""

    type: SymbolType

    # Location within file
    location: SymbolLocation

    @property
    def text(self) -> str:
        return SYMBOL_TYPE_TO_CHARACTER[self.type]
