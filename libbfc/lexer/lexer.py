from __future__ import annotations

from typing import IO, TYPE_CHECKING, Final

from .symbols import BYTE_TO_SYMBOL_TYPE, Symbol, SymbolLocation

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

# Bytes requested from source per read, source is never read whole
READ_CHUNK_SIZE: Final[int] = 4096

NEWLINE: Final[int] = ord("\n")


def scan_symbols(
    source: IO[bytes],
    path: Path | None = None,
    *,
    chunk_size: int = READ_CHUNK_SIZE,
) -> Generator[Symbol]:
    """Stream recognized symbols via generator (perform lexical analysis).

    Unrecognized bytes are skipped with no side effect except location tracking.

    :param source: Readable binary stream positioned at start of program text
    :param path: Path of source file, used only for symbol locations
    :param chunk_size: Bytes to read per read call
    :returns scanner: Generator of symbols, in source order
    """
    assert chunk_size > 0, "Cannot read source with non-positive chunk size"

    row, col = 0, 0
    while chunk := source.read(chunk_size):
        for byte in chunk:
            symbol_type = BYTE_TO_SYMBOL_TYPE.get(byte)
            if symbol_type is not None:
                yield Symbol(
                    type=symbol_type,
                    location=SymbolLocation(
                        line_number=row,
                        col_number=col,
                        filepath=path,
                        source="file" if path else "stream",
                    ),
                )

            if byte == NEWLINE:
                row, col = row + 1, 0
                continue
            col += 1
