"""Configuration of memory model for generated programs."""

from typing import Final

from libbfc.codegen.errors import InvalidCellsSizeError

# Bytes allocated as cells memory when not specified
DEFAULT_CELLS_SIZE: Final[int] = 4096


def parse_cells_size(raw: str) -> int:
    """Parse cells size from user input as an integer literal (base prefixes like `0x` are allowed).

    :raises InvalidCellsSizeError: Not an integer or not positive
    """
    try:
        cells_size = int(raw.strip(), base=0)
    except ValueError as e:
        raise InvalidCellsSizeError(cells_size=raw) from e

    validate_cells_size(cells_size)
    return cells_size


def validate_cells_size(cells_size: object) -> None:
    """Ensure that cells size is an positive integer.

    :raises InvalidCellsSizeError: Not an integer or not positive
    """
    if isinstance(cells_size, bool) or not isinstance(cells_size, int):
        raise InvalidCellsSizeError(cells_size=cells_size)
    if cells_size <= 0:
        raise InvalidCellsSizeError(cells_size=cells_size)
