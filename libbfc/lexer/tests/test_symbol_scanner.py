from io import BytesIO
from pathlib import Path

from libbfc.lexer import scan_symbols
from libbfc.lexer.symbols import Symbol, SymbolType


def test_scan_symbols_all_recognized() -> None:
    symbols = _scan(b"><+-,.[]")
    assert [s.type for s in symbols] == [
        SymbolType.POINTER_ADVANCE,
        SymbolType.POINTER_RETREAT,
        SymbolType.CELL_INCREMENT,
        SymbolType.CELL_DECREMENT,
        SymbolType.CELL_INPUT,
        SymbolType.CELL_OUTPUT,
        SymbolType.LOOP_BEGIN,
        SymbolType.LOOP_END,
    ]
    assert "".join(s.text for s in symbols) == "><+-,.[]"


def test_scan_symbols_skips_inert_bytes() -> None:
    symbols = _scan(b"this is a comment\n\xff\x00 +  # still comment -")
    assert [s.type for s in symbols] == [
        SymbolType.CELL_INCREMENT,
        SymbolType.CELL_DECREMENT,
    ]


def test_scan_symbols_empty_source() -> None:
    assert _scan(b"") == []


def test_scan_symbols_locations() -> None:
    symbols = _scan(b"+\n ab[\n\n]")
    locations = [(s.location.line_number, s.location.col_number) for s in symbols]
    assert locations == [(0, 0), (1, 3), (3, 0)]


def test_scan_symbols_location_repr_with_path() -> None:
    symbols = list(scan_symbols(BytesIO(b"\n  ]"), Path("dir/program.b")))
    assert repr(symbols[0].location) == "'program.b:2:3'"


def test_scan_symbols_location_repr_without_path() -> None:
    symbols = _scan(b"+")
    assert repr(symbols[0].location) == "'(stream):1:1'"


def test_scan_symbols_chunk_size_does_not_change_result() -> None:
    source = b"++[>+<-]\n>.comment,[-]" * 100
    assert _scan(source, chunk_size=1) == _scan(source)
    assert _scan(source, chunk_size=7) == _scan(source)


def test_scan_symbols_is_lazy() -> None:
    source = BytesIO(b"+" * 10)
    scanner = scan_symbols(source, chunk_size=1)
    next(scanner)
    assert source.tell() == 1


def _scan(source: bytes, chunk_size: int = 4096) -> list[Symbol]:
    return list(scan_symbols(BytesIO(source), chunk_size=chunk_size))
