"""Translator which streams source symbols into assembly text, resolving loops with labels stack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, TYPE_CHECKING, assert_never

from libbfc.codegen.config import validate_cells_size
from libbfc.codegen.errors import (
    LoopStackUnderflowError,
    UnclosedLoopError,
    UnmatchedLoopEndError,
)
from libbfc.codegen.get_backend import get_backend_for_target
from libbfc.codegen.labels import LabelAllocator
from libbfc.codegen.loop_stack import LoopStack
from libbfc.lexer import scan_symbols
from libbfc.lexer.symbols import SymbolType
from libbfc.targets.target import DEFAULT_TARGET_TRIPLET, Target

if TYPE_CHECKING:
    from collections.abc import MutableMapping, Sequence
    from pathlib import Path

    from libbfc.codegen.backends import InstructionSetBackend
    from libbfc.lexer.symbols import Symbol, SymbolLocation


@dataclass(frozen=True)
class TranslationSummary:
    """Statistics of finished translation."""

    symbols_count: int
    loops_count: int
    max_loop_depth: int


class Translator:
    """Single-pass translator of one source program.

    Owns label allocator and loop stack, so each translation must use its own translator.
    """

    backend: InstructionSetBackend
    labels: LabelAllocator
    loop_stack: LoopStack

    def __init__(
        self,
        backend: InstructionSetBackend,
        *,
        loop_stack: LoopStack | None = None,
    ) -> None:
        self.backend = backend
        self.labels = LabelAllocator()
        self.loop_stack = loop_stack if loop_stack is not None else LoopStack()

        # Where each currently opened loop was opened, for diagnostics
        self._opened_at: MutableMapping[int, SymbolLocation] = {}

        self._symbols_count = 0
        self._max_loop_depth = 0
        self._is_used = False

    def translate(
        self,
        source: IO[bytes],
        sink: IO[str],
        cells_size: int,
        *,
        path: Path | None = None,
    ) -> TranslationSummary:
        """Consume whole source and write assembly into sink, in streaming manner.

        :param source: Readable binary stream positioned at start of program text
        :param sink: Writable text stream for assembly
        :param cells_size: Bytes allocated as cells memory
        :param path: Path of source, only used for diagnostics
        :raises InvalidCellsSizeError: Cells size is not positive, nothing is written
        :raises UnmatchedLoopEndError: Loop end with no opened loop, sink is partially written
        :raises UnclosedLoopError: Input ended with opened loops, sink is partially written
        """
        assert not self._is_used, "Translator cannot be reused for another translation"
        self._is_used = True

        validate_cells_size(cells_size)
        _emit(sink, self.backend.program_prologue(cells_size))

        for symbol in scan_symbols(source, path):
            _emit(sink, self.translate_symbol(symbol))

        if not self.loop_stack.is_empty:
            innermost_label = self.loop_stack.peek()
            raise UnclosedLoopError(
                open_loop_at=self._opened_at[innermost_label],
                unclosed_count=len(self.loop_stack),
            )

        _emit(sink, self.backend.program_epilogue())
        return TranslationSummary(
            symbols_count=self._symbols_count,
            loops_count=self.labels.allocated_count,
            max_loop_depth=self._max_loop_depth,
        )

    def translate_symbol(self, symbol: Symbol) -> Sequence[str]:
        """Get instructions for given symbol, updating loop state for loop symbols."""
        self._symbols_count += 1
        match symbol.type:
            case SymbolType.POINTER_ADVANCE:
                return self.backend.pointer_advance()
            case SymbolType.POINTER_RETREAT:
                return self.backend.pointer_retreat()
            case SymbolType.CELL_INCREMENT:
                return self.backend.cell_increment()
            case SymbolType.CELL_DECREMENT:
                return self.backend.cell_decrement()
            case SymbolType.CELL_INPUT:
                return self.backend.cell_input()
            case SymbolType.CELL_OUTPUT:
                return self.backend.cell_output()
            case SymbolType.LOOP_BEGIN:
                return self._open_loop(symbol)
            case SymbolType.LOOP_END:
                return self._close_loop(symbol)
            case _:
                assert_never(symbol.type)

    def _open_loop(self, symbol: Symbol) -> Sequence[str]:
        label = self.labels.allocate()
        self.loop_stack.push(label)
        self._opened_at[label] = symbol.location
        self._max_loop_depth = max(self._max_loop_depth, len(self.loop_stack))
        return self.backend.loop_begin(label)

    def _close_loop(self, symbol: Symbol) -> Sequence[str]:
        try:
            label = self.loop_stack.pop()
        except LoopStackUnderflowError as e:
            raise UnmatchedLoopEndError(at=symbol.location) from e
        del self._opened_at[label]
        return self.backend.loop_end(label)


def translate(
    source: IO[bytes],
    sink: IO[str],
    cells_size: int,
    *,
    target: Target | None = None,
    path: Path | None = None,
) -> TranslationSummary:
    """Translate source program into assembly for given target (default one if not specified).

    See `Translator.translate`.
    """
    if target is None:
        target = Target.from_triplet(DEFAULT_TARGET_TRIPLET)
    backend = get_backend_for_target(target)(target)
    return Translator(backend).translate(source, sink, cells_size, path=path)


def _emit(sink: IO[str], lines: Sequence[str]) -> None:
    sink.writelines(f"{line}\n" for line in lines)
