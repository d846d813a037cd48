from libbfc.exceptions import BFCError
from libbfc.lexer.symbols import SymbolLocation


class UnclosedLoopError(BFCError):
    def __init__(self, open_loop_at: SymbolLocation, unclosed_count: int) -> None:
        self.open_loop_at = open_loop_at
        self.unclosed_count = unclosed_count

    def __repr__(self) -> str:
        return f"""Unclosed loop `[` at {self.open_loop_at}!

Program is not well-formed: reached end of input with {self.unclosed_count} loop(s) still opened
Did you forget to close loop with `]`?
Assembly output may be already partially written

{self.generic_error_name}"""
