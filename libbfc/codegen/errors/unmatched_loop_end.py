from libbfc.exceptions import BFCError
from libbfc.lexer.symbols import SymbolLocation


class UnmatchedLoopEndError(BFCError):
    def __init__(self, at: SymbolLocation) -> None:
        self.at = at

    def __repr__(self) -> str:
        return f"""Unmatched loop end `]` at {self.at}!

Program is not well-formed: there is no opened loop `[` to close at that point
Did you forget an `[` or place an excessive `]`?
Assembly output may be already partially written

{self.generic_error_name}"""
