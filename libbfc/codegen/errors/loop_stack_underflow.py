from libbfc.exceptions import BFCError


class LoopStackUnderflowError(BFCError):
    def __repr__(self) -> str:
        return f"""Tried to pop label from an empty loop stack!

There is no opened loop to close at that point

{self.generic_error_name}"""
