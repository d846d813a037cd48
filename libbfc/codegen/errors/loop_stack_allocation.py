from libbfc.exceptions import BFCError


class LoopStackAllocationError(BFCError):
    def __init__(self, requested_capacity: int) -> None:
        self.requested_capacity = requested_capacity

    def __repr__(self) -> str:
        return f"""Out of memory while allocating loop stack of size {self.requested_capacity}!

Loop nesting of source program is too deep to be tracked on that host

{self.generic_error_name}"""
