from pathlib import Path

from libbfc.exceptions import BFCError


class SourceFileReadError(BFCError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Could not read file {self.path}!

Source file cannot be opened for reading: {self.reason}

{self.generic_error_name}"""
