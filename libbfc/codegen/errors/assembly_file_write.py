from pathlib import Path

from libbfc.exceptions import BFCError


class AssemblyFileWriteError(BFCError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Could not write file {self.path}!

Assembly output file cannot be created or opened for writing: {self.reason}
Ensure parent directory exists and you have permissions to write there

{self.generic_error_name}"""
