import re
from abc import abstractmethod

# Boundary before every inner capital letter (`UnclosedLoop` -> `Unclosed|Loop`)
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class BFCError(Exception):
    """Parent for all user-facing errors of the toolchain.

    Subclasses render their diagnostic via `__repr__`: first line is an summary, then details,
    then error tag (e.g `[unclosed-loop-error]`) which stays the same across messages rewording.
    """

    @abstractmethod
    def __repr__(self) -> str: ...

    def __str__(self) -> str:
        return self.summary

    @property
    def summary(self) -> str:
        return repr(self).partition("\n")[0]

    @property
    def details(self) -> str:
        return repr(self).partition("\n")[2].strip("\n")

    @property
    def generic_error_name(self) -> str:
        return f"[{_WORD_BOUNDARY.sub('-', type(self).__name__).lower()}]"
