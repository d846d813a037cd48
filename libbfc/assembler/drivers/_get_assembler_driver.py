from collections.abc import Iterable

from libbfc.targets.target import Target

from ._driver import AssemblerDriver
from .clang import ClangAssemblerDriver
from .gnu import GNUAssemblerDriver

# In order of preference
_drivers: list[type[AssemblerDriver]] = [
    GNUAssemblerDriver,
    ClangAssemblerDriver,
]


def get_assembler_driver(target: Target) -> AssemblerDriver | None:
    """Get supported assembler (driver) for that target.

    Returns None if no suitable assembler either installed or supports that target
    """
    for driver in _drivers:
        if not driver.is_supported(target):
            continue
        if not driver.is_installed():
            continue
        return driver()
    return None


def get_all_drivers() -> Iterable[type[AssemblerDriver]]:
    """Acquire list of all drivers that is used."""
    return _drivers
