"""Assembler drivers (e.g direct assemblers)."""

from ._driver import AssemblerDriver
from ._get_assembler_driver import get_all_drivers, get_assembler_driver
from .clang import ClangAssemblerDriver
from .gnu import GNUAssemblerDriver

__all__ = [
    "AssemblerDriver",
    "ClangAssemblerDriver",
    "GNUAssemblerDriver",
    "get_all_drivers",
    "get_assembler_driver",
]
