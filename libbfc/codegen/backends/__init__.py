"""Code generation backend module.

Provides instruction emission backends (codegen) for emitting assembly from source symbols.
"""

from .base import InstructionSetBackend
from .i386.codegen import I386CodegenBackend

__all__ = [
    "I386CodegenBackend",
    "InstructionSetBackend",
]
