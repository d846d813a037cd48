"""BF compiler library.

Provides translator from BF source into IA-32 assembly with assembler and linker drivers.
"""

from .assembler import assemble_object_file
from .codegen import generate_assembly_file, translate
from .linker import link_object_files

__all__ = [
    "assemble_object_file",
    "generate_assembly_file",
    "link_object_files",
    "translate",
]
