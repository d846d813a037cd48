"""Assembler package that translates *assembly* file into *object* file.

Codegen emits an `.s` assembly file with text machine instructions, so we need to call an *assembler*
that translates our codegen result into object file that is suitable for next linkage (linker) step.

In matchup: Lexer (Symbols) -> Translator (Assembly Text) -> Assembler (Object file) -> Linker (Executable)
"""

from .assembler import assemble_object_file

__all__ = ["assemble_object_file"]
