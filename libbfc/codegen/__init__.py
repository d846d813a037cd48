"""Code generation package that translates source symbols into target assembly."""

from .generator import generate_assembly_file
from .translator import TranslationSummary, Translator, translate

__all__ = [
    "TranslationSummary",
    "Translator",
    "generate_assembly_file",
    "translate",
]
