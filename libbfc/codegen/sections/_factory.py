from enum import Enum, auto
from typing import Protocol

from libbfc.targets.target import Target

from .elf import ELF_SECTION_BSS, ELF_SECTION_INSTRUCTIONS


class SectionType(Enum):
    BSS = auto()
    INSTRUCTIONS = auto()


class Section(Protocol):
    def __str__(self) -> str: ...


def get_os_assembler_section(section: SectionType, target: Target) -> Section:
    match target.operating_system:
        case "Linux":
            return {
                SectionType.BSS: ELF_SECTION_BSS,
                SectionType.INSTRUCTIONS: ELF_SECTION_INSTRUCTIONS,
            }[section]
        case _:
            raise NotImplementedError
