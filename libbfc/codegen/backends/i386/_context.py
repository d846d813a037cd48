from dataclasses import dataclass, field

from libbfc.codegen.sections._factory import SectionType, get_os_assembler_section
from libbfc.targets.target import Target


@dataclass(frozen=True)
class I386CodegenContext:
    """General context for emitting code from source symbols.

    Collects assembly text lines which are taken by the backend after an emission.
    """

    target: Target
    lines: list[str] = field(default_factory=list)

    def write(self, *instructions: str) -> None:
        self.lines.extend(f"\t{instruction}" for instruction in instructions)

    def directive(self, *directives: str) -> None:
        self.lines.extend(directives)

    def label(self, name: str) -> None:
        self.lines.append(f"{name}:")

    def section(self, section: SectionType) -> None:
        self.lines.append(f".section {get_os_assembler_section(section, self.target)}")
