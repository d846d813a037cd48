from dataclasses import dataclass
from typing import Literal, TypeAlias

Triplet: TypeAlias = Literal["i386-unknown-linux"]


@dataclass(eq=True)
class Target:
    """Specifications for target build host."""

    # Conventional triplet for that target for comparisons
    triplet: Triplet

    # Based on triplet
    architecture: Literal["I386"]
    vendor: Literal["unknown"]
    operating_system: Literal["Linux"]

    # Size of an machine word, also the width of one memory cell
    cpu_word_size: Literal[4]

    file_executable_default_name: Literal["a.out"]
    file_assembly_suffix: Literal[".s"]
    file_object_suffix: Literal[".o"]

    @staticmethod
    def from_triplet(triplet: Triplet) -> "Target":
        match triplet:
            case "i386-unknown-linux":
                return Target(
                    triplet=triplet,
                    vendor="unknown",
                    architecture="I386",
                    operating_system="Linux",
                    cpu_word_size=4,
                    file_executable_default_name="a.out",
                    file_assembly_suffix=".s",
                    file_object_suffix=".o",
                )
            case _:
                msg = f"Unknown target triplet `{triplet}`"
                raise ValueError(msg)


DEFAULT_TARGET_TRIPLET: Triplet = "i386-unknown-linux"
