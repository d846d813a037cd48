from typing import assert_never

from libbfc.targets import Target

from .backends import I386CodegenBackend, InstructionSetBackend


def get_backend_for_target(
    target: Target,
) -> type[InstructionSetBackend]:
    """Get instruction emission backend for specified ARCHxOS pair."""
    match target.architecture:
        case "I386":
            return I386CodegenBackend
        case _:
            assert_never(target.architecture)
