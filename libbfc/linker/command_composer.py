from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol

from libbfc.linker.gnu.command_composer import compose_gnu_linker_command
from libbfc.targets.target import Target


class LinkerCommandComposer(Protocol):
    @staticmethod
    def __call__(
        objects: Iterable[Path],
        output: Path,
        target: Target,
        additional_flags: Sequence[str],
        executable_entry_point_symbol: str = ...,
        *,
        linker_executable: Path | None = ...,
    ) -> list[str]: ...


def get_linker_command_composer_backend(
    target: Target,
) -> LinkerCommandComposer:
    """Get linker command composer backend suitable for that target and current host."""
    match target.operating_system:
        case "Linux":
            return compose_gnu_linker_command
        case _:
            raise NotImplementedError
