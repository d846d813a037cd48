import stat
from pathlib import Path

import pytest

from bfc.execution.permissions import apply_file_executable_permissions


def test_executable_permissions(tmp_path: Path) -> None:
    program = tmp_path / "program"
    program.write_bytes(b"\x7fELF")
    program.chmod(0o647)

    apply_file_executable_permissions(program)

    assert stat.S_IMODE(program.stat().st_mode) == 0o756


def test_executable_permissions_symlink(tmp_path: Path) -> None:
    program = tmp_path / "program"
    program.write_bytes(b"\x7fELF")
    link = tmp_path / "link"
    link.symlink_to(program)

    with pytest.raises(PermissionError):
        apply_file_executable_permissions(link)


def test_executable_permissions_directory(tmp_path: Path) -> None:
    with pytest.raises(OSError, match="not an regular file"):
        apply_file_executable_permissions(tmp_path)
