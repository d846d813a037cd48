from __future__ import annotations

from pathlib import Path
from subprocess import CalledProcessError, CompletedProcess
from typing import TYPE_CHECKING

import pytest

from libbfc.assembler import assemble_object_file
from libbfc.assembler.drivers import (
    AssemblerDriver,
    ClangAssemblerDriver,
    GNUAssemblerDriver,
    get_all_drivers,
    get_assembler_driver,
)
from libbfc.assembler.errors import NoAssemblerDriverError
from libbfc.targets import Target

if TYPE_CHECKING:
    from collections.abc import Sequence

TARGET = Target.from_triplet("i386-unknown-linux")


class FakeAssemblerDriver(AssemblerDriver):
    name = "fake"
    executable = "fake-as"

    @classmethod
    def is_supported(cls, target: Target) -> bool:
        return True

    @classmethod
    def compose_command(
        cls,
        target: Target,
        in_assembly_file: Path,
        out_object_file: Path,
        *,
        flags: Sequence[str],
    ) -> list[str]:
        return [cls.executable, str(in_assembly_file), str(out_object_file), *flags]


def _installed(monkeypatch: pytest.MonkeyPatch, *executables: str) -> None:
    monkeypatch.setattr(
        "libbfc.assembler.drivers._driver.which",
        lambda name: f"/usr/bin/{name}" if name in executables else None,
    )


def _process_exits_with(monkeypatch: pytest.MonkeyPatch, returncode: int) -> list[list[str]]:
    spawned: list[list[str]] = []

    def fake_run(command: list[str], **_: object) -> CompletedProcess[bytes]:
        spawned.append(command)
        return CompletedProcess(args=command, returncode=returncode)

    monkeypatch.setattr("libbfc.assembler.drivers._driver.run", fake_run)
    return spawned


def test_gnu_assembler_command() -> None:
    command = GNUAssemblerDriver.compose_command(
        TARGET,
        in_assembly_file=Path("program.s"),
        out_object_file=Path("program.o"),
        flags=["-g"],
    )
    assert command == ["as", "--32", "-g", "-o", "program.o", "program.s"]


def test_clang_assembler_command() -> None:
    command = ClangAssemblerDriver.compose_command(
        TARGET,
        in_assembly_file=Path("program.s"),
        out_object_file=Path("program.o"),
        flags=[],
    )
    assert command == [
        "clang",
        "-target",
        "i386-unknown-linux",
        "-x",
        "assembler",
        "-c",
        "program.s",
        "-o",
        "program.o",
    ]


def test_gnu_assembler_is_preferred(monkeypatch: pytest.MonkeyPatch) -> None:
    _installed(monkeypatch, "as", "clang")
    assert isinstance(get_assembler_driver(TARGET), GNUAssemblerDriver)


def test_clang_assembler_is_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    _installed(monkeypatch, "clang")
    assert isinstance(get_assembler_driver(TARGET), ClangAssemblerDriver)


def test_no_assembler_installed(monkeypatch: pytest.MonkeyPatch) -> None:
    _installed(monkeypatch)
    assert get_assembler_driver(TARGET) is None

    with pytest.raises(NoAssemblerDriverError) as e:
        assemble_object_file(Path("program.s"), Path("program.o"), TARGET)
    assert "gnu-as, clang" in repr(e.value)
    assert "[no-assembler-driver-error]" in repr(e.value)


def test_all_drivers_in_order_of_preference() -> None:
    assert list(get_all_drivers()) == [GNUAssemblerDriver, ClangAssemblerDriver]


def test_assemble_object_file_with_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    spawned = _process_exits_with(monkeypatch, returncode=0)
    shown: list[Sequence[str]] = []

    process = assemble_object_file(
        Path("program.s"),
        Path("program.o"),
        TARGET,
        flags=("-g",),
        driver=FakeAssemblerDriver(),
        on_shell_call=shown.append,
    )

    assert process.returncode == 0
    assert spawned == [["fake-as", "program.s", "program.o", "-g"]]
    assert shown == spawned


def test_assemble_object_file_failed_assembler(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _process_exits_with(monkeypatch, returncode=2)
    with pytest.raises(CalledProcessError) as e:
        assemble_object_file(
            Path("program.s"),
            Path("program.o"),
            TARGET,
            driver=FakeAssemblerDriver(),
        )
    assert e.value.returncode == 2
