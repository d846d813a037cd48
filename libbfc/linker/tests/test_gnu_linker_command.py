from pathlib import Path
from subprocess import CompletedProcess

import pytest

from libbfc.linker import link_object_files
from libbfc.linker.command_composer import get_linker_command_composer_backend
from libbfc.linker.gnu.command_composer import compose_gnu_linker_command
from libbfc.targets import Target

TARGET = Target.from_triplet("i386-unknown-linux")


def test_gnu_linker_command() -> None:
    command = compose_gnu_linker_command(
        objects=[Path("program.o")],
        output=Path("program"),
        target=TARGET,
        additional_flags=["-s"],
        linker_executable=Path("/opt/ld"),
    )
    assert command == [
        "/opt/ld",
        "-m",
        "elf_i386",
        "-e",
        "_start",
        "-z",
        "noexecstack",
        "program.o",
        "-s",
        "-o",
        "program",
    ]


def test_gnu_linker_executable_lookup(monkeypatch: pytest.MonkeyPatch) -> None:
    installed = {"x86_64-linux-gnu-ld"}
    monkeypatch.setattr(
        "libbfc.linker.gnu.command_composer.which",
        lambda name: f"/usr/bin/{name}" if name in installed else None,
    )
    command = compose_gnu_linker_command(
        objects=[Path("program.o")],
        output=Path("a.out"),
        target=TARGET,
        additional_flags=[],
    )
    assert command[0] == "x86_64-linux-gnu-ld"

    installed.add("ld")
    command = compose_gnu_linker_command(
        objects=[Path("program.o")],
        output=Path("a.out"),
        target=TARGET,
        additional_flags=[],
    )
    assert command[0] == "ld"


def test_linker_backend_for_target() -> None:
    assert get_linker_command_composer_backend(TARGET) is compose_gnu_linker_command


def test_link_object_files(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []

    def fake_run(command: list[str], **_: object) -> CompletedProcess[bytes]:
        calls.append(command)
        return CompletedProcess(args=command, returncode=0)

    monkeypatch.setattr("libbfc.linker.linker.run", fake_run)
    shown: list[list[str]] = []

    process = link_object_files(
        objects=[Path("program.o")],
        output=Path("program"),
        target=TARGET,
        additional_flags=["-s"],
        linker_executable=Path("/opt/ld"),
        on_shell_call=shown.append,
    )

    assert process.returncode == 0
    assert calls == shown
    assert calls[0][:3] == ["/opt/ld", "-m", "elf_i386"]
    assert calls[0][-2:] == ["-o", "program"]
