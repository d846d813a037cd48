from subprocess import CalledProcessError

import pytest

from bfc.cli.errors.error_handler import cli_bfc_error_handler
from libbfc.codegen.errors import UnmatchedLoopEndError
from libbfc.lexer.symbols import SymbolLocation


def test_bfc_error_is_reported(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as e, cli_bfc_error_handler():
        raise UnmatchedLoopEndError(at=SymbolLocation(0, 3, source="stream"))
    assert e.value.code == 1

    err = capsys.readouterr().err
    assert err.startswith("bfc: Unmatched loop end `]` at '(stream):1:4'!\n")
    assert err.rstrip().endswith("[unmatched-loop-end-error]")


def test_bfc_error_is_raised_when_debugging() -> None:
    with (
        pytest.raises(UnmatchedLoopEndError),
        cli_bfc_error_handler(debug_user_friendly_errors=False),
    ):
        raise UnmatchedLoopEndError(at=SymbolLocation(0, 0, source="stream"))


def test_failed_process_exit_code_is_propagated(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit) as e, cli_bfc_error_handler():
        raise CalledProcessError(returncode=7, cmd=["ld", "-o", "a.out"])
    assert e.value.code == 7

    err = capsys.readouterr().err
    assert err.startswith("bfc: external command failed with exit code 7\n")
    assert "ld -o a.out" in err


def test_keyboard_interrupt_exits_successfully() -> None:
    with pytest.raises(SystemExit) as e, cli_bfc_error_handler():
        raise KeyboardInterrupt
    assert e.value.code == 0


def test_goal_must_not_return() -> None:
    with pytest.raises(SystemExit) as e, cli_bfc_error_handler():
        pass
    assert e.value.code == 1


def test_internal_errors_are_not_handled() -> None:
    with pytest.raises(ZeroDivisionError), cli_bfc_error_handler():
        _ = 1 / 0
