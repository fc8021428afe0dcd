"""Errors of the bank module, which reserves codes 101 to 199."""

from __future__ import annotations

from qstars import errors as sdk_errors
from qstars.errors import SdkError

DEFAULT_CODESPACE = 2

CODE_INVALID_INPUT = 101
CODE_INVALID_OUTPUT = 102

_MESSAGES = {
    CODE_INVALID_INPUT: "invalid input coins",
    CODE_INVALID_OUTPUT: "invalid output coins",
}


def code_to_default_msg(code: int) -> str:
    """Default message for a bank code, falling back to the root messages."""
    return _MESSAGES.get(int(code)) or sdk_errors.code_to_default_msg(code)


def _new_error(codespace: int, code: int, msg: str) -> SdkError:
    return sdk_errors.new_error(codespace, code, msg or code_to_default_msg(code))


def err_invalid_input(codespace: int, msg: str) -> SdkError:
    return _new_error(codespace, CODE_INVALID_INPUT, msg)


def err_no_inputs(codespace: int) -> SdkError:
    return _new_error(codespace, CODE_INVALID_INPUT, "")


def err_invalid_output(codespace: int, msg: str) -> SdkError:
    return _new_error(codespace, CODE_INVALID_OUTPUT, msg)


def err_no_outputs(codespace: int) -> SdkError:
    return _new_error(codespace, CODE_INVALID_OUTPUT, "")