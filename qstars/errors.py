"""Error codes, codespaces and the error type that carries them."""

from __future__ import annotations

from enum import IntEnum

from qstars.result import ABCI_CODE_OK, Result

CODESPACE_UNDEFINED = 0
CODESPACE_ROOT = 1
MAXIMUM_CODESPACE = 65535


class CodeType(IntEnum):
    """Base error codes within the root codespace."""

    OK = 0
    INTERNAL = 1
    TX_DECODE = 2
    INVALID_SEQUENCE = 3
    UNAUTHORIZED = 4
    INSUFFICIENT_FUNDS = 5
    UNKNOWN_REQUEST = 6
    INVALID_ADDRESS = 7
    INVALID_PUB_KEY = 8
    UNKNOWN_ADDRESS = 9
    INSUFFICIENT_COINS = 10
    INVALID_COINS = 11
    OUT_OF_GAS = 12
    MEMO_TOO_LARGE = 13


_DEFAULT_MESSAGES = {
    CodeType.INTERNAL: "internal error",
    CodeType.TX_DECODE: "tx parse error",
    CodeType.INVALID_SEQUENCE: "invalid sequence",
    CodeType.UNAUTHORIZED: "unauthorized",
    CodeType.INSUFFICIENT_FUNDS: "insufficient funds",
    CodeType.UNKNOWN_REQUEST: "unknown request",
    CodeType.INVALID_ADDRESS: "invalid address",
    CodeType.INVALID_PUB_KEY: "invalid pubkey",
    CodeType.UNKNOWN_ADDRESS: "unknown address",
    CodeType.INSUFFICIENT_COINS: "insufficient coins",
    CodeType.INVALID_COINS: "invalid coins",
    CodeType.OUT_OF_GAS: "out of gas",
    CodeType.MEMO_TOO_LARGE: "memo too large",
}


def _check_u16(value: int, what: str) -> int:
    value = int(value)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"{what} out of range: {value}")
    return value


def is_ok(abci_code: int) -> bool:
    return abci_code == ABCI_CODE_OK


def to_abci_code(space: int, code: int) -> int:
    """Combine a codespace and a code into one ABCI code."""
    space = _check_u16(space, "codespace")
    code = _check_u16(code, "code")
    if space == CODESPACE_ROOT and code == CodeType.OK:
        return ABCI_CODE_OK
    return (space << 16) | code


def unknown_code_msg(code: int) -> str:
    return f"unknown code {int(code)}"


def code_to_default_msg(code: int) -> str:
    """Default message for a root code; ``unknown code N`` otherwise."""
    try:
        return _DEFAULT_MESSAGES[CodeType(code)]
    except (ValueError, KeyError):
        return unknown_code_msg(code)


class SdkError(Exception):
    """An error tagged with a codespace and a code."""

    def __init__(self, codespace: int, code: int, message: str = "") -> None:
        if not message:
            message = code_to_default_msg(code)
        super().__init__(message)
        self.codespace = int(codespace)
        self.code = int(code)
        self.message = message

    def __str__(self) -> str:
        return f"Error{{{self.codespace}:{self.code},{self.message!r}}}"

    def with_default_codespace(self, codespace: int) -> "SdkError":
        """Return a copy of this error placed in ``codespace``."""
        return SdkError(codespace, self.code, self.message)

    def abci_code(self) -> int:
        return to_abci_code(self.codespace, self.code)

    def abci_log(self) -> str:
        return (
            "=== ABCI Log ===\n"
            f"Codespace: {self.codespace}\n"
            f"Code:      {self.code}\n"
            f"ABCICode:  {self.abci_code()}\n"
            f"Error:     {self.message!r}\n"
            "=== /ABCI Log ===\n"
        )

    def result(self) -> Result:
        return Result(code=self.abci_code(), log=self.abci_log())


def new_error(codespace: int, code: int, message: str = "") -> SdkError:
    return SdkError(codespace, code, message)


def _root(code: CodeType, msg: str) -> SdkError:
    return SdkError(CODESPACE_ROOT, code, msg)


def err_internal(msg: str) -> SdkError:
    return _root(CodeType.INTERNAL, msg)


def err_tx_decode(msg: str) -> SdkError:
    return _root(CodeType.TX_DECODE, msg)


def err_invalid_sequence(msg: str) -> SdkError:
    return _root(CodeType.INVALID_SEQUENCE, msg)


def err_unauthorized(msg: str) -> SdkError:
    return _root(CodeType.UNAUTHORIZED, msg)


def err_insufficient_funds(msg: str) -> SdkError:
    return _root(CodeType.INSUFFICIENT_FUNDS, msg)


def err_unknown_request(msg: str) -> SdkError:
    return _root(CodeType.UNKNOWN_REQUEST, msg)


def err_invalid_address(msg: str) -> SdkError:
    return _root(CodeType.INVALID_ADDRESS, msg)


def err_unknown_address(msg: str) -> SdkError:
    return _root(CodeType.UNKNOWN_ADDRESS, msg)


def err_invalid_pub_key(msg: str) -> SdkError:
    return _root(CodeType.INVALID_PUB_KEY, msg)


def err_insufficient_coins(msg: str) -> SdkError:
    return _root(CodeType.INSUFFICIENT_COINS, msg)


def err_invalid_coins(msg: str) -> SdkError:
    return _root(CodeType.INVALID_COINS, msg)


def err_out_of_gas(msg: str) -> SdkError:
    return _root(CodeType.OUT_OF_GAS, msg)


def err_memo_too_large(msg: str) -> SdkError:
    return _root(CodeType.MEMO_TOO_LARGE, msg)