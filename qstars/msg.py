"""Multi-input, multi-output send messages and their signing bytes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from qstars.address import PREF_ADD, convert_and_encode
from qstars.coin import Coins
from qstars.errors import err_invalid_address, err_invalid_coins

_GO_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _go_dumps(obj: Any, **kwargs: Any) -> str:
    text = json.dumps(obj, ensure_ascii=False, **kwargs)
    for char, escape in _GO_ESCAPES.items():
        text = text.replace(char, escape)
    return text


def sort_json(data: bytes) -> bytes:
    """Re-encode JSON compactly with object keys sorted; ``ValueError`` if invalid."""
    return _go_dumps(json.loads(data), sort_keys=True, separators=(",", ":")).encode()


def _normalise(address, coins) -> tuple[bytes, Coins]:
    return bytes(address), coins if isinstance(coins, Coins) else Coins(coins)


def _sign_bytes(address: bytes, coins: Coins) -> bytes:
    encoded_coins = (
        [{"denom": c.denom, "amount": str(c.amount)} for c in coins] if coins else None
    )
    document = {"address": convert_and_encode(PREF_ADD, address), "coins": encoded_coins}
    return sort_json(_go_dumps(document).encode())


def _validate(address: bytes, coins: Coins) -> None:
    if not address:
        raise err_invalid_address(convert_and_encode(PREF_ADD, address))
    if not coins.is_valid() or not coins.is_positive():
        raise err_invalid_coins(str(coins))


@dataclass
class Input:
    """Coins taken from one address."""

    address: bytes = b""
    coins: Coins = field(default_factory=Coins)

    def __post_init__(self) -> None:
        self.address, self.coins = _normalise(self.address, self.coins)

    def sign_bytes(self) -> bytes:
        """Canonical JSON bytes to sign."""
        return _sign_bytes(self.address, self.coins)

    def validate_basic(self) -> None:
        """Raise ``SdkError`` if the address is empty or the coins are not valid and positive."""
        _validate(self.address, self.coins)


@dataclass
class Output:
    """Coins given to one address."""

    address: bytes = b""
    coins: Coins = field(default_factory=Coins)

    def __post_init__(self) -> None:
        self.address, self.coins = _normalise(self.address, self.coins)

    def sign_bytes(self) -> bytes:
        """Canonical JSON bytes to sign."""
        return _sign_bytes(self.address, self.coins)

    def validate_basic(self) -> None:
        """Raise ``SdkError`` if the address is empty or the coins are not valid and positive."""
        _validate(self.address, self.coins)


@dataclass
class MsgSend:
    """A send from any number of inputs to any number of outputs."""

    inputs: list[Input] = field(default_factory=list)
    outputs: list[Output] = field(default_factory=list)