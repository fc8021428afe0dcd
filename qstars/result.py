"""The outcome of delivering or checking a transaction."""

from __future__ import annotations

from dataclasses import dataclass

ABCI_CODE_OK = 0


@dataclass
class Result:
    """Response code, returned data and log of a transaction."""

    code: int = ABCI_CODE_OK
    data: bytes = b""
    log: str = ""
    gas_wanted: int = 0
    gas_used: int = 0
    fee_amount: int = 0
    fee_denom: str = ""

    def is_ok(self) -> bool:
        return self.code == ABCI_CODE_OK