"""Transfer and approve transactions built from base coins."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from qstars.sdkint import Int

QOS_DENOM = "qos"

ACTION_CREATE = "create"
ACTION_INCREASE = "increase"
ACTION_DECREASE = "decrease"
ACTION_USE = "use"
ACTION_CANCEL = "cancel"


@dataclass(frozen=True)
class BaseCoin:
    """A named amount."""

    name: str
    amount: Int

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Int):
            object.__setattr__(self, "amount", Int(self.amount))


@dataclass
class TransItem:
    """One party of a transfer: an address, its main-chain coin amount and other coins."""

    address: bytes | None
    qos: Int = field(default_factory=Int.zero)
    qscs: list[BaseCoin] = field(default_factory=list)


@dataclass
class Transfer:
    senders: list[TransItem] = field(default_factory=list)
    receivers: list[TransItem] = field(default_factory=list)


@dataclass
class Approve:
    """An approve transaction of the given action between two addresses."""

    action: str
    from_address: bytes
    to_address: bytes
    qos: Int = field(default_factory=Int.zero)
    qscs: list[BaseCoin] = field(default_factory=list)


def wrap_trans_item(address: bytes | None, coins: Iterable[BaseCoin]) -> TransItem:
    """Sum the ``qos`` coins and collect the others, in order."""
    item = TransItem(address)
    for coin in coins:
        if coin.name == QOS_DENOM:
            item.qos = item.qos.add(coin.amount)
        else:
            item.qscs.append(BaseCoin(coin.name, coin.amount))
    return item


def new_transfer(sender: bytes, receiver: bytes, coins: Sequence[BaseCoin]) -> Transfer:
    """Transfer of the same coins from one sender to one receiver."""
    return Transfer(
        senders=[wrap_trans_item(sender, coins)],
        receivers=[wrap_trans_item(receiver, coins)],
    )


def new_transfer_multiple(
    senders: Sequence[bytes],
    receivers: Sequence[bytes],
    sender_coins: Sequence[Sequence[BaseCoin]],
    receiver_coins: Sequence[Sequence[BaseCoin]],
) -> Transfer:
    """Transfer between several senders and receivers, each with its own coins."""
    if len(sender_coins) < len(senders):
        raise ValueError("fewer coin lists than senders")
    if len(receiver_coins) < len(receivers):
        raise ValueError("fewer coin lists than receivers")
    return Transfer(
        senders=[wrap_trans_item(a, c) for a, c in zip(senders, sender_coins)],
        receivers=[wrap_trans_item(a, c) for a, c in zip(receivers, receiver_coins)],
    )


class ApproveTx:
    """Builds approve transactions from one address to another."""

    def __init__(self, from_address: bytes, to_address: bytes) -> None:
        self.from_address = from_address
        self.to_address = to_address

    def _build(self, action: str, coins: Iterable[BaseCoin]) -> Approve:
        item = wrap_trans_item(None, coins)
        return Approve(action, self.from_address, self.to_address, item.qos, item.qscs)

    def create(self, coins: Iterable[BaseCoin]) -> Approve:
        return self._build(ACTION_CREATE, coins)

    def increase(self, coins: Iterable[BaseCoin]) -> Approve:
        return self._build(ACTION_INCREASE, coins)

    def decrease(self, coins: Iterable[BaseCoin]) -> Approve:
        return self._build(ACTION_DECREASE, coins)

    def use(self, coins: Iterable[BaseCoin]) -> Approve:
        return self._build(ACTION_USE, coins)

    def cancel(self) -> Approve:
        return Approve(ACTION_CANCEL, self.from_address, self.to_address)