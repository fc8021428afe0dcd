"""Coins: amounts of named currencies, and sorted sets of them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from qstars.sdkint import Int

_INT64_MAX = (1 << 63) - 1

# Denominations are 3 to 16 characters long and start with a letter.
_DENOM = r"[A-Za-z][A-Za-z0-9]{2,15}"
_AMOUNT = r"[0-9]+"
_SPACE = r"[\t\n\v\f\r ]*"
_COIN_RE = re.compile(rf"^({_AMOUNT}){_SPACE}({_DENOM})$")


@dataclass(frozen=True)
class Coin:
    """An amount of one currency."""

    denom: str
    amount: Int

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Int):
            object.__setattr__(self, "amount", Int(self.amount))

    @classmethod
    def of(cls, denom: str, amount: int) -> "Coin":
        """Build a coin from a denomination and a plain integer amount."""
        return cls(denom, Int(amount))

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"

    def same_denom_as(self, other: "Coin") -> bool:
        return self.denom == other.denom

    def is_zero(self) -> bool:
        return self.amount.is_zero()

    def is_gte(self, other: "Coin") -> bool:
        """True if both share a denomination and this amount is not smaller."""
        return self.same_denom_as(other) and not self.amount.lt(other.amount)

    def is_equal(self, other: "Coin") -> bool:
        return self.same_denom_as(other) and self.amount == other.amount

    def is_positive(self) -> bool:
        return self.amount.sign() == 1

    def is_not_negative(self) -> bool:
        return self.amount.sign() != -1

    def plus(self, other: "Coin") -> "Coin":
        """Add amounts of the same denomination; otherwise return this coin."""
        if not self.same_denom_as(other):
            return self
        return Coin(self.denom, self.amount.add(other.amount))

    def minus(self, other: "Coin") -> "Coin":
        """Subtract amounts of the same denomination; otherwise return this coin."""
        if not self.same_denom_as(other):
            return self
        return Coin(self.denom, self.amount.sub(other.amount))


class Coins(list):
    """A list of coins, expected to hold one coin per currency, sorted by denomination."""

    def __init__(self, coins: Iterable[Coin] = ()) -> None:
        super().__init__(coins)

    def __str__(self) -> str:
        return ",".join(str(coin) for coin in self)

    def __repr__(self) -> str:
        return f"Coins({list.__repr__(self)})"

    def is_valid(self) -> bool:
        """True if the coins are sorted with unique denominations and no zero amounts."""
        if not self:
            return True
        if len(self) == 1:
            return not self[0].is_zero()
        low_denom = self[0].denom
        for coin in self[1:]:
            if coin.denom <= low_denom or coin.is_zero():
                return False
            low_denom = coin.denom
        return True

    def plus(self, other: Iterable[Coin]) -> "Coins":
        """Merge two sorted coin sets, dropping currencies whose sum is zero."""
        other = list(other)
        total = Coins()
        index_a, index_b = 0, 0
        len_a, len_b = len(self), len(other)
        while True:
            if index_a == len_a:
                total.extend(other[index_b:])
                return total
            if index_b == len_b:
                total.extend(self[index_a:])
                return total
            coin_a, coin_b = self[index_a], other[index_b]
            if coin_a.denom < coin_b.denom:
                total.append(coin_a)
                index_a += 1
            elif coin_a.denom == coin_b.denom:
                summed = coin_a.plus(coin_b)
                if not summed.is_zero():
                    total.append(summed)
                index_a += 1
                index_b += 1
            else:
                total.append(coin_b)
                index_b += 1

    def negative(self) -> "Coins":
        return Coins(Coin(coin.denom, coin.amount.neg()) for coin in self)

    def minus(self, other: Iterable[Coin]) -> "Coins":
        return self.plus(Coins(other).negative())

    def is_gte(self, other: Iterable[Coin]) -> bool:
        """True if every currency of ``other`` is present here in at least that amount."""
        diff = self.minus(other)
        return not diff or diff.is_not_negative()

    def is_zero(self) -> bool:
        return all(coin.is_zero() for coin in self)

    def is_equal(self, other: Iterable[Coin]) -> bool:
        other = list(other)
        if len(self) != len(other):
            return False
        return all(
            a.denom == b.denom and a.amount == b.amount for a, b in zip(self, other)
        )

    def is_positive(self) -> bool:
        return bool(self) and all(coin.is_positive() for coin in self)

    def is_not_negative(self) -> bool:
        return all(coin.is_not_negative() for coin in self)

    def amount_of(self, denom: str) -> Int:
        """Binary-search the sorted coins for ``denom``; zero if absent."""
        lo, hi = 0, len(self)
        while hi - lo > 1:
            mid = lo + (hi - lo) // 2
            coin = self[mid]
            if denom < coin.denom:
                hi = mid
            elif denom == coin.denom:
                return coin.amount
            else:
                lo = mid + 1
        if hi - lo == 1 and self[lo].denom == denom:
            return self[lo].amount
        return Int.zero()

    def sort(self) -> "Coins":
        """Sort in place by denomination and return self."""
        super().sort(key=lambda coin: coin.denom)
        return self


def parse_coin(coin_str: str) -> Coin:
    """Parse one coin such as ``"10foo"``; raise ``ValueError`` if invalid."""
    coin_str = coin_str.strip()
    match = _COIN_RE.match(coin_str)
    if match is None:
        raise ValueError(f"invalid coin expression: {coin_str}")
    amount_str, denom = match.group(1), match.group(2)
    amount = int(amount_str)
    if amount > _INT64_MAX:
        raise ValueError(f"amount out of range: {amount_str}")
    return Coin(denom, Int(amount))


def parse_coins(coins_str: str) -> Coins:
    """Parse comma-separated coins, returning them sorted.

    An empty string gives empty coins. Raises ``ValueError`` on any invalid
    coin or when the result has duplicates or zero amounts.
    """
    coins_str = coins_str.strip()
    if not coins_str:
        return Coins()
    coins = Coins(parse_coin(part) for part in coins_str.split(","))
    coins.sort()
    if not coins.is_valid():
        raise ValueError(f"parseCoins invalid: {coins!r}")
    return coins