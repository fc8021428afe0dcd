"""Bounded integers, coins, bech32 addresses, ed25519 key derivation and transaction building for QOS/QSC chains."""

__version__ = "0.24.2"