# qstars

Client-side building blocks for QOS/QSC chains.

- `qstars.sdkint`: `Int`, a signed integer bounded to ±(2²⁵⁵−1), and
  `Uint`, from 0 to 2²⁵⁶−1. Both are immutable. Arithmetic that leaves the
  range raises `OverflowError`, and division by zero raises
  `ZeroDivisionError`. Division and modulo are Euclidean, so the remainder
  is never negative. Both types have amino and JSON string encodings
  (`marshal_amino` / `unmarshal_amino`, `marshal_json` / `unmarshal_json`),
  and `min_int` / `min_uint` return the smaller of two values.
- `qstars.coin`: `Coin` and sorted `Coins` sets. They support arithmetic
  (`plus`, `minus`, `negative`), comparisons (`is_gte`, `is_equal`,
  `is_positive`, ...), `amount_of` and `sort`. `parse_coin` and
  `parse_coins` read inputs such as `"99bar,1foo"` and raise `ValueError`
  when the input is invalid.
- `qstars.errors` and `qstars.bankerrors`: coded errors (`SdkError`, an
  `Exception`), their ABCI codes and logs, and a constructor for each base
  or bank error code.
- `qstars.result`: the transaction `Result`, with `is_ok()`.
- `qstars.address`: bech32 encoding (`convert_and_encode`,
  `decode_and_convert`, `get_from_bech32`), and account addresses read from
  hex or bech32 text.
- `qstars.keys`: base64 helpers (`encbase64`, `decbase64`).
  `pub_addr_retrieval_from_amino` and `pub_addr_retrieval_from_hex1` take an
  ed25519 private key and return its bech32 public key, its bech32 address
  and a `nacl.signing.SigningKey`.
- `qstars.response`: the JSON `Response` returned to clients, with success,
  error and timeout constructors, and `get_result_key`, which gives the
  store key of a cross-chain result.
- `qstars.msg`: `Input`, `Output` and `MsgSend`. `validate_basic()` raises
  `SdkError`, and `sign_bytes()` gives the canonical bytes to sign.
  `sort_json` re-encodes JSON compactly with its keys sorted.
- `qstars.transfer`: `Transfer` and `Approve` transactions built from lists
  of `BaseCoin`, using `new_transfer`, `new_transfer_multiple` and
  `ApproveTx` (`create`, `increase`, `decrease`, `use`, `cancel`).

## Install

```
pip install .
```

## Examples

```python
from qstars.sdkint import Int, Uint
from qstars.coin import parse_coins

total = Int(40).add(Int(2))
print(total.marshal_json())          # b'"42"'

Uint(0).sub(Uint(1))                 # raises OverflowError

coins = parse_coins("98 bar , 1 foo")
print(coins.amount_of("bar"))        # 98
print(coins.plus(parse_coins("2foo")).is_valid())   # True
```

```python
from qstars.address import convert_and_encode, acc_address_from_bech32

text = convert_and_encode("address", bytes(20))
print(acc_address_from_bech32(text) == bytes(20))   # True
```

```python
from qstars.response import new_error_result, get_result_key

print(get_result_key("10", "ABCD"))  # heigth:10,hash:ABCD
print(new_error_result("500", 0, "", "boom").marshal())
```

## Command line

To print the version, run:

```
qstars-version
```

## What it does not do

The package builds values and transactions, but it does not talk to a chain.
It has no client that queries accounts or broadcasts transactions, no REST
server and no key storage. Transactions are not signed or serialised for the
wire here. `Transfer` and `Approve` are plain data classes.

## Tests

```
pip install ".[test]"
pytest
```