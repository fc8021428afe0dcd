"""Bounded big integers: a signed 256-bit ``Int`` and an unsigned 256-bit ``Uint``.

Both types are immutable. Arithmetic that leaves the allowed range raises
``OverflowError``; division by zero raises ``ZeroDivisionError``.
Division and modulo follow Euclidean semantics: the remainder is never negative.
"""

from __future__ import annotations

import json
import operator
from functools import total_ordering

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1

_BASE_PREFIXES = "xXbBoO"


def _parse_integer(text: str) -> int:
    """Parse an integer literal, detecting the base from its prefix.

    Accepts ``0x``/``0b``/``0o`` prefixes, a leading ``0`` for octal,
    an optional sign and underscores between digits. Whitespace is rejected.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if not text or any(ch.isspace() for ch in text):
        raise ValueError(f"invalid integer string: {text!r}")
    sign, body = "", text
    if body[0] in "+-":
        sign, body = body[0], body[1:]
    if not body:
        raise ValueError(f"invalid integer string: {text!r}")
    if len(body) > 1 and body[0] == "0" and body[1] not in _BASE_PREFIXES:
        body = "0o" + body[1:]
    try:
        return int(sign + body, 0)
    except ValueError:
        raise ValueError(f"invalid integer string: {text!r}") from None


def _euclid_divmod(x: int, y: int) -> tuple[int, int]:
    remainder = x % abs(y)
    return (x - remainder) // y, remainder


@total_ordering
class _BoundedInteger:
    """Shared machinery of the bounded integer types."""

    __slots__ = ("_value",)
    _bits = 0

    def _init(self, value) -> None:
        value = operator.index(value)
        if not self._in_range(value):
            raise OverflowError(f"{type(self).__name__} out of bound")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def _in_range(cls, value: int) -> bool:
        raise NotImplementedError

    @classmethod
    def _make(cls, value: int):
        if not cls._in_range(value):
            raise OverflowError(f"{cls.__name__} overflow")
        return cls(value)

    @property
    def value(self) -> int:
        """The wrapped Python integer."""
        return self._value

    @classmethod
    def _parse(cls, s: str):
        value = _parse_integer(s)
        if not cls._in_range(value):
            raise ValueError(f"{cls.__name__} out of bound: {s}")
        return cls(value)

    @classmethod
    def _scaled(cls, n: int, dec: int):
        if dec < 0:
            raise ValueError(f"{cls.__name__}.with_decimal() decimal is negative")
        value = operator.index(n) * 10 ** dec
        if not cls._in_range(value):
            raise OverflowError(f"{cls.__name__}.with_decimal() out of bound")
        return cls(value)

    def _sign(self) -> int:
        return (self._value > 0) - (self._value < 0)

    def _coerce(self, other) -> int:
        if isinstance(other, _BoundedInteger):
            if type(other) is not type(self):
                raise TypeError(
                    f"cannot combine {type(self).__name__} with {type(other).__name__}"
                )
            return other._value
        if isinstance(other, int):
            return type(self)(other)._value
        raise TypeError(f"unsupported operand type: {type(other).__name__}")

    def _multiply(self, other):
        rhs = self._coerce(other)
        if self._value.bit_length() + rhs.bit_length() - 1 > self._bits:
            raise OverflowError(f"{type(self).__name__} overflow")
        return self._make(self._value * rhs)

    def _divmod(self, other) -> tuple[int, int]:
        rhs = self._coerce(other)
        if rhs == 0:
            raise ZeroDivisionError("division by zero")
        return _euclid_divmod(self._value, rhs)

    @classmethod
    def _from_json(cls, data):
        text = json.loads(data)
        if not isinstance(text, str):
            raise ValueError(f"{cls.__name__} must be encoded as a JSON string")
        return cls(_parse_integer(text))

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"


class Int(_BoundedInteger):
    """Signed integer in the range -(2**255 - 1) .. 2**255 - 1."""

    __slots__ = ()
    _bits = 255

    def __init__(self, value) -> None:
        self._init(value)

    @classmethod
    def _in_range(cls, value: int) -> bool:
        return value.bit_length() <= cls._bits

    @classmethod
    def from_string(cls, s: str) -> "Int":
        """Parse ``s``; raise ``ValueError`` if it is malformed or out of range."""
        return cls._parse(s)

    @classmethod
    def with_decimal(cls, n: int, dec: int) -> "Int":
        """Return ``n * 10**dec``."""
        return cls._scaled(n, dec)

    @classmethod
    def zero(cls) -> "Int":
        return cls(0)

    @classmethod
    def one(cls) -> "Int":
        return cls(1)

    def int64(self) -> int:
        """Return the value, raising ``OverflowError`` outside the int64 range."""
        if not self.is_int64():
            raise OverflowError("int64() out of bound")
        return self._value

    def is_int64(self) -> bool:
        return _INT64_MIN <= self._value <= _INT64_MAX

    def is_zero(self) -> bool:
        return self._value == 0

    def sign(self) -> int:
        return self._sign()

    def gt(self, other) -> bool:
        return self._value > self._coerce(other)

    def lt(self, other) -> bool:
        return self._value < self._coerce(other)

    def add(self, other) -> "Int":
        return self._make(self._value + self._coerce(other))

    def sub(self, other) -> "Int":
        return self._make(self._value - self._coerce(other))

    def mul(self, other) -> "Int":
        return self._multiply(other)

    def div(self, other) -> "Int":
        return Int(self._divmod(other)[0])

    def mod(self, other) -> "Int":
        return Int(self._divmod(other)[1])

    def neg(self) -> "Int":
        return Int(-self._value)

    def marshal_amino(self) -> str:
        return str(self._value)

    @classmethod
    def unmarshal_amino(cls, text: str) -> "Int":
        return cls(_parse_integer(text))

    def marshal_json(self) -> bytes:
        """Encode as a JSON string, keeping full precision."""
        return json.dumps(str(self._value)).encode()

    @classmethod
    def unmarshal_json(cls, data) -> "Int":
        return cls._from_json(data)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __floordiv__ = div
    __mod__ = mod
    __neg__ = neg


class Uint(_BoundedInteger):
    """Unsigned integer in the range 0 .. 2**256 - 1."""

    __slots__ = ()
    _bits = 256

    def __init__(self, value) -> None:
        self._init(value)

    @classmethod
    def _in_range(cls, value: int) -> bool:
        return value >= 0 and value.bit_length() <= cls._bits

    @classmethod
    def from_string(cls, s: str) -> "Uint":
        """Parse ``s``; raise ``ValueError`` if it is malformed or out of range."""
        return cls._parse(s)

    @classmethod
    def with_decimal(cls, n: int, dec: int) -> "Uint":
        """Return ``n * 10**dec``."""
        return cls._scaled(n, dec)

    @classmethod
    def zero(cls) -> "Uint":
        return cls(0)

    @classmethod
    def one(cls) -> "Uint":
        return cls(1)

    def uint64(self) -> int:
        """Return the value, raising ``OverflowError`` outside the uint64 range."""
        if not self.is_uint64():
            raise OverflowError("uint64() out of bound")
        return self._value

    def is_uint64(self) -> bool:
        return 0 <= self._value <= _UINT64_MAX

    def is_zero(self) -> bool:
        return self._value == 0

    def sign(self) -> int:
        return self._sign()

    def gt(self, other) -> bool:
        return self._value > self._coerce(other)

    def lt(self, other) -> bool:
        return self._value < self._coerce(other)

    def add(self, other) -> "Uint":
        return self._make(self._value + self._coerce(other))

    def sub(self, other) -> "Uint":
        return self._make(self._value - self._coerce(other))

    def mul(self, other) -> "Uint":
        return self._multiply(other)

    def div(self, other) -> "Uint":
        return Uint(self._divmod(other)[0])

    def mod(self, other) -> "Uint":
        return Uint(self._divmod(other)[1])

    def marshal_amino(self) -> str:
        return str(self._value)

    @classmethod
    def unmarshal_amino(cls, text: str) -> "Uint":
        return cls(_parse_integer(text))

    def marshal_json(self) -> bytes:
        """Encode as a JSON string, keeping full precision."""
        return json.dumps(str(self._value)).encode()

    @classmethod
    def unmarshal_json(cls, data) -> "Uint":
        return cls._from_json(data)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __floordiv__ = div
    __mod__ = mod


def min_int(a: Int, b: Int) -> Int:
    """Return the smaller of two ``Int`` values."""
    if not (isinstance(a, Int) and isinstance(b, Int)):
        raise TypeError("min_int() takes two Int values")
    return Int(min(a.value, b.value))


def min_uint(a: Uint, b: Uint) -> Uint:
    """Return the smaller of two ``Uint`` values."""
    if not (isinstance(a, Uint) and isinstance(b, Uint)):
        raise TypeError("min_uint() takes two Uint values")
    return Uint(min(a.value, b.value))