"""JSON responses returned to clients, and the key under which results are stored."""

from __future__ import annotations

import base64
import dataclasses
import json
from dataclasses import dataclass
from typing import Any

from qstars.sdkint import Int, Uint

RESULT_CODE_SUCCESS = "0"
RESULT_CODE_QSTARS_TIMEOUT = "-2"
RESULT_CODE_QOS_TIMEOUT = "-1"
RESULT_CODE_INTERNAL_ERROR = "500"

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


def _encode_default(obj: Any) -> Any:
    if isinstance(obj, (Int, Uint)):
        return str(obj)
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


@dataclass
class Response:
    """Outcome reported to a client: a code, a block height and an optional payload."""

    code: str
    height: int = 0
    tx_hash: str = ""
    reason: str = ""
    result: str | None = None

    def marshal(self) -> str:
        """Render as indented JSON, leaving out empty hash, reason and result."""
        document: dict[str, Any] = {"code": self.code, "height": self.height}
        if self.tx_hash:
            document["hash"] = self.tx_hash
        if self.reason:
            document["reason"] = self.reason
        if self.result:
            try:
                document["result"] = json.loads(self.result)
            except ValueError as exc:
                return internal_error(str(exc)).marshal()
        return _go_dumps(document, indent=2)


def new_error_result(code: str, height: int, tx_hash: str, reason: str) -> Response:
    return Response(code=code, height=height, tx_hash=tx_hash, reason=reason)


def internal_error(reason: str) -> Response:
    return new_error_result(RESULT_CODE_INTERNAL_ERROR, 0, "", reason)


def new_success_result(height: int, tx_hash: str, res: Any) -> Response:
    """Successful response carrying ``res`` encoded as JSON."""
    raw = None
    if res is not None:
        try:
            raw = _go_dumps(res, separators=(",", ":"), default=_encode_default)
        except (TypeError, ValueError) as exc:
            return internal_error(str(exc))
    return Response(code=RESULT_CODE_SUCCESS, height=height, tx_hash=tx_hash, result=raw)


def qstars_timeout_error(height: int, tx_hash: str) -> Response:
    """The side chain did not answer in time."""
    return new_error_result(RESULT_CODE_QSTARS_TIMEOUT, height, tx_hash, "qstars timeout")


def qos_timeout_error(height: int, tx_hash: str) -> Response:
    """The main chain did not answer in time."""
    return new_error_result(RESULT_CODE_QOS_TIMEOUT, height, tx_hash, "qos timeout")


def get_result_key(height, tx_hash: str) -> str:
    """Store key under which a cross-chain result is kept."""
    return f"heigth:{height},hash:{tx_hash}"