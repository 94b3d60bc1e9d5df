"""An RPC extension that returns constant and doubled values."""

from __future__ import annotations

from typing import Any, Sequence

U64_MAX = 2**64 - 1

METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602


class RpcError(Exception):
    """A JSON-RPC error with its code."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")


def _as_u64(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= U64_MAX:
        raise RpcError(INVALID_PARAMS, f"Invalid params: expected u64, got {value!r}")
    return value


class Silly:
    """Implements the `silly_seven` and `silly_double` methods."""

    def silly_7(self) -> int:
        return 7

    def silly_double(self, val: int) -> int:
        result = 2 * _as_u64(val)
        if result > U64_MAX:
            raise OverflowError("attempt to multiply with overflow")
        return result

    def handle(self, method: str, params: Sequence[Any] | None = None) -> int:
        """Dispatch a call by its RPC name with positional parameters."""
        params = list(params or [])
        if method == "silly_seven":
            if params:
                raise RpcError(INVALID_PARAMS, "Invalid params: expected no parameters")
            return self.silly_7()
        if method == "silly_double":
            if len(params) != 1:
                raise RpcError(INVALID_PARAMS, "Invalid params: expected one parameter")
            return self.silly_double(params[0])
        raise RpcError(METHOD_NOT_FOUND, "Method not found")