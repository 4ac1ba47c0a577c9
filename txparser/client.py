"""JSON-RPC client for an Ethereum node."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any

JSONRPC_VERSION = "2.0"
ETH_GET_BLOCK_BY_NUMBER = "eth_getBlockByNumber"
RETURN_FULL_TRANSACTION_OBJECTS = True
LATEST_BLOCK = "latest"

_MISSING = object()


class RpcError(Exception):
    """An error object returned by the node."""

    def __init__(self, message: str, code: int = 0) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


def _string_field(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class TransactionResponse:
    """A transaction as the node reports it."""

    hash: str = ""
    from_: str = ""
    to: str = ""
    value: str = ""
    block_number: str = ""

    @classmethod
    def from_json(cls, data: Any) -> TransactionResponse:
        """Build from a decoded JSON transaction object."""
        if not isinstance(data, dict):
            raise ValueError(f"transaction must be an object, got {type(data).__name__}")
        return cls(
            hash=_string_field(data, "hash"),
            from_=_string_field(data, "from"),
            to=_string_field(data, "to"),
            value=_string_field(data, "value"),
            block_number=_string_field(data, "blockNumber"),
        )


class EthereumClient:
    """Fetches blocks from an Ethereum node over JSON-RPC."""

    def __init__(self, url: str, logger: logging.Logger | None = None) -> None:
        self.url = url
        self._logger = logger or logging.getLogger(__name__)

    def get_block(self, block_id: str) -> list[TransactionResponse]:
        """Return the full transactions of a block, by number or tag."""
        try:
            result = self._do_rpc_request(
                ETH_GET_BLOCK_BY_NUMBER, block_id, RETURN_FULL_TRANSACTION_OBJECTS
            )
        except Exception as exc:
            self._logger.error("error making get block request: %s", exc)
            raise

        try:
            return self._parse_block(result)
        except ValueError as exc:
            self._logger.error("error unmarshalling response block response: %s", exc)
            raise

    @staticmethod
    def _parse_block(result: Any) -> list[TransactionResponse]:
        if result is _MISSING:
            raise ValueError("unexpected end of JSON input")
        if result is None:
            return []
        if not isinstance(result, dict):
            raise ValueError(f"block must be an object, got {type(result).__name__}")
        _string_field(result, "number")
        transactions = result.get("transactions")
        if transactions is None:
            return []
        if not isinstance(transactions, list):
            raise ValueError("block transactions must be a list")
        return [TransactionResponse.from_json(item) for item in transactions]

    def _do_rpc_request(self, method: str, *params: Any) -> Any:
        payload = {
            "jsonrpc": JSONRPC_VERSION,
            "method": method,
            "params": list(params),
            "id": 1,
        }
        request = urllib.request.Request(
            self.url,
            data=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        try:
            with urllib.request.urlopen(request) as response:
                body = response.read()
        except urllib.error.HTTPError as exc:
            # The node's status code is not meaningful on its own; the body decides.
            with exc:
                body = exc.read()

        decoded = json.loads(body)
        if not isinstance(decoded, dict):
            raise ValueError("RPC response must be an object")

        error = decoded.get("error")
        if error is not None:
            if not isinstance(error, dict):
                raise ValueError("RPC error must be an object")
            raise RpcError(str(error.get("message", "")), int(error.get("code", 0) or 0))

        return decoded.get("result", _MISSING)