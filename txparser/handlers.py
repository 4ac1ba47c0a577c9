"""HTTP handlers for the parser service."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from http import HTTPStatus
from typing import Any

from txparser.errors import BadRequestError, ConflictError, NotFoundError
from txparser.models import Parser, Transaction
from txparser.router import Request, Response, Router

ADDRESS_QUERY_KEY = "address"
_JSON_HEADERS = {"Content-Type": "application/json"}


def json_ok(payload: Any) -> Response:
    """Return a 200 response whose body is the payload encoded as JSON."""
    try:
        text = json.dumps(payload, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        return handle_error(exc)
    return Response(
        status=HTTPStatus.OK,
        headers=dict(_JSON_HEADERS),
        body=(text + "\n").encode("utf-8"),
    )


def handle_error(err: BaseException) -> Response:
    """Map an error onto an HTTP status, with its message as the body."""
    if isinstance(err, ConflictError):
        status = HTTPStatus.CONFLICT
    elif isinstance(err, NotFoundError):
        status = HTTPStatus.NOT_FOUND
    elif isinstance(err, BadRequestError):
        status = HTTPStatus.BAD_REQUEST
    else:
        status = HTTPStatus.INTERNAL_SERVER_ERROR
    return Response(
        status=status,
        headers=dict(_JSON_HEADERS),
        body=str(err).encode("utf-8"),
    )


def current_block_response(block_number: int) -> dict[str, int]:
    """Build the body of the current-block endpoint."""
    return {"block_number": block_number}


def transactions_response(txs: Iterable[Transaction]) -> list[dict[str, str]]:
    """Build the body of the transactions endpoint."""
    return [
        {
            "hash": tx.hash,
            "from": str(tx.from_),
            "to": str(tx.to),
            "value": tx.value,
            "blockNumber": tx.block_number,
        }
        for tx in txs
    ]


class ParserHandlers:
    """Request handlers that delegate to a parser service."""

    def __init__(self, parser_svc: Parser, logger: logging.Logger | None = None) -> None:
        self._svc = parser_svc
        self._logger = logger or logging.getLogger(__name__)

    def get_current_block(self, request: Request) -> Response:
        try:
            block_number = self._svc.get_current_block()
        except Exception as exc:
            self._logger.error("error retrieving current block: %s", exc)
            return handle_error(exc)
        return json_ok(current_block_response(block_number))

    def subscribe_address(self, request: Request) -> Response:
        address = request.query_get(ADDRESS_QUERY_KEY)
        try:
            self._svc.subscribe(address)
        except Exception as exc:
            self._logger.error("error subscribing address: %s: %s", address, exc)
            return handle_error(exc)
        return json_ok({})

    def get_transactions(self, request: Request) -> Response:
        address = request.query_get(ADDRESS_QUERY_KEY)
        try:
            txs = self._svc.get_transactions(address)
        except Exception as exc:
            self._logger.error(
                "error retrieving transactions for address: %s: %s", address, exc
            )
            return handle_error(exc)
        return json_ok(transactions_response(txs or []))


def register_routes(
    router: Router, parser_svc: Parser, logger: logging.Logger | None = None
) -> ParserHandlers:
    """Register the parser endpoints on a router."""
    handlers = ParserHandlers(parser_svc, logger)
    router.handle("GET", "/blocks/current", handlers.get_current_block)
    router.handle("POST", "/subscribe", handlers.subscribe_address)
    router.handle("GET", "/transactions", handlers.get_transactions)
    return handlers