"""Chain-agnostic parser service that dispatches to registered chain parsers."""

from __future__ import annotations

import logging
import threading

from txparser.models import Parser, Transaction

ETHEREUM_CHAIN_ID = 1


class LoadingParserError(Exception):
    """No parser is registered for the requested chain."""

    def __init__(self, message: str = "error loading chain parser") -> None:
        super().__init__(message)


class CastingParserError(Exception):
    """The object registered for a chain is not a parser."""

    def __init__(self, message: str = "error casting chain parser") -> None:
        super().__init__(message)


class ParserService(Parser):
    """Routes parser calls to the parser registered for the chain in use."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._parsers: dict[int, object] = {}
        self._lock = threading.Lock()
        self._logger = logger or logging.getLogger(__name__)

    def register(self, chain_id: int, parser: Parser) -> None:
        """Register the parser that serves the given chain."""
        with self._lock:
            self._parsers[chain_id] = parser

    def _get_parser(self, chain_id: int = ETHEREUM_CHAIN_ID) -> Parser:
        # Only the Ethereum parser is served; chain_id is kept so more chains
        # can be routed later without changing callers.
        del chain_id
        with self._lock:
            if ETHEREUM_CHAIN_ID not in self._parsers:
                self._logger.error("error loading parser: %d", ETHEREUM_CHAIN_ID)
                raise LoadingParserError()
            candidate = self._parsers[ETHEREUM_CHAIN_ID]

        if not isinstance(candidate, Parser):
            self._logger.error(
                "error casting parser wanted (Parser) got %s", type(candidate).__name__
            )
            raise CastingParserError()
        return candidate

    def get_current_block(self) -> int:
        return self._get_parser(ETHEREUM_CHAIN_ID).get_current_block()

    def get_transactions(self, address: str) -> list[Transaction]:
        return self._get_parser(ETHEREUM_CHAIN_ID).get_transactions(address)

    def subscribe(self, address: str) -> None:
        self._get_parser(ETHEREUM_CHAIN_ID).subscribe(address)