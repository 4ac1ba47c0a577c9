"""Ethereum parser built on a repository of subscribed addresses."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod

from txparser.errors import ConflictError, NotFoundError
from txparser.evm import Address
from txparser.models import Parser, Transaction

_HEX_DIGITS_RE = re.compile(r"[+-]?[0-9a-fA-F]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class AddressNotSubscribedError(NotFoundError):
    """The address has not been subscribed."""

    def __init__(self, detail: str = "error address not subscribed") -> None:
        super().__init__(detail)


class AddressConflictError(ConflictError):
    """The address is already subscribed."""

    def __init__(self, detail: str = "error address already exists") -> None:
        super().__init__(detail)


class Repository(ABC):
    """Storage for subscribed addresses and their transactions."""

    @abstractmethod
    def get_last_parsed_block(self) -> str:
        """Return the hex number of the last parsed block."""

    @abstractmethod
    def add_address(self, address: Address) -> None:
        """Subscribe an address; raise AddressConflictError if it already is."""

    @abstractmethod
    def has_address(self, address: Address) -> bool:
        """Return whether the address is subscribed."""

    @abstractmethod
    def save_transaction(self, address: Address, tx: Transaction) -> None:
        """Store a transaction under an address."""

    @abstractmethod
    def get_transactions(self, address: Address) -> list[Transaction]:
        """Return the transactions stored under an address."""


def hex_to_decimal(hex_value: str) -> int:
    """Convert a ``0x``-prefixed hex string to a signed 64-bit integer."""
    if not hex_value.startswith("0x"):
        raise ValueError(f"unexpected result format: {hex_value}")

    digits = hex_value[2:]
    if _HEX_DIGITS_RE.fullmatch(digits) is None:
        raise ValueError(f"failed to parse hex {digits!r}: invalid syntax")

    value = int(digits, 16)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"failed to parse hex {digits!r}: value out of range")
    return value


class EthereumParser(Parser):
    """Parser for Ethereum mainnet backed by a repository."""

    def __init__(self, repo: Repository, logger: logging.Logger | None = None) -> None:
        self._repo = repo
        self._logger = logger or logging.getLogger(__name__)

    def get_current_block(self) -> int:
        return hex_to_decimal(self._repo.get_last_parsed_block())

    def _validated(self, address: str) -> Address:
        try:
            return Address(address).validate()
        except ValueError:
            raise
        except Exception as exc:
            self._logger.error("error validating address: %s", exc)
            raise

    def get_transactions(self, address: str) -> list[Transaction]:
        addr = self._validated(address)
        if not self._repo.has_address(addr):
            raise AddressNotSubscribedError()
        return list(self._repo.get_transactions(addr) or [])

    def subscribe(self, address: str) -> None:
        addr = self._validated(address)
        if self._repo.has_address(addr):
            raise AddressConflictError()
        self._repo.add_address(addr)