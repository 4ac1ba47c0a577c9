"""Thread-safe in-memory repository."""

from __future__ import annotations

import threading

from txparser.ethereum import AddressConflictError, Repository
from txparser.evm import Address
from txparser.models import Transaction


class MemoryStorage(Repository):
    """Keeps subscribed addresses and their transactions in memory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._addresses: set[Address] = set()
        self._txs: dict[Address, list[Transaction]] = {}
        self._last_parsed_block = "0x0"

    def get_last_parsed_block(self) -> str:
        with self._lock:
            return self._last_parsed_block

    def add_address(self, address: Address) -> None:
        with self._lock:
            if address in self._addresses:
                raise AddressConflictError()
            self._addresses.add(address)

    def has_address(self, address: Address) -> bool:
        with self._lock:
            return address in self._addresses

    def save_transaction(self, address: Address, tx: Transaction) -> None:
        """Store a transaction unless one with the same hash is already stored."""
        with self._lock:
            saved = self._txs.setdefault(address, [])
            if any(existing.hash == tx.hash for existing in saved):
                return
            self._last_parsed_block = tx.block_number
            saved.append(tx)

    def get_transactions(self, address: Address) -> list[Transaction]:
        with self._lock:
            return list(self._txs.get(address, ()))