"""Transaction records and the parser interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from txparser.evm import Address


@dataclass(frozen=True)
class Transaction:
    """A transaction that touches a subscribed address."""

    hash: str = ""
    from_: Address = Address("")
    to: Address = Address("")
    value: str = ""
    block_number: str = ""


class Parser(ABC):
    """Tracks subscribed addresses and the transactions that involve them."""

    @abstractmethod
    def get_current_block(self) -> int:
        """Return the number of the last parsed block."""

    @abstractmethod
    def subscribe(self, address: str) -> None:
        """Add an address to the set of observed addresses."""

    @abstractmethod
    def get_transactions(self, address: str) -> list[Transaction]:
        """Return the inbound and outbound transactions of an address."""