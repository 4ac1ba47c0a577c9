"""Polls the latest block and records transactions of subscribed addresses."""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from txparser.client import LATEST_BLOCK, TransactionResponse
from txparser.ethereum import Repository
from txparser.evm import Address
from txparser.models import Transaction


class BlockSource(Protocol):
    """Anything that can return the transactions of a block."""

    def get_block(self, block_id: str) -> list[TransactionResponse]:
        ...


class PollTarget(Protocol):
    """Anything that can be polled."""

    def poll(self) -> None:
        ...


class Poller:
    """Fetches the latest block and stores transactions of subscribed addresses."""

    def __init__(
        self,
        eth_client: BlockSource,
        repo: Repository,
        logger: logging.Logger | None = None,
    ) -> None:
        self._client = eth_client
        self._repo = repo
        self._logger = logger or logging.getLogger(__name__)

    def poll(self) -> None:
        """Run one polling pass; errors from the node are logged and re-raised."""
        try:
            txs = self._client.get_block(LATEST_BLOCK)
        except Exception as exc:
            self._logger.error("error retrieving the latest block: %s", exc)
            raise
        self._logger.debug("latest block info: %s", txs)

        for tx in txs:
            sender = Address(tx.from_)
            recipient = Address(tx.to)
            record = Transaction(
                hash=tx.hash,
                from_=sender,
                to=recipient,
                value=tx.value,
                block_number=tx.block_number,
            )

            if self._repo.has_address(sender):
                self._repo.save_transaction(sender, record)
                self._logger.info("new outbound transaction saved: %s", tx)
                continue

            if self._repo.has_address(recipient):
                self._repo.save_transaction(recipient, record)
                self._logger.info("new inbound transaction saved: %s", tx)


class Runner:
    """Calls a poller at a fixed rate until told to stop."""

    def __init__(self, logger: logging.Logger | None, poll_rate: float) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self.poll_rate = poll_rate

    def run(self, poller: PollTarget, stop_event: threading.Event) -> None:
        """Poll every ``poll_rate`` seconds until ``stop_event`` is set."""
        while not stop_event.wait(self.poll_rate):
            try:
                poller.poll()
            except Exception as exc:
                self._logger.error("error polling: %s", exc)
        self._logger.info("poller stopped")