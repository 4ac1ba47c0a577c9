import dataclasses

import pytest

from txparser.evm import Address
from txparser.models import Parser, Transaction

ZERO_ADDRESS = Address("0x0000000000000000000000000000000000000000")


class _StaticParser(Parser):
    def __init__(self):
        self.subscribed = []

    def get_current_block(self):
        return 7

    def subscribe(self, address):
        self.subscribed.append(address)

    def get_transactions(self, address):
        return [Transaction(hash="h1", from_=Address(address), to=ZERO_ADDRESS)]


def test_transaction_equality_by_value():
    a = Transaction("h1", ZERO_ADDRESS, ZERO_ADDRESS, "10", "0x1")
    b = Transaction(hash="h1", from_=ZERO_ADDRESS, to=ZERO_ADDRESS, value="10", block_number="0x1")
    assert a == b
    assert a != dataclasses.replace(b, hash="h2")


def test_transaction_defaults_are_empty():
    tx = Transaction(hash="h")
    assert (tx.from_, tx.to, tx.value, tx.block_number) == ("", "", "", "")


def test_transaction_is_immutable():
    tx = Transaction(hash="h1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        tx.hash = "h2"
    assert tx.hash == "h1"


def test_parser_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Parser()
    assert Parser.__abstractmethods__ == frozenset(
        {"get_current_block", "subscribe", "get_transactions"}
    )


def test_complete_parser_is_usable():
    parser = _StaticParser()
    parser.subscribe(str(ZERO_ADDRESS))
    assert parser.subscribed == [ZERO_ADDRESS]
    assert parser.get_transactions(str(ZERO_ADDRESS))[0].from_ == ZERO_ADDRESS
    assert parser.get_current_block() == 7