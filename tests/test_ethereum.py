import pytest

from txparser.errors import BadRequestError, ConflictError, NotFoundError
from txparser.ethereum import (
    AddressConflictError,
    AddressNotSubscribedError,
    EthereumParser,
    Repository,
    hex_to_decimal,
)
from txparser.evm import Address, InvalidAddressError
from txparser.models import Transaction

ZERO_ADDRESS = Address("0x0000000000000000000000000000000000000000")
ONE_ADDRESS = Address("0x0000000000000000000000000000000000000001")


class FakeRepo(Repository):
    def __init__(self, last_block="", transactions=None, has_address=False):
        self.last_block = last_block
        self.transactions = transactions or []
        self.has = has_address
        self.added = []

    def get_last_parsed_block(self):
        return self.last_block

    def add_address(self, address):
        self.added.append(address)

    def has_address(self, address):
        return self.has

    def save_transaction(self, address, tx):
        pass

    def get_transactions(self, address):
        return self.transactions


@pytest.mark.parametrize(
    "hex_value, expected",
    [("0x4b7", 1207), ("0x0", 0), ("0xff", 255), ("0x7fffffffffffffff", 2**63 - 1)],
)
def test_hex_to_decimal_valid(hex_value, expected):
    assert hex_to_decimal(hex_value) == expected


@pytest.mark.parametrize(
    "hex_value, message",
    [
        ("4b7", "unexpected result format"),
        ("0xZZZ", "failed to parse hex"),
        ("0x", "failed to parse hex"),
        ("", "unexpected result format"),
        ("0x0x1f", "failed to parse hex"),
        ("0x8000000000000000", "failed to parse hex"),
    ],
)
def test_hex_to_decimal_invalid(hex_value, message):
    with pytest.raises(ValueError, match=message):
        hex_to_decimal(hex_value)


def test_get_current_block():
    parser = EthereumParser(FakeRepo(last_block="0x1"))
    assert parser.get_current_block() == 1


def test_get_current_block_invalid():
    parser = EthereumParser(FakeRepo(last_block="invalid"))
    with pytest.raises(ValueError, match="unexpected result format"):
        parser.get_current_block()


def test_get_transactions_happy_path():
    want = [
        Transaction(hash="h1", from_=ZERO_ADDRESS, to=ONE_ADDRESS, value="10", block_number="0x2"),
        Transaction(hash="h2", from_=ONE_ADDRESS, to=ZERO_ADDRESS, value="20", block_number="0x2"),
    ]
    parser = EthereumParser(FakeRepo(transactions=want, has_address=True))
    assert parser.get_transactions(str(ZERO_ADDRESS)) == want


def test_get_transactions_invalid_address():
    parser = EthereumParser(FakeRepo())
    with pytest.raises(InvalidAddressError) as info:
        parser.get_transactions("not-an-address")
    assert isinstance(info.value, BadRequestError)


def test_get_transactions_not_subscribed():
    parser = EthereumParser(FakeRepo(has_address=False))
    with pytest.raises(AddressNotSubscribedError) as info:
        parser.get_transactions(str(ZERO_ADDRESS))
    assert isinstance(info.value, NotFoundError)
    assert str(info.value) == "error not found: error address not subscribed"


def test_subscribe_adds_address():
    repo = FakeRepo(has_address=False)
    EthereumParser(repo).subscribe(str(ZERO_ADDRESS))
    assert repo.added == [ZERO_ADDRESS]


def test_subscribe_conflict():
    repo = FakeRepo(has_address=True)
    with pytest.raises(AddressConflictError) as info:
        EthereumParser(repo).subscribe(str(ZERO_ADDRESS))
    assert isinstance(info.value, ConflictError)
    assert repo.added == []


def test_subscribe_invalid_address():
    repo = FakeRepo()
    with pytest.raises(InvalidAddressError):
        EthereumParser(repo).subscribe("0x123")
    assert repo.added == []