"""EVM account addresses."""

from __future__ import annotations

import re

from txparser.errors import BadRequestError

_ADDRESS_RE = re.compile(r"0x[0-9a-fA-F]{40}")


class InvalidAddressError(BadRequestError):
    """Raised when a string is not a well-formed EVM address."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"error validating address: {address}")


class Address(str):
    """A hex-encoded 20-byte account address such as ``0x00…00``."""

    __slots__ = ()

    def validate(self) -> Address:
        """Return the address if it is well formed, else raise InvalidAddressError."""
        if _ADDRESS_RE.fullmatch(self) is None:
            raise InvalidAddressError(str(self))
        return self