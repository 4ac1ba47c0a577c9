import pytest

from txparser.errors import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    ServiceError,
)


@pytest.mark.parametrize(
    ("cls", "prefix"),
    [
        (ConflictError, "error conflict"),
        (NotFoundError, "error not found"),
        (BadRequestError, "error bad request"),
    ],
)
def test_message_without_detail_is_prefix(cls, prefix):
    assert str(cls()) == prefix


@pytest.mark.parametrize("cls", [ConflictError, NotFoundError, BadRequestError])
def test_message_with_detail_is_prefixed(cls):
    err = cls("something happened")
    assert str(err) == f"{cls.prefix}: something happened"
    assert err.detail == "something happened"


@pytest.mark.parametrize("cls", [ConflictError, NotFoundError, BadRequestError])
def test_categories_are_service_errors(cls):
    with pytest.raises(ServiceError) as excinfo:
        raise cls("detail")
    assert excinfo.value.detail == "detail"
    assert str(excinfo.value) == f"{cls.prefix}: detail"


def test_categories_are_distinct():
    not_found = NotFoundError("missing")
    conflict = ConflictError("taken")
    assert str(not_found) == "error not found: missing"
    assert str(conflict) == "error conflict: taken"
    assert not isinstance(not_found, ConflictError)
    assert not isinstance(conflict, BadRequestError)
    assert not isinstance(conflict, NotFoundError)