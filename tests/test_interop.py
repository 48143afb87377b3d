import pytest

from optional_values import (
    EMPTY,
    InvalidRepresentationError,
    create,
    from_list,
    from_nullable,
    to_list,
    to_nullable,
)


def test_from_list():
    assert from_list([]) == EMPTY
    assert from_list([42]) == create(42)
    assert from_list(("a",)) == create("a")


def test_from_list_rejects_long_lists():
    with pytest.raises(InvalidRepresentationError, match="Expected a list with 0 or 1 elements, got 3"):
        from_list([1, 2, 3])


@pytest.mark.parametrize("items", ["a", {"a": 1}, 42, None])
def test_from_list_rejects_non_lists(items):
    with pytest.raises(InvalidRepresentationError, match="Expected a list, got"):
        from_list(items)


def test_to_list():
    assert to_list(EMPTY) == []
    assert to_list(create(42)) == [42]
    assert from_list(to_list(create("x"))) == create("x")


def test_nullable():
    assert from_nullable(None) == EMPTY
    assert from_nullable(0) == create(0)
    assert to_nullable(EMPTY) is None
    assert to_nullable(create("x")) == "x"
