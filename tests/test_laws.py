import pytest

from optional_values import EMPTY, bind, case_of, create, has_value, make_attr_set, map, value


OPTIONALS = [EMPTY, create(0), create(7), create(-3), create(None)]


def inc(x):
    return 0 if x is None else x + 1


def double(x):
    return 0 if x is None else x * 2


def half(x):
    return EMPTY if x is None or x % 2 else create(x // 2)


def positive(x):
    return create(x) if x is not None and x > 0 else EMPTY


@pytest.mark.parametrize("v", [0, "", None, [1, 2], {"k": "v"}])
def test_create_then_value(v):
    assert has_value(create(v))
    assert value(create(v)) == v


@pytest.mark.parametrize("o", OPTIONALS)
def test_case_of_law(o):
    expected = inc(value(o)) if has_value(o) else "default"
    assert case_of("default", inc, o) == expected


@pytest.mark.parametrize("o", OPTIONALS)
def test_functor_identity(o):
    assert map(lambda x: x, o) == o


@pytest.mark.parametrize("o", OPTIONALS)
def test_functor_composition(o):
    assert map(double, map(inc, o)) == map(lambda x: double(inc(x)), o)


@pytest.mark.parametrize("v", [0, 4, 7])
def test_monad_left_identity(v):
    assert bind(half, create(v)) == half(v)


@pytest.mark.parametrize("o", OPTIONALS)
def test_monad_right_identity(o):
    assert bind(create, o) == o


@pytest.mark.parametrize("o", [*OPTIONALS, create(8), create(12)])
def test_monad_associativity(o):
    assert bind(positive, bind(half, o)) == bind(lambda x: bind(positive, half(x)), o)


@pytest.mark.parametrize("o", OPTIONALS)
def test_map_is_bind_of_create(o):
    assert map(inc, o) == bind(lambda x: create(inc(x)), o)


@pytest.mark.parametrize("o", OPTIONALS)
def test_make_attr_set_law(o):
    expected = {"k": value(o)} if has_value(o) else {}
    assert make_attr_set("k", o) == expected
