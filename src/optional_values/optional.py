from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Final, cast

from optional_values.errors import EmptyOptionalError, InvalidRepresentationError
from optional_values.log import get_logger


_logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class Present[T]:
    """
    값이 하나 들어 있는 Optional 입니다.

    Variant of an Optional that holds exactly one value.
    """

    # match Present(value) 구문에서 위치 인자로 매칭될 필드 정의
    # Define which field is used positionally in `match Present(value)`
    __match_args__ = ("value",)

    value: T


@dataclass(slots=True, frozen=True)
class Absent:
    """
    값이 없는 Optional 입니다. 모든 인스턴스는 서로 같습니다.

    Variant of an Optional that holds no value. All instances compare equal.
    """

    __match_args__ = ()


type Optional[T] = Present[T] | Absent
"""
값이 있거나(Present) 없는(Absent) 상태를 표현하는 공용 Optional 타입입니다.

Generic Optional type: either Present with one value, or Absent.

- T: 값이 있을 때 담기는 값의 타입 (payload type)
"""


# Absent 는 타입 인자가 없으므로 어떤 Optional[T] 자리에도 그대로 쓸 수 있다.
# Absent takes no type argument, so it fits any Optional[T].
EMPTY: Final[Absent] = Absent()


def create[T](value: T) -> Optional[T]:
    """
    값을 감싼 Optional 을 만든다. None 도 유효한 값이다.
    Wrap a value into a present Optional. None is a legal payload.
    """
    return Present(value)


def empty() -> Absent:
    """
    비어 있는 Optional 을 반환한다.
    Return the absent Optional.
    """
    return EMPTY


def has_value[T](optional: Optional[T]) -> bool:
    """
    Optional 에 값이 있는지 여부를 반환한다.
    Return True if the given Optional is present.

    타입 별칭은 런타임에 강제되지 않으므로 Present/Absent 가 아닌 값이 들어오면
    InvalidRepresentationError 를 던진다.
    The alias is not enforced at runtime, so anything other than
    Present/Absent raises InvalidRepresentationError.
    """
    match optional:
        case Present():
            return True
        case Absent():
            return False
        case _:
            _logger.debug("has_value called on %r", optional)
            raise InvalidRepresentationError(
                f"Expected an optional, got {type(optional).__name__}",
            )


def value[T](optional: Optional[T]) -> T:
    """
    Optional 에 담긴 값을 꺼낸다.
    Extract the payload of a present Optional.

    Raises:
        EmptyOptionalError: Optional 이 비어 있는 경우 / if the Optional is absent.
    """
    if not has_value(optional):
        _logger.debug("value called on empty optional")
        raise EmptyOptionalError("value called on empty optional")
    return cast(Present[T], optional).value


def get_attr[V](key: str, mapping: Mapping[str, V]) -> Optional[V]:
    """
    매핑에서 key 를 찾아 Optional 로 반환한다.
    Look up `key` in `mapping` and return the result as an Optional.
    """
    if key in mapping:
        return create(mapping[key])
    return EMPTY


def head[T](items: Iterable[T]) -> Optional[T]:
    """
    첫 번째 원소를 Optional 로 반환한다.
    Return the first element of `items` as an Optional.

    첫 원소만 꺼내므로 제너레이터나 무한 이터레이터에도 안전하다.
    Only the first element is consumed, so generators and infinite
    iterators are fine.
    """
    for item in items:
        return create(item)
    return EMPTY


def case_of[T, R](default: R, f: Callable[[T], R], optional: Optional[T]) -> R:
    """
    Optional 에 대한 패턴 매칭.
    Pattern match on an Optional.

    값이 있으면 f(value) 를, 없으면 default 를 반환한다. f 는 최대 한 번 호출된다.
    Return f(value) when present, otherwise `default`. `f` is called at most once.
    """
    if has_value(optional):
        return f(value(optional))
    return default


def bind[T, R](f: Callable[[T], Optional[R]], optional: Optional[T]) -> Optional[R]:
    """
    Optional 에 대한 모나드 bind.
    Monadic bind for Optional values.

    실패할 수 있는(Optional 을 반환하는) 연산을 이어 붙일 때 사용한다.
    Chains computations that may fail by returning an empty Optional.

    Example:
        >>> def safe_divide(a, b):
        ...     return EMPTY if b == 0 else create(a // b)
        >>> bind(lambda b: safe_divide(10, b), create(2))
        Present(value=5)
    """
    return case_of(EMPTY, f, optional)


def map[T, R](f: Callable[[T], R], optional: Optional[T]) -> Optional[R]:
    """
    Optional 에 담긴 값에 f 를 적용한다. 비어 있으면 그대로 비어 있다.
    Apply `f` to the payload, if any, keeping the present/absent shape.
    """
    return bind(lambda x: create(f(x)), optional)


def make_attr_set[V](key: str, optional: Optional[V]) -> dict[str, V]:
    """
    Optional 로부터 단일 항목 dict 를 만든다.
    Build a single-entry dict from an Optional.

    값이 있으면 {key: value}, 없으면 {} 를 반환하므로 조건부 병합에 쓸 수 있다.
    Returns {key: value} when present and {} when absent, for conditional merges:

        {"name": "Alice"} | make_attr_set("age", maybe_age)
    """
    return case_of({}, lambda v: {key: v}, optional)


__all__ = [
    "Present",
    "Absent",
    "Optional",
    "EMPTY",
    "create",
    "empty",
    "has_value",
    "value",
    "get_attr",
    "head",
    "case_of",
    "bind",
    "map",
    "make_attr_set",
]
