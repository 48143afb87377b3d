"""
Optional 과 다른 표현 사이의 변환 함수 모음.

- 0/1 개 원소 리스트 표현 ([] / [value])
- None 을 "값 없음"으로 쓰는 nullable 표현

Conversions between Optional and other encodings: the 0-or-1 element list
encoding, and nullable values where None means "absent".
"""

from collections.abc import Sequence

from optional_values.errors import InvalidRepresentationError
from optional_values.log import get_logger
from optional_values.optional import EMPTY, Optional, case_of, create


_logger = get_logger(__name__)


def from_list[T](items: Sequence[T]) -> Optional[T]:
    """
    0 또는 1 개 원소를 가진 리스트를 Optional 로 변환한다.
    Convert a list with 0 or 1 elements into an Optional.

    Raises:
        InvalidRepresentationError: 리스트가 아니거나 원소가 2 개 이상인 경우.
            If `items` is not a list/tuple or holds more than one element.
    """
    if not isinstance(items, (list, tuple)):
        _logger.debug("from_list called on %r", items)
        raise InvalidRepresentationError(
            f"Expected a list, got {type(items).__name__}",
        )

    match len(items):
        case 0:
            return EMPTY
        case 1:
            return create(items[0])
        case length:
            _logger.debug("from_list called on a list of %d elements", length)
            raise InvalidRepresentationError(
                f"Expected a list with 0 or 1 elements, got {length}",
            )


def to_list[T](optional: Optional[T]) -> list[T]:
    """Optional 을 [] 또는 [value] 로 변환한다. / Convert to [] or [value]."""
    return case_of([], lambda v: [v], optional)


def from_nullable[T](value: T | None) -> Optional[T]:
    """None 이면 비어 있는 Optional 을 반환한다. / None becomes absent."""
    if value is None:
        return EMPTY
    return create(value)


def to_nullable[T](optional: Optional[T]) -> T | None:
    """비어 있으면 None 을 반환한다. / Absent becomes None."""
    return case_of(None, lambda v: v, optional)


__all__ = [
    "from_list",
    "to_list",
    "from_nullable",
    "to_nullable",
]
