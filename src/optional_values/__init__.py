"""
optional_values 패키지.

값이 있거나 없는 상태를 None 이나 특수 값 없이 표현하는 Optional 타입과
그 조합 함수(create, bind, map, case_of 등)를 제공합니다.

The `optional_values` package.

Provides the Optional type, representing presence or absence of a value
without None or sentinel values, and its combinators (create, bind, map,
case_of, ...).
"""

from .errors import (
    EmptyOptionalError,
    InvalidRepresentationError,
    OptionalError,
    OptionalErrorCode,
)
from .interop import from_list, from_nullable, to_list, to_nullable
from .models import OptionalPayload, from_payload, to_payload
from .optional import (
    EMPTY,
    Absent,
    Optional,
    Present,
    bind,
    case_of,
    create,
    empty,
    get_attr,
    has_value,
    head,
    make_attr_set,
    map,
    value,
)

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
    "from_list",
    "to_list",
    "from_nullable",
    "to_nullable",
    "OptionalPayload",
    "to_payload",
    "from_payload",
    "OptionalError",
    "OptionalErrorCode",
    "EmptyOptionalError",
    "InvalidRepresentationError",
]
