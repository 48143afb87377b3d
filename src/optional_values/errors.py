from enum import Enum


class OptionalErrorCode(str, Enum):
    """
    Optional 값을 다루는 과정에서 발생하는 에러 코드.
    Error codes raised while operating on optional values.
    """

    EMPTY_OPTIONAL = "empty_optional"
    INVALID_REPRESENTATION = "invalid_representation"


class OptionalError(Exception):
    """
    optional_values 패키지에서 발생하는 모든 예외의 기반 클래스.
    Base class for every exception raised by the optional_values package.
    """

    code: OptionalErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyOptionalError(OptionalError, LookupError):
    """
    비어 있는 Optional 에서 값을 꺼내려 할 때 발생한다.
    Raised when the payload of an absent optional is requested.
    """

    code = OptionalErrorCode.EMPTY_OPTIONAL


class InvalidRepresentationError(OptionalError, TypeError):
    """
    Optional 이 아닌 값이나 0/1 개 규칙을 어기는 리스트가 전달되었을 때 발생한다.
    Raised when a value that is not an optional (or a list breaking the
    0-or-1 element convention) is passed where an optional is expected.
    """

    code = OptionalErrorCode.INVALID_REPRESENTATION


__all__ = [
    "OptionalErrorCode",
    "OptionalError",
    "EmptyOptionalError",
    "InvalidRepresentationError",
]
