from typing import Any, Self

from pydantic import BaseModel, Field, model_validator

from optional_values.optional import EMPTY, Optional, case_of, create


class OptionalPayload[T](BaseModel):
    """
    JSON 등으로 주고받기 위한 Optional 의 직렬화 형태.
    Serialized form of an Optional, for JSON and other wire formats.

    - has_value: 값이 있는지 여부 / whether a value is present
    - value: 값이 있을 때의 값 (없으면 null) / the payload, or null when absent
    """

    has_value: bool = Field(
        ...,
        description="값이 있는지 여부 / Whether a value is present.",
    )
    value: T | None = Field(
        default=None,
        description="값이 있을 때의 값 / Payload when present.",
    )

    @model_validator(mode="after")
    def _check_consistency(self) -> Self:
        if not self.has_value and self.value is not None:
            raise ValueError("absent optional must not carry a value")
        return self


def to_payload[V](optional: Optional[V]) -> OptionalPayload[Any]:
    """
    Optional 을 OptionalPayload 로 변환한다.
    Convert an Optional into an OptionalPayload.
    """
    return case_of(
        OptionalPayload(has_value=False),
        lambda v: OptionalPayload(has_value=True, value=v),
        optional,
    )


def from_payload[V](payload: OptionalPayload[V]) -> Optional[V | None]:
    """
    OptionalPayload 를 Optional 로 되돌린다.
    Convert an OptionalPayload back into an Optional.
    """
    if payload.has_value:
        return create(payload.value)
    return EMPTY


__all__ = [
    "OptionalPayload",
    "to_payload",
    "from_payload",
]
