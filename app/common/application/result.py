from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorCode(str, enum.Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


@dataclass(frozen=True, slots=True)
class FieldError:
    field: str
    message: str

    def as_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True, slots=True)
class Err:
    """
    유스케이스 실패 결과.

    - code: 호출자가 분기할 수 있는 에러 종류 (ErrorCode)
    - message: 사용자/로그용 메시지
    - details: 추가 정보(선택). VALIDATION_ERROR 는 {"errors": [...]} 형태로 모든 위반 항목을 담습니다.
    """

    code: ErrorCode
    message: str
    details: Optional[dict] = None

    @classmethod
    def validation(cls, errors: list[FieldError]) -> "Err":
        return cls(
            code=ErrorCode.VALIDATION_ERROR,
            message="Validation failed",
            details={"errors": [e.as_dict() for e in errors]},
        )

    @property
    def field_errors(self) -> list[FieldError]:
        raw = (self.details or {}).get("errors", [])
        return [FieldError(field=e["field"], message=e["message"]) for e in raw]


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """유스케이스 성공 결과."""

    value: T


Result = Ok[T] | Err
