from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorCode:
    """유스케이스가 돌려주는 에러 코드 모음."""

    ID_ALREADY_SET = "ID_ALREADY_SET"
    ID_MISSING = "ID_MISSING"


@dataclass(frozen=True, slots=True)
class Err:
    """
    유스케이스 실패 결과.

    - code: ErrorCode 중 하나 (뷰에서 HTTP 상태 코드로 매핑)
    - message: 클라이언트/로그용 메시지
    - details: 디버깅용 추가 정보(선택)
    """

    code: str
    message: str
    details: Optional[dict] = None


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """유스케이스 성공 결과."""

    value: T


Result = Union[Ok[T], Err]
