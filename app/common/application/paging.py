"""
Paging value types

저장소 포트와 뷰 사이에서 주고받는 페이지 요청/결과 타입.
page 는 0부터 시작합니다.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

ASC = "asc"
DESC = "desc"


@dataclass(frozen=True, slots=True)
class SortOrder:
    field_name: str
    direction: str = ASC

    @property
    def is_descending(self) -> bool:
        return self.direction == DESC


@dataclass(frozen=True, slots=True)
class PageRequest:
    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    content: Sequence[T] = field(default_factory=list)
    number: int = 0
    size: int = 20
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1
        return math.ceil(self.total_elements / self.size)

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0
